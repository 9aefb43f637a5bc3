"""GitHub Actions reporter.

Emits workflow commands on stdout so warnings and errors show up as
annotations, and writes outputs to the GITHUB_OUTPUT file so later steps
can read them as ``steps.<id>.outputs.<name>``.
"""

import os
import sys
from typing import Optional, TextIO

from lighthouse_badges.reporters.base import Reporter


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsReporter(Reporter):
    """Reporter for runs inside a GitHub Actions step.

    Args:
        output_file: Path of the step output file (defaults to the
            GITHUB_OUTPUT environment variable)
        stream: Where workflow commands are written (defaults to stdout)
    """

    def __init__(
        self,
        output_file: Optional[str] = None,
        stream: Optional[TextIO] = None,
    ):
        super().__init__()
        self.output_file = output_file or os.environ.get("GITHUB_OUTPUT")
        self.stream = stream or sys.stdout

    def _command(self, command: str, message: str) -> None:
        self.stream.write(f"::{command}::{escape_data(message)}\n")
        self.stream.flush()

    def info(self, message: str) -> None:
        self.stream.write(f"{message}\n")
        self.stream.flush()

    def warning(self, message: str) -> None:
        self._command("warning", message)

    def error(self, message: str) -> None:
        self._command("error", message)

    def set_output(self, name: str, value: str) -> None:
        """Append the output to GITHUB_OUTPUT.

        Does nothing if no output file is available (e.g. outside Actions).
        """
        if not self.output_file:
            return

        with open(self.output_file, "a", encoding="utf-8") as f:
            if "\n" in value:
                f.write(f"{name}<<EOF\n{value}\nEOF\n")
            else:
                f.write(f"{name}={value}\n")
