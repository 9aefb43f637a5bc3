"""Console reporter using Rich library for formatted CLI output."""

from typing import Optional

from rich.console import Console

from lighthouse_badges.reporters.base import Reporter


class ConsoleReporter(Reporter):
    """Rich-based console reporter for local runs.

    Args:
        quiet: If True, suppress informational lines
        console: Console to print to (defaults to stdout)
    """

    def __init__(self, quiet: bool = False, console: Optional[Console] = None):
        super().__init__()
        # Use legacy_windows=True for ASCII-safe output on Windows consoles
        self.console = console or Console(legacy_windows=True)
        self.quiet = quiet
        self.outputs: dict[str, str] = {}

    def _print(self, prefix: str, message: str) -> None:
        # Messages contain file names and URLs; never treat them as markup
        self.console.print(prefix, end="")
        self.console.print(message, markup=False, highlight=False)

    def info(self, message: str) -> None:
        if self.quiet:
            return
        self._print("[dim][INFO][/dim] ", message)

    def warning(self, message: str) -> None:
        self._print("[yellow][WARN][/yellow] ", message)

    def error(self, message: str) -> None:
        self._print("[bold red][ERROR][/bold red] ", message)

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value
        self._print(f"[cyan]{name}[/cyan]: ", value)
