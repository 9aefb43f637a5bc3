"""Tests for GitHubActionsReporter.

Tests workflow command output and the GITHUB_OUTPUT file.
"""

import io
from pathlib import Path

import pytest

from lighthouse_badges.reporters.base import Reporter
from lighthouse_badges.reporters.github_actions import GitHubActionsReporter, escape_data


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


class TestEscapeData:
    def test_escapes_percent_and_newlines(self):
        assert escape_data("100%\r\ndone") == "100%25%0D%0Adone"


class TestWorkflowCommands:
    """Tests for annotation lines."""

    def test_inherits_from_reporter(self, stream):
        assert isinstance(GitHubActionsReporter(stream=stream), Reporter)

    def test_warning(self, stream):
        reporter = GitHubActionsReporter(stream=stream)

        reporter.warning("Invalid file broken.report.json")

        assert stream.getvalue() == "::warning::Invalid file broken.report.json\n"

    def test_info_is_plain_line(self, stream):
        reporter = GitHubActionsReporter(stream=stream)

        reporter.info("Uploaded a to S3: https://x")

        assert stream.getvalue() == "Uploaded a to S3: https://x\n"

    def test_set_failed_emits_error(self, stream):
        reporter = GitHubActionsReporter(stream=stream)

        reporter.set_failed("Action failed with error: line 1\nline 2")

        assert reporter.failed is True
        assert stream.getvalue() == "::error::Action failed with error: line 1%0Aline 2\n"


class TestOutputs:
    """Tests for GITHUB_OUTPUT handling."""

    def test_appends_output(self, tmp_path: Path, stream):
        output_file = tmp_path / "github_output"
        output_file.write_text("existing=1\n")
        reporter = GitHubActionsReporter(output_file=str(output_file), stream=stream)

        reporter.set_output("s3-url", "https://b.s3.amazonaws.com/x.svg")

        assert output_file.read_text() == "existing=1\ns3-url=https://b.s3.amazonaws.com/x.svg\n"

    def test_multiline_output_uses_delimiter(self, tmp_path: Path, stream):
        output_file = tmp_path / "github_output"
        reporter = GitHubActionsReporter(output_file=str(output_file), stream=stream)

        reporter.set_output("notes", "a\nb")

        assert output_file.read_text() == "notes<<EOF\na\nb\nEOF\n"

    def test_output_file_from_environment(self, tmp_path: Path, stream, monkeypatch):
        output_file = tmp_path / "github_output"
        monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
        reporter = GitHubActionsReporter(stream=stream)

        reporter.set_output("azure-blob-url", "https://acct.blob.core.windows.net/c/x.svg")

        assert "azure-blob-url=https://acct.blob.core.windows.net/c/x.svg" in output_file.read_text()

    def test_no_output_file_is_noop(self, stream, monkeypatch):
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
        reporter = GitHubActionsReporter(stream=stream)

        reporter.set_output("s3-url", "https://x")

        assert stream.getvalue() == ""
