"""Main badge runner and orchestrator.

Coordinates a single pass over the reports directory:
- Report discovery and validation
- Badge rendering for every configured category
- Badge and raw report uploads
- Mapping of unexpected errors to a failed run
"""

from pathlib import Path
from typing import Optional

from lighthouse_badges.badges import write_badge
from lighthouse_badges.keys import badge_key, report_key
from lighthouse_badges.models import ActionConfig, Report, RunResult, UploadResult
from lighthouse_badges.reporters import Reporter
from lighthouse_badges.reports import InvalidReportError, find_report_files, load_report
from lighthouse_badges.scoring import compute_percentage, derive_url_path
from lighthouse_badges.uploaders import (
    JSON_CONTENT_TYPE,
    SVG_CONTENT_TYPE,
    Uploader,
    build_uploader,
)


NO_REPORTS_MESSAGE = "No Lighthouse reports found."


class BadgeRunner:
    """Generates and uploads badges for every report in a directory.

    Args:
        config: Run configuration
        reporter: Receives log lines, outputs and the failure status
        uploader: Storage backend (built from config if not given)
    """

    def __init__(
        self,
        config: ActionConfig,
        reporter: Reporter,
        uploader: Optional[Uploader] = None,
    ):
        self.config = config
        self.reporter = reporter
        self.uploader = uploader or build_uploader(config)
        self._result = RunResult()

    def run(self) -> RunResult:
        """Run the pipeline once.

        Any exception that escapes processing fails the run with its
        message; nothing after it is processed.

        Returns:
            What the run produced, including failure messages.
        """
        self._result = RunResult()

        try:
            self._process_directory()
        except Exception as e:
            self._fail(f"Action failed with error: {e}")

        return self._result

    def _process_directory(self) -> None:
        report_files = find_report_files(self.config.reports_path)

        if not report_files:
            self._warn(NO_REPORTS_MESSAGE)
            return

        for path in report_files:
            try:
                report = load_report(path)
            except InvalidReportError:
                self._warn(f"Invalid file {path.name}")
                continue

            self.process_report(report)

    def process_report(self, report: Report) -> None:
        """Write, and possibly upload, the badges for one report."""
        url_path = derive_url_path(report.final_url)

        for label in self.config.result_categories:
            percentage = compute_percentage(report.categories, label)
            svg_path = write_badge(report.source_path, label, percentage)
            self._result.badges.append(svg_path)

            key = badge_key(self.config.s3_prefix, url_path, label)
            self._upload(svg_path, key, SVG_CONTENT_TYPE)

        if self.config.upload_reports:
            key = report_key(self.config.s3_prefix, url_path)
            self._upload(report.source_path, key, JSON_CONTENT_TYPE)

    def _upload(self, file_path: Path, key: str, content_type: str) -> None:
        result = self.uploader.upload(file_path, key, content_type)
        if result is None:
            return

        self._result.uploads.append(result)
        self._record_upload(result)

    def _record_upload(self, result: UploadResult) -> None:
        if not result.ok:
            self._fail(f"Failed to upload {result.name} to {result.backend}: {result.error}")
            return

        if self.uploader.output_name:
            self._result.outputs[self.uploader.output_name] = result.url
            self.reporter.set_output(self.uploader.output_name, result.url)
        self.reporter.info(f"Uploaded {result.name} to {result.backend}: {result.url}")

    def _warn(self, message: str) -> None:
        self._result.warnings.append(message)
        self.reporter.warning(message)

    def _fail(self, message: str) -> None:
        self._result.failures.append(message)
        self.reporter.set_failed(message)
