"""Discovery and parsing of Lighthouse report files."""

import json
from pathlib import Path
from typing import Any, Union

from lighthouse_badges.models import Report


REPORT_SUFFIX = ".report.json"


class InvalidReportError(ValueError):
    """Raised when a parsed report has no usable 'categories' field."""

    pass


def _is_missing(value: Any) -> bool:
    # Empty objects and arrays still count as present
    if isinstance(value, (dict, list)):
        return False
    return not value


def find_report_files(directory: Union[str, Path]) -> list[Path]:
    """List report files in a directory.

    Only direct children whose name ends with '.report.json' are kept;
    subdirectories are not searched.

    Args:
        directory: Directory to scan.

    Returns:
        Report paths sorted by file name.
    """
    path = Path(directory)
    return sorted(
        (entry for entry in path.iterdir() if entry.name.endswith(REPORT_SUFFIX)),
        key=lambda entry: entry.name,
    )


def load_report(path: Union[str, Path]) -> Report:
    """Parse a single report file.

    Args:
        path: Path to a '*.report.json' file.

    Returns:
        The parsed Report.

    Raises:
        json.JSONDecodeError: If the file is not valid JSON. This is left
            to propagate and fails the run.
        InvalidReportError: If the document has no 'categories' value, or it is null,
            false, 0 or an empty string.
    """
    path = Path(path)

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or _is_missing(data.get("categories")):
        raise InvalidReportError(f"Invalid file {path.name}")

    return Report(
        source_path=path,
        categories=data["categories"],
        final_url=data.get("finalUrl"),
    )
