"""Remote object keys for uploaded badges and reports.

The prefix is prepended verbatim. No separator is inserted, so a prefix
meant as a folder must carry its own trailing slash.
"""


def badge_key(prefix: str, url_path: str, label: str) -> str:
    """Key for a category badge, e.g. 'site/docs.performance.svg'."""
    return f"{prefix}{url_path}.{label}.svg"


def report_key(prefix: str, url_path: str) -> str:
    """Key for a raw report, e.g. 'site/docs.report.json'."""
    return f"{prefix}{url_path}.report.json"
