"""Score extraction and URL path derivation for reports."""

import math
import re
from typing import Any, Optional, Union

from lighthouse_badges.models import Tier


# Thresholds follow the Lighthouse score color bands
GREEN_THRESHOLD = 90
ORANGE_THRESHOLD = 50

DEFAULT_URL_PATH = "/main"

_ORIGIN_PATTERN = re.compile(r"(^\w+:|^)//[^/]+")

Percentage = Union[int, float]


def compute_percentage(categories: dict[str, Any], label: str) -> Percentage:
    """Turn a category's 0-1 score into a rounded-up percentage.

    A category (or score) missing from the report is not an error: the
    result is NaN and still gets rendered as a badge.

    Args:
        categories: The report's 'categories' mapping.
        label: Category to look up.

    Returns:
        ceil(score * 100), or math.nan if there is no score.
    """
    if not isinstance(categories, dict):
        return math.nan

    category = categories.get(label)
    if not isinstance(category, dict) or "score" not in category:
        return math.nan

    score = category["score"]
    if score is None:
        # Lighthouse writes null for categories it could not score
        return 0

    return math.ceil(score * 100)


def classify(percentage: Percentage) -> Tier:
    """Map a percentage to its badge tier.

    <50 is red, 50-89 is orange, >=90 is green. NaN is red.
    """
    if percentage >= GREEN_THRESHOLD:
        return Tier.GREEN
    if percentage >= ORANGE_THRESHOLD:
        return Tier.ORANGE
    return Tier.RED


def format_status(percentage: Percentage) -> str:
    """Format a percentage as badge status text."""
    if isinstance(percentage, float) and math.isnan(percentage):
        return "NaN"
    return str(int(percentage))


def derive_url_path(final_url: Optional[str]) -> str:
    """Derive the storage path for a report from its final URL.

    The scheme and host are stripped, and a bare '/' (or a missing URL)
    becomes '/main'.

    Examples:
        >>> derive_url_path("https://a.com/foo")
        '/foo'
        >>> derive_url_path("https://a.com/")
        '/main'
    """
    url = final_url or DEFAULT_URL_PATH
    url_path = _ORIGIN_PATTERN.sub("", url, count=1)
    return DEFAULT_URL_PATH if url_path == "/" else url_path
