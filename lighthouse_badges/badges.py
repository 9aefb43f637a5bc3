"""SVG badge generation for Lighthouse category scores.

Generates flat, badgen-style static SVG badges with the category label on
the left and the score on the right, colored by tier.
"""

import html
from pathlib import Path
from typing import Union

from lighthouse_badges.scoring import Percentage, classify, format_status


# Tier colors, same palette as badgen
BADGE_COLORS = {
    "green": "#3c1",
    "orange": "#f73",
    "red": "#e43",
}

LABEL_COLOR = "#555"


def _text_width(text: str) -> int:
    # Approximate width of Verdana 11px
    return len(text) * 7 + 10


def render_badge(label: str, status: str, color: str) -> str:
    """Render an SVG badge.

    Args:
        label: Left-hand text (the category name)
        status: Right-hand text (the score)
        color: A named color from BADGE_COLORS, or any CSS color

    Returns:
        SVG string for the badge
    """
    safe_label = html.escape(label)
    safe_status = html.escape(status)
    fill = BADGE_COLORS.get(color, color)

    label_width = _text_width(label)
    status_width = _text_width(status)
    total_width = label_width + status_width

    return f'''<svg xmlns="http://www.w3.org/2000/svg" width="{total_width}" height="20" role="img" aria-label="{safe_label}: {safe_status}">
  <title>{safe_label}: {safe_status}</title>
  <linearGradient id="b" x2="0" y2="100%">
    <stop offset="0" stop-color="#bbb" stop-opacity=".1"/>
    <stop offset="1" stop-opacity=".1"/>
  </linearGradient>
  <clipPath id="a">
    <rect width="{total_width}" height="20" rx="3" fill="#fff"/>
  </clipPath>
  <g clip-path="url(#a)">
    <path fill="{LABEL_COLOR}" d="M0 0h{label_width}v20H0z"/>
    <path fill="{fill}" d="M{label_width} 0h{status_width}v20H{label_width}z"/>
    <path fill="url(#b)" d="M0 0h{total_width}v20H0z"/>
  </g>
  <g fill="#fff" text-anchor="middle" font-family="DejaVu Sans,Verdana,Geneva,sans-serif" font-size="11">
    <text x="{label_width / 2}" y="15" fill="#010101" fill-opacity=".3">{safe_label}</text>
    <text x="{label_width / 2}" y="14">{safe_label}</text>
    <text x="{label_width + status_width / 2}" y="15" fill="#010101" fill-opacity=".3">{safe_status}</text>
    <text x="{label_width + status_width / 2}" y="14">{safe_status}</text>
  </g>
</svg>'''


def badge_path(report_path: Union[str, Path], label: str) -> Path:
    """Path of the badge written next to a report.

    'site.report.json' with label 'performance' becomes
    'site.performance.svg' in the same directory.
    """
    report_path = Path(report_path)
    name = report_path.name.replace("report.json", f"{label}.svg", 1)
    return report_path.with_name(name)


def write_badge(
    report_path: Union[str, Path], label: str, percentage: Percentage
) -> Path:
    """Render a category badge and write it beside its report.

    Args:
        report_path: Path to the source report
        label: Category label
        percentage: Score percentage (may be NaN)

    Returns:
        Path of the written SVG file
    """
    svg = render_badge(label, format_status(percentage), classify(percentage).value)
    path = badge_path(report_path, label)

    with open(path, "w", encoding="utf-8") as f:
        f.write(svg)

    return path
