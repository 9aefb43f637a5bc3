"""
Lighthouse Badges.

Renders score badges from Lighthouse reports in a CI run and optionally
uploads them, together with the raw reports, to S3 or Azure Blob Storage.
"""

__version__ = "1.0.0"

from lighthouse_badges.cli import main

__all__ = ["main", "__version__"]
