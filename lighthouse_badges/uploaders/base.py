"""Base uploader interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from lighthouse_badges.models import UploadResult


SVG_CONTENT_TYPE = "image/svg+xml"
JSON_CONTENT_TYPE = "application/json"


class Uploader(ABC):
    """Abstract base class for storage backends.

    Subclasses set ``backend_name`` (used in log lines) and ``output_name``
    (the action output that receives the uploaded URL).
    """

    backend_name: str = ""
    output_name: Optional[str] = None

    @abstractmethod
    def upload(
        self,
        file_path: Union[str, Path],
        key: str,
        content_type: str = SVG_CONTENT_TYPE,
    ) -> Optional[UploadResult]:
        """Upload a local file once, without retrying.

        SDK errors, including client setup rejected for blank settings, are
        returned as a failed UploadResult rather than raised. Anything else (an unreadable
        local file) propagates to the caller.

        Args:
            file_path: Local file to upload
            key: Destination key computed for the file
            content_type: MIME type stored with the object

        Returns:
            The result of the attempt, or None if nothing was uploaded.
        """
        pass


class NullUploader(Uploader):
    """Uploader used when no known destination is configured."""

    backend_name = "none"

    def upload(
        self,
        file_path: Union[str, Path],
        key: str,
        content_type: str = SVG_CONTENT_TYPE,
    ) -> Optional[UploadResult]:
        """Do nothing."""
        return None
