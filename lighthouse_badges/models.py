"""Data models for the Lighthouse badge generator."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class UploadDestination(Enum):
    """Backend that badges and reports are uploaded to."""

    S3 = "s3"
    AZURE = "azure"
    NONE = "none"


class Tier(Enum):
    """Badge color tier for a category score."""

    RED = "red"
    ORANGE = "orange"
    GREEN = "green"


@dataclass(frozen=True)
class ActionConfig:
    """Run-time configuration resolved once per invocation."""

    reports_path: str
    result_categories: tuple[str, ...]
    upload_destination: UploadDestination = UploadDestination.S3
    upload_reports: bool = False
    s3_bucket_name: str = ""
    s3_access_key_id: str = ""
    s3_secret_access_key: str = ""
    s3_region: str = ""
    s3_prefix: str = ""
    s3_endpoint_url: Optional[str] = None
    azure_container_name: str = ""
    azure_storage_account_name: str = ""
    azure_storage_account_key: str = ""


@dataclass
class Report:
    """A parsed Lighthouse report file."""

    source_path: Path
    categories: dict[str, Any]
    final_url: Optional[str] = None

    @property
    def file_name(self) -> str:
        return self.source_path.name


@dataclass
class UploadResult:
    """Outcome of a single upload attempt."""

    backend: str
    name: str
    url: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunResult:
    """Everything a single run produced."""

    badges: list[Path] = field(default_factory=list)
    uploads: list[UploadResult] = field(default_factory=list)
    outputs: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """True if any failure was signalled during the run."""
        return bool(self.failures)
