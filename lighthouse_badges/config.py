"""Configuration loading for the Lighthouse badge generator.

Inputs are read the way GitHub Actions exposes them to a step: every
``with:`` input becomes an ``INPUT_{NAME}`` environment variable, with the
name upper-cased and spaces replaced by underscores (hyphens are kept).

Example:
    INPUT_REPORTS-PATH=./lighthouse
    INPUT_RESULT-CATEGORIES=performance, accessibility
    INPUT_UPLOAD-DESTINATION=s3
    INPUT_S3-BUCKET-NAME=my-badges

Values passed on the command line override the environment. Nothing is
validated beyond presence: a missing credential shows up later as an upload
failure, not as a configuration error.
"""

import os
from typing import Mapping, Optional

from lighthouse_badges.models import ActionConfig, UploadDestination


DEFAULT_DESTINATION = "s3"


def get_input(name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Read a single action input.

    Args:
        name: Input name as declared in action.yml (e.g. 'reports-path').
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        The trimmed value, or an empty string if the input is not set.
    """
    if environ is None:
        environ = os.environ

    env_key = "INPUT_" + name.replace(" ", "_").upper()
    return environ.get(env_key, "").strip()


def parse_categories(raw: str) -> tuple[str, ...]:
    """Split a comma-separated category list and trim each entry."""
    return tuple(category.strip() for category in raw.split(","))


def parse_destination(raw: str) -> UploadDestination:
    """Map an upload-destination input onto a backend.

    Anything other than 's3' or 'azure' disables uploading.
    """
    if raw == UploadDestination.S3.value:
        return UploadDestination.S3
    if raw == UploadDestination.AZURE.value:
        return UploadDestination.AZURE
    return UploadDestination.NONE


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> ActionConfig:
    """Resolve the run configuration.

    Args:
        environ: Environment mapping (defaults to os.environ).
        overrides: Input values keyed by input name, usually taken from
            command-line flags. ``None`` values are ignored.

    Returns:
        The immutable ActionConfig for this run.
    """
    overrides = {k: v for k, v in (overrides or {}).items() if v is not None}

    def value(name: str) -> str:
        if name in overrides:
            return overrides[name].strip()
        return get_input(name, environ)

    return ActionConfig(
        reports_path=value("reports-path") or os.getcwd(),
        result_categories=parse_categories(value("result-categories")),
        upload_destination=parse_destination(
            value("upload-destination") or DEFAULT_DESTINATION
        ),
        upload_reports=value("upload-reports") == "true",
        s3_bucket_name=value("s3-bucket-name"),
        s3_access_key_id=value("s3-access-key-id"),
        s3_secret_access_key=value("s3-secret-access-key"),
        s3_region=value("s3-region"),
        s3_prefix=value("s3-prefix"),
        s3_endpoint_url=value("s3-endpoint-url") or None,
        azure_container_name=value("azure-container-name"),
        azure_storage_account_name=value("azure-storage-account-name"),
        azure_storage_account_key=value("azure-storage-account-key"),
    )
