"""Storage backends for badge and report uploads."""

from lighthouse_badges.models import ActionConfig, UploadDestination

from .azure import AzureBlobUploader
from .base import JSON_CONTENT_TYPE, SVG_CONTENT_TYPE, NullUploader, Uploader
from .s3 import S3Uploader


def build_uploader(config: ActionConfig) -> Uploader:
    """Select the uploader for the configured destination."""
    if config.upload_destination == UploadDestination.S3:
        return S3Uploader(config)
    if config.upload_destination == UploadDestination.AZURE:
        return AzureBlobUploader(config)
    return NullUploader()


__all__ = [
    "Uploader",
    "NullUploader",
    "S3Uploader",
    "AzureBlobUploader",
    "build_uploader",
    "SVG_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
]
