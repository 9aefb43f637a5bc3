"""Upload to Azure Blob Storage."""

from pathlib import Path
from typing import Optional, Union

from azure.core.exceptions import AzureError
from azure.storage.blob import BlobServiceClient, ContentSettings

from lighthouse_badges.models import ActionConfig, UploadResult
from lighthouse_badges.uploaders.base import SVG_CONTENT_TYPE, Uploader


def account_url(account_name: str) -> str:
    """Blob service endpoint for a storage account."""
    return f"https://{account_name}.blob.core.windows.net"


class AzureBlobUploader(Uploader):
    """Single-shot block blob uploads to the configured container.

    The blob is always named after the local file. The destination key
    computed by the caller is not used for this backend, so badges for
    different reports with the same file name overwrite each other.
    """

    backend_name = "Azure Blob Storage"
    output_name = "azure-blob-url"

    def __init__(self, config: ActionConfig):
        self.config = config
        self._service = None

    @property
    def service(self) -> BlobServiceClient:
        """The blob service client, created on first use."""
        if self._service is None:
            self._service = BlobServiceClient(
                account_url=account_url(self.config.azure_storage_account_name),
                credential={
                    "account_name": self.config.azure_storage_account_name,
                    "account_key": self.config.azure_storage_account_key,
                },
            )
        return self._service

    def upload(
        self,
        file_path: Union[str, Path],
        key: str,
        content_type: str = SVG_CONTENT_TYPE,
    ) -> Optional[UploadResult]:
        file_path = Path(file_path)
        body = file_path.read_bytes()
        blob_name = file_path.name

        # Client construction rejects blank settings with ValueError
        try:
            container = self.service.get_container_client(self.config.azure_container_name)
            blob_client = container.get_blob_client(blob_name)
            blob_client.upload_blob(
                body,
                length=len(body),
                overwrite=True,
                content_settings=ContentSettings(content_type=content_type),
            )
        except (AzureError, ValueError) as e:
            return UploadResult(backend=self.backend_name, name=blob_name, error=str(e))

        return UploadResult(backend=self.backend_name, name=blob_name, url=blob_client.url)
