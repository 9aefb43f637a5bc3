"""Upload to S3 or an S3-compatible provider."""

from pathlib import Path
from typing import Callable, Optional, Union

from botocore.exceptions import BotoCoreError, ClientError

from lighthouse_badges.models import ActionConfig, UploadResult
from lighthouse_badges.s3_client import build_s3_client, object_url
from lighthouse_badges.uploaders.base import SVG_CONTENT_TYPE, Uploader


class S3Uploader(Uploader):
    """Single-shot put_object uploads to the configured bucket.

    Args:
        config: Run configuration
        client_factory: Builds the boto3 client (overridable for tests)
    """

    backend_name = "S3"
    output_name = "s3-url"

    def __init__(
        self,
        config: ActionConfig,
        client_factory: Callable[[ActionConfig], object] = build_s3_client,
    ):
        self.config = config
        self._client_factory = client_factory
        self._client = None

    @property
    def client(self):
        """The boto3 client, created on first use."""
        if self._client is None:
            self._client = self._client_factory(self.config)
        return self._client

    def upload(
        self,
        file_path: Union[str, Path],
        key: str,
        content_type: str = SVG_CONTENT_TYPE,
    ) -> Optional[UploadResult]:
        body = Path(file_path).read_bytes()
        bucket = self.config.s3_bucket_name

        try:
            self.client.put_object(
                Bucket=bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            return UploadResult(backend=self.backend_name, name=key, error=str(e))

        return UploadResult(
            backend=self.backend_name,
            name=key,
            url=object_url(self.client, bucket, key),
        )
