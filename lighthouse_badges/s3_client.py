"""S3 client factory for badge uploads.

Creates a boto3 S3 client from the run configuration. A custom endpoint
can be given for S3-compatible providers (Backblaze B2, Cloudflare R2,
MinIO); otherwise boto3 resolves the AWS endpoint for the region.
"""

from urllib.parse import quote, urlsplit

import boto3
from botocore.client import Config

from lighthouse_badges.models import ActionConfig


def build_s3_client(config: ActionConfig):
    """Build a boto3 S3 client for the given configuration.

    Args:
        config: Run configuration holding credentials, region and endpoint.

    Returns:
        A boto3 S3 client.

    Note:
        Empty credentials or region are passed as None so boto3 falls back
        to its own lookup chain instead of signing with blank values.
    """
    boto_config = Config(
        signature_version="s3v4",
        s3={"addressing_style": "path" if config.s3_endpoint_url else "virtual"},
    )

    return boto3.client(
        "s3",
        endpoint_url=config.s3_endpoint_url,
        aws_access_key_id=config.s3_access_key_id or None,
        aws_secret_access_key=config.s3_secret_access_key or None,
        region_name=config.s3_region or None,
        config=boto_config,
    )


def object_url(s3_client, bucket: str, key: str) -> str:
    """Public URL of an uploaded object.

    Virtual-hosted style for AWS endpoints, path style for custom ones.

    Args:
        s3_client: Client the object was uploaded with.
        bucket: Bucket name.
        key: Object key, used as-is (a leading '/' is kept).

    Returns:
        The object's URL.
    """
    endpoint = urlsplit(s3_client.meta.endpoint_url)
    quoted_key = quote(key, safe="/~")

    if endpoint.hostname and endpoint.hostname.endswith("amazonaws.com"):
        return f"{endpoint.scheme}://{bucket}.{endpoint.netloc}/{quoted_key}"

    return f"{endpoint.scheme}://{endpoint.netloc}/{bucket}/{quoted_key}"
