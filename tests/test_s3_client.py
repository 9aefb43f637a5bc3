"""Tests for S3 client factory module."""

from unittest.mock import MagicMock, patch

import pytest

from lighthouse_badges.models import ActionConfig
from lighthouse_badges.s3_client import build_s3_client, object_url


def make_client(endpoint_url: str) -> MagicMock:
    client = MagicMock()
    client.meta.endpoint_url = endpoint_url
    return client


class TestBuildS3Client:
    """Tests for build_s3_client function."""

    @pytest.fixture
    def config(self) -> ActionConfig:
        """Create a sample configuration for testing."""
        return ActionConfig(
            reports_path=".",
            result_categories=("performance",),
            s3_bucket_name="test-bucket",
            s3_access_key_id="test-access-key",
            s3_secret_access_key="test-secret-key",
            s3_region="eu-west-1",
        )

    @patch("lighthouse_badges.s3_client.boto3.client")
    def test_credentials_and_region(self, mock_boto_client: MagicMock, config: ActionConfig):
        """Verify credentials and region are passed to boto3."""
        build_s3_client(config)

        mock_boto_client.assert_called_once()
        call_kwargs = mock_boto_client.call_args.kwargs

        assert call_kwargs["aws_access_key_id"] == "test-access-key"
        assert call_kwargs["aws_secret_access_key"] == "test-secret-key"
        assert call_kwargs["region_name"] == "eu-west-1"
        assert call_kwargs["endpoint_url"] is None

    @patch("lighthouse_badges.s3_client.boto3.client")
    def test_first_argument_is_s3(self, mock_boto_client: MagicMock, config: ActionConfig):
        """Verify first argument to boto3.client is 's3'."""
        build_s3_client(config)

        assert mock_boto_client.call_args.args[0] == "s3"

    @patch("lighthouse_badges.s3_client.boto3.client")
    def test_blank_values_become_none(self, mock_boto_client: MagicMock):
        """Empty credentials and region fall back to boto3's own lookup."""
        config = ActionConfig(reports_path=".", result_categories=("seo",))

        build_s3_client(config)

        call_kwargs = mock_boto_client.call_args.kwargs
        assert call_kwargs["aws_access_key_id"] is None
        assert call_kwargs["aws_secret_access_key"] is None
        assert call_kwargs["region_name"] is None

    @patch("lighthouse_badges.s3_client.boto3.client")
    def test_virtual_addressing_for_aws(self, mock_boto_client: MagicMock, config: ActionConfig):
        """AWS endpoints use virtual-hosted addressing."""
        build_s3_client(config)

        boto_config = mock_boto_client.call_args.kwargs["config"]
        assert boto_config.s3["addressing_style"] == "virtual"
        assert boto_config.signature_version == "s3v4"

    @patch("lighthouse_badges.s3_client.boto3.client")
    def test_custom_endpoint_uses_path_addressing(self, mock_boto_client: MagicMock):
        """Custom endpoints are passed through with path addressing."""
        config = ActionConfig(
            reports_path=".",
            result_categories=("seo",),
            s3_endpoint_url="https://account.r2.cloudflarestorage.com",
        )

        build_s3_client(config)

        call_kwargs = mock_boto_client.call_args.kwargs
        assert call_kwargs["endpoint_url"] == "https://account.r2.cloudflarestorage.com"
        assert call_kwargs["config"].s3["addressing_style"] == "path"

    @patch("lighthouse_badges.s3_client.boto3.client")
    def test_returns_s3_client(self, mock_boto_client: MagicMock, config: ActionConfig):
        """Verify function returns the boto3 client."""
        mock_client = MagicMock()
        mock_boto_client.return_value = mock_client

        assert build_s3_client(config) is mock_client


class TestObjectUrl:
    """Tests for object_url function."""

    def test_aws_virtual_hosted(self):
        """AWS objects get a bucket subdomain URL."""
        client = make_client("https://s3.eu-west-1.amazonaws.com")

        url = object_url(client, "my-bucket", "site/docs.seo.svg")

        assert url == "https://my-bucket.s3.eu-west-1.amazonaws.com/site/docs.seo.svg"

    def test_leading_slash_kept(self):
        """A key starting with '/' keeps its slash."""
        client = make_client("https://s3.amazonaws.com")

        url = object_url(client, "b", "/main.performance.svg")

        assert url == "https://b.s3.amazonaws.com//main.performance.svg"

    def test_custom_endpoint_path_style(self):
        """Non-AWS endpoints use path-style URLs."""
        client = make_client("http://localhost:9000")

        url = object_url(client, "badges", "main.seo.svg")

        assert url == "http://localhost:9000/badges/main.seo.svg"

    def test_key_is_quoted(self):
        """Characters outside the safe set are percent-encoded."""
        client = make_client("https://s3.amazonaws.com")

        url = object_url(client, "b", "/search?q=1.seo.svg")

        assert url == "https://b.s3.amazonaws.com//search%3Fq%3D1.seo.svg"
