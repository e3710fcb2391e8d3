"""S3 client for PDDA HTML uploads."""

from django.conf import settings

import boto3
from botocore.client import BaseClient


def _normalize_endpoint(endpoint_url: str | None) -> str | None:
    if endpoint_url:
        return endpoint_url.rstrip("/")
    return None


def get_s3_client(
    *,
    region: str | None = None,
    endpoint_url: str | None = None,
) -> BaseClient:
    """Return an S3 client, pointed at an S3-compatible endpoint when configured.

    Credentials come from the standard AWS environment chain.
    """
    return boto3.client(
        "s3",
        region_name=region or settings.PDDA_HTML_S3_REGION or None,
        endpoint_url=_normalize_endpoint(
            endpoint_url or settings.PDDA_HTML_S3_ENDPOINT_URL
        ),
    )
