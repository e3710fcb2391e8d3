"""Downstream service clients package."""

from core.services.downstream.gov_notify_client import (
    GovNotifyClient,
    gov_notify_client,
)
from core.services.downstream.s3_storage_client import get_s3_client

__all__ = [
    "GovNotifyClient",
    "get_s3_client",
    "gov_notify_client",
]
