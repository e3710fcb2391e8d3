"""GOV.UK Notify email client."""

import time
from typing import Any

from django.conf import settings

import jwt
import structlog

from core.exceptions import DownstreamServiceError
from core.services.downstream.base_downstream_client import BaseDownstreamClient

logger = structlog.get_logger(__name__)

UUID_LENGTH = 36


def parse_api_key(api_key: str) -> tuple[str, str]:
    """Split a Notify API key into ``(service_id, secret)``.

    Keys look like ``<key name>-<service id>-<secret>`` where both trailing
    parts are UUIDs.

    Raises:
        ValueError: If the key is too short to hold both UUIDs.
    """
    if len(api_key) < 2 * UUID_LENGTH + 1:
        raise ValueError("GOV.UK Notify API key is not in the expected format")
    secret = api_key[-UUID_LENGTH:]
    service_id = api_key[-(2 * UUID_LENGTH + 1) : -(UUID_LENGTH + 1)]
    return service_id, secret


class GovNotifyClient(BaseDownstreamClient):
    """Send template emails through the GOV.UK Notify REST API."""

    def __init__(self, api_key: str | None = None, base_url: str | None = None):
        super().__init__(
            service_name="gov-notify",
            base_url=base_url or settings.GOVUK_NOTIFY_BASE_URL,
            timeout=30,
        )
        self._api_key = api_key

    @property
    def api_key(self) -> str:
        return self._api_key or settings.GOVUK_NOTIFY_API_KEY

    def _auth_headers(self) -> dict[str, str]:
        try:
            service_id, secret = parse_api_key(self.api_key)
        except ValueError as e:
            raise DownstreamServiceError(
                message=str(e), service_name=self.service_name
            ) from e
        token = jwt.encode(
            {"iss": service_id, "iat": int(time.time())}, secret, algorithm="HS256"
        )
        return {"Authorization": f"Bearer {token}"}

    def send_email(
        self,
        email_address: str,
        template_id: str,
        personalisation: dict[str, Any],
        reference: str | None = None,
    ) -> str:
        """Send one templated email.

        Returns:
            The Notify notification id.

        Raises:
            DownstreamServiceError: If Notify rejects the request or the
                response carries no id.
        """
        body: dict[str, Any] = {
            "email_address": email_address,
            "template_id": template_id,
            "personalisation": personalisation,
        }
        if reference:
            body["reference"] = reference

        response = self._make_request("POST", "/v2/notifications/email", json_data=body)
        notification_id = response.json().get("id")
        if not notification_id:
            raise DownstreamServiceError(
                message="GOV.UK Notify response did not include a notification id",
                service_name=self.service_name,
                status_code=response.status_code,
            )
        return notification_id


gov_notify_client = GovNotifyClient()
