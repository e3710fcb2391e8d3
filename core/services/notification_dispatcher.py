"""Subscription email fan-out for newly published artefacts."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any
from uuid import UUID

from django.conf import settings

import structlog
from tenacity import Retrying, stop_after_attempt, wait_exponential

from core.constants import SKIPPED_NO_EMAIL_MESSAGE
from core.logging import redact_emails
from core.models import NotificationAuditLog, Subscription
from core.repositories.notification_audit_repository import (
    NotificationAuditRepository,
)
from core.repositories.subscription_repository import SubscriptionRepository
from core.repositories.user_repository import UserRepository
from core.schemas.publication.dispatch_result import DispatchResult
from core.services.artefact_search_extractor import ArtefactSearchExtractor
from core.services.case_summaries import build_case_summary
from core.services.downstream.gov_notify_client import (
    GovNotifyClient,
    gov_notify_client,
)
from core.services.notification_templates import (
    TemplateParameters,
    build_personalisation,
    encode_attachment,
    get_template_id,
    select_template,
)
from core.services.reference_data import ReferenceData

logger = structlog.get_logger(__name__)


@dataclass
class Recipient:
    """One user matched by one or more subscriptions."""

    user_id: UUID
    subscription_id: UUID
    location_match: bool = False
    cases: list[str] = field(default_factory=list)


@dataclass
class PendingSend:
    recipient: Recipient
    audit: NotificationAuditLog
    email: str
    template_id: str
    personalisation: dict[str, Any]


class NotificationDispatcher:
    """Email every subscriber of an artefact's location or cases.

    Recipients are deduplicated by user id. Users without an email address
    are recorded as skipped. Sends run on a bounded thread pool and each is
    retried with exponential backoff before it is recorded as failed.
    Database access stays on the calling thread.
    """

    def __init__(
        self,
        reference_data: ReferenceData,
        notify_client: GovNotifyClient | None = None,
        max_workers: int | None = None,
        retry_attempts: int | None = None,
        base_delay_ms: int | None = None,
        backoff_multiplier: float | None = None,
    ) -> None:
        self.reference_data = reference_data
        self.notify_client = notify_client or gov_notify_client
        self.max_workers = max_workers or settings.NOTIFICATION_MAX_WORKERS
        self.retry_attempts = (
            settings.NOTIFICATION_RETRY_ATTEMPTS
            if retry_attempts is None
            else retry_attempts
        )
        self.base_delay_ms = (
            settings.NOTIFICATION_RETRY_BASE_DELAY_MS
            if base_delay_ms is None
            else base_delay_ms
        )
        self.backoff_multiplier = (
            settings.NOTIFICATION_RETRY_BACKOFF_MULTIPLIER
            if backoff_multiplier is None
            else backoff_multiplier
        )
        self.search_extractor = ArtefactSearchExtractor(reference_data)

    def dispatch(
        self,
        artefact_id: UUID,
        location_id: int | str,
        list_type_id: int,
        content_date: date,
        payload: Any = None,
        pdf_path: Path | None = None,
    ) -> DispatchResult:
        """Notify subscribers about one artefact and return aggregate counts."""
        location = self.reference_data.get_location(location_id)
        if location is None:
            logger.error(
                "notification_location_not_found",
                artefact_id=str(artefact_id),
                location_id=str(location_id),
            )
            return DispatchResult(
                success=False, errors=[f"Location {location_id} not found"]
            )

        list_type = self.reference_data.get_list_type(list_type_id)
        list_type_name = list_type.name if list_type else ""
        friendly_name = (
            list_type.friendly_name
            if list_type and list_type.friendly_name
            else f"LIST_TYPE_{list_type_id}"
        )

        recipients = self._match_recipients(location.location_id, list_type, payload)
        result = DispatchResult(total_subscriptions=len(recipients))
        if not recipients:
            logger.info(
                "notification_no_subscribers",
                artefact_id=str(artefact_id),
                location_id=str(location_id),
            )
            return result

        case_summary = build_case_summary(list_type_name, payload)
        attachment = encode_attachment(pdf_path) if pdf_path else None
        template = select_template(attachment is not None, bool(case_summary))
        template_id = get_template_id(template)
        users = UserRepository.get_users_by_ids([r.user_id for r in recipients])

        pending: list[PendingSend] = []
        for recipient in recipients:
            user = users.get(recipient.user_id)
            if user is None or not user.email:
                NotificationAuditRepository.create_skipped(
                    recipient.subscription_id,
                    recipient.user_id,
                    artefact_id,
                    SKIPPED_NO_EMAIL_MESSAGE,
                )
                result.skipped += 1
                result.errors.append(
                    f"User {recipient.user_id}: {SKIPPED_NO_EMAIL_MESSAGE}"
                )
                continue

            params: TemplateParameters = {
                "list_type_name": friendly_name,
                "content_date": content_date,
                "location_name": location.name,
                "subscribed_to_location": recipient.location_match,
                "case_info": ", ".join(recipient.cases),
                "case_summary": case_summary,
            }
            audit = NotificationAuditRepository.create_pending(
                recipient.subscription_id, recipient.user_id, artefact_id
            )
            pending.append(
                PendingSend(
                    recipient=recipient,
                    audit=audit,
                    email=user.email,
                    template_id=template_id,
                    personalisation=build_personalisation(params, attachment),
                )
            )

        self._send_all(artefact_id, pending, result)

        result.success = result.failed == 0
        log = logger.warning if result.failed else logger.info
        log(
            "notifications_dispatched",
            artefact_id=str(artefact_id),
            template=template.value,
            total_subscriptions=result.total_subscriptions,
            sent=result.sent,
            failed=result.failed,
            skipped=result.skipped,
            errors=redact_emails("; ".join(result.errors)),
        )
        return result

    def _match_recipients(self, location_id, list_type, payload) -> list[Recipient]:
        """Location subscribers first, then case subscribers, one per user."""
        recipients: dict[UUID, Recipient] = {}

        for subscription in SubscriptionRepository.find_by_location(location_id):
            recipient = recipients.setdefault(
                subscription.user_id,
                Recipient(subscription.user_id, subscription.subscription_id),
            )
            recipient.location_match = True

        if list_type is not None and list_type.has_search_config:
            cases = (
                self.search_extractor.extract_cases(list_type, payload)
                if isinstance(payload, dict)
                else []
            )
            numbers = [number for number, _name in cases if number]
            names = [name for _number, name in cases if name]
            for subscription in SubscriptionRepository.find_by_cases(numbers, names):
                recipient = recipients.setdefault(
                    subscription.user_id,
                    Recipient(subscription.user_id, subscription.subscription_id),
                )
                recipient.cases.append(_case_label(subscription))

        return list(recipients.values())

    def _send_all(
        self, artefact_id: UUID, pending: list[PendingSend], result: DispatchResult
    ) -> None:
        if not pending:
            return
        workers = min(self.max_workers, len(pending))
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="notify"
        ) as executor:
            futures = [
                (item, executor.submit(self._send_with_retry, artefact_id, item))
                for item in pending
            ]
            for item, future in futures:
                try:
                    notify_id = future.result()
                except Exception as e:
                    message = str(e) or type(e).__name__
                    item.audit.mark_failed(message)
                    result.failed += 1
                    result.errors.append(f"User {item.recipient.user_id}: {message}")
                else:
                    item.audit.mark_sent(notify_id)
                    result.sent += 1

    def _send_with_retry(self, artefact_id: UUID, item: PendingSend) -> str:
        retrying = Retrying(
            stop=stop_after_attempt(self.retry_attempts + 1),
            wait=wait_exponential(
                multiplier=self.base_delay_ms / 1000,
                exp_base=self.backoff_multiplier,
            ),
            before_sleep=lambda state: logger.warning(
                "notification_send_retrying",
                artefact_id=str(artefact_id),
                user_id=str(item.recipient.user_id),
                attempt=state.attempt_number,
            ),
            reraise=True,
        )
        return retrying(
            self.notify_client.send_email,
            email_address=item.email,
            template_id=item.template_id,
            personalisation=item.personalisation,
            reference=f"{artefact_id}-{item.recipient.user_id}",
        )


def _case_label(subscription: Subscription) -> str:
    parts = [subscription.case_name, subscription.case_number]
    label = " ".join(p for p in parts if p)
    return label or subscription.search_value
