"""GOV.UK Notify template selection and personalisation.

Subscription emails use one of three Notify templates. Which one is chosen
depends on whether a PDF can be attached and whether a case summary exists
for the list. Template ids are configured in settings.
"""

import base64
from datetime import date
from pathlib import Path
from typing import Any, TypedDict

from django.conf import settings

from core.enums import NotificationTemplate
from core.services.cause_list_formatting import format_long_date

TEMPLATE_ID_SETTINGS: dict[NotificationTemplate, str] = {
    NotificationTemplate.SUBSCRIPTION: "GOVUK_NOTIFY_TEMPLATE_ID_SUBSCRIPTION",
    NotificationTemplate.PDF_AND_SUMMARY: "GOVUK_NOTIFY_TEMPLATE_ID_PDF_AND_SUMMARY",
    NotificationTemplate.SUMMARY_ONLY: "GOVUK_NOTIFY_TEMPLATE_ID_SUMMARY_ONLY",
}

ATTACHMENT_RETENTION_PERIOD = "1 week"


class TemplateParameters(TypedDict):
    """What an email says about one publication for one recipient."""

    list_type_name: str
    content_date: date
    location_name: str
    subscribed_to_location: bool
    case_info: str
    case_summary: str | None


def select_template(
    has_pdf_attachment: bool, has_case_summary: bool
) -> NotificationTemplate:
    if has_pdf_attachment:
        return NotificationTemplate.PDF_AND_SUMMARY
    if has_case_summary:
        return NotificationTemplate.SUMMARY_ONLY
    return NotificationTemplate.SUBSCRIPTION


def get_template_id(template: NotificationTemplate) -> str:
    """Configured Notify template id, falling back to the plain subscription
    template when the richer variant is not configured."""
    template_id = getattr(settings, TEMPLATE_ID_SETTINGS[template], "")
    if not template_id and template != NotificationTemplate.SUBSCRIPTION:
        return get_template_id(NotificationTemplate.SUBSCRIPTION)
    return template_id


def encode_attachment(pdf_path: Path) -> dict[str, Any]:
    """Notify ``prepareUpload`` structure for a file attachment."""
    return {
        "file": base64.b64encode(Path(pdf_path).read_bytes()).decode("ascii"),
        "filename": Path(pdf_path).name,
        "confirm_email_before_download": True,
        "retention_period": ATTACHMENT_RETENTION_PERIOD,
    }


def build_personalisation(
    params: TemplateParameters, attachment: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Map template parameters to Notify personalisation keys."""
    service_url = settings.CATH_SERVICE_URL
    personalisation: dict[str, Any] = {
        "ListType": params["list_type_name"],
        "content_date": format_long_date(params["content_date"]),
        "start_page_link": service_url,
        "subscription_page_link": service_url,
        "locations": params["location_name"]
        if params["subscribed_to_location"]
        else "",
        "display_locations": "yes" if params["subscribed_to_location"] else "",
        "case": params["case_info"],
        "display_case": "yes" if params["case_info"] else "",
        "display_summary": "",
        "summary_of_cases": "",
        "link_to_file": service_url,
    }
    if params["case_summary"]:
        personalisation["display_summary"] = "yes"
        personalisation["summary_of_cases"] = params["case_summary"]
    if attachment is not None:
        personalisation["link_to_file"] = attachment
    return personalisation
