"""Masking of personal data in free-text log fields."""

import re

EMAIL_PATTERN = re.compile(r"\b[\w.%+-]+@[\w.-]+\.[A-Za-z]{2,}\b")
REDACTED_EMAIL = "[REDACTED_EMAIL]"


def redact_emails(text: str | None) -> str:
    """Replace every email address in ``text`` with a fixed marker.

    Provider error bodies echo the recipient address back, so anything built
    from them goes through here before it reaches a log handler.
    """
    if not text:
        return ""
    return EMAIL_PATTERN.sub(REDACTED_EMAIL, text)
