"""Thread-local access to the authenticated caller."""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.auth.oauth2 import OAuth2User

_security_context = threading.local()


def set_current_user(user: "OAuth2User") -> None:
    _security_context.user = user


def get_current_user() -> "OAuth2User | None":
    """Caller authenticated for the current request, if any."""
    return getattr(_security_context, "user", None)


def clear_current_user() -> None:
    if hasattr(_security_context, "user"):
        delattr(_security_context, "user")
