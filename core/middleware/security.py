"""Security response headers and per-request security context."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.auth.context import clear_current_user
from core.constants import SECURITY_HEADERS


class SecurityHeadersMiddleware:
    """Apply the fixed security header set to every response."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)
        for header, value in SECURITY_HEADERS.items():
            response[header] = value
        return response


class SecurityContextMiddleware:
    """Clear the thread-local authenticated user once the request is done.

    The user is bound by ``OAuth2Authentication`` when DRF authenticates
    the request, which happens inside the view.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        try:
            return self.get_response(request)
        finally:
            clear_current_user()
