"""OAuth2 scopes and the view-level scope check."""

from rest_framework import status
from rest_framework.response import Response

import structlog

logger = structlog.get_logger(__name__)

PUBLICATION_WRITE = "publication:write"
PUBLICATION_READ = "publication:read"
PUBLICATION_ADMIN = "publication:admin"
SUBSCRIPTION_USER = "subscription:user"
SUBSCRIPTION_ADMIN = "subscription:admin"

FORBIDDEN_MESSAGE = "You do not have permission to perform this action"


def forbidden(detail: str) -> Response:
    return Response(
        {"error": "forbidden", "message": FORBIDDEN_MESSAGE, "detail": detail},
        status=status.HTTP_403_FORBIDDEN,
    )


def require_any_scope(request, *scopes: str) -> Response | None:
    """Return a 403 response unless the caller holds one of ``scopes``.

    ``publication:admin`` satisfies every publication scope.
    """
    user = request.user
    accepted = set(scopes)
    if accepted & {PUBLICATION_READ, PUBLICATION_WRITE}:
        accepted.add(PUBLICATION_ADMIN)
    if any(user.has_scope(scope) for scope in accepted):
        return None

    logger.warning(
        "missing_required_scope",
        user_id=user.user_id,
        scopes=user.scopes,
        required=sorted(accepted),
    )
    return forbidden(f"Requires {' or '.join(sorted(accepted))} scope")


def require_subscription_access(request, user_id) -> Response | None:
    """Admins may manage any user's subscriptions; users only their own."""
    user = request.user
    if user.has_scope(SUBSCRIPTION_ADMIN):
        return None
    if user.has_scope(SUBSCRIPTION_USER):
        if str(user.user_id) == str(user_id):
            return None
        logger.warning(
            "subscription_access_denied",
            user_id=user.user_id,
            target_user_id=str(user_id),
        )
        return forbidden("Users may only manage their own subscriptions")
    return require_any_scope(request, SUBSCRIPTION_USER, SUBSCRIPTION_ADMIN)
