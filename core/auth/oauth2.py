"""Bearer token authentication for Django REST Framework.

Tokens are validated either by RFC 7662 introspection against the auth
service, with results cached briefly, or locally as HS256 JWTs signed with
``JWT_SECRET``.
"""

from typing import Any, cast

from django.conf import settings
from django.core.cache import cache

import jwt
import requests
import structlog
from rest_framework import authentication, exceptions

from core.auth.context import set_current_user

logger = structlog.get_logger(__name__)


def _scopes_from(claims: dict[str, Any]) -> list[str]:
    """Read scopes from a ``scopes`` list or a space separated ``scope``."""
    scopes = claims.get("scopes")
    if isinstance(scopes, list):
        return [str(s) for s in scopes]
    scope = claims.get("scope")
    if isinstance(scope, str):
        return scope.split()
    return []


class OAuth2User:
    """Token claims for an authenticated caller. Not a Django user model."""

    def __init__(self, user_id: str, client_id: str, scopes: list[str]):
        self.id = user_id
        self.user_id = user_id
        self.client_id = client_id
        self.scopes = scopes
        self.is_authenticated = True

    def has_scope(self, scope: str) -> bool:
        return scope in self.scopes

    def __str__(self):
        return f"OAuth2User(user_id={self.user_id}, client_id={self.client_id})"


class OAuth2Authentication(authentication.BaseAuthentication):
    """Authenticate ``Authorization: Bearer <token>`` requests."""

    def authenticate(self, request):
        """Validate the bearer token, if one was sent.

        Returns:
            ``(OAuth2User, token)``, or None when no token was presented or
            OAuth2 is disabled.

        Raises:
            AuthenticationFailed: If the token is malformed or invalid.
        """
        if not settings.OAUTH2_SERVICE_ENABLED:
            return None

        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        scheme, _, token = auth_header.partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token or " " in token:
            raise exceptions.AuthenticationFailed("Invalid authorization header format")

        if settings.OAUTH2_INTROSPECTION_ENABLED:
            claims = self._introspect(token)
        else:
            claims = self._decode_jwt(token)

        user = OAuth2User(
            user_id=claims.get("sub") or claims.get("client_id") or "unknown",
            client_id=claims.get("client_id") or "unknown",
            scopes=_scopes_from(claims),
        )

        set_current_user(user)
        return (user, token)

    def _introspect(self, token: str) -> dict[str, Any]:
        cache_key = f"{settings.OAUTH2_TOKEN_CACHE_PREFIX}{token[:16]}"
        cached = cache.get(cache_key)
        if cached:
            return cast("dict[str, Any]", cached)

        try:
            response = requests.post(
                settings.OAUTH2_INTROSPECT_URL,
                data={"token": token, "token_type_hint": "access_token"},
                auth=(settings.OAUTH2_CLIENT_ID, settings.OAUTH2_CLIENT_SECRET),
                timeout=5,
            )
        except requests.RequestException as e:
            logger.error("token_introspection_unavailable", error=str(e))
            raise exceptions.AuthenticationFailed(
                "Token validation service unavailable"
            ) from e

        if response.status_code != 200:
            logger.warning(
                "token_introspection_failed", status_code=response.status_code
            )
            raise exceptions.AuthenticationFailed("Token introspection failed")

        claims = response.json()
        if not claims.get("active", False):
            raise exceptions.AuthenticationFailed("Token is not active")

        cache.set(cache_key, claims, timeout=settings.OAUTH2_TOKEN_CACHE_TTL)
        return cast("dict[str, Any]", claims)

    def _decode_jwt(self, token: str) -> dict[str, Any]:
        if not settings.JWT_SECRET:
            logger.error("jwt_secret_not_configured")
            raise exceptions.AuthenticationFailed("JWT validation not configured")

        try:
            claims = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=["HS256", "HS384", "HS512"],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("invalid_jwt", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

        token_type = claims.get("type", "access_token")
        if token_type != "access_token":
            raise exceptions.AuthenticationFailed(f"Invalid token type: {token_type}")
        return claims

    def authenticate_header(self, _request):
        return 'Bearer realm="publication-service"'
