"""Domain exceptions for publications and subscriptions."""

from uuid import UUID


class ResourceNotFoundError(Exception):
    """Base class for lookups that map to HTTP 404."""


class ArtefactNotFoundError(ResourceNotFoundError):
    def __init__(self, artefact_id: UUID | str):
        self.artefact_id = artefact_id
        super().__init__(f"Artefact with ID {artefact_id} not found")


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, user_id: UUID | str):
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


class SubscriptionNotFoundError(ResourceNotFoundError):
    def __init__(self, subscription_id: UUID | str):
        self.subscription_id = subscription_id
        super().__init__(f"Subscription with ID {subscription_id} not found")


class ListTypeNotFoundError(ResourceNotFoundError):
    def __init__(self, list_type_id: int):
        self.list_type_id = list_type_id
        super().__init__(f"List type with ID {list_type_id} not found")


class ConflictError(Exception):
    """Conflict error for operations that cannot be performed (409)."""

    def __init__(self, message: str, detail: str | None = None):
        """Initialize conflict error.

        Args:
            message: Error message
            detail: Additional details about the conflict
        """
        self.detail = detail
        super().__init__(message)


class SubscriptionLimitError(ConflictError):
    """The user already holds the maximum number of subscriptions."""


class DuplicateSubscriptionError(ConflictError):
    """An identical subscription already exists for the user."""


class InvalidSubscriptionError(Exception):
    """The subscription target does not exist in reference data (400)."""
