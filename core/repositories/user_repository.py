"""Repository for user lookups needed to address notifications."""

from uuid import UUID

from core.models import User


class UserRepository:
    """User queries used by the notification dispatcher and subscriptions."""

    @staticmethod
    def get_users_by_ids(user_ids: list[UUID]) -> dict[UUID, User]:
        """Batch lookup users by their IDs.

        Args:
            user_ids: User UUIDs to look up.

        Returns:
            Mapping of user id to User for every id that exists.

        Example:
            >>> users = UserRepository.get_users_by_ids([uuid1, uuid2])
            >>> users[uuid1].email
            'someone@example.com'
        """
        users = User.objects.filter(user_id__in=user_ids)
        return {user.user_id: user for user in users}

    @staticmethod
    def exists(user_id: UUID) -> bool:
        """Check whether a user account exists."""
        return User.objects.filter(user_id=user_id).exists()
