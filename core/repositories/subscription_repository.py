"""Subscription queries for notification matching and management."""

from collections.abc import Iterable
from uuid import UUID

from django.db.models import Q, QuerySet

from core.enums import SearchType
from core.models import Subscription, SubscriptionListType


class SubscriptionRepository:
    """Encapsulates subscription table access."""

    @staticmethod
    def find_by_location(location_id: int | str) -> QuerySet[Subscription]:
        """Subscriptions for a court or tribunal location."""
        return Subscription.objects.filter(
            search_type=SearchType.LOCATION_ID.value,
            search_value=str(location_id),
        )

    @staticmethod
    def find_by_cases(
        case_numbers: Iterable[str], case_names: Iterable[str]
    ) -> QuerySet[Subscription]:
        """Subscriptions matching any of the given case numbers or names.

        Case names match without regard to case.
        """
        numbers = {n for n in case_numbers if n}
        names = {n for n in case_names if n}
        if not numbers and not names:
            return Subscription.objects.none()

        query = Q()
        if numbers:
            query |= Q(
                search_type=SearchType.CASE_NUMBER.value, search_value__in=numbers
            )
        for name in names:
            query |= Q(
                search_type=SearchType.CASE_NAME.value, search_value__iexact=name
            )
        return Subscription.objects.filter(query)

    @staticmethod
    def for_user(user_id: UUID) -> QuerySet[Subscription]:
        """All location/case subscriptions held by a user."""
        return Subscription.objects.filter(user_id=user_id)

    @staticmethod
    def list_types_for_user(user_id: UUID) -> QuerySet[SubscriptionListType]:
        """All list type subscriptions held by a user."""
        return SubscriptionListType.objects.filter(user_id=user_id)
