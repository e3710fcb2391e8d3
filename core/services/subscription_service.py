"""Creation and removal of user subscriptions."""

from uuid import UUID

from django.db import IntegrityError, transaction

import structlog

from core.constants import (
    MAX_LIST_TYPE_SUBSCRIPTIONS_PER_USER,
    MAX_SUBSCRIPTIONS_PER_USER,
)
from core.enums import Language, SearchType
from core.exceptions import (
    DuplicateSubscriptionError,
    InvalidSubscriptionError,
    SubscriptionLimitError,
    SubscriptionNotFoundError,
    UserNotFoundError,
)
from core.models import ListType, Location, Subscription, SubscriptionListType
from core.repositories.subscription_repository import SubscriptionRepository
from core.repositories.user_repository import UserRepository
from core.schemas.subscription import (
    ListTypeSubscriptionCreate,
    ListTypeSubscriptionDetail,
    SubscriptionCreate,
    SubscriptionDetail,
)

logger = structlog.get_logger(__name__)


class SubscriptionService:
    """Enforces per-user limits and uniqueness when subscribing."""

    def _require_user(self, user_id: UUID) -> None:
        if not UserRepository.exists(user_id):
            raise UserNotFoundError(user_id)

    def list_subscriptions(self, user_id: UUID) -> list[SubscriptionDetail]:
        self._require_user(user_id)
        return [
            SubscriptionDetail.model_validate(s)
            for s in SubscriptionRepository.for_user(user_id)
        ]

    def create_subscription(
        self, user_id: UUID, request: SubscriptionCreate
    ) -> SubscriptionDetail:
        """Subscribe a user to a location or a case.

        Raises:
            UserNotFoundError: If the user does not exist.
            InvalidSubscriptionError: If a location id names no known location.
            SubscriptionLimitError: If the user is at the subscription limit.
            DuplicateSubscriptionError: If the same subscription exists.
        """
        self._require_user(user_id)
        search_type = SearchType(request.search_type)
        search_value = request.search_value

        if search_type == SearchType.LOCATION_ID:
            try:
                location_id = int(search_value)
            except ValueError:
                location_id = None
            if location_id is None or not Location.objects.filter(
                location_id=location_id
            ).exists():
                raise InvalidSubscriptionError(
                    f"Location {request.search_value} not found"
                )
            search_value = str(location_id)

        existing = SubscriptionRepository.for_user(user_id)
        if existing.count() >= MAX_SUBSCRIPTIONS_PER_USER:
            raise SubscriptionLimitError(
                f"Maximum {MAX_SUBSCRIPTIONS_PER_USER} subscriptions allowed"
            )

        duplicate_message = (
            "You are already subscribed to this court"
            if search_type == SearchType.LOCATION_ID
            else "You are already subscribed to this case"
        )
        if existing.filter(
            search_type=search_type.value, search_value=search_value
        ).exists():
            raise DuplicateSubscriptionError(duplicate_message)

        try:
            with transaction.atomic():
                subscription = Subscription.objects.create(
                    user_id=user_id,
                    search_type=search_type.value,
                    search_value=search_value,
                    case_name=request.case_name,
                    case_number=request.case_number,
                )
        except IntegrityError as e:
            raise DuplicateSubscriptionError(duplicate_message) from e

        logger.info(
            "subscription_created",
            user_id=str(user_id),
            subscription_id=str(subscription.subscription_id),
            search_type=search_type.value,
        )
        return SubscriptionDetail.model_validate(subscription)

    def delete_subscription(self, user_id: UUID, subscription_id: UUID) -> None:
        deleted, _ = Subscription.objects.filter(
            subscription_id=subscription_id, user_id=user_id
        ).delete()
        if not deleted:
            raise SubscriptionNotFoundError(subscription_id)
        logger.info(
            "subscription_deleted",
            user_id=str(user_id),
            subscription_id=str(subscription_id),
        )

    def list_list_type_subscriptions(
        self, user_id: UUID
    ) -> list[ListTypeSubscriptionDetail]:
        self._require_user(user_id)
        return [
            ListTypeSubscriptionDetail.model_validate(s)
            for s in SubscriptionRepository.list_types_for_user(user_id)
        ]

    def create_list_type_subscription(
        self, user_id: UUID, request: ListTypeSubscriptionCreate
    ) -> ListTypeSubscriptionDetail:
        """Subscribe a user to a list type in one language.

        Raises:
            UserNotFoundError: If the user does not exist.
            InvalidSubscriptionError: If the list type is unknown.
            SubscriptionLimitError: If the user is at the limit.
            DuplicateSubscriptionError: If the same subscription exists.
        """
        self._require_user(user_id)
        language = Language(request.language).value

        if not ListType.objects.filter(id=request.list_type_id).exists():
            raise InvalidSubscriptionError(
                f"List type {request.list_type_id} not found"
            )

        existing = SubscriptionRepository.list_types_for_user(user_id)
        if existing.count() >= MAX_LIST_TYPE_SUBSCRIPTIONS_PER_USER:
            raise SubscriptionLimitError(
                f"Maximum {MAX_LIST_TYPE_SUBSCRIPTIONS_PER_USER} "
                "list type subscriptions allowed"
            )

        duplicate_message = (
            f"Already subscribed to list type {request.list_type_id} "
            f"with language {language}"
        )
        if existing.filter(
            list_type_id=request.list_type_id, language=language
        ).exists():
            raise DuplicateSubscriptionError(duplicate_message)

        try:
            with transaction.atomic():
                subscription = SubscriptionListType.objects.create(
                    user_id=user_id,
                    list_type_id=request.list_type_id,
                    language=language,
                )
        except IntegrityError as e:
            raise DuplicateSubscriptionError(duplicate_message) from e

        logger.info(
            "list_type_subscription_created",
            user_id=str(user_id),
            list_type_id=request.list_type_id,
            language=language,
        )
        return ListTypeSubscriptionDetail.model_validate(subscription)

    def delete_list_type_subscription(
        self, user_id: UUID, subscription_id: UUID
    ) -> None:
        deleted, _ = SubscriptionListType.objects.filter(
            list_type_subscription_id=subscription_id, user_id=user_id
        ).delete()
        if not deleted:
            raise SubscriptionNotFoundError(subscription_id)
        logger.info(
            "list_type_subscription_deleted",
            user_id=str(user_id),
            subscription_id=str(subscription_id),
        )


subscription_service = SubscriptionService()
