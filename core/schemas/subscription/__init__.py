"""Subscription schemas."""

from core.schemas.subscription.list_search_config import (
    ListSearchConfigDetail,
    ListSearchConfigUpdate,
)
from core.schemas.subscription.list_type_subscription import (
    ListTypeSubscriptionCreate,
    ListTypeSubscriptionDetail,
)
from core.schemas.subscription.subscription import (
    SubscriptionCreate,
    SubscriptionDetail,
)

__all__ = [
    "ListSearchConfigDetail",
    "ListSearchConfigUpdate",
    "ListTypeSubscriptionCreate",
    "ListTypeSubscriptionDetail",
    "SubscriptionCreate",
    "SubscriptionDetail",
]
