"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    ArtefactDetailView,
    ArtefactNotificationsView,
    ArtefactResubmitView,
    ArtefactSearchView,
    BlobIngestionView,
    ListSearchConfigView,
    LivenessCheckView,
    PddaHtmlUploadView,
    ReadinessCheckView,
    UserListTypeSubscriptionDetailView,
    UserListTypeSubscriptionsView,
    UserSubscriptionDetailView,
    UserSubscriptionsView,
)

urlpatterns = [
    # Health check endpoints
    path("v1/publication/health/live", LivenessCheckView.as_view(), name="health-live"),
    path(
        "v1/publication/health/ready",
        ReadinessCheckView.as_view(),
        name="health-ready",
    ),
    # Ingestion
    path(
        "v1/publication", BlobIngestionView.as_view(), name="api-blob-ingestion"
    ),
    path("v1/pdda-html", PddaHtmlUploadView.as_view(), name="pdda-html-upload"),
    # Artefacts (search must come before <uuid:artefact_id>)
    path(
        "v1/publication/artefacts/search",
        ArtefactSearchView.as_view(),
        name="artefact-search",
    ),
    path(
        "v1/publication/artefacts/<uuid:artefact_id>",
        ArtefactDetailView.as_view(),
        name="artefact-detail",
    ),
    path(
        "v1/publication/artefacts/<uuid:artefact_id>/notifications",
        ArtefactNotificationsView.as_view(),
        name="artefact-notifications",
    ),
    path(
        "v1/publication/artefacts/<uuid:artefact_id>/resubmit",
        ArtefactResubmitView.as_view(),
        name="artefact-resubmit",
    ),
    # Subscriptions
    path(
        "v1/publication/users/<uuid:user_id>/subscriptions",
        UserSubscriptionsView.as_view(),
        name="user-subscriptions",
    ),
    path(
        "v1/publication/users/<uuid:user_id>/subscriptions/<uuid:subscription_id>",
        UserSubscriptionDetailView.as_view(),
        name="user-subscription-detail",
    ),
    path(
        "v1/publication/users/<uuid:user_id>/list-type-subscriptions",
        UserListTypeSubscriptionsView.as_view(),
        name="user-list-type-subscriptions",
    ),
    path(
        "v1/publication/users/<uuid:user_id>/list-type-subscriptions/"
        "<uuid:subscription_id>",
        UserListTypeSubscriptionDetailView.as_view(),
        name="user-list-type-subscription-detail",
    ),
    # List type configuration
    path(
        "v1/publication/list-types/<int:list_type_id>/search-config",
        ListSearchConfigView.as_view(),
        name="list-search-config",
    ),
]
