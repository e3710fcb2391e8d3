"""URL configuration for the publication service.

The blob ingestion endpoint keeps its historical unprefixed path
(``/v1/publication``) alongside the ``/api/`` mount used by every other route.
"""

from django.urls import include, path

from core.views import BlobIngestionView

urlpatterns = [
    path("v1/publication", BlobIngestionView.as_view(), name="blob-ingestion"),
    path("api/", include("core.urls")),
]
