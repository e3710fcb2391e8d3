"""API views for the publication service."""

import uuid
from uuid import UUID

from django.conf import settings

import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.auth.oauth2 import OAuth2Authentication
from core.auth.scopes import (
    PUBLICATION_ADMIN,
    PUBLICATION_READ,
    PUBLICATION_WRITE,
    require_any_scope,
    require_subscription_access,
)
from core.constants import CORRELATION_ID_HEADER
from core.exceptions import ArtefactNotFoundError
from core.jobs.publication_jobs import enqueue_publication_processing
from core.logging import set_correlation_id
from core.pagination import NotificationAuditPagination
from core.repositories.artefact_repository import ArtefactRepository
from core.repositories.artefact_search_repository import ArtefactSearchRepository
from core.repositories.notification_audit_repository import (
    NotificationAuditRepository,
)
from core.schemas.publication import (
    ArtefactDetail,
    NotificationAuditDetail,
    PddaUploadResponse,
)
from core.schemas.subscription import (
    ListSearchConfigUpdate,
    ListTypeSubscriptionCreate,
    SubscriptionCreate,
)
from core.services import health_service
from core.services.ingestion_service import IngestionService
from core.services.list_search_config_service import list_search_config_service
from core.services.pdda_html_service import (
    UPLOAD_ACCEPTED,
    UPLOAD_FAILED,
    PddaUploadError,
    pdda_html_service,
    validate_upload,
)
from core.services.subscription_service import subscription_service

logger = structlog.get_logger(__name__)


def _bad_request(message: str, e: ValidationError) -> Response:
    return Response(
        {
            "error": "bad_request",
            "message": message,
            "errors": e.errors(include_url=False, include_context=False),
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class HealthCheckView(APIView):
    """Base for probe endpoints, which Kubernetes calls without credentials."""

    authentication_classes = ()
    permission_classes = (AllowAny,)


class LivenessCheckView(HealthCheckView):
    def get(self, _request):
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(HealthCheckView):
    """Always 200; a failing dependency is reported as degraded."""

    def get(self, _request):
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(), status=status.HTTP_200_OK)


class BlobIngestionView(APIView):
    """Ingest a court list publication submitted as a JSON blob.

    Requires publication:write. Returns 201 with the new artefact id, 400
    with every validation error, or 500 when persistence fails.
    """

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        denied = require_any_scope(request, PUBLICATION_WRITE)
        if denied:
            return denied

        body, status_code = IngestionService().ingest(request.body)
        return Response(
            body.model_dump(mode="json", exclude_none=True), status=status_code
        )


class PddaHtmlUploadView(APIView):
    """Accept a PDDA HTML list upload (multipart) and store it in S3.

    Every response carries the caller's x-correlation-id, or a new one.
    """

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)
    parser_classes = (MultiPartParser, FormParser)

    def post(self, request):
        denied = require_any_scope(request, PUBLICATION_WRITE)
        if denied:
            return denied

        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(
            uuid.uuid4()
        )
        set_correlation_id(correlation_id)

        upload = request.FILES.get("file")
        validation = validate_upload(request.data.get("artefact_type"), upload)
        if not validation.valid:
            logger.warning("pdda_html_upload_rejected", reason=validation.error)
            return self._respond(
                PddaUploadResponse(
                    success=False,
                    message=validation.error,
                    correlation_id=correlation_id,
                ),
                status.HTTP_400_BAD_REQUEST,
            )

        try:
            key = pdda_html_service.store(upload, correlation_id)
        except PddaUploadError:
            return self._respond(
                PddaUploadResponse(
                    success=False,
                    message=UPLOAD_FAILED,
                    correlation_id=correlation_id,
                ),
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return self._respond(
            PddaUploadResponse(
                success=True,
                message=UPLOAD_ACCEPTED,
                s3_key=key,
                correlation_id=correlation_id,
            ),
            status.HTTP_201_CREATED,
        )

    @staticmethod
    def _respond(body: PddaUploadResponse, status_code: int) -> Response:
        response = Response(body.model_dump(exclude_none=True), status=status_code)
        response[CORRELATION_ID_HEADER] = body.correlation_id
        return response


class ArtefactDetailView(APIView):
    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request, artefact_id: UUID):
        denied = require_any_scope(request, PUBLICATION_READ)
        if denied:
            return denied

        artefact = ArtefactRepository.get(artefact_id)
        if artefact is None:
            raise ArtefactNotFoundError(artefact_id)
        return Response(
            ArtefactDetail.model_validate(artefact).model_dump(mode="json"),
            status=status.HTTP_200_OK,
        )


class ArtefactNotificationsView(APIView):
    """Notification audit rows for an artefact, oldest first, paginated.

    An artefact nobody was notified about yields an empty page.
    """

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request, artefact_id: UUID):
        denied = require_any_scope(request, PUBLICATION_READ)
        if denied:
            return denied

        queryset = NotificationAuditRepository.for_publication(artefact_id)
        paginator = NotificationAuditPagination()
        page = paginator.paginate_queryset(queryset, request, view=self) or []
        return paginator.get_paginated_response(
            [
                NotificationAuditDetail.model_validate(row).model_dump(mode="json")
                for row in page
            ]
        )


class ArtefactResubmitView(APIView):
    """Re-run PDF rendering and subscriber notification for an artefact."""

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def post(self, request, artefact_id: UUID):
        denied = require_any_scope(request, PUBLICATION_ADMIN)
        if denied:
            return denied

        if ArtefactRepository.get(artefact_id) is None:
            raise ArtefactNotFoundError(artefact_id)

        enqueue_publication_processing(artefact_id)
        logger.info(
            "artefact_resubmitted",
            artefact_id=str(artefact_id),
            requested_by=request.user.user_id,
        )
        return Response(
            {
                "artefact_id": str(artefact_id),
                "message": "Resubmission accepted",
                "processed_inline": not settings.PUBLICATION_PROCESSING_ASYNC,
            },
            status=status.HTTP_202_ACCEPTED,
        )


class ArtefactSearchView(APIView):
    """Find artefacts by exact case number or partial case name."""

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        denied = require_any_scope(request, PUBLICATION_READ)
        if denied:
            return denied

        case_number = (request.query_params.get("case_number") or "").strip()
        case_name = (request.query_params.get("case_name") or "").strip()
        if case_number:
            rows = ArtefactSearchRepository.find_by_case_number(case_number)
        elif case_name:
            rows = ArtefactSearchRepository.find_by_case_name(case_name)
        else:
            return Response(
                {
                    "error": "bad_request",
                    "message": "Provide case_number or case_name",
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        results = [
            {
                "artefact_id": str(row.artefact_id),
                "case_number": row.case_number,
                "case_name": row.case_name,
            }
            for row in rows
        ]
        return Response(
            {"results": results, "count": len(results)}, status=status.HTTP_200_OK
        )


class UserSubscriptionsView(APIView):
    """List or create a user's location and case subscriptions."""

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request, user_id: UUID):
        denied = require_subscription_access(request, user_id)
        if denied:
            return denied
        subscriptions = subscription_service.list_subscriptions(user_id)
        return Response(
            {"subscriptions": [s.model_dump(mode="json") for s in subscriptions]},
            status=status.HTTP_200_OK,
        )

    def post(self, request, user_id: UUID):
        denied = require_subscription_access(request, user_id)
        if denied:
            return denied
        try:
            body = SubscriptionCreate.model_validate(request.data)
        except ValidationError as e:
            return _bad_request("Invalid subscription request", e)

        created = subscription_service.create_subscription(user_id, body)
        return Response(created.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class UserSubscriptionDetailView(APIView):
    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def delete(self, request, user_id: UUID, subscription_id: UUID):
        denied = require_subscription_access(request, user_id)
        if denied:
            return denied
        subscription_service.delete_subscription(user_id, subscription_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class UserListTypeSubscriptionsView(APIView):
    """List or create a user's list type and language subscriptions."""

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request, user_id: UUID):
        denied = require_subscription_access(request, user_id)
        if denied:
            return denied
        subscriptions = subscription_service.list_list_type_subscriptions(user_id)
        return Response(
            {"subscriptions": [s.model_dump(mode="json") for s in subscriptions]},
            status=status.HTTP_200_OK,
        )

    def post(self, request, user_id: UUID):
        denied = require_subscription_access(request, user_id)
        if denied:
            return denied
        try:
            body = ListTypeSubscriptionCreate.model_validate(request.data)
        except ValidationError as e:
            return _bad_request("Invalid list type subscription request", e)

        created = subscription_service.create_list_type_subscription(user_id, body)
        return Response(created.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class UserListTypeSubscriptionDetailView(APIView):
    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def delete(self, request, user_id: UUID, subscription_id: UUID):
        denied = require_subscription_access(request, user_id)
        if denied:
            return denied
        subscription_service.delete_list_type_subscription(user_id, subscription_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ListSearchConfigView(APIView):
    """Read or replace the case search field names of a list type."""

    authentication_classes = (OAuth2Authentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request, list_type_id: int):
        denied = require_any_scope(request, PUBLICATION_ADMIN)
        if denied:
            return denied
        config = list_search_config_service.get_config(list_type_id)
        return Response(config.model_dump(mode="json"), status=status.HTTP_200_OK)

    def put(self, request, list_type_id: int):
        denied = require_any_scope(request, PUBLICATION_ADMIN)
        if denied:
            return denied
        try:
            body = ListSearchConfigUpdate.model_validate(request.data)
        except ValidationError as e:
            return _bad_request("Invalid search configuration", e)

        saved = list_search_config_service.save_config(list_type_id, body)
        if isinstance(saved, list):
            return Response(
                {
                    "error": "bad_request",
                    "message": "Invalid search configuration",
                    "errors": [error.model_dump() for error in saved],
                },
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(saved.model_dump(mode="json"), status=status.HTTP_200_OK)
