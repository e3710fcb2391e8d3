"""Pagination classes for API endpoints."""

from rest_framework.pagination import PageNumberPagination


class NotificationAuditPagination(PageNumberPagination):
    """Page-number pagination for an artefact's notification audit rows."""

    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100
