"""Exceptions raised when a third-party service call fails."""


class DownstreamServiceError(Exception):
    """A third-party service rejected a request or could not be reached."""

    def __init__(
        self,
        message: str,
        service_name: str | None = None,
        status_code: int | None = None,
    ):
        """Initialize downstream service error.

        Args:
            message: Error message
            service_name: Name of the downstream service
            status_code: HTTP status code if applicable
        """
        self.service_name = service_name
        self.status_code = status_code
        super().__init__(message)


class DownstreamServiceUnavailableError(DownstreamServiceError):
    """The service answered with a 5xx status."""

    def __init__(self, service_name: str, status_code: int, message: str | None = None):
        default_message = (
            f"{service_name} service is unavailable (status: {status_code})"
        )
        super().__init__(
            message=message or default_message,
            service_name=service_name,
            status_code=status_code,
        )
