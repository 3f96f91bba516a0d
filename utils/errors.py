from typing import Any, Dict, Optional


class ServiceError(Exception):
    """Base error carrying the HTTP status and JSON body for a failed request."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class NotFoundError(ServiceError):
    status_code = 404


class ValidationError(ServiceError):
    status_code = 400


class UnauthorizedError(ServiceError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized", details: Optional[str] = None):
        super().__init__(message, details)


class ConflictError(ServiceError):
    status_code = 409


class ProcessingError(ServiceError):
    status_code = 500


class UpstreamError(ServiceError):
    """The generative AI service failed; surfaced with ``success: false``."""

    status_code = 500

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        body.setdefault("details", "Unknown error")
        body["success"] = False
        return body
