"""
BFF Error Taxonomy

Every error raised by the gateway or a translator derives from BffError and
carries the HTTP status, the message and a short error label. The FastAPI
exception handlers render them as {"statusCode", "message", "error"}.
"""

from typing import Any, Dict, Optional


class BffError(Exception):
    """Base error with an HTTP status"""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if error is not None:
            self.error = error

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "message": self.message,
            "error": self.error,
        }


class UnauthorizedError(BffError):
    """Missing or malformed authorization on a gated operation"""
    status_code = 401
    error = "Unauthorized"


class BadRequestError(BffError):
    """Malformed input rejected before any outbound call"""
    status_code = 400
    error = "Bad Request"


class NotFoundError(BffError):
    """Requested resource does not exist on the platform"""
    status_code = 404
    error = "Not Found"

    def __init__(self, message: str, resource_id: Optional[str] = None):
        super().__init__(message)
        self.resource_id = resource_id


class MedusaApiError(BffError):
    """The Medusa backend answered with a non-success status"""

    error = "Medusa API Error"

    def __init__(
        self,
        message: str,
        status_code: int,
        error: Optional[str] = None,
        url: Optional[str] = None,
        request_body: Any = None,
        response_body: Any = None,
    ):
        super().__init__(message, status_code=status_code, error=error or self.error)
        self.url = url
        self.request_body = request_body
        self.response_body = response_body


class MedusaUnavailableError(BffError):
    """The Medusa backend could not be reached at all"""

    status_code = 503
    error = "Service Unavailable"

    def __init__(self, message: str = "Failed to connect to Medusa backend", url: Optional[str] = None):
        super().__init__(message)
        self.url = url


def is_not_found(error: Exception) -> bool:
    """True when a platform call failed with 404"""
    return isinstance(error, MedusaApiError) and error.status_code == 404


__all__ = [
    "BffError",
    "UnauthorizedError",
    "BadRequestError",
    "NotFoundError",
    "MedusaApiError",
    "MedusaUnavailableError",
    "is_not_found",
]
