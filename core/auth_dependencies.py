"""
FastAPI Authentication Dependencies

The BFF never validates tokens itself: it extracts the Authorization header
and forwards it verbatim to Medusa. The gates below only reject requests that
carry no usable value, before any outbound call is made.
"""

from fastapi import Header
from typing import Dict, Optional
import logging

from .errors import UnauthorizedError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


async def get_authorization(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> Optional[str]:
    """
    Authorization header as sent by the client, or None

    使用示例：
        @router.get("/orders")
        async def list_orders(authorization: Optional[str] = Depends(get_authorization)):
            ...
    """
    if authorization is not None and not authorization.strip():
        return None
    return authorization


def require_authorization(
    authorization: Optional[str],
    message: str = "Authorization header is required",
) -> str:
    """Reject a missing or blank Authorization value"""
    if not authorization or not authorization.strip():
        raise UnauthorizedError(message)
    return authorization


def require_bearer_token(authorization: Optional[str]) -> str:
    """Reject anything that is not a 'Bearer <token>' value"""
    if (
        not authorization
        or not authorization.startswith(BEARER_PREFIX)
        or not authorization[len(BEARER_PREFIX):].strip()
    ):
        raise UnauthorizedError("Valid Bearer token is required")
    return authorization


def auth_headers(authorization: Optional[str]) -> Dict[str, str]:
    """Headers forwarding the caller's Authorization, if any"""
    return {"Authorization": authorization} if authorization else {}


__all__ = [
    "BEARER_PREFIX",
    "get_authorization",
    "require_authorization",
    "require_bearer_token",
    "auth_headers",
]
