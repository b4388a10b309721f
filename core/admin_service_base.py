"""
Base class for admin-scoped translators

Every admin operation runs the same gates before touching the network:
the caller must present an Authorization value, and resource ids must carry
the platform prefix of their type. Platform 404s become NotFoundError with
the requested id.
"""

import logging
from typing import Any, Dict, Optional

from .auth_dependencies import auth_headers, require_authorization, require_bearer_token
from .errors import NotFoundError, is_not_found
from .medusa_client import MedusaGatewayProtocol
from .payload import ensure_id_prefix

logger = logging.getLogger(__name__)


class AdminServiceBase:
    """
    Admin translator base

    Subclasses set ``require_bearer`` to False where any non-empty
    Authorization value is accepted.
    """

    require_bearer: bool = True

    def __init__(self, medusa: MedusaGatewayProtocol):
        self.medusa = medusa

    def authorize(self, authorization: Optional[str]) -> Dict[str, str]:
        """Gate the call and return the headers forwarding the token"""
        if self.require_bearer:
            require_bearer_token(authorization)
        else:
            require_authorization(authorization, "Admin authorization header is required")
        return auth_headers(authorization)

    @staticmethod
    def check_id(resource_id: str, prefix: str, label: str) -> str:
        return ensure_id_prefix(resource_id, prefix, label)

    async def admin_call(
        self,
        path: str,
        authorization: Optional[str],
        not_found: Optional[str] = None,
        resource_id: Optional[str] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        """
        Authorised admin request.

        Args:
            path: Admin API path (without the /admin prefix)
            authorization: Caller's Authorization header
            not_found: Message raised as NotFoundError on a platform 404
            resource_id: Id reported with the NotFoundError
        """
        headers = self.authorize(authorization)
        try:
            return await self.medusa.admin_request(path, headers=headers, **kwargs)
        except Exception as e:
            if not_found and is_not_found(e):
                raise NotFoundError(not_found, resource_id) from e
            raise


__all__ = ["AdminServiceBase"]
