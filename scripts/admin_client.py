"""
Medusa Admin API client for operator scripts

Wraps the BFF's outbound gateway with admin authentication: a static
MEDUSA_ADMIN_TOKEN, or an email/password login against /auth/user/emailpass.
"""

import logging
from typing import Any, Dict, List, Optional

from core.config import MedusaConfig
from core.errors import UnauthorizedError
from core.medusa_client import MedusaClient, MedusaGatewayProtocol

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


class AdminApiClient:
    """
    Authenticated Medusa admin client

    Usage:
        async with AdminApiClient.from_config(settings.medusa) as admin:
            regions = await admin.list_all("/regions", "regions")
    """

    def __init__(
        self,
        medusa: MedusaGatewayProtocol,
        token: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ):
        self.medusa = medusa
        self.token = token
        self.email = email
        self.password = password

    @classmethod
    def from_config(cls, config: MedusaConfig) -> 'AdminApiClient':
        return cls(
            MedusaClient.from_config(config),
            token=config.admin_token,
            email=config.admin_email,
            password=config.admin_password,
        )

    async def authenticate(self) -> str:
        """Resolve the admin bearer token, logging in when none is configured"""
        if self.token:
            return self.token
        if not (self.email and self.password):
            raise UnauthorizedError(
                "Set MEDUSA_ADMIN_TOKEN or MEDUSA_ADMIN_EMAIL and MEDUSA_ADMIN_PASSWORD"
            )

        response = await self.medusa.auth_request(
            "/user/emailpass",
            method="POST",
            body={"email": self.email, "password": self.password},
        )
        token = response.get("token")
        if not token:
            raise UnauthorizedError("Admin login did not return a token")

        self.token = token
        logger.info(f"✅ Authenticated as admin {self.email}")
        return token

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        query: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        token = await self.authenticate()
        return await self.medusa.admin_request(
            path,
            method=method,
            body=body,
            query=query,
            headers={"Authorization": f"Bearer {token}"},
        )

    async def get(self, path: str, query: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self.request(path, query=query)

    async def post(self, path: str, body: Optional[Any] = None) -> Dict[str, Any]:
        return await self.request(path, method="POST", body=body if body is not None else {})

    async def delete(self, path: str) -> Dict[str, Any]:
        return await self.request(path, method="DELETE")

    async def list_all(
        self,
        path: str,
        key: str,
        query: Optional[Dict[str, Any]] = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> List[Dict[str, Any]]:
        """
        Fetch every record of a paginated admin list.

        Args:
            path: Admin list path, e.g. "/regions"
            key: Response key holding the records, e.g. "regions"
            query: Extra query parameters (fields, filters)
            page_size: Records per request

        Returns:
            All records across pages
        """
        records: List[Dict[str, Any]] = []
        offset = 0
        while True:
            params = dict(query or {})
            params.update({"offset": offset, "limit": page_size})
            response = await self.get(path, query=params)
            page = response.get(key) or []
            records.extend(page)
            offset += len(page)

            count = response.get("count")
            if not page or count is None or offset >= count:
                break
        return records

    async def close(self):
        close = getattr(self.medusa, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
