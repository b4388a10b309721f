"""
Medusa Backend Client

The single outbound request gateway of the BFF. Every translator and operator
script funnels its calls through MedusaClient, which attaches the publishable
key, serialises query/body and normalises every failure into one of two
errors:

    MedusaApiError          the backend answered with a non-success status
    MedusaUnavailableError  the backend could not be reached

No retries happen here; callers decide their own retry policy.
"""

import httpx
import logging
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple, runtime_checkable

from .errors import MedusaApiError, MedusaUnavailableError

logger = logging.getLogger(__name__)

QueryParams = Optional[Mapping[str, Any]]


@runtime_checkable
class MedusaGatewayProtocol(Protocol):
    """
    Interface of the outbound gateway.

    Translators depend on this so tests can inject a recording mock.
    """

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
        query: QueryParams = None,
    ) -> Dict[str, Any]:
        ...

    async def store_request(self, path: str, **kwargs) -> Dict[str, Any]:
        ...

    async def admin_request(self, path: str, **kwargs) -> Dict[str, Any]:
        ...

    async def auth_request(self, path: str, **kwargs) -> Dict[str, Any]:
        ...

    async def health_check(self) -> bool:
        ...


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_params(query: QueryParams) -> List[Tuple[str, str]]:
    """
    Flatten a query mapping into httpx params.

    None values are omitted, lists become repeated keys and every other value
    is stringified (booleans as true/false).
    """
    params: List[Tuple[str, str]] = []
    for key, value in (query or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set)):
            params.extend((key, _stringify(item)) for item in value)
        else:
            params.append((key, _stringify(value)))
    return params


class MedusaClient:
    """
    Medusa HTTP API client

    Usage:
        async with MedusaClient("http://localhost:9000", publishable_key="pk_...") as medusa:
            data = await medusa.store_request("/products", query={"limit": 10})
            cart = await medusa.store_request("/carts", method="POST", body={"region_id": "reg_1"})
    """

    service_name = "medusa"

    def __init__(
        self,
        base_url: str = "http://localhost:9000",
        publishable_key: str = "",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            base_url: Medusa backend URL
            publishable_key: Publishable API key sent as x-publishable-api-key
            timeout: Request timeout in seconds
            client: Pre-built HTTP client (tests inject a mock here)
        """
        self.base_url = base_url.rstrip('/')
        self.publishable_key = publishable_key
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": "medusa-bff/1.0"},
        )

        logger.debug(
            f"Initialized {self.service_name} client: {self.base_url} "
            f"(publishable_key={'set' if publishable_key else 'unset'})"
        )

    @classmethod
    def from_config(cls, config) -> 'MedusaClient':
        """Build from a MedusaConfig"""
        return cls(
            base_url=config.backend_url,
            publishable_key=config.publishable_key,
            timeout=config.timeout,
        )

    def _build_headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.publishable_key:
            headers["x-publishable-api-key"] = self.publishable_key
        if extra:
            # caller headers win, compared case-insensitively
            overridden = {name.lower() for name in extra}
            headers = {k: v for k, v in headers.items() if k.lower() not in overridden}
            headers.update(extra)
        return headers

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()
        logger.debug(f"Closed {self.service_name} client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ========================================
    # Requests
    # ========================================

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
        query: QueryParams = None,
    ) -> Dict[str, Any]:
        """
        Issue a request and return the parsed JSON body.

        Raises:
            MedusaApiError: non-2xx response
            MedusaUnavailableError: transport failure (DNS, refused, timeout)
        """
        method = method.upper()
        url = f"{self.base_url}{path}"
        params = build_query_params(query)
        request_body = body if method != "GET" else None

        logger.debug(f"Medusa request: {method} {url}")

        kwargs: Dict[str, Any] = {"headers": self._build_headers(headers)}
        if params:
            kwargs["params"] = params
        if request_body is not None:
            kwargs["json"] = request_body

        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"Failed to connect to Medusa: {method} {url}: {e}")
            raise MedusaUnavailableError(url=url) from e

        data = self._parse_body(response)

        if not 200 <= response.status_code < 300:
            body_data = data if isinstance(data, dict) else {}
            message = body_data.get("message") or f"Medusa API error: {response.status_code}"
            logger.error(
                f"Medusa API error {response.status_code}: {message} | "
                f"{method} {url} | request_body={request_body} | response={data}"
            )
            raise MedusaApiError(
                message,
                status_code=response.status_code,
                error=body_data.get("type"),
                url=url,
                request_body=request_body,
                response_body=data,
            )

        return data if data is not None else {}

    @staticmethod
    def _parse_body(response) -> Any:
        try:
            return response.json()
        except ValueError:
            return {}

    async def store_request(self, path: str, **kwargs) -> Dict[str, Any]:
        """Storefront API call (/store prefix)"""
        return await self.request(f"/store{path}", **kwargs)

    async def admin_request(self, path: str, **kwargs) -> Dict[str, Any]:
        """Admin API call (/admin prefix)"""
        return await self.request(f"/admin{path}", **kwargs)

    async def auth_request(self, path: str, **kwargs) -> Dict[str, Any]:
        """Authentication API call (/auth prefix)"""
        return await self.request(f"/auth{path}", **kwargs)

    async def health_check(self) -> bool:
        """
        Ping the backend health endpoint

        Returns:
            Whether Medusa answered 200
        """
        try:
            response = await self.client.request("GET", f"{self.base_url}/health")
            return response.status_code == 200
        except Exception as e:
            logger.warning(f"{self.service_name} health check failed: {e}")
            return False


__all__ = ["MedusaClient", "MedusaGatewayProtocol", "build_query_params"]
