"""
Transport stand-in for MedusaClient

MedusaClient only ever calls ``request()`` and ``aclose()`` on its
httpx.AsyncClient, so that is all this double implements. Responses are
keyed by exact "METHOD:url"; anything unkeyed gets the default response.
"""
from typing import Any, Dict, List, Optional


class MockHttpResponse:
    """The slice of httpx.Response the gateway reads"""

    def __init__(self, status_code: int = 200, json_data: Any = None, text: str = ""):
        self.status_code = status_code
        self._json_data = json_data
        self.text = text
        self.content = text.encode() if text else b""

    def json(self) -> Any:
        # httpx raises a ValueError subclass on a non-JSON body
        if self._json_data is None:
            raise ValueError("Response body is not JSON")
        return self._json_data


class MockHttpClient:
    """Records every outbound request and replays canned responses"""

    def __init__(self):
        self.requests: List[Dict[str, Any]] = []
        self.closed = False
        self._routes: Dict[str, MockHttpResponse] = {}
        self._default = MockHttpResponse(200, {})
        self._error: Optional[Exception] = None

    async def request(self, method: str, url: str, **kwargs) -> MockHttpResponse:
        self.requests.append({"method": method.upper(), "url": url, **kwargs})
        if self._error is not None:
            raise self._error
        return self._routes.get(f"{method.upper()}:{url}", self._default)

    async def aclose(self):
        self.closed = True

    def set_response(self, method: str, url: str, status_code: int = 200, json_data: Any = None, text: str = ""):
        self._routes[f"{method.upper()}:{url}"] = MockHttpResponse(status_code, json_data, text)

    def set_error(self, error: Exception):
        """Raise ``error`` from every subsequent request, as a dead transport would"""
        self._error = error

    def get_last_request(self) -> Optional[Dict[str, Any]]:
        return self.requests[-1] if self.requests else None
