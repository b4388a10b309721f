"""
Medusa Gateway Mock

Implements MedusaGatewayProtocol. Every call is recorded with the API it
targeted (store/admin/auth) so tests can assert the exact outbound request,
or that none was made at all.
"""
import fnmatch
from typing import Any, Dict, List, Optional


class MockMedusaGateway:
    """Recording gateway with canned responses per route"""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self._responses: Dict[str, Any] = {}
        self._errors: Dict[str, Exception] = {}
        self.healthy = True

    @staticmethod
    def _key(api: str, method: str, path: str) -> str:
        return f"{method.upper()}:/{api}{path}"

    def set_response(self, api: str, method: str, path: str, data: Any):
        """Canned JSON for a route; path may contain * wildcards"""
        self._responses[self._key(api, method, path)] = data

    def set_error(self, api: str, method: str, path: str, error: Exception):
        """Raise ``error`` for a route; path may contain * wildcards"""
        self._errors[self._key(api, method, path)] = error

    def _lookup(self, table: Dict[str, Any], key: str) -> Any:
        if key in table:
            return table[key]
        for pattern, value in table.items():
            if "*" in pattern and fnmatch.fnmatch(key, pattern):
                return value
        return None

    async def _dispatch(
        self,
        api: str,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        query: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        self.calls.append({
            "api": api,
            "path": path,
            "method": method.upper(),
            "body": body,
            "headers": dict(headers or {}),
            "query": dict(query or {}),
        })
        key = self._key(api, method, path)
        error = self._lookup(self._errors, key)
        if error is not None:
            raise error
        response = self._lookup(self._responses, key)
        return response if response is not None else {}

    async def request(self, path: str, method: str = "GET", body=None, headers=None, query=None):
        return await self._dispatch("", path, method, body, headers, query)

    async def store_request(self, path: str, **kwargs) -> Dict[str, Any]:
        return await self._dispatch("store", path, **kwargs)

    async def admin_request(self, path: str, **kwargs) -> Dict[str, Any]:
        return await self._dispatch("admin", path, **kwargs)

    async def auth_request(self, path: str, **kwargs) -> Dict[str, Any]:
        return await self._dispatch("auth", path, **kwargs)

    async def health_check(self) -> bool:
        return self.healthy

    # Assertion helpers

    @property
    def last_call(self) -> Optional[Dict[str, Any]]:
        return self.calls[-1] if self.calls else None

    def calls_to(self, api: str, method: str, path: str) -> List[Dict[str, Any]]:
        return [
            c for c in self.calls
            if c["api"] == api and c["method"] == method.upper() and c["path"] == path
        ]

    def assert_called(self, api: str, method: str, path: str) -> Dict[str, Any]:
        matching = self.calls_to(api, method, path)
        assert matching, f"No {method} /{api}{path} call. Calls: {self.calls}"
        return matching[-1]

    def assert_no_calls(self):
        assert not self.calls, f"Expected no outbound calls, got: {self.calls}"
