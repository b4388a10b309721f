"""
Response Envelope Middleware

Wraps successful JSON responses of the versioned API as
{"success": true, "data": <payload>, "timestamp": <ISO-8601 UTC>}.
Error responses, non-JSON responses and anything outside the API prefix
pass through untouched.
"""

import json
import logging
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from core.payload import utc_timestamp

logger = logging.getLogger(__name__)


class ResponseEnvelopeMiddleware(BaseHTTPMiddleware):
    """
    Success envelope middleware

    **Usage:**
    ```python
    app.add_middleware(ResponseEnvelopeMiddleware, base_path="/api/v1")
    ```
    """

    def __init__(self, app, base_path: str = ""):
        super().__init__(app)
        self.base_path = base_path.rstrip("/")

    def _should_wrap(self, request: Request, response: Response) -> bool:
        path = request.url.path
        if self.base_path and not (path == self.base_path or path.startswith(self.base_path + "/")):
            return False
        if not 200 <= response.status_code < 300:
            return False
        content_type = response.headers.get("content-type", "")
        return content_type.startswith("application/json")

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        if not self._should_wrap(request, response):
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])
        headers = {
            key: value
            for key, value in response.headers.items()
            if key.lower() not in ("content-length", "content-type")
        }

        try:
            payload = json.loads(body) if body else None
        except ValueError:
            logger.warning(f"Response of {request.url.path} is not valid JSON, sending as is")
            return Response(
                content=body,
                status_code=response.status_code,
                headers=headers,
                media_type=response.media_type,
            )

        return JSONResponse(
            content={"success": True, "data": payload, "timestamp": utc_timestamp()},
            status_code=response.status_code,
            headers=headers,
        )
