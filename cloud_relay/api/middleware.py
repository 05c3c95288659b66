"""
ASGI middleware for the relay API
"""

import logging
import time

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from cloud_relay.models.errors import ErrorCode, RelayError
from cloud_relay.utils.logging import log_api_request

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """
    Reject request bodies above ``max_body_size`` bytes with 413.

    Uses Content-Length when the client sends it; otherwise the body is
    buffered up to the limit and replayed to the application.
    """

    def __init__(self, app: ASGIApp, max_body_size: int):
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers") or [])
        content_length = headers.get(b"content-length")

        if content_length is not None:
            try:
                too_large = int(content_length) > self.max_body_size
            except ValueError:
                too_large = False
            if too_large:
                await self._reject(scope, receive, send)
                return
            await self.app(scope, receive, send)
            return

        body = b""
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                # Client went away before sending the body
                return
            body += message.get("body", b"")
            more_body = message.get("more_body", False)
            if len(body) > self.max_body_size:
                await self._reject(scope, receive, send)
                return

        replayed = False

        async def replay() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        logger.warning(f"Rejected request body above {self.max_body_size} bytes: {scope.get('path')}")
        error = RelayError(ErrorCode.PAYLOAD_TOO_LARGE)
        response = JSONResponse(status_code=error.status_code, content=error.to_dict())
        await response(scope, receive, send)


async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request"""
    start_time = time.time()
    response = await call_next(request)
    log_api_request(
        request.method,
        request.url.path,
        response.status_code,
        time.time() - start_time,
    )
    return response
