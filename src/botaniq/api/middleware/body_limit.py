"""Request body size limit for upload endpoints.

Oversized requests are rejected with 413 before the multipart form is parsed:
- a declared Content-Length above the limit is refused without reading the body,
- otherwise the streamed bytes are counted and the request is cut off once the
  count passes the limit.
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from botaniq.api.middleware.error_handler import error_body
from botaniq.core.exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)

# Room for multipart boundaries, part headers and the text fields.
FORM_OVERHEAD_BYTES = 64 * 1024

LIMITED_METHODS = {"POST", "PUT", "PATCH"}


class RequestSizeLimitMiddleware:
    """Reject request bodies over `max_bytes` on paths under `path_prefix`."""

    def __init__(self, app: ASGIApp, max_bytes: int, path_prefix: str = "/users/"):
        self.app = app
        self.max_bytes = max_bytes
        self.path_prefix = path_prefix

    def _applies(self, scope: Scope) -> bool:
        return (
            scope["type"] == "http"
            and scope["method"] in LIMITED_METHODS
            and scope["path"].startswith(self.path_prefix)
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if not self._applies(scope) or self.max_bytes <= 0:
            await self.app(scope, receive, send)
            return

        raw_length = Headers(scope=scope).get("content-length")
        try:
            content_length = int(raw_length) if raw_length is not None else None
        except ValueError:
            content_length = None

        if content_length is not None and content_length > self.max_bytes:
            await self._reject(scope, receive, send, content_length)
            return

        received = 0
        exceeded = False

        async def limited_receive() -> Message:
            nonlocal received, exceeded
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    exceeded = True
                    raise PayloadTooLargeError(
                        "UPLOAD_001", details={"max_bytes": self.max_bytes}
                    )
            return message

        async def guarded_send(message: Message) -> None:
            # Whatever the app answers to a cut-off body is replaced by the 413.
            if not exceeded:
                await send(message)

        try:
            await self.app(scope, limited_receive, guarded_send)
        except PayloadTooLargeError:
            if not exceeded:
                raise

        if exceeded:
            await self._reject(scope, receive, send, received)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, size: int) -> None:
        logger.info(
            "Request body too large",
            extra={
                "error_code": "UPLOAD_001",
                "method": scope["method"],
                "path": scope["path"],
                "size_bytes": size,
            },
        )
        response = JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content=error_body("UPLOAD_001"),
        )
        await response(scope, receive, send)
