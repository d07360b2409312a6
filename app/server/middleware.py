"""HTTP middleware: request logging context and CORS."""

import uuid
from typing import Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from infrastructure.logging import bind_request_context

CORRELATION_ID_HEADER = "X-Correlation-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id, path and method to every log line of a request."""

    async def dispatch(self, request, call_next):
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(
            uuid.uuid4()
        )
        with bind_request_context(
            correlation_id=correlation_id,
            request_path=request.url.path,
            request_method=request.method,
        ):
            response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


class ProxyAwareCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that leaves the proxy endpoints alone.

    Proxy endpoints answer their own preflight with an empty body and set
    their own headers. Every other OPTIONS request gets an empty 200.
    """

    def __init__(
        self, app: ASGIApp, exempt_prefixes: Sequence[str] = (), **kwargs
    ) -> None:
        super().__init__(app, **kwargs)
        self.exempt_prefixes = tuple(exempt_prefixes)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].startswith(self.exempt_prefixes):
            await self.app(scope, receive, send)
            return
        if scope["type"] == "http" and scope["method"] == "OPTIONS":
            if "access-control-request-method" not in Headers(scope=scope):
                # Bare OPTIONS: empty 200 instead of the router's 405
                response = Response(status_code=200, headers=dict(self.simple_headers))
                await response(scope, receive, send)
                return
        await super().__call__(scope, receive, send)
