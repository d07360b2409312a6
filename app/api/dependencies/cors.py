"""CORS responses for the browser-facing proxy endpoints.

The proxy endpoints answer their own preflight requests and attach
permissive CORS headers to every response, errors included. The global
CORSMiddleware skips them (see server.middleware.ProxyAwareCORSMiddleware).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import Response
from fastapi.responses import JSONResponse

# Methods answered with 405 by the POST-only proxy endpoints
UNSUPPORTED_METHODS = ["GET", "PUT", "PATCH", "DELETE"]


@dataclass(frozen=True)
class CorsPolicy:
    """Header set returned by one family of proxy endpoints."""

    allow_methods: str = "POST, OPTIONS"
    allow_headers: str = "Content-Type"
    max_age: Optional[int] = None

    @property
    def headers(self) -> Dict[str, str]:
        headers = {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": self.allow_methods,
            "Access-Control-Allow-Headers": self.allow_headers,
        }
        if self.max_age is not None:
            headers["Access-Control-Max-Age"] = str(self.max_age)
        return headers

    def json(self, content: Any, status_code: int = 200) -> JSONResponse:
        return JSONResponse(
            content=content, status_code=status_code, headers=self.headers
        )

    def preflight(self) -> Response:
        """Empty 200 answer to an OPTIONS request."""
        return Response(status_code=200, headers=self.headers)

    def method_not_allowed(self, error_key: str = "error") -> JSONResponse:
        return self.json({error_key: "Method not allowed"}, status_code=405)


DISCORD_PROXY_CORS = CorsPolicy()
STRIPE_PROXY_CORS = CorsPolicy(
    allow_methods="POST, OPTIONS, GET",
    allow_headers="Content-Type, Authorization",
    max_age=86400,
)
