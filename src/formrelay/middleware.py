"""Cross-origin request policy."""

from __future__ import annotations

from collections.abc import Iterable

from starlette.datastructures import Headers
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from formrelay.exceptions import OriginNotAllowedError, error_response
from formrelay.utils.logger import get_logger

logger = get_logger(__name__)

PREFLIGHT_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"


class OriginPolicyMiddleware:
    """
    Enforce the origin allow-list ahead of routing.

    - Requests without an Origin header (curl, server-to-server) pass through.
    - Preflight requests get a permissive 204 on any path.
    - Any other request from an unlisted origin is answered with a generic
      403 and never reaches a handler.

    CORS response headers for allowed origins are added by Starlette's
    ``CORSMiddleware``, which sits inside this one.
    """

    def __init__(self, app: ASGIApp, allowed_origins: Iterable[str]) -> None:
        self.app = app
        self.allowed_origins = frozenset(allowed_origins)

    def is_allowed(self, origin: str | None) -> bool:
        """Whether a request with this Origin header may proceed."""
        return origin is None or origin in self.allowed_origins

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        origin = headers.get("origin")

        if scope["method"] == "OPTIONS" and "access-control-request-method" in headers:
            response = self.preflight_response(headers)
            await response(scope, receive, send)
            return

        try:
            self.check(origin)
        except OriginNotAllowedError as exc:
            logger.warning("CORS blocked: %s %s from %s", scope["method"], scope["path"], exc.origin)
            response = error_response(exc.status_code, "Request blocked")
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)

    def check(self, origin: str | None) -> None:
        """
        Raises:
            OriginNotAllowedError: If the origin is present and not allow-listed
        """
        if not self.is_allowed(origin):
            raise OriginNotAllowedError(origin)

    @staticmethod
    def preflight_response(headers: Headers) -> Response:
        """Permissive 204 answer to a CORS preflight, for any origin and path."""
        origin = headers.get("origin")
        response_headers = {
            "Access-Control-Allow-Origin": origin or "*",
            "Access-Control-Allow-Methods": PREFLIGHT_METHODS,
            "Access-Control-Max-Age": "600",
        }
        if origin:
            response_headers["Vary"] = "Origin"
        requested_headers = headers.get("access-control-request-headers")
        if requested_headers:
            response_headers["Access-Control-Allow-Headers"] = requested_headers
        return Response(status_code=204, headers=response_headers)
