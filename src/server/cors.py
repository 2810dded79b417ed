from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.responses import Response
from starlette.types import Receive, Scope, Send

from src.server import config


def preflight_headers() -> dict[str, str]:
    """Headers sent back on every preflight, whatever the browser asked for."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": ", ".join(config.CORS_ALLOWED_METHODS),
        "Access-Control-Allow-Headers": ", ".join(config.CORS_ALLOWED_HEADERS),
        "Access-Control-Max-Age": str(config.CORS_MAX_AGE_SECONDS),
    }


class PermissiveCORSMiddleware(CORSMiddleware):
    """CORS middleware that never rejects a preflight.

    Starlette answers 400 when a preflight asks for a method or header outside
    the allowed lists. Here every preflight succeeds and advertises the fixed
    lists; enforcing them is left to the browser. Simple requests are handled
    by the parent class.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "OPTIONS":
            headers = Headers(scope=scope)
            if "origin" in headers and "access-control-request-method" in headers:
                response = Response(
                    status_code=config.CORS_PREFLIGHT_STATUS,
                    headers=preflight_headers(),
                )
                await response(scope, receive, send)
                return
        await super().__call__(scope, receive, send)
