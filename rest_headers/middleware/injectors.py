"""Response header injectors for REST APIs.

Each factory returns a middleware: a function that takes the next handler
and returns a handler which writes its header(s) into the response header
sink and then delegates to the next handler exactly once.

Headers and values follow the OWASP REST Security Cheat Sheet and assume the
API never returns HTML:
https://cheatsheetseries.owasp.org/cheatsheets/REST_Security_Cheat_Sheet.html#security-headers
"""

from functools import reduce
from typing import Any

from rest_headers.logging import get_logger
from rest_headers.ports import Handler, HeaderSink, Middleware

logger = get_logger("middleware.injectors")

CACHE_CONTROL = "Cache-Control"
CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_OPTIONS = "X-Content-Type-Options"
ALLOW_ORIGIN = "Access-Control-Allow-Origin"
CONTENT_SECURITY_POLICY = "Content-Security-Policy"
FRAME_OPTIONS = "X-Frame-Options"
STRICT_TRANSPORT_SECURITY = "Strict-Transport-Security"

NO_STORE = "no-store"
NOSNIFF = "nosniff"
FRAME_ANCESTORS_NONE = "frame-ancestors 'none'"
DENY = "DENY"


def _header_middleware(headers: dict[str, str]) -> Middleware:
    """Build a middleware that sets fixed `headers` before delegating."""
    items = tuple(headers.items())

    def middleware(next_handler: Handler) -> Handler:
        async def handler(request: Any, response_headers: HeaderSink) -> Any:
            for name, value in items:
                response_headers[name] = value
            return await next_handler(request, response_headers)

        return handler

    middleware.headers = dict(items)
    logger.debug("header_middleware_created", headers=middleware.headers)
    return middleware


def cache_control_middleware() -> Middleware:
    """Adds the 'Cache-Control' response header with the value 'no-store'."""
    return _header_middleware({CACHE_CONTROL: NO_STORE})


def content_type_middleware(content_type: str) -> Middleware:
    """
    Adds the 'Content-Type' response header with the value of `content_type`.

    Also adds the 'X-Content-Type-Options' response header with the value
    'nosniff'. The content type is written verbatim.
    """
    return _header_middleware({CONTENT_TYPE: content_type, CONTENT_TYPE_OPTIONS: NOSNIFF})


def cors_origin_middleware(origin: str) -> Middleware:
    """Adds the 'Access-Control-Allow-Origin' response header with the value of `origin`."""
    return _header_middleware({ALLOW_ORIGIN: origin})


def frame_middleware() -> Middleware:
    """
    Adds the 'Content-Security-Policy' response header with the value "frame-ancestors 'none'".

    Also adds the 'X-Frame-Options' response header with the value 'DENY'.
    """
    return _header_middleware({CONTENT_SECURITY_POLICY: FRAME_ANCESTORS_NONE, FRAME_OPTIONS: DENY})


def hsts_middleware(value: str) -> Middleware:
    """Adds the 'Strict-Transport-Security' response header with the value of `value`."""
    return _header_middleware({STRICT_TRANSPORT_SECURITY: value})


def chain(*middlewares: Middleware) -> Middleware:
    """
    Compose middlewares into one.

    The first middleware listed is the outermost, so it runs first.

    Example:
        handler = chain(cache_control_middleware(), frame_middleware())(endpoint)
    """

    def middleware(next_handler: Handler) -> Handler:
        return reduce(lambda inner, outer: outer(inner), reversed(middlewares), next_handler)

    return middleware
