"""Router-bound header middleware API.

Kept for callers written against the earlier API, where every factory took
the router it was registered on. The router is accepted and ignored; each
function returns the same middleware as its counterpart in
`rest_headers.middleware`.
"""

from typing import Any

from rest_headers.middleware.injectors import (
    cache_control_middleware,
    content_type_middleware,
    cors_origin_middleware,
    frame_middleware,
    hsts_middleware,
)
from rest_headers.ports import Middleware


def set_cache_control_header(router: Any) -> Middleware:
    """Adds the 'Cache-Control' header with the value 'no-store'."""
    return cache_control_middleware()


def set_content_type_headers(router: Any, content_type: str) -> Middleware:
    """
    Adds the 'Content-Type' header with the value of the `content_type` argument.
    Also adds the 'X-Content-Type-Options' header with the value 'nosniff'.
    """
    return content_type_middleware(content_type)


def set_cors_origin_header(router: Any, origin: str) -> Middleware:
    """Adds the 'Access-Control-Allow-Origin' header with the value of the `origin` argument."""
    return cors_origin_middleware(origin)


def set_frame_headers(router: Any) -> Middleware:
    """
    Adds the 'Content-Security-Policy' header with the value "frame-ancestors 'none'".
    Also adds the 'X-Frame-Options' with the value 'DENY'.
    """
    return frame_middleware()


def set_hsts_header(router: Any, value: str) -> Middleware:
    """Adds the 'Strict-Transport-Security' header with the value of the `value` argument."""
    return hsts_middleware(value)
