"""Header middleware."""

from .injectors import (
    cache_control_middleware,
    chain,
    content_type_middleware,
    cors_origin_middleware,
    frame_middleware,
    hsts_middleware,
)
from .asgi import HttpExchange, ResponseHeadersMiddleware, add_response_headers

__all__ = [
    "cache_control_middleware",
    "chain",
    "content_type_middleware",
    "cors_origin_middleware",
    "frame_middleware",
    "hsts_middleware",
    "HttpExchange",
    "ResponseHeadersMiddleware",
    "add_response_headers",
]
