"""
rest-headers: OWASP response headers for REST APIs.

Middleware factories that add the recommended security and caching headers
to API responses. It assumes the API does not return any HTML; if yours does,
write custom middleware.

See https://cheatsheetseries.owasp.org/cheatsheets/REST_Security_Cheat_Sheet.html#security-headers
"""

from .config import Environment, HeaderSettings, get_settings, reset_settings
from .errors import HeaderConfigurationError, RestHeadersError
from .middleware import (
    HttpExchange,
    ResponseHeadersMiddleware,
    add_response_headers,
    cache_control_middleware,
    chain,
    content_type_middleware,
    cors_origin_middleware,
    frame_middleware,
    hsts_middleware,
)
from .ports import Handler, HeaderSink, Middleware

__version__ = "1.0.0"

__all__ = [
    "Environment",
    "HeaderSettings",
    "get_settings",
    "reset_settings",
    "HeaderConfigurationError",
    "RestHeadersError",
    "HttpExchange",
    "ResponseHeadersMiddleware",
    "add_response_headers",
    "cache_control_middleware",
    "chain",
    "content_type_middleware",
    "cors_origin_middleware",
    "frame_middleware",
    "hsts_middleware",
    "Handler",
    "HeaderSink",
    "Middleware",
]
