"""Unit tests for the router-bound API."""

import pytest

from rest_headers.compat import (
    set_cache_control_header,
    set_content_type_headers,
    set_cors_origin_header,
    set_frame_headers,
    set_hsts_header,
)
from rest_headers.middleware.injectors import chain
from tests.fakes import RecordingHandler


@pytest.fixture
def router():
    """Stand-in for the router the middlewares are registered on."""
    return object()


class TestRouterBoundApi:
    """The router-bound functions behave like the plain factories."""

    async def test_all_headers(self, router, request_obj):
        """All five produce the standard headers."""
        headers = {}
        handler = RecordingHandler()

        middleware = chain(
            set_cache_control_header(router),
            set_content_type_headers(router, "application/json"),
            set_cors_origin_header(router, "https://example.com"),
            set_frame_headers(router),
            set_hsts_header(router, "max-age=31536000"),
        )
        await middleware(handler)(request_obj, headers)

        assert headers == {
            "Cache-Control": "no-store",
            "Content-Type": "application/json",
            "X-Content-Type-Options": "nosniff",
            "Access-Control-Allow-Origin": "https://example.com",
            "Content-Security-Policy": "frame-ancestors 'none'",
            "X-Frame-Options": "DENY",
            "Strict-Transport-Security": "max-age=31536000",
        }
        assert handler.call_count == 1

    async def test_cors_origin_is_echoed(self, router, request_obj):
        """The configured origin is used, never a hardcoded wildcard."""
        headers = {}

        await set_cors_origin_header(router, "https://partner.example.org")(RecordingHandler())(
            request_obj, headers
        )

        assert headers["Access-Control-Allow-Origin"] == "https://partner.example.org"

    async def test_router_is_ignored(self, request_obj):
        """Any router value, including None, is accepted."""
        headers = {}

        await set_frame_headers(None)(RecordingHandler())(request_obj, headers)

        assert headers["X-Frame-Options"] == "DENY"
