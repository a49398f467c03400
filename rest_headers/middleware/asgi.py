"""ASGI adapter for the header injectors.

Pure ASGI implementation (no BaseHTTPMiddleware) so streaming responses are
left alone. Works with any Starlette or FastAPI application.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from rest_headers.errors import HeaderConfigurationError
from rest_headers.logging import get_logger
from rest_headers.middleware.injectors import chain
from rest_headers.ports import Middleware

logger = get_logger("middleware.asgi")


@dataclass(frozen=True)
class HttpExchange:
    """One ASGI HTTP exchange, passed down the chain as the request."""

    scope: Scope
    receive: Receive
    send: Send

    @property
    def request(self) -> Request:
        """Starlette view of the inbound request."""
        return Request(self.scope, self.receive)


class ResponseHeadersMiddleware:
    """Inject the headers written by a middleware chain into every HTTP response."""

    def __init__(self, app: ASGIApp, middlewares: Sequence[Middleware] = ()) -> None:
        """
        Initialize response headers middleware.

        Args:
            app: ASGI application to wrap
            middlewares: Header middlewares, outermost first
        """
        for position, middleware in enumerate(middlewares):
            if not callable(middleware):
                raise HeaderConfigurationError(
                    f"middlewares[{position}]", f"expected a middleware, got {type(middleware).__name__}"
                )
        self.app = app
        self.handler = chain(*middlewares)(self._forward)

        logger.info(
            "response_headers_middleware_installed",
            headers=[name for middleware in middlewares for name in getattr(middleware, "headers", {})],
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        await self.handler(HttpExchange(scope, receive, send), MutableHeaders())

    async def _forward(self, exchange: HttpExchange, injected: MutableHeaders) -> None:
        async def send_with_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                headers = MutableHeaders(scope=message)
                # Injected values replace whatever the application set
                for name, value in injected.items():
                    headers[name] = value
            await exchange.send(message)

        await self.app(exchange.scope, exchange.receive, send_with_headers)


def add_response_headers(
    app: Any,
    settings: Any | None = None,
    middlewares: Sequence[Middleware] | None = None,
) -> None:
    """
    Add the response headers middleware to a Starlette or FastAPI application.

    Args:
        app: The Starlette/FastAPI application
        settings: HeaderSettings to build the chain from (defaults to the
            process-wide settings loaded from the environment)
        middlewares: Explicit middleware chain; takes precedence over settings

    Example:
        ```python
        from fastapi import FastAPI
        from rest_headers import add_response_headers, cors_origin_middleware

        app = FastAPI()
        add_response_headers(app, middlewares=[cors_origin_middleware("https://example.com")])
        ```
    """
    if middlewares is None:
        if settings is None:
            from rest_headers.config import get_settings

            settings = get_settings()
        middlewares = settings.build_middlewares()
    app.add_middleware(ResponseHeadersMiddleware, middlewares=list(middlewares))
