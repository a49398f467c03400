"""Ports (interfaces) for the header injectors.

The injectors only know about these two capabilities, so they can be
composed with any router that exposes an equivalent middleware convention.
"""

from typing import Any, Awaitable, Callable, Protocol


class HeaderSink(Protocol):
    """Mutable response header collection of one in-flight exchange."""

    def __setitem__(self, name: str, value: str) -> None:
        """Set header `name` to `value`, replacing any previous value."""
        ...


class Handler(Protocol):
    """Inner request handler wrapped by a middleware."""

    def __call__(self, request: Any, headers: HeaderSink) -> Awaitable[Any]:
        """
        Handle one request.

        Args:
            request: Framework request object, passed through untouched
            headers: Response header sink for this exchange

        Returns:
            Awaitable resolving to whatever the handler produces
        """
        ...


Middleware = Callable[[Handler], Handler]
