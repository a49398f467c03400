"""
Structured logging for rest-headers.

The library only emits events through `get_logger`; the host application
decides how they are rendered by calling `configure_logging` at startup.
"""

from .factory import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
