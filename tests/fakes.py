"""Fake implementations for testing."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RecordingHandler:
    """Fake inner handler that records calls and the headers seen at call time."""

    result: Any = "handled"
    calls: list[tuple[Any, dict[str, str]]] = field(default_factory=list)

    async def __call__(self, request: Any, headers: Any) -> Any:
        self.calls.append((request, dict(headers)))
        return self.result

    @property
    def call_count(self) -> int:
        """Number of times the handler was invoked."""
        return len(self.calls)


@dataclass
class FailingHandler:
    """Fake inner handler that always raises."""

    error: Exception = field(default_factory=lambda: RuntimeError("handler failed"))
    call_count: int = 0

    async def __call__(self, request: Any, headers: Any) -> Any:
        self.call_count += 1
        raise self.error


@dataclass
class WriteOnlyHeaders:
    """Header sink that only supports item assignment."""

    written: list[tuple[str, str]] = field(default_factory=list)

    def __setitem__(self, name: str, value: str) -> None:
        self.written.append((name, value))
