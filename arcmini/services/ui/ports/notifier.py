from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class INotifier(Protocol):
    """Transient user-visible messages. Fire-and-forget."""

    def notify(self, title: str, message: str) -> None: ...
    def error(self, title: str, message: str) -> None: ...
