from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IClipboardWriter(Protocol):
    """Abstract port for putting text on the system clipboard."""

    def write(self, text: str, tab_id: str) -> None:
        """Write *text*; raise ClipboardWriteFailed if the write did not take."""
        ...
