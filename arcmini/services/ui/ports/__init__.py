from __future__ import annotations

from .clipboard import IClipboardWriter
from .notifier import INotifier
from .tabs import ISearchOverlay, ITabInspector

__all__ = [
    "IClipboardWriter",
    "INotifier",
    "ISearchOverlay",
    "ITabInspector",
]
