from __future__ import annotations

from typing import Protocol, runtime_checkable

from arcmini.domain.models import TabInfo


@runtime_checkable
class ITabInspector(Protocol):
    """Reports the active tab. Returns None when there is no tab at all."""

    def active_tab(self) -> TabInfo | None: ...


@runtime_checkable
class ISearchOverlay(Protocol):
    """Shows/hides the portable search box for a tab."""

    def toggle(self, tab_id: str) -> bool:
        """Return True when the overlay is now visible."""
        ...
