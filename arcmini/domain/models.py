from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, TypeGuard

FormatKind = Literal["plain", "markdown", "html", "csv"]

# Display order for pickers; keep in sync with FormatKind.
FORMAT_KINDS: tuple[FormatKind, ...] = ("plain", "markdown", "html", "csv")

DEFAULT_FORMAT: FormatKind = "markdown"
DEFAULT_SEPARATOR = " "

DEFAULT_TEMPLATES: dict[str, str] = {
    "plain": "{title}{separator}{url}",
    "markdown": "[{title}]({url})",
    "html": '<a href="{url}">{title}</a>',
    "csv": '"{title}","{url}"',
}


def is_format_kind(value: object) -> TypeGuard[FormatKind]:
    return isinstance(value, str) and value in FORMAT_KINDS


@dataclass(frozen=True)
class PreferenceState:
    """
    The single persisted record governing copy behaviour.

    `selected_format` is a plain string so a corrupted or newer tag can travel
    through the store untouched; the renderer decides what to do with it.
    """

    selected_format: str = DEFAULT_FORMAT
    templates: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_TEMPLATES))
    plain_text_separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        if not isinstance(self.selected_format, str):
            raise ValueError("selected_format must be a string")
        if not isinstance(self.plain_text_separator, str):
            raise ValueError("plain_text_separator must be a string")
        missing = [k for k in FORMAT_KINDS if k not in self.templates]
        if missing:
            raise ValueError(f"templates missing entries for: {', '.join(missing)}")
        # Read-only view over a private copy; every subscriber sees the same record.
        object.__setattr__(self, "templates", MappingProxyType(dict(self.templates)))

    def __hash__(self) -> int:
        return hash(
            (self.selected_format, tuple(sorted(self.templates.items())), self.plain_text_separator)
        )

    @classmethod
    def default(cls) -> PreferenceState:
        return cls()

    @property
    def format_kind(self) -> FormatKind | None:
        """The selected format if it is a known kind, otherwise None."""
        return self.selected_format if is_format_kind(self.selected_format) else None

    def template_for(self, kind: str) -> str:
        return self.templates.get(kind, "")


@dataclass(frozen=True)
class CopyRequest:
    title: str
    url: str


@dataclass(frozen=True)
class TabInfo:
    """What the tab inspector reports about the active tab. Any field may be empty."""

    title: str = ""
    url: str = ""
    tab_id: str = ""

    def missing_fields(self, *required: str) -> list[str]:
        names = required or ("title", "url", "tab_id")
        return [n for n in names if not getattr(self, n)]
