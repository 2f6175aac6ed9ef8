from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Protocol, Union

from arcmini.domain.models import CopyRequest, PreferenceState

StateUpdate = Union[PreferenceState, Callable[[PreferenceState], PreferenceState]]
Subscriber = Callable[[PreferenceState], None]
Unsubscribe = Callable[[], None]


class IPreferenceBackend(Protocol):
    """Raw persistence under the preference store. Values are JSON text."""

    def load(self) -> str | None: ...
    def save(self, raw: str) -> None: ...


class IPreferenceStore(Protocol):
    """get/set/subscribe over the durable preference record."""

    def get(self) -> PreferenceState: ...
    def set(self, update: StateUpdate) -> None: ...
    def subscribe(self, callback: Subscriber) -> Unsubscribe: ...


class ITemplateRenderer(Protocol):
    """Turn a title/url pair into the final copy text for the selected format."""

    def render(self, request: CopyRequest, state: PreferenceState) -> str: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state and raw string values."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_raw(self, key: str, default: object = None) -> object: ...
    def set_raw(self, key: str, value: object) -> None: ...


class IConfigService(Protocol):
    """Read-only application configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...

    @property
    def loaded_from(self) -> Path | None: ...
