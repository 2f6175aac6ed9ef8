from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from arcmini.domain.errors import StorageUnavailable
from arcmini.domain.interfaces import (
    IPreferenceBackend,
    IPreferenceStore,
    StateUpdate,
    Subscriber,
    Unsubscribe,
)
from arcmini.domain.models import (
    DEFAULT_FORMAT,
    DEFAULT_SEPARATOR,
    DEFAULT_TEMPLATES,
    PreferenceState,
)
from arcmini.log import logger
from arcmini.utils.constants import SCHEMA_VERSION

# Pre-separator records stored the active format under this key.
_LEGACY_FORMAT_KEY = "titleUrlFormat"


def state_to_record(state: PreferenceState) -> dict[str, Any]:
    return {
        "schemaVersion": SCHEMA_VERSION,
        "selectedFormat": state.selected_format,
        "templates": dict(state.templates),
        "plainTextSeparator": state.plain_text_separator,
    }


def record_to_state(record: dict[str, Any]) -> tuple[PreferenceState, bool]:
    """
    Build a state from a stored record, migrating older shapes.

    Returns ``(state, migrated)``; ``migrated`` is True when the record had to be
    upgraded and should be written back.
    """
    migrated = record.get("schemaVersion") != SCHEMA_VERSION

    selected = record.get("selectedFormat")
    if selected is None:
        selected = record.get(_LEGACY_FORMAT_KEY, DEFAULT_FORMAT)
        migrated = True
    if not isinstance(selected, str):
        selected = DEFAULT_FORMAT
        migrated = True

    raw_templates = record.get("templates")
    templates: dict[str, str] = {}
    if isinstance(raw_templates, dict):
        templates = {str(k): str(v) for k, v in raw_templates.items() if isinstance(v, str)}
    for kind, default in DEFAULT_TEMPLATES.items():
        if kind not in templates:
            templates[kind] = default
            migrated = True

    separator = record.get("plainTextSeparator")
    if not isinstance(separator, str):
        separator = DEFAULT_SEPARATOR
        migrated = True

    state = PreferenceState(
        selected_format=selected,
        templates=templates,
        plain_text_separator=separator,
    )
    return state, migrated


class PreferenceStore(IPreferenceStore):
    """
    Single source of truth for the copy-format preferences.

    - Every `get()` reads the backend; nothing is cached for reads.
    - `set()` accepts a full state or a function of the current state. The
      function is applied to a value read inside `set`, never to a copy the
      caller might be holding.
    - Subscribers are called synchronously, in registration order, after each
      commit. A failing subscriber is logged and skipped.
    """

    def __init__(self, backend: IPreferenceBackend) -> None:
        self._backend = backend
        self._subscribers: list[Subscriber] = []
        # Last state subscribers are known to reflect; reads do not move it.
        self._delivered: PreferenceState | None = None

    @property
    def backend(self) -> IPreferenceBackend:
        return self._backend

    # -----------------------------
    # Public API
    # -----------------------------

    def get(self) -> PreferenceState:
        state = self._read()
        if self._delivered is None:
            self._delivered = state
        return state

    def set(self, update: StateUpdate) -> None:
        if isinstance(update, PreferenceState):
            new_state = update
        elif callable(update):
            new_state = update(self._read())
            if not isinstance(new_state, PreferenceState):
                raise TypeError(
                    f"update function must return PreferenceState, got {type(new_state).__name__}"
                )
        else:
            raise TypeError(
                f"set() expects PreferenceState or a callable, got {type(update).__name__}"
            )

        self._write(new_state)
        logger.debug("preferences committed: format=%s", new_state.selected_format)
        self._delivered = new_state
        self._notify(new_state)

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass  # already removed

        return unsubscribe

    def reload(self) -> PreferenceState:
        """
        Re-read the backend and notify subscribers if the value differs from the
        last one they were given (or the first one read). Picks up writes made
        by another process.
        """
        state = self._read()
        if state != self._delivered:
            self._delivered = state
            self._notify(state)
        return state

    # -----------------------------
    # Internal helpers
    # -----------------------------

    def _read(self) -> PreferenceState:
        try:
            raw = self._backend.load()
        except OSError as exc:
            raise StorageUnavailable(str(exc)) from exc

        record = self._decode(raw)
        if record is None:
            state = PreferenceState.default()
            self._write(state)
            logger.info("initialized copy-format preferences with defaults")
            return state

        state, migrated = record_to_state(record)
        if migrated:
            self._write(state)
            logger.info("migrated stored copy-format preferences to schema %s", SCHEMA_VERSION)
        return state

    def _write(self, state: PreferenceState) -> None:
        raw = json.dumps(state_to_record(state), ensure_ascii=False)
        try:
            self._backend.save(raw)
        except OSError as exc:
            raise StorageUnavailable(str(exc)) from exc

    @staticmethod
    def _decode(raw: str | None) -> dict[str, Any] | None:
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("stored copy-format preferences are not valid JSON; resetting")
            return None
        if not isinstance(data, dict):
            logger.warning("stored copy-format preferences are not an object; resetting")
            return None
        return data

    def _notify(self, state: PreferenceState) -> None:
        # Copy: callbacks may unsubscribe while we iterate.
        for cb in list(self._subscribers):
            try:
                cb(state)
            except Exception:
                logger.exception("preference subscriber %r failed", cb)


def merge(**changes: Any) -> Callable[[PreferenceState], PreferenceState]:
    """Build a functional update that replaces the given fields of the current state."""

    def apply(current: PreferenceState) -> PreferenceState:
        return replace(current, **changes)

    return apply


def with_template(kind: str, template: str) -> Callable[[PreferenceState], PreferenceState]:
    """Functional update replacing a single template, keeping the others."""

    def apply(current: PreferenceState) -> PreferenceState:
        templates = dict(current.templates)
        templates[kind] = template
        return replace(current, templates=templates)

    return apply
