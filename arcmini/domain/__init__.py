"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import (
    ArcMiniError,
    ClipboardWriteFailed,
    CopyActionError,
    IncompleteTabData,
    NoActiveTab,
    StorageUnavailable,
    UnknownFormatKind,
)
from .interfaces import IPreferenceBackend, IPreferenceStore, ISettingsService, ITemplateRenderer
from .models import FORMAT_KINDS, CopyRequest, FormatKind, PreferenceState, TabInfo

__all__ = [
    "ArcMiniError",
    "ClipboardWriteFailed",
    "CopyActionError",
    "IncompleteTabData",
    "NoActiveTab",
    "StorageUnavailable",
    "UnknownFormatKind",
    "IPreferenceBackend",
    "IPreferenceStore",
    "ISettingsService",
    "ITemplateRenderer",
    "FORMAT_KINDS",
    "CopyRequest",
    "FormatKind",
    "PreferenceState",
    "TabInfo",
]
