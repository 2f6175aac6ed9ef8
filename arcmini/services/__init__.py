"""Concrete service implementations."""

from .backends import InMemoryPreferenceBackend, SettingsPreferenceBackend
from .preference_store import PreferenceStore
from .template_renderer import TemplateRenderer

__all__ = [
    "InMemoryPreferenceBackend",
    "PreferenceStore",
    "SettingsPreferenceBackend",
    "TemplateRenderer",
]
