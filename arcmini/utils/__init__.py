"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    DEFAULT_SHORTCUTS,
    FORMAT_NAMES,
    SCHEMA_VERSION,
    SETTINGS_GEOMETRY,
    STORAGE_KEY,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "DEFAULT_SHORTCUTS",
    "FORMAT_NAMES",
    "SCHEMA_VERSION",
    "SETTINGS_GEOMETRY",
    "STORAGE_KEY",
]
