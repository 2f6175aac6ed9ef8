from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from arcmini.domain.interfaces import IAppConfig
from arcmini.services.config.ini_config_service import IniConfigService
from arcmini.utils.constants import DEFAULT_SEARCH_URL, NOTIFY_TIMEOUT_MS

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller onefile/onedir uses sys._MEIPASS as bundle root
      - dev mode walks up from this file
    """
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass:
        return Path(meipass)

    # arcmini/services/config/app_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    return m.group(1) if m else None


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Wraps IniConfigService and adds typed accessors for the settings the app reads.

    Precedence for version:
      1) <project_root>/version file (e.g. v0.3.1)
      2) [app] version in the ini
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    def log_level(self) -> str:
        return (self.get("logging", "level", "INFO") or "INFO").strip().upper()

    def search_url(self) -> str:
        url = (self.get("search", "url", DEFAULT_SEARCH_URL) or "").strip()
        return url if "{query}" in url else DEFAULT_SEARCH_URL

    def notifications_enabled(self) -> bool:
        return bool(self.get_bool("notifications", "enabled", True))

    def notify_timeout_ms(self) -> int:
        ms = self.get_int("notifications", "timeout_ms", NOTIFY_TIMEOUT_MS)
        return ms if ms and ms > 0 else NOTIFY_TIMEOUT_MS

    # ---- delegate IniConfigService ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
