# tests/test_app_config.py
from __future__ import annotations

from pathlib import Path

from arcmini.services.config.app_config import AppConfig, build_app_config
from arcmini.utils.constants import DEFAULT_SEARCH_URL, NOTIFY_TIMEOUT_MS


def _write(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


class FakeIni:
    """Minimal IniConfigService-like fake; only what AppConfig calls."""

    def __init__(self, *, version: str = "0.0.0", values: dict | None = None) -> None:
        self._version = version
        self._values = values or {}

    def app_version(self) -> str:
        return self._version

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self._values.get((section, key), default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        v = self._values.get((section, key))
        return int(v) if v is not None else default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        v = self._values.get((section, key))
        return v == "true" if v is not None else default

    def as_dict(self) -> dict[str, dict[str, str]]:
        return {"app": {"version": self._version}}

    @property
    def loaded_from(self) -> Path | None:
        return None


def test_get_version_prefers_version_file_and_strips_v(tmp_path: Path):
    root = tmp_path / "proj"
    _write(root / "version", "v1.0.5\n")
    cfg = AppConfig(ini=FakeIni(version="9.9.9"), project_root=root)
    assert cfg.get_version() == "1.0.5"


def test_get_version_falls_back_to_ini_then_zero(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni(version="v2.3.4"), project_root=tmp_path)
    assert cfg.get_version() == "2.3.4"
    cfg = AppConfig(ini=FakeIni(version="  "), project_root=tmp_path)
    assert cfg.get_version() == "0.0.0"


def test_defaults_for_typed_accessors(tmp_path: Path):
    cfg = AppConfig(ini=FakeIni(), project_root=tmp_path)
    assert cfg.log_level() == "INFO"
    assert cfg.search_url() == DEFAULT_SEARCH_URL
    assert cfg.notifications_enabled() is True
    assert cfg.notify_timeout_ms() == NOTIFY_TIMEOUT_MS


def test_typed_accessors_read_ini(tmp_path: Path):
    values = {
        ("logging", "level"): "debug",
        ("search", "url"): "https://duckduckgo.com/?q={query}",
        ("notifications", "enabled"): "false",
        ("notifications", "timeout_ms"): "1500",
    }
    cfg = AppConfig(ini=FakeIni(values=values), project_root=tmp_path)
    assert cfg.log_level() == "DEBUG"
    assert cfg.search_url() == "https://duckduckgo.com/?q={query}"
    assert cfg.notifications_enabled() is False
    assert cfg.notify_timeout_ms() == 1500


def test_search_url_without_query_placeholder_is_rejected(tmp_path: Path):
    values = {("search", "url"): "https://example.com/search"}
    cfg = AppConfig(ini=FakeIni(values=values), project_root=tmp_path)
    assert cfg.search_url() == DEFAULT_SEARCH_URL


def test_build_app_config_reads_project_config(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(
        "arcmini.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "none"),
    )
    root = tmp_path / "repo"
    _write(root / "config" / "config.ini", "[shortcuts]\ncopy-url = Alt+U\n")
    cfg = build_app_config(project_root=root)
    assert cfg.get("shortcuts", "copy-url") == "Alt+U"
    assert cfg.loaded_from == root / "config" / "config.ini"
