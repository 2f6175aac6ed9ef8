from arcmini.services.commands import (
    COMMAND_INTENTS,
    CommandDispatcher,
    Intent,
    shortcut_bindings,
)
from arcmini.utils.constants import DEFAULT_SHORTCUTS


class StubConfig:
    def __init__(self, shortcuts: dict[str, str]) -> None:
        self._shortcuts = shortcuts

    def get(self, section, key, default=None):
        if section != "shortcuts":
            return default
        return self._shortcuts.get(key, default)


def test_dispatch_routes_to_bound_handler():
    d = CommandDispatcher()
    calls = []
    d.bind(Intent.COPY_TITLE_URL, lambda: calls.append("title+url"))
    d.bind(Intent.COPY_URL, lambda: calls.append("url"))

    assert d.dispatch("copy-url-title") is True
    assert d.dispatch("copy-url") is True
    assert calls == ["title+url", "url"]


def test_unknown_command_is_ignored():
    d = CommandDispatcher()
    assert d.dispatch("open-the-pod-bay-doors") is False


def test_unbound_intent_returns_false():
    d = CommandDispatcher()
    assert d.intent_for("toggle-portable-search") is Intent.TOGGLE_SEARCH
    assert d.dispatch("toggle-portable-search") is False


def test_every_command_has_a_default_shortcut():
    assert set(COMMAND_INTENTS) == set(DEFAULT_SHORTCUTS)
    assert shortcut_bindings() == DEFAULT_SHORTCUTS


def test_config_overrides_and_disables_shortcuts():
    cfg = StubConfig({"copy-url": " Ctrl+Shift+U ", "toggle-portable-search": ""})
    b = shortcut_bindings(cfg)
    assert b["copy-url"] == "Ctrl+Shift+U"
    assert b["copy-url-title"] == DEFAULT_SHORTCUTS["copy-url-title"]
    assert "toggle-portable-search" not in b
