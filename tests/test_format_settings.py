from __future__ import annotations

import pytest
from PyQt6 import sip

from arcmini.domain.models import PreferenceState
from arcmini.services.preference_store import merge
from arcmini.services.ui.format_picker import FormatPicker
from arcmini.services.ui.format_settings import (
    FormatSettingsWidget,
    decode_separator,
    encode_separator,
    shortcut_hint,
)


@pytest.fixture()
def panel(qapp, store, renderer) -> FormatSettingsWidget:
    return FormatSettingsWidget(store, renderer)


@pytest.mark.parametrize(
    "value, shown",
    [(" ", " "), ("\n", "\\n"), (" \t ", " \\t "), ("a\\b", "a\\\\b"), ("", "")],
)
def test_separator_escape_roundtrip(value, shown):
    assert encode_separator(value) == shown
    assert decode_separator(shown) == value


def test_decode_leaves_unknown_escapes():
    assert decode_separator("\\x") == "\\x"
    assert decode_separator("end\\") == "end\\"


def test_shortcut_hint_lists_copy_shortcuts():
    hint = shortcut_hint({"copy-url": "Alt+C", "copy-url-title": "Ctrl+Alt+C"})
    assert "Alt+C copies the link" in hint
    assert "Ctrl+Alt+C copies title and link" in hint
    assert shortcut_hint({}) == "No copy shortcuts configured."


def test_panel_shows_current_state(panel):
    assert panel.buttons["markdown"].isChecked()
    assert not panel.buttons["plain"].isChecked()
    assert panel.separator_edit.isEnabled() is False
    assert panel.example_label.text() == "[Example Domain](https://example.com)"
    assert panel.template_edit.text() == "[{title}]({url})"


def test_panel_follows_store_changes(panel, store):
    store.set(merge(selected_format="plain", plain_text_separator="\n"))
    assert panel.buttons["plain"].isChecked()
    assert panel.separator_edit.isEnabled()
    assert panel.separator_edit.text() == "\\n"
    assert panel.example_label.text() == "Example Domain\nhttps://example.com"
    assert panel.template_preview.text() == "Example Domain\nhttps://example.com"


def test_clicking_format_writes_through_store(panel, store):
    panel.buttons["csv"].click()
    assert store.get().selected_format == "csv"
    assert panel.buttons["csv"].isChecked()
    assert panel.example_label.text() == '"Example Domain","https://example.com"'


def test_separator_edit_is_saved(panel, store):
    store.set(merge(selected_format="plain"))
    panel.separator_edit.setText(" \\t ")
    panel.separator_edit.editingFinished.emit()
    assert store.get().plain_text_separator == " \t "


def test_template_edit_saves_only_current_format(panel, store):
    panel.template_edit.setText("[{title}]( {url} )")
    panel.template_edit.editingFinished.emit()
    templates = store.get().templates
    assert templates["markdown"] == "[{title}]( {url} )"
    assert templates["html"] == PreferenceState.default().templates["html"]


def test_unknown_format_selects_nothing(panel, store):
    store.set(PreferenceState(selected_format="bogus"))
    assert not any(b.isChecked() for b in panel.buttons.values())
    assert panel.example_label.text() == "Example Domain https://example.com"


def test_known_format_after_unknown_checks_one_button(panel, store):
    store.set(PreferenceState(selected_format="bogus"))
    store.set(merge(selected_format="csv"))
    checked = [k for k, b in panel.buttons.items() if b.isChecked()]
    assert checked == ["csv"]


def test_two_surfaces_stay_in_sync(qapp, store, renderer, panel):
    picker = FormatPicker(store)
    assert picker.currentData() == "markdown"

    panel.buttons["html"].click()
    assert picker.currentData() == "html"

    picker.activated.emit(picker.findData("plain"))
    assert panel.buttons["plain"].isChecked()
    assert store.get().selected_format == "plain"


def test_picker_with_unknown_format_has_no_selection(qapp, store):
    store.set(PreferenceState(selected_format="bogus"))
    picker = FormatPicker(store)
    assert picker.currentIndex() == -1


def test_destroyed_panel_unsubscribes(qapp, store, renderer):
    w = FormatSettingsWidget(store, renderer)
    count = len(store._subscribers)
    sip.delete(w)
    assert len(store._subscribers) == count - 1
    store.set(merge(selected_format="csv"))  # must not touch the deleted widget
