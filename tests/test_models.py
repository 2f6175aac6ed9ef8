import pytest

from arcmini.domain.models import (
    DEFAULT_TEMPLATES,
    FORMAT_KINDS,
    PreferenceState,
    TabInfo,
    is_format_kind,
)


def test_default_state():
    s = PreferenceState.default()
    assert s.selected_format == "markdown"
    assert s.plain_text_separator == " "
    assert s.templates == DEFAULT_TEMPLATES
    assert set(s.templates) == set(FORMAT_KINDS)


def test_state_requires_every_template():
    templates = dict(DEFAULT_TEMPLATES)
    del templates["csv"]
    with pytest.raises(ValueError, match="csv"):
        PreferenceState(templates=templates)


def test_state_keeps_private_copy_of_templates():
    templates = dict(DEFAULT_TEMPLATES)
    s = PreferenceState(templates=templates)
    templates["plain"] = "changed"
    assert s.templates["plain"] == DEFAULT_TEMPLATES["plain"]


def test_state_templates_are_read_only():
    s = PreferenceState()
    with pytest.raises(TypeError):
        s.templates["plain"] = "changed"  # type: ignore[index]


def test_equal_states_hash_equal():
    a = PreferenceState(selected_format="csv")
    b = PreferenceState(selected_format="csv", templates=dict(DEFAULT_TEMPLATES))
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, PreferenceState()}) == 2


def test_unknown_format_tag_is_allowed_but_has_no_kind():
    s = PreferenceState(selected_format="bogus")
    assert s.selected_format == "bogus"
    assert s.format_kind is None
    assert PreferenceState(selected_format="csv").format_kind == "csv"


def test_is_format_kind():
    assert all(is_format_kind(k) for k in FORMAT_KINDS)
    assert not is_format_kind("rtf")
    assert not is_format_kind(None)


def test_tab_info_missing_fields():
    assert TabInfo("t", "u", "1").missing_fields() == []
    assert TabInfo("", "u", "").missing_fields() == ["title", "tab_id"]
    assert TabInfo("", "u", "1").missing_fields("url", "tab_id") == []
