from __future__ import annotations

from collections.abc import Mapping

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QButtonGroup,
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from arcmini.domain.errors import StorageUnavailable
from arcmini.domain.interfaces import IPreferenceStore, ITemplateRenderer
from arcmini.domain.models import FORMAT_KINDS, CopyRequest, PreferenceState
from arcmini.log import logger
from arcmini.services.format_preview import FormatPreview
from arcmini.services.preference_store import merge, with_template
from arcmini.services.template_renderer import fill_template
from arcmini.utils.constants import (
    CMD_COPY_URL,
    CMD_COPY_URL_TITLE,
    DEFAULT_SHORTCUTS,
    FORMAT_NAMES,
)

SAMPLE_REQUEST = CopyRequest(title="Example Domain", url="https://example.com")

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\t": "\\t"}


def shortcut_hint(bindings: Mapping[str, str]) -> str:
    parts = []
    if bindings.get(CMD_COPY_URL):
        parts.append(f"{bindings[CMD_COPY_URL]} copies the link")
    if bindings.get(CMD_COPY_URL_TITLE):
        parts.append(f"{bindings[CMD_COPY_URL_TITLE]} copies title and link")
    return "Shortcuts: " + ", ".join(parts) if parts else "No copy shortcuts configured."


def encode_separator(value: str) -> str:
    """Show control characters as backslash escapes so they fit a line edit."""
    return "".join(_ESCAPES.get(ch, ch) for ch in value)


def decode_separator(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text):
            nxt = text[i + 1]
            if nxt == "n":
                out.append("\n")
                i += 2
                continue
            if nxt == "t":
                out.append("\t")
                i += 2
                continue
            if nxt == "\\":
                out.append("\\")
                i += 2
                continue
        out.append(ch)
        i += 1
    return "".join(out)


class FormatSettingsWidget(QGroupBox):
    """
    Copy format settings: format buttons, plain-text separator, template editor
    and live examples.

    Reads the store once on construction, then follows the subscription. All
    writes go through functional updates so concurrent edits from other
    surfaces are not lost.
    """

    def __init__(
        self,
        store: IPreferenceStore,
        renderer: ITemplateRenderer,
        parent: QWidget | None = None,
        *,
        preview: FormatPreview | None = None,
        bindings: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__("Copy format", parent)
        self._store = store
        self._renderer = renderer
        self._preview = preview or FormatPreview()
        self._state = PreferenceState.default()

        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self.buttons: dict[str, QPushButton] = {}
        grid = QGridLayout()
        for i, kind in enumerate(FORMAT_KINDS):
            btn = QPushButton(FORMAT_NAMES[kind], self)
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked=False, k=kind: self._on_format_clicked(k))
            self._group.addButton(btn)
            self.buttons[kind] = btn
            grid.addWidget(btn, i // 2, i % 2)

        self.separator_edit = QLineEdit(self)
        self.separator_edit.setPlaceholderText(r"e.g. ' - ' or \n")
        self.separator_edit.editingFinished.connect(self._on_separator_edited)

        self.template_edit = QLineEdit(self)
        self.template_edit.editingFinished.connect(self._on_template_edited)
        self.template_preview = QLabel(self)
        self.template_preview.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)

        self.example_label = QLabel(self)
        self.example_label.setTextFormat(Qt.TextFormat.PlainText)
        self.example_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.rich_label = QLabel(self)
        self.rich_label.setTextFormat(Qt.TextFormat.RichText)

        form = QFormLayout()
        form.addRow("Separator:", self.separator_edit)
        form.addRow("Template:", self.template_edit)
        form.addRow("", self.template_preview)
        form.addRow("Example:", self.example_label)
        form.addRow("Preview:", self.rich_label)

        layout = QVBoxLayout(self)
        keys = bindings if bindings is not None else DEFAULT_SHORTCUTS
        hint = QLabel(shortcut_hint(keys), self)
        hint.setWordWrap(True)
        layout.addWidget(hint)
        layout.addLayout(grid)
        layout.addLayout(form)

        try:
            self._apply_state(self._store.get())
        except StorageUnavailable:
            logger.warning("copy format settings: storage unavailable, showing defaults")
            self._apply_state(self._state)
        self._unsubscribe = unsubscribe = self._store.subscribe(self._apply_state)
        self.destroyed.connect(lambda *_: unsubscribe())

    # -------------------- state -> widgets --------------------

    @property
    def state(self) -> PreferenceState:
        return self._state

    def _apply_state(self, state: PreferenceState) -> None:
        self._state = state
        kind = state.format_kind
        # An exclusive group refuses to uncheck its checked button.
        self._group.setExclusive(False)
        for k, btn in self.buttons.items():
            btn.blockSignals(True)
            btn.setChecked(k == kind)
            btn.blockSignals(False)
        self._group.setExclusive(True)

        self.separator_edit.blockSignals(True)
        self.separator_edit.setText(encode_separator(state.plain_text_separator))
        self.separator_edit.blockSignals(False)
        self.separator_edit.setEnabled(kind == "plain")

        self.template_edit.blockSignals(True)
        self.template_edit.setText(state.template_for(state.selected_format))
        self.template_edit.blockSignals(False)
        self.template_edit.setEnabled(kind is not None)
        self.template_preview.setText(
            fill_template(
                state.template_for(state.selected_format),
                {
                    "title": SAMPLE_REQUEST.title,
                    "url": SAMPLE_REQUEST.url,
                    "separator": state.plain_text_separator,
                },
            )
        )

        example = self._renderer.render(SAMPLE_REQUEST, state)
        self.example_label.setText(example)
        self.rich_label.setText(self._preview.to_html(state.selected_format, example))

    # -------------------- widgets -> store --------------------

    def _write(self, update) -> None:
        try:
            self._store.set(update)
        except StorageUnavailable:
            logger.error("could not save copy format settings", exc_info=True)

    def _on_format_clicked(self, kind: str) -> None:
        if kind != self._state.selected_format:
            self._write(merge(selected_format=kind))

    def _on_separator_edited(self) -> None:
        sep = decode_separator(self.separator_edit.text())
        if sep != self._state.plain_text_separator:
            self._write(merge(plain_text_separator=sep))

    def _on_template_edited(self) -> None:
        kind = self._state.format_kind
        if kind is None:
            return
        text = self.template_edit.text()
        if text != self._state.template_for(kind):
            self._write(with_template(kind, text))
