from __future__ import annotations

from PyQt6.QtWidgets import QComboBox, QWidget

from arcmini.domain.errors import StorageUnavailable
from arcmini.domain.interfaces import IPreferenceStore
from arcmini.domain.models import FORMAT_KINDS, PreferenceState
from arcmini.log import logger
from arcmini.services.preference_store import merge
from arcmini.utils.constants import FORMAT_NAMES


class FormatPicker(QComboBox):
    """Toolbar combo bound to the selected copy format."""

    def __init__(self, store: IPreferenceStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._store = store
        for kind in FORMAT_KINDS:
            self.addItem(FORMAT_NAMES[kind], kind)
        self.setToolTip("Format used by Copy Title + URL")

        try:
            self._apply_state(self._store.get())
        except StorageUnavailable:
            logger.warning("format picker: storage unavailable, showing defaults")
            self._apply_state(PreferenceState.default())
        self._unsubscribe = unsubscribe = self._store.subscribe(self._apply_state)
        self.destroyed.connect(lambda *_: unsubscribe())
        self.activated.connect(self._on_activated)

    def _apply_state(self, state: PreferenceState) -> None:
        self.blockSignals(True)
        # -1 (no selection) for a tag we do not know.
        self.setCurrentIndex(self.findData(state.selected_format))
        self.blockSignals(False)

    def _on_activated(self, index: int) -> None:
        kind = self.itemData(index)
        try:
            self._store.set(merge(selected_format=kind))
        except StorageUnavailable:
            logger.error("could not save copy format", exc_info=True)
