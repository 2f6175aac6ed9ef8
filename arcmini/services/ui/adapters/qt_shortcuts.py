from __future__ import annotations

from collections.abc import Mapping

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import QWidget

from arcmini.log import logger
from arcmini.services.commands import CommandDispatcher


class QtShortcutBinder:
    """Creates application-wide QShortcuts that dispatch command names."""

    def __init__(self, dispatcher: CommandDispatcher) -> None:
        self._dispatcher = dispatcher
        self.shortcuts: dict[str, QShortcut] = {}

    def bind(self, parent: QWidget, bindings: Mapping[str, str]) -> dict[str, QShortcut]:
        for command, keys in bindings.items():
            seq = QKeySequence(keys)
            if seq.isEmpty():
                logger.warning("ignoring invalid shortcut %r for %s", keys, command)
                continue
            sc = QShortcut(seq, parent)
            sc.setContext(Qt.ShortcutContext.ApplicationShortcut)
            sc.activated.connect(lambda c=command: self._dispatcher.dispatch(c))
            self.shortcuts[command] = sc
        return self.shortcuts
