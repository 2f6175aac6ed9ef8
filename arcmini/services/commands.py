from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum

from arcmini.domain.interfaces import IConfigService
from arcmini.log import logger
from arcmini.utils.constants import (
    CMD_COPY_URL,
    CMD_COPY_URL_TITLE,
    CMD_TOGGLE_SEARCH,
    DEFAULT_SHORTCUTS,
)


class Intent(Enum):
    COPY_URL = "copy_url"
    COPY_TITLE_URL = "copy_title_url"
    TOGGLE_SEARCH = "toggle_search"


COMMAND_INTENTS: dict[str, Intent] = {
    CMD_COPY_URL: Intent.COPY_URL,
    CMD_COPY_URL_TITLE: Intent.COPY_TITLE_URL,
    CMD_TOGGLE_SEARCH: Intent.TOGGLE_SEARCH,
}


def shortcut_bindings(config: IConfigService | None = None) -> dict[str, str]:
    """
    Command name -> key sequence. Values from the ``[shortcuts]`` config section
    override the defaults; an empty value disables the shortcut.
    """
    bindings = dict(DEFAULT_SHORTCUTS)
    if config is None:
        return bindings
    for command in COMMAND_INTENTS:
        value = config.get("shortcuts", command, None)
        if value is None:
            continue
        value = value.strip()
        if value:
            bindings[command] = value
        else:
            bindings.pop(command, None)
    return bindings


class CommandDispatcher:
    """Routes command names (from shortcuts, menus, ...) to intent handlers."""

    def __init__(self, commands: Mapping[str, Intent] | None = None) -> None:
        self._commands: dict[str, Intent] = dict(commands or COMMAND_INTENTS)
        self._handlers: dict[Intent, Callable[[], object]] = {}

    def bind(self, intent: Intent, handler: Callable[[], object]) -> None:
        self._handlers[intent] = handler

    def commands(self) -> list[str]:
        return list(self._commands)

    def intent_for(self, command: str) -> Intent | None:
        return self._commands.get(command)

    def dispatch(self, command: str) -> bool:
        intent = self._commands.get(command)
        if intent is None:
            logger.debug("ignoring unknown command %r", command)
            return False
        handler = self._handlers.get(intent)
        if handler is None:
            logger.warning("no handler bound for %s (command %r)", intent.name, command)
            return False
        logger.debug("dispatching %r -> %s", command, intent.name)
        handler()
        return True
