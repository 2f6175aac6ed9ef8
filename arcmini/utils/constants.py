APP_ORG = "ArcMini"
APP_NAME = "Arc Mini"

# Preference record (JSON) under a single fixed key.
STORAGE_KEY = "copy-format-storage-key"
SCHEMA_VERSION = 2

SETTINGS_GEOMETRY = "window/geometry"

HOME_URL = "about:blank"
DEFAULT_SEARCH_URL = "https://www.google.com/search?q={query}"

# Command names routed through the dispatcher.
CMD_COPY_URL = "copy-url"
CMD_COPY_URL_TITLE = "copy-url-title"
CMD_TOGGLE_SEARCH = "toggle-portable-search"

DEFAULT_SHORTCUTS = {
    CMD_COPY_URL: "Alt+C",
    CMD_COPY_URL_TITLE: "Ctrl+Alt+C",
    CMD_TOGGLE_SEARCH: "Alt+S",
}

FORMAT_NAMES = {
    "plain": "Plain text",
    "markdown": "Markdown",
    "html": "HTML",
    "csv": "CSV",
}

NOTIFY_TIMEOUT_MS = 3000
