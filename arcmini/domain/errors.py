from __future__ import annotations


class ArcMiniError(Exception):
    """Base class for all application errors."""


class CopyActionError(ArcMiniError):
    """A copy/toggle action was aborted. `user_message` is safe to show."""

    title = "Copy failed"

    def __init__(self, user_message: str) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class NoActiveTab(CopyActionError):
    def __init__(self, user_message: str = "No active tab to copy from.") -> None:
        super().__init__(user_message)


class IncompleteTabData(CopyActionError):
    def __init__(self, missing: list[str] | tuple[str, ...]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"The active tab is missing: {', '.join(self.missing)}.")


class ClipboardWriteFailed(CopyActionError):
    def __init__(self, user_message: str = "Could not write to the clipboard.") -> None:
        super().__init__(user_message)


class StorageUnavailable(ArcMiniError):
    """Preference storage could not be read or written."""


class UnknownFormatKind(ArcMiniError, ValueError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown format kind: {value!r}")
