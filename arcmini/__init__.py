"""Arc Mini: copy the active tab's title and link in a chosen format."""

__version__ = "0.3.0"
