"""Qt widgets, ports and adapters."""
