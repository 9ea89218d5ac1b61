"""Modal, line-oriented editing engine."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "commands",
    "keymaps",
    "modes",
    "runtime",
    "search",
]

__version__ = "0.1.0"
