"""Forward/backward literal search and global substitution."""

from .engine import SearchEngine, replace_all

__all__ = ["SearchEngine", "replace_all"]
