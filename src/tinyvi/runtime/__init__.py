"""Cross-cutting services: telemetry and the file-store collaborator."""

from .files import FileStore

__all__ = ["FileStore"]
