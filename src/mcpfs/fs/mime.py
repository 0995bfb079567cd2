"""Static extension → MIME type table."""

from __future__ import annotations

from pathlib import PurePath

DEFAULT_MIME_TYPE = "application/octet-stream"

_MIME_TYPES: dict[str, str] = {
    ".txt": "text/plain",
    ".md": "text/plain",
    ".markdown": "text/plain",
    ".json": "application/json",
    ".xml": "application/xml",
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".go": "text/plain",
    ".py": "text/plain",
    ".java": "text/plain",
    ".c": "text/plain",
    ".cpp": "text/plain",
    ".h": "text/plain",
}


def guess_mime_type(path: str | PurePath) -> str:
    """Classify *path* by its (case-insensitive) extension."""
    return _MIME_TYPES.get(PurePath(path).suffix.lower(), DEFAULT_MIME_TYPE)
