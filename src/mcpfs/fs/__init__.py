"""Sandboxed, read-only access to the served directory."""

from mcpfs.fs.catalog import ResourceCatalog, iter_files
from mcpfs.fs.mime import guess_mime_type
from mcpfs.fs.sandbox import PathSandbox

__all__ = [
    "PathSandbox",
    "ResourceCatalog",
    "guess_mime_type",
    "iter_files",
]
