"""mcpfs — a read-only filesystem server speaking MCP over stdio."""

from __future__ import annotations

__version__ = "0.1.0"
