"""Async stdio client for talking to an mcpfs (or any MCP) server."""

from mcpfs.client.client import FileServerClient
from mcpfs.client.transport import StdioTransport, Transport

__all__ = [
    "FileServerClient",
    "StdioTransport",
    "Transport",
]
