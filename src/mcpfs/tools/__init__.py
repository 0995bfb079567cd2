"""Tool registry — the fixed set of filesystem tools."""

from mcpfs.tools.models import (
    ListDirectoryArgs,
    ReadFileArgs,
    SearchFilesArgs,
    TextContent,
    Tool,
    ToolResult,
)
from mcpfs.tools.registry import ToolRegistry

__all__ = [
    "ListDirectoryArgs",
    "ReadFileArgs",
    "SearchFilesArgs",
    "TextContent",
    "Tool",
    "ToolRegistry",
    "ToolResult",
]
