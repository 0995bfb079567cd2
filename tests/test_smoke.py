"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import mcpfs

    assert mcpfs.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from mcpfs.cli import main

    assert callable(main)


def test_subpackage_exports() -> None:
    from mcpfs.client import FileServerClient, StdioTransport
    from mcpfs.fs import PathSandbox, ResourceCatalog, guess_mime_type, iter_files
    from mcpfs.protocol import Dispatcher, JsonRpcRequest, JsonRpcResponse, MessageFramer
    from mcpfs.tools import Tool, ToolRegistry, ToolResult

    assert all(
        obj is not None
        for obj in (
            FileServerClient,
            StdioTransport,
            PathSandbox,
            ResourceCatalog,
            guess_mime_type,
            iter_files,
            Dispatcher,
            JsonRpcRequest,
            JsonRpcResponse,
            MessageFramer,
            Tool,
            ToolRegistry,
            ToolResult,
        )
    )
