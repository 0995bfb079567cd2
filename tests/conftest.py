"""Shared fixtures: small directory trees and a wired-up server."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mcpfs.config import ServerConfig
from mcpfs.fs.sandbox import PathSandbox
from mcpfs.server import FileServer

TreeFactory = Callable[[dict[str, str | bytes]], Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Create files under ``tmp_path / "root"`` from a ``{relpath: content}`` map."""

    def _make(files: dict[str, str | bytes]) -> Path:
        root = tmp_path / "root"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def root(make_tree: TreeFactory) -> Path:
    return make_tree({"x.txt": "hello\n", "d/y.json": '{"a": 1}'})


@pytest.fixture
def sandbox(root: Path) -> PathSandbox:
    return PathSandbox(root)


@pytest.fixture
def server(root: Path) -> FileServer:
    return FileServer(ServerConfig(root=root))
