"""Tests for PathSandbox."""

import os
from pathlib import Path

import pytest

from mcpfs.errors import AccessDeniedError, InvalidParamsError
from mcpfs.fs.sandbox import PathSandbox


class TestResolve:
    def test_relative_path_joined_to_root(self, sandbox: PathSandbox) -> None:
        assert sandbox.resolve("x.txt") == sandbox.root / "x.txt"

    def test_root_itself_accepted(self, sandbox: PathSandbox) -> None:
        assert sandbox.resolve(".") == sandbox.root
        assert sandbox.resolve(str(sandbox.root)) == sandbox.root

    def test_absolute_path_inside_root(self, sandbox: PathSandbox) -> None:
        target = sandbox.root / "d" / "y.json"
        assert sandbox.resolve(str(target)) == target

    def test_dot_dot_inside_root_collapses(self, sandbox: PathSandbox) -> None:
        assert sandbox.resolve("d/../x.txt") == sandbox.root / "x.txt"

    def test_nonexistent_path_inside_root_accepted(self, sandbox: PathSandbox) -> None:
        assert sandbox.resolve("missing.txt") == sandbox.root / "missing.txt"

    def test_parent_escape_denied(self, sandbox: PathSandbox) -> None:
        with pytest.raises(AccessDeniedError) as exc_info:
            sandbox.resolve("../outside.txt")
        assert exc_info.value.path == "../outside.txt"
        assert "Access denied" in str(exc_info.value)

    def test_absolute_escape_denied(self, sandbox: PathSandbox) -> None:
        with pytest.raises(AccessDeniedError):
            sandbox.resolve("/etc/passwd")

    def test_denial_is_invalid_params(self, sandbox: PathSandbox) -> None:
        with pytest.raises(InvalidParamsError):
            sandbox.resolve("../../..")

    def test_embedded_nul_is_invalid_params(self, sandbox: PathSandbox) -> None:
        with pytest.raises(InvalidParamsError, match="Invalid path") as exc_info:
            sandbox.resolve("a\x00b")
        assert not isinstance(exc_info.value, AccessDeniedError)
        assert exc_info.value.code == -32602


class TestSiblingPrefix:
    def test_sibling_sharing_string_prefix_denied(self, tmp_path: Path) -> None:
        (tmp_path / "b").mkdir()
        (tmp_path / "bc").mkdir()
        (tmp_path / "bc" / "secret.txt").write_text("s")
        sandbox = PathSandbox(tmp_path / "b")

        with pytest.raises(AccessDeniedError):
            sandbox.resolve(str(tmp_path / "bc" / "secret.txt"))
        with pytest.raises(AccessDeniedError):
            sandbox.resolve("../bc/secret.txt")

    def test_contains_is_component_wise(self, tmp_path: Path) -> None:
        sandbox = PathSandbox(tmp_path / "data")
        root = sandbox.root
        assert sandbox.contains(root)
        assert sandbox.contains(root / "a" / "b")
        assert not sandbox.contains(root.parent / "data-other")
        assert not sandbox.contains(root.parent)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
class TestSymlinks:
    def test_symlink_escaping_root_denied(self, tmp_path: Path) -> None:
        root = tmp_path / "root"
        root.mkdir()
        outside = tmp_path / "outside.txt"
        outside.write_text("secret")
        (root / "link.txt").symlink_to(outside)

        with pytest.raises(AccessDeniedError):
            PathSandbox(root).resolve("link.txt")

    def test_symlink_inside_root_accepted(self, tmp_path: Path) -> None:
        root = tmp_path / "root"
        root.mkdir()
        (root / "real.txt").write_text("ok")
        (root / "alias.txt").symlink_to(root / "real.txt")

        sandbox = PathSandbox(root)
        assert sandbox.resolve("alias.txt") == sandbox.root / "real.txt"


class TestRelative:
    def test_posix_separators(self, sandbox: PathSandbox) -> None:
        assert sandbox.relative(sandbox.root / "d" / "y.json") == "d/y.json"

    def test_root_is_dot(self, sandbox: PathSandbox) -> None:
        assert sandbox.relative(sandbox.root) == "."
