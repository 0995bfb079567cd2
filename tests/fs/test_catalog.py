"""Tests for ResourceCatalog and the directory walk."""

import base64
import os
from pathlib import Path

import pytest

from mcpfs.errors import AccessDeniedError, InternalError, InvalidParamsError
from mcpfs.fs.catalog import FILE_SCHEME, ResourceCatalog, iter_files
from mcpfs.fs.sandbox import PathSandbox


def _catalog(root: Path) -> ResourceCatalog:
    return ResourceCatalog(PathSandbox(root))


class TestIterFiles:
    def test_lexical_depth_first_order(self, make_tree) -> None:
        root = make_tree({"b.txt": "", "a/z.txt": "", "a/b/c.txt": "", "c.txt": ""})
        sandbox = PathSandbox(root)
        names = [sandbox.relative(p) for p in iter_files(sandbox)]
        assert names == ["a/b/c.txt", "a/z.txt", "b.txt", "c.txt"]

    def test_directories_are_not_entries(self, make_tree) -> None:
        root = make_tree({"d/f.txt": ""})
        (root / "empty").mkdir()
        sandbox = PathSandbox(root)
        assert [sandbox.relative(p) for p in iter_files(sandbox)] == ["d/f.txt"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_out_of_root_skipped(self, make_tree, tmp_path: Path) -> None:
        root = make_tree({"in.txt": ""})
        outside = tmp_path / "outside.txt"
        outside.write_text("secret")
        (root / "escape.txt").symlink_to(outside)
        (root / "alias.txt").symlink_to(root / "in.txt")

        sandbox = PathSandbox(root)
        names = [sandbox.relative(p) for p in iter_files(sandbox)]
        assert names == ["alias.txt", "in.txt"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_loop_skipped(self, make_tree) -> None:
        root = make_tree({"in.txt": ""})
        (root / "loop").symlink_to(root / "loop")

        sandbox = PathSandbox(root)
        assert [sandbox.relative(p) for p in iter_files(sandbox)] == ["in.txt"]


class TestListResources:
    def test_round_trip_listing(self, root: Path) -> None:
        catalog = _catalog(root)
        resources = catalog.list_resources()

        assert len(resources) == 2
        prefix = FILE_SCHEME + root.resolve().as_posix() + "/"
        stripped = {r.uri.removeprefix(prefix) for r in resources}
        assert stripped == {"x.txt", "d/y.json"}

    def test_resource_fields(self, root: Path) -> None:
        by_name = {r.name: r for r in _catalog(root).list_resources()}
        json_res = by_name["d/y.json"]
        assert json_res.mime_type == "application/json"
        assert json_res.description == "File: d/y.json"
        assert json_res.uri == f"file://{root.resolve().as_posix()}/d/y.json"
        assert by_name["x.txt"].mime_type == "text/plain"

    def test_listing_is_deterministic(self, root: Path) -> None:
        catalog = _catalog(root)
        assert catalog.list_resources() == catalog.list_resources()

    def test_empty_root(self, make_tree) -> None:
        assert _catalog(make_tree({})).list_resources() == []

    def test_walk_failure_is_internal_error(self, tmp_path: Path) -> None:
        root = tmp_path / "gone"
        root.mkdir()
        catalog = _catalog(root)
        root.rmdir()

        with pytest.raises(InternalError, match="Failed to list resources"):
            catalog.list_resources()


class TestRead:
    def test_reads_text(self, root: Path) -> None:
        catalog = _catalog(root)
        uri = catalog.uri_for("d/y.json")
        content = catalog.read(uri)
        assert content.uri == uri
        assert content.mime_type == "application/json"
        assert content.text == '{"a": 1}'
        assert content.blob is None

    def test_non_utf8_becomes_blob(self, make_tree) -> None:
        payload = b"\xff\xfe\x00binary"
        catalog = _catalog(make_tree({"blob.bin": payload}))
        content = catalog.read(catalog.uri_for("blob.bin"))
        assert content.text is None
        assert content.mime_type == "application/octet-stream"
        assert base64.b64decode(content.blob or "") == payload

    def test_wrong_scheme(self, root: Path) -> None:
        with pytest.raises(InvalidParamsError, match="expected file://"):
            _catalog(root).read("http://example.com/x.txt")

    def test_outside_root_denied(self, root: Path) -> None:
        outside = root.parent / "outside.txt"
        outside.write_text("secret")
        with pytest.raises(AccessDeniedError):
            _catalog(root).read(f"file://{outside}")

    def test_embedded_nul_is_invalid_params(self, root: Path) -> None:
        catalog = _catalog(root)
        with pytest.raises(InvalidParamsError, match="Invalid path"):
            catalog.read(catalog.uri_for("x.txt") + "\x00")

    def test_sibling_prefix_denied(self, tmp_path: Path) -> None:
        (tmp_path / "data").mkdir()
        (tmp_path / "data-other").mkdir()
        (tmp_path / "data-other" / "x.txt").write_text("secret")
        catalog = _catalog(tmp_path / "data")
        with pytest.raises(AccessDeniedError):
            catalog.read(f"file://{(tmp_path / 'data-other' / 'x.txt').resolve()}")

    def test_missing_file(self, root: Path) -> None:
        catalog = _catalog(root)
        with pytest.raises(InvalidParamsError, match="File not found"):
            catalog.read(catalog.uri_for("nope.txt"))

    def test_directory_is_invalid_params(self, root: Path) -> None:
        catalog = _catalog(root)
        with pytest.raises(InvalidParamsError, match="Not a file"):
            catalog.read(catalog.uri_for("d"))

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="permission checks do not apply to root",
    )
    def test_unreadable_file_is_internal_error(self, make_tree) -> None:
        root = make_tree({"locked.txt": "x"})
        (root / "locked.txt").chmod(0)
        catalog = _catalog(root)
        try:
            with pytest.raises(InternalError, match="Failed to read file"):
                catalog.read(catalog.uri_for("locked.txt"))
        finally:
            (root / "locked.txt").chmod(0o644)
