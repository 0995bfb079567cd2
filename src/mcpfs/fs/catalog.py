"""ResourceCatalog — enumerate and read files under the sandbox root."""

from __future__ import annotations

import base64
import logging
import os
from typing import TYPE_CHECKING

from mcpfs.errors import InternalError, InvalidParamsError
from mcpfs.fs.mime import guess_mime_type
from mcpfs.fs.models import Resource, ResourceContent

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from mcpfs.fs.sandbox import PathSandbox

logger = logging.getLogger(__name__)

FILE_SCHEME = "file://"


def iter_files(sandbox: PathSandbox) -> Iterator[Path]:
    """Yield every regular file under the root, depth-first in lexical order.

    Entries of each directory are visited sorted by name and directories are
    descended where they sort, so the order is stable for an unchanged tree.
    Symlinked directories are not descended; symlinked files are yielded only
    when their target stays inside the root.

    Raises:
        OSError: If the root or any subdirectory cannot be read.
    """
    yield from _walk(sandbox, sandbox.root)


def _walk(sandbox: PathSandbox, directory: Path) -> Iterator[Path]:
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        path = directory / entry.name
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(sandbox, path)
        elif entry.is_symlink():
            try:
                target = path.resolve()
            except RuntimeError:
                logger.debug("Skipping symlink loop %s", path)
                continue
            if target.is_file() and sandbox.contains(target):
                yield path
            else:
                logger.debug("Skipping symlink %s -> %s", path, target)
        elif entry.is_file(follow_symlinks=False):
            yield path


class ResourceCatalog:
    """Expose the files under the root as ``file://`` resources.

    Nothing is cached: every call re-reads the live filesystem.
    """

    def __init__(self, sandbox: PathSandbox) -> None:
        self._sandbox = sandbox

    def uri_for(self, name: str) -> str:
        """Build the ``file://`` URI for a root-relative name."""
        return FILE_SCHEME + (self._sandbox.root / name).as_posix()

    def list_resources(self) -> list[Resource]:
        """Return one Resource per file under the root.

        Raises:
            InternalError: If the directory walk fails.
        """
        logger.info("Listing resources in directory: %s", self._sandbox.root)
        try:
            names = [self._sandbox.relative(p) for p in iter_files(self._sandbox)]
        except OSError as exc:
            logger.error("Error walking directory: %s", exc)
            raise InternalError(f"Failed to list resources: {exc}") from exc

        resources = [
            Resource(
                uri=self.uri_for(name),
                name=name,
                description=f"File: {name}",
                mime_type=guess_mime_type(name),
            )
            for name in names
        ]
        logger.info("Found %d resources", len(resources))
        return resources

    def read(self, uri: str) -> ResourceContent:
        """Read the whole file behind *uri*.

        UTF-8 content is returned as ``text``; anything else is base64-encoded
        into ``blob``.

        Raises:
            InvalidParamsError: Bad scheme, path outside the root, missing
                file, or a directory.
            InternalError: Any other I/O failure.
        """
        logger.info("Reading resource: %s", uri)
        if not uri.startswith(FILE_SCHEME):
            raise InvalidParamsError("Invalid URI scheme, expected file://")

        path = self._sandbox.resolve(uri[len(FILE_SCHEME):])
        try:
            data = path.read_bytes()
        except FileNotFoundError as exc:
            raise InvalidParamsError("File not found", data={"uri": uri}) from exc
        except IsADirectoryError as exc:
            raise InvalidParamsError("Not a file", data={"uri": uri}) from exc
        except OSError as exc:
            raise InternalError(f"Failed to read file: {exc}") from exc

        mime_type = guess_mime_type(path)
        logger.info("Successfully read file: %s (%d bytes)", path, len(data))
        try:
            return ResourceContent(uri=uri, mime_type=mime_type, text=data.decode("utf-8"))
        except UnicodeDecodeError:
            blob = base64.b64encode(data).decode("ascii")
            return ResourceContent(uri=uri, mime_type=mime_type, blob=blob)
