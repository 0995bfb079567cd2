"""PathSandbox — confine caller-supplied paths to the served root.

Both the root and the candidate are canonicalized with ``Path.resolve``
(``.``/``..`` collapsed, symlinks followed) and compared component-wise, so
a root of ``/srv/data`` never admits ``/srv/data-other``.

The check and the subsequent read are not atomic: a symlink swapped in
between the two can still redirect the read.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mcpfs.errors import AccessDeniedError, InvalidParamsError

logger = logging.getLogger(__name__)


class PathSandbox:
    """Resolve paths against a fixed root and reject anything outside it."""

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    @property
    def root(self) -> Path:
        return self._root

    def contains(self, path: Path) -> bool:
        """Return whether canonical *path* is the root or a descendant."""
        return path == self._root or path.is_relative_to(self._root)

    def resolve(self, raw: str | Path) -> Path:
        """Return the canonical absolute path for *raw*.

        Relative input is joined to the root; absolute input is taken as-is.

        Raises:
            InvalidParamsError: If *raw* cannot name a file at all (an
                embedded NUL, an unencodable character, a symlink loop).
            AccessDeniedError: If the canonical path escapes the root.
        """
        candidate = Path(raw)
        if not candidate.is_absolute():
            candidate = self._root / candidate
        try:
            resolved = candidate.resolve()
        except (ValueError, RuntimeError) as exc:
            raise InvalidParamsError(f"Invalid path {str(raw)!r}: {exc}") from exc

        if not self.contains(resolved):
            logger.warning("Denied access to %s (resolved to %s)", raw, resolved)
            raise AccessDeniedError(str(raw))
        return resolved

    def relative(self, path: Path) -> str:
        """Render a path under the root as a ``/``-separated relative name."""
        return path.relative_to(self._root).as_posix()
