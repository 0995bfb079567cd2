"""ToolRegistry — the three read-only filesystem tools.

Failures the caller can act on (missing file, denied path, bad pattern,
unknown tool) come back as a :class:`ToolResult` with ``is_error`` set.
Only undecodable arguments raise, as :class:`InvalidParamsError`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, ValidationError

from mcpfs.errors import InvalidParamsError
from mcpfs.fs.catalog import iter_files
from mcpfs.tools.models import ListDirectoryArgs, ReadFileArgs, SearchFilesArgs, Tool, ToolResult
from mcpfs.tools.pattern import GlobPatternError, compile_glob

if TYPE_CHECKING:
    from mcpfs.fs.sandbox import PathSandbox

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    tool: Tool
    args_model: type[BaseModel]
    run: Callable[[Any], ToolResult]


def _schema(properties: dict[str, str], required: list[str]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            name: {"type": "string", "description": desc} for name, desc in properties.items()
        },
        "required": required,
    }


class ToolRegistry:
    """Fixed name → tool table bound to one sandbox."""

    def __init__(self, sandbox: PathSandbox) -> None:
        self._sandbox = sandbox
        self._entries: dict[str, _Entry] = {
            "read_file": _Entry(
                Tool(
                    name="read_file",
                    description="Read the contents of a file",
                    input_schema=_schema({"path": "The path to the file to read"}, ["path"]),
                ),
                ReadFileArgs,
                self._read_file,
            ),
            "list_directory": _Entry(
                Tool(
                    name="list_directory",
                    description="List files and directories in a given path",
                    input_schema=_schema(
                        {
                            "path": "The path to the directory to list "
                            "(optional, defaults to base directory)",
                        },
                        [],
                    ),
                ),
                ListDirectoryArgs,
                self._list_directory,
            ),
            "search_files": _Entry(
                Tool(
                    name="search_files",
                    description="Search for files by name pattern",
                    input_schema=_schema(
                        {"pattern": "The filename pattern to search for (supports wildcards)"},
                        ["pattern"],
                    ),
                ),
                SearchFilesArgs,
                self._search_files,
            ),
        }

    def list_tools(self) -> list[Tool]:
        """Return every tool definition in registration order."""
        return [entry.tool for entry in self._entries.values()]

    def call(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Decode *arguments* for tool *name* and run it.

        Raises:
            InvalidParamsError: If the arguments do not fit the tool's record.
        """
        entry = self._entries.get(name)
        if entry is None:
            logger.warning("Tool not found: %s", name)
            return ToolResult.error(f"Tool not found: {name}")

        try:
            args = entry.args_model.model_validate(arguments)
        except ValidationError as exc:
            raise InvalidParamsError(
                f"Invalid arguments for {name}",
                data=exc.errors(include_url=False, include_context=False),
            ) from exc

        logger.info("Calling tool: %s with arguments: %s", name, arguments)
        return entry.run(args)

    # ------------------------------------------------------------------
    # Tool implementations
    # ------------------------------------------------------------------

    def _read_file(self, args: ReadFileArgs) -> ToolResult:
        try:
            path = self._sandbox.resolve(args.path)
        except InvalidParamsError as exc:
            return ToolResult.error(exc.message)

        try:
            data = path.read_bytes()
        except FileNotFoundError:
            return ToolResult.error(f"File not found: {args.path}")
        except OSError as exc:
            return ToolResult.error(f"Failed to read file: {exc}")

        text = data.decode("utf-8", errors="replace")
        return ToolResult.from_text(f"Contents of {args.path}:\n{text}")

    def _list_directory(self, args: ListDirectoryArgs) -> ToolResult:
        raw = args.path if args.path is not None else "."
        try:
            path = self._sandbox.resolve(raw)
        except InvalidParamsError as exc:
            return ToolResult.error(exc.message)

        try:
            with os.scandir(path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except FileNotFoundError:
            return ToolResult.error(f"Directory not found: {raw}")
        except OSError as exc:
            return ToolResult.error(f"Failed to list directory: {exc}")

        rel = self._sandbox.relative(path)
        lines = ["Contents of base directory:" if rel == "." else f"Contents of {rel}:"]
        for entry in entries:
            if entry.is_symlink() and not self._link_stays_inside(entry.path):
                lines.append(f"\U0001f4c4 {entry.name}")
                continue
            if entry.is_dir():
                lines.append(f"\U0001f4c1 {entry.name}/")
                continue
            try:
                size = entry.stat().st_size
            except OSError:
                lines.append(f"\U0001f4c4 {entry.name}")
            else:
                lines.append(f"\U0001f4c4 {entry.name} ({size} bytes)")
        return ToolResult.from_text("\n".join(lines) + "\n")

    def _link_stays_inside(self, path: str) -> bool:
        try:
            self._sandbox.resolve(path)
        except InvalidParamsError:
            return False
        return True

    def _search_files(self, args: SearchFilesArgs) -> ToolResult:
        try:
            regex = compile_glob(args.pattern)
            matches = [
                self._sandbox.relative(path)
                for path in iter_files(self._sandbox)
                if regex.match(path.name)
            ]
        except (GlobPatternError, OSError) as exc:
            return ToolResult.error(f"Search failed: {exc}")

        lines = [f"Files matching pattern '{args.pattern}':"]
        if matches:
            lines.extend(f"\U0001f4c4 {match}" for match in matches)
        else:
            lines.append("No files found matching the pattern.")
        return ToolResult.from_text("\n".join(lines))
