"""Client transports — newline-delimited JSON to a server subprocess.

Each transport satisfies the :class:`Transport` protocol, providing
``connect``, ``send``, ``receive``, and ``close`` methods.
"""

from __future__ import annotations

import asyncio
import json
import shlex
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from mcpfs.protocol.framing import encode_message

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class Transport(Protocol):
    """Abstract transport for JSON-RPC communication."""

    async def connect(self) -> None: ...
    async def send(self, data: dict[str, Any]) -> None: ...
    async def receive(self) -> dict[str, Any]: ...
    async def close(self) -> None: ...


class StdioTransport:
    """Communicates with a server via subprocess stdin/stdout.

    The server's stderr is discarded unless *show_stderr* is set, in which
    case it is inherited from this process.
    """

    def __init__(
        self,
        command: str | Sequence[str],
        env: dict[str, str] | None = None,
        *,
        show_stderr: bool = False,
    ) -> None:
        self._command = shlex.split(command) if isinstance(command, str) else list(command)
        self._env = env
        self._show_stderr = show_stderr
        self._process: asyncio.subprocess.Process | None = None

    async def connect(self) -> None:
        """Launch the subprocess."""
        self._process = await asyncio.create_subprocess_exec(
            *self._command,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=None if self._show_stderr else asyncio.subprocess.DEVNULL,
            env=self._env,
        )

    async def send(self, data: dict[str, Any]) -> None:
        """Write a JSON line to stdin."""
        if self._process is None or self._process.stdin is None:
            msg = "Transport not connected"
            raise RuntimeError(msg)
        self._process.stdin.write(encode_message(data))
        await self._process.stdin.drain()

    async def receive(self) -> dict[str, Any]:
        """Read a JSON line from stdout."""
        if self._process is None or self._process.stdout is None:
            msg = "Transport not connected"
            raise RuntimeError(msg)
        line = await self._process.stdout.readline()
        if not line:
            msg = "Transport closed"
            raise RuntimeError(msg)
        return json.loads(line)  # type: ignore[no-any-return]

    async def close(self) -> None:
        """Close stdin and wait for the server to exit on EOF."""
        if self._process is not None:
            if self._process.stdin:
                self._process.stdin.close()
            try:
                await asyncio.wait_for(self._process.wait(), timeout=5.0)
            except TimeoutError:
                self._process.terminate()
                await self._process.wait()
            self._process = None
