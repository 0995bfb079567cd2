"""FileServer — the synchronous stdio loop.

Reads one line, answers it completely, then reads the next.  Lines that
cannot be parsed are logged and dropped without a reply because no id can
be recovered from them.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

from mcpfs.errors import InvalidRequestError, ParseError
from mcpfs.fs.catalog import ResourceCatalog
from mcpfs.fs.sandbox import PathSandbox
from mcpfs.protocol.dispatcher import Dispatcher
from mcpfs.protocol.framing import MessageFramer, decode_line
from mcpfs.protocol.models import JsonRpcResponse
from mcpfs.tools.registry import ToolRegistry

if TYPE_CHECKING:
    from mcpfs.config import ServerConfig

logger = logging.getLogger(__name__)


class FileServer:
    """Wire the sandbox, catalog, tools, and dispatcher for one root."""

    def __init__(self, config: ServerConfig) -> None:
        self.config = config
        self.sandbox = PathSandbox(config.root)
        self.dispatcher = Dispatcher(
            config,
            ResourceCatalog(self.sandbox),
            ToolRegistry(self.sandbox),
        )

    def handle_line(self, line: bytes) -> JsonRpcResponse | None:
        """Process one input line and return the reply to write, if any."""
        logger.debug("Received: %s", line.decode("utf-8", errors="replace"))
        try:
            request = decode_line(line)
        except ParseError as exc:
            logger.warning("Discarding line: %s", exc.message)
            return None
        except InvalidRequestError as exc:
            if not exc.has_id:
                logger.warning("Discarding invalid request without id")
                return None
            return JsonRpcResponse.failure(exc.request_id, exc.code, exc.message)

        return self.dispatcher.dispatch(request)

    def serve(self, reader: IO[bytes] | None = None, writer: IO[bytes] | None = None) -> None:
        """Run until EOF on *reader* (stdin by default)."""
        framer = MessageFramer(
            reader if reader is not None else sys.stdin.buffer,
            writer if writer is not None else sys.stdout.buffer,
        )
        logger.info("MCP server starting, serving directory: %s", self.config.root)
        logger.info("Server ready, waiting for messages...")

        for line in framer.lines():
            response = self.handle_line(line)
            if response is not None:
                framer.write(response)

        logger.info("Input closed, shutting down")
