"""MessageFramer — one JSON-RPC envelope per line over a pair of byte streams."""

from __future__ import annotations

import json
import logging
import math
from typing import IO, TYPE_CHECKING, Any

from pydantic import ValidationError

from mcpfs.errors import InvalidRequestError, ParseError
from mcpfs.protocol.models import JsonRpcRequest

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mcpfs.protocol.models import JsonRpcResponse

logger = logging.getLogger(__name__)


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def _reject_constant(name: str) -> float:
    raise ValueError(f"Non-standard JSON constant: {name}")


def decode_line(line: bytes) -> JsonRpcRequest:
    """Parse one input line into a request envelope.

    Raises:
        ParseError: The line is not UTF-8 JSON or not a JSON object, or it
            holds a number that cannot be echoed back as JSON (overlong
            integers, overflowing floats, NaN/Infinity) or nests too deeply.
            No id can be recovered, so no reply is possible.
        InvalidRequestError: The object is not a valid request; carries the
            id when one was supplied.
    """
    try:
        data: Any = json.loads(
            line.decode("utf-8"),
            parse_float=_finite_float,
            parse_constant=_reject_constant,
        )
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise ParseError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        return JsonRpcRequest.model_validate(data)
    except ValidationError as exc:
        raise InvalidRequestError(
            "Invalid Request",
            request_id=data.get("id"),
            has_id="id" in data,
        ) from exc


def encode_message(message: dict[str, Any]) -> bytes:
    """Serialize *message* as a single ASCII line terminated by ``\\n``."""
    return json.dumps(message, separators=(",", ":")).encode("ascii") + b"\n"


class MessageFramer:
    """Read request lines from *reader* and write response lines to *writer*.

    Every write is flushed immediately so the caller sees responses in
    request order.
    """

    def __init__(self, reader: IO[bytes], writer: IO[bytes]) -> None:
        self._reader = reader
        self._writer = writer

    def lines(self) -> Iterator[bytes]:
        """Yield non-blank input lines until EOF."""
        for line in iter(self._reader.readline, b""):
            stripped = line.strip()
            if stripped:
                yield stripped

    def write(self, response: JsonRpcResponse) -> None:
        self.write_raw(response.to_wire())

    def write_raw(self, message: dict[str, Any]) -> None:
        self._writer.write(encode_message(message))
        self._writer.flush()
