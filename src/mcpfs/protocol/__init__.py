"""JSON-RPC framing, envelopes, and method dispatch."""

from mcpfs.protocol.dispatcher import Dispatcher, Route
from mcpfs.protocol.framing import MessageFramer, decode_line, encode_message
from mcpfs.protocol.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse

__all__ = [
    "Dispatcher",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MessageFramer",
    "Route",
    "decode_line",
    "encode_message",
]
