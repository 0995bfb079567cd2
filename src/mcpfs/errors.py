"""Shared error types.

``RpcError`` subclasses carry a JSON-RPC error code and surface on the
response envelope.  ``ConfigError`` is raised only at startup, before the
protocol loop runs.
"""

from __future__ import annotations

from typing import Any

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class FileServerError(Exception):
    """Base error for all mcpfs failures."""


class ConfigError(FileServerError):
    """The server configuration is unusable (missing root, bad YAML, ...)."""


class RpcError(FileServerError):
    """A failure reported to the caller as a JSON-RPC error payload."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, *, data: Any = None) -> None:
        self.message = message
        self.data = data
        super().__init__(message)


class ParseError(RpcError):
    """The input line is not a JSON object."""

    code = PARSE_ERROR


class InvalidRequestError(RpcError):
    """The JSON object is not a valid request envelope."""

    code = INVALID_REQUEST

    def __init__(self, message: str, *, request_id: Any = None, has_id: bool = False) -> None:
        self.request_id = request_id
        self.has_id = has_id
        super().__init__(message)


class MethodNotFoundError(RpcError):
    """No route exists for the requested method."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class InvalidParamsError(RpcError):
    """Parameters are missing, mistyped, or refer to something unusable."""

    code = INVALID_PARAMS


class AccessDeniedError(InvalidParamsError):
    """A path resolved outside the sandbox root."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Access denied: {path} is outside the allowed directory")


class InternalError(RpcError):
    """An I/O or server-side failure unrelated to the caller's input."""

    code = INTERNAL_ERROR


class ClientError(FileServerError):
    """The server answered a client request with an error payload."""

    def __init__(self, method: str, code: int, message: str) -> None:
        self.method = method
        self.code = code
        self.detail = message
        super().__init__(f"{method} failed ({code}): {message}")
