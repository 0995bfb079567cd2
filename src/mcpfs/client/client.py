"""FileServerClient — a small async client for the six server methods.

Usage::

    transport = StdioTransport([sys.executable, "-m", "mcpfs", "serve", "."])
    async with FileServerClient(transport) as client:
        resources = await client.list_resources()
        content = await client.read_resource(resources[0].uri)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcpfs import __version__
from mcpfs.config import DEFAULT_PROTOCOL_VERSION
from mcpfs.errors import ClientError, FileServerError
from mcpfs.fs.models import Resource, ResourceContent
from mcpfs.protocol.models import InitializeResult, JsonRpcRequest, JsonRpcResponse
from mcpfs.tools.models import Tool, ToolResult

if TYPE_CHECKING:
    from mcpfs.client.transport import Transport


class FileServerClient:
    """Async context manager that connects and performs the handshake."""

    def __init__(self, transport: Transport, *, client_name: str = "mcpfs-probe") -> None:
        self._transport = transport
        self._client_name = client_name
        self._next_id = 1
        self.server: InitializeResult | None = None

    async def __aenter__(self) -> FileServerClient:
        await self.connect()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def connect(self) -> None:
        """Start the transport, send ``initialize``, then the initialized notification."""
        try:
            await self._transport.connect()
        except OSError as exc:
            raise FileServerError(f"Cannot start server: {exc}") from exc

        result = await self._request(
            "initialize",
            {
                "protocolVersion": DEFAULT_PROTOCOL_VERSION,
                "capabilities": {"roots": {"listChanged": True}},
                "clientInfo": {"name": self._client_name, "version": __version__},
            },
        )
        self.server = InitializeResult.model_validate(result)
        await self._notify("notifications/initialized")

    async def close(self) -> None:
        await self._transport.close()

    async def list_resources(self) -> list[Resource]:
        result = await self._request("resources/list")
        return [Resource.model_validate(r) for r in result.get("resources", [])]

    async def read_resource(self, uri: str) -> list[ResourceContent]:
        result = await self._request("resources/read", {"uri": uri})
        return [ResourceContent.model_validate(c) for c in result.get("contents", [])]

    async def list_tools(self) -> list[Tool]:
        result = await self._request("tools/list")
        return [Tool.model_validate(t) for t in result.get("tools", [])]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        result = await self._request("tools/call", {"name": name, "arguments": arguments or {}})
        return ToolResult.model_validate(result)

    async def _notify(self, method: str) -> None:
        await self._transport.send(JsonRpcRequest(method=method).to_wire())

    async def _request(self, method: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Send a request and wait for its response.

        Raises:
            ClientError: If the server answers with an error payload.
        """
        request_id = self._next_id
        self._next_id += 1

        request = JsonRpcRequest(method=method, id=request_id, params=params)
        await self._transport.send(request.to_wire())
        response = JsonRpcResponse.model_validate(await self._transport.receive())

        if response.id != request_id:
            raise FileServerError(f"Response id {response.id!r} does not match request {request_id}")
        if response.error is not None:
            raise ClientError(method, response.error.code, response.error.message)
        return response.result or {}
