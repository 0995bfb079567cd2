"""Protocol models — JSON-RPC 2.0 envelopes and MCP method payloads.

Each routed method has its own params record; the dispatcher decodes the
raw ``params`` value into it before any handler runs.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from mcpfs.fs.models import Resource, ResourceContent
from mcpfs.tools.models import Tool

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request or notification.

    A request whose ``id`` key is absent is a notification; an explicit
    ``null`` id is still a request and is echoed back as ``null``.
    """

    jsonrpc: Literal["2.0"] = "2.0"
    method: StrictStr
    id: Any = None
    params: Any = None

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "method": self.method}
        if not self.is_notification:
            data["id"] = self.id
        if self.params is not None:
            data["params"] = self.params
        return data


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: Any = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @classmethod
    def success(cls, request_id: Any, result: BaseModel | dict[str, Any]) -> JsonRpcResponse:
        if isinstance(result, BaseModel):
            result = result.model_dump(by_alias=True, exclude_none=True)
        return cls(id=request_id, result=result)

    @classmethod
    def failure(
        cls, request_id: Any, code: int, message: str, data: Any = None
    ) -> JsonRpcResponse:
        return cls(id=request_id, error=JsonRpcError(code=code, message=message, data=data))

    def to_wire(self) -> dict[str, Any]:
        """Serialize with exactly one of ``result``/``error`` and the id always present."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result if self.result is not None else {}
        return data


# ---------------------------------------------------------------------------
# initialize
# ---------------------------------------------------------------------------


class ClientInfo(BaseModel):
    name: StrictStr
    version: StrictStr = ""


class InitializeParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    protocol_version: StrictStr = Field(..., alias="protocolVersion")
    capabilities: dict[str, Any]
    client_info: ClientInfo = Field(..., alias="clientInfo")


class ResourcesCapability(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subscribe: bool = False
    list_changed: bool = Field(default=False, alias="listChanged")


class ToolsCapability(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    list_changed: bool = Field(default=False, alias="listChanged")


class ServerCapabilities(BaseModel):
    resources: ResourcesCapability = Field(default_factory=ResourcesCapability)
    tools: ToolsCapability = Field(default_factory=ToolsCapability)


class ServerInfo(BaseModel):
    name: str
    version: str


class InitializeResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(..., alias="protocolVersion")
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    server_info: ServerInfo = Field(..., alias="serverInfo")


# ---------------------------------------------------------------------------
# resources/*
# ---------------------------------------------------------------------------


class ListResourcesResult(BaseModel):
    resources: list[Resource]


class ReadResourceParams(BaseModel):
    uri: StrictStr


class ReadResourceResult(BaseModel):
    contents: list[ResourceContent]


# ---------------------------------------------------------------------------
# tools/*
# ---------------------------------------------------------------------------


class ListToolsResult(BaseModel):
    tools: list[Tool]


class CallToolParams(BaseModel):
    name: StrictStr
    arguments: dict[str, Any] = Field(default_factory=dict)
