"""Dispatcher — routes a decoded request to its handler.

The route table maps a method name to a params model and a handler.  Params
are decoded before the handler is called, so handlers only ever see valid
records.  Outcomes are turned into a :class:`JsonRpcResponse`, or into
nothing for notifications.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, ValidationError

from mcpfs.errors import INTERNAL_ERROR, InvalidParamsError, MethodNotFoundError, RpcError
from mcpfs.protocol.models import (
    CallToolParams,
    InitializeParams,
    InitializeResult,
    JsonRpcResponse,
    ListResourcesResult,
    ListToolsResult,
    ReadResourceParams,
    ReadResourceResult,
    ServerInfo,
)
from mcpfs.utils.telemetry import ATTR_METHOD, ATTR_OUTCOME, get_tracer

if TYPE_CHECKING:
    from mcpfs.config import ServerConfig
    from mcpfs.fs.catalog import ResourceCatalog
    from mcpfs.protocol.models import JsonRpcRequest
    from mcpfs.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

NOTIFICATION_INITIALIZED = "notifications/initialized"


@dataclass(frozen=True)
class Route:
    """How to decode and handle one method.

    ``params`` is ``None`` for methods that take no parameters.  A
    ``notification`` route never produces a response.
    """

    handler: Callable[[Any], BaseModel | None]
    params: type[BaseModel] | None = None
    notification: bool = False


class Dispatcher:
    """Stateless method router for one server process."""

    def __init__(
        self,
        config: ServerConfig,
        catalog: ResourceCatalog,
        tools: ToolRegistry,
    ) -> None:
        self._config = config
        self._catalog = catalog
        self._tools = tools
        self._routes: dict[str, Route] = {
            "initialize": Route(self._initialize, InitializeParams),
            NOTIFICATION_INITIALIZED: Route(self._initialized, notification=True),
            "resources/list": Route(self._list_resources),
            "resources/read": Route(self._read_resource, ReadResourceParams),
            "tools/list": Route(self._list_tools),
            "tools/call": Route(self._call_tool, CallToolParams),
        }

    @property
    def methods(self) -> list[str]:
        return list(self._routes)

    def dispatch(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        """Handle *request* and return its response, or ``None`` when silent."""
        with _tracer.start_as_current_span("mcpfs.dispatch") as span:
            span.set_attribute(ATTR_METHOD, request.method)
            response = self._dispatch(request)
            outcome = "silent" if response is None else "error" if response.error else "ok"
            span.set_attribute(ATTR_OUTCOME, outcome)

        if response is not None and request.is_notification:
            logger.debug("Suppressing reply to notification %s", request.method)
            return None
        return response

    def _dispatch(self, request: JsonRpcRequest) -> JsonRpcResponse | None:
        logger.info("Dispatching %s (id=%r)", request.method, request.id)
        route = self._routes.get(request.method)
        if route is not None and route.notification:
            route.handler(None)
            return None

        try:
            if route is None:
                raise MethodNotFoundError(request.method)
            arg = self._decode(request, route)
            result = route.handler(arg)
        except RpcError as exc:
            logger.warning("%s failed: %s (%d)", request.method, exc.message, exc.code)
            return JsonRpcResponse.failure(request.id, exc.code, exc.message, exc.data)
        except Exception as exc:
            logger.exception("Unhandled error in %s", request.method)
            return JsonRpcResponse.failure(request.id, INTERNAL_ERROR, f"Internal error: {exc}")

        return JsonRpcResponse.success(request.id, result)

    @staticmethod
    def _decode(request: JsonRpcRequest, route: Route) -> BaseModel | None:
        if route.params is None:
            return None
        raw = request.params if request.params is not None else {}
        try:
            return route.params.model_validate(raw)
        except ValidationError as exc:
            raise InvalidParamsError(
                f"Invalid {request.method} parameters",
                data=exc.errors(include_url=False, include_context=False),
            ) from exc

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _initialize(self, params: InitializeParams) -> InitializeResult:
        logger.info(
            "Initialize request from client: %s %s",
            params.client_info.name,
            params.client_info.version,
        )
        return InitializeResult(
            protocol_version=self._config.protocol_version,
            server_info=ServerInfo(
                name=self._config.server_name,
                version=self._config.server_version,
            ),
        )

    def _initialized(self, _: None) -> None:
        logger.info("Received initialized notification")

    def _list_resources(self, _: None) -> ListResourcesResult:
        return ListResourcesResult(resources=self._catalog.list_resources())

    def _read_resource(self, params: ReadResourceParams) -> ReadResourceResult:
        return ReadResourceResult(contents=[self._catalog.read(params.uri)])

    def _list_tools(self, _: None) -> ListToolsResult:
        tools = self._tools.list_tools()
        logger.info("Returning %d tools", len(tools))
        return ListToolsResult(tools=tools)

    def _call_tool(self, params: CallToolParams) -> BaseModel:
        return self._tools.call(params.name, params.arguments)
