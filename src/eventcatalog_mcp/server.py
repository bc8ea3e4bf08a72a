"""MCP Server implementation for EventCatalog.

This module wires the catalog service, tools, resources and prompts into a
FastMCP instance and manages its lifecycle on the configured transport.
"""

import json
import logging
import sys
import time
from typing import Any, Optional

from mcp import types
from mcp.server.fastmcp import FastMCP

from .catalog.service import CatalogService
from .config import ServerConfig, load_config
from .constants import MIME_JSON
from .context import HandlerContext
from .prompts import CREATE_NEW_SCHEMA_DESCRIPTION, CREATE_NEW_SCHEMA_PROMPT, create_new_schema_prompt
from .resources.handlers import CATALOG_RESOURCES, make_resource_reader
from .tools.handlers import TOOL_HANDLERS
from .tools.registry import ToolRegistry
from .tools.schemas import get_tool_schema
from .transport import create_transport

logger = logging.getLogger(__name__)


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


class EventCatalogServer:
    """MCP Server exposing one EventCatalog site.

    Args:
        config: Validated server settings
        service: Catalog service to serve (default: one built from ``config``)
    """

    def __init__(self, config: ServerConfig, service: Optional[CatalogService] = None):
        self.config = config
        self.name = config.name
        self.version = config.version
        self.transport_type = config.transport

        self._setup_logging()

        self.service = service or CatalogService.from_url(
            config.eventcatalog_url,
            page_size=config.page_size,
            timeout=config.request_timeout,
        )
        self.tool_registry = ToolRegistry()
        self._registered = False

        self.mcp = FastMCP(
            name=self.name,
            json_response=True,
            host=config.host,
            port=config.port,
            streamable_http_path=config.base_path,
        )

        logger.info(f"Initialized {self.name} v{self.version}")
        logger.info(f"Using EventCatalog URL: {config.eventcatalog_url}")
        logger.info(f"Transport: {self.transport_type}")

    def _setup_logging(self) -> None:
        """Configure the root logger: stderr always, plus an optional file."""
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, self.config.log_level.upper(), logging.INFO))
        root_logger.handlers.clear()

        if self.config.log_format == "json":
            formatter: logging.Formatter = JSONFormatter()
        else:
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        # stdout belongs to the stdio transport
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if self.config.log_file:
            file_handler = logging.FileHandler(self.config.log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logger.info(f"Logging to file: {self.config.log_file}")

    def _register_capabilities(self) -> None:
        """Register tools with the registry, resources and prompts with FastMCP."""
        if self._registered:
            return
        logger.info("Registering server capabilities...")

        HandlerContext.set(self.service)

        for tool_name, handler in TOOL_HANDLERS.items():
            schema = get_tool_schema(tool_name)
            if schema is None:
                logger.warning(f"Tool '{tool_name}' not found in schemas, skipping")
                continue
            self.tool_registry.register(
                name=tool_name,
                handler=handler,
                schema=schema.schema,
                description=schema.description(self.service.base_url),
            )

        self._install_tool_handlers()
        logger.info(f"Registered {self.tool_registry.count()} tools")

        self._register_resources()

        self.mcp.prompt(name=CREATE_NEW_SCHEMA_PROMPT, description=CREATE_NEW_SCHEMA_DESCRIPTION)(
            create_new_schema_prompt
        )
        self._registered = True

    def _install_tool_handlers(self) -> None:
        """Answer ``tools/list`` and ``tools/call`` from the tool registry.

        These replace FastMCP's own tool handlers, which turn every exception
        into an ``isError`` result. Here an ``McpError`` raised by a handler
        reaches the client as a JSON-RPC error.
        """
        request_handlers = self.mcp._mcp_server.request_handlers
        request_handlers[types.ListToolsRequest] = self._handle_list_tools
        request_handlers[types.CallToolRequest] = self._handle_call_tool

    async def _handle_list_tools(self, request: Optional[types.ListToolsRequest]) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=self.tool_registry.to_mcp_tools()))

    async def _handle_call_tool(self, request: types.CallToolRequest) -> types.ServerResult:
        result = await self.tool_registry.dispatch(request.params.name, request.params.arguments)
        return types.ServerResult(result)

    def _register_resources(self) -> None:
        for resource in CATALOG_RESOURCES:
            self.mcp.resource(
                resource.uri,
                name=resource.name,
                description=resource.description,
                mime_type=MIME_JSON,
            )(make_resource_reader(resource.kind))
        logger.info(f"Registered {len(CATALOG_RESOURCES)} catalog resources")

    async def start(self) -> None:
        """Register capabilities and serve until the transport closes."""
        logger.info("Starting MCP server...")
        self._register_capabilities()

        transport = create_transport(
            self.transport_type,
            host=self.config.host,
            port=self.config.port,
            path=self.config.base_path,
        )
        try:
            await transport.run(self.mcp)
        except KeyboardInterrupt:
            logger.info("Received interrupt signal. Shutting down...")
        except Exception as e:
            logger.error(f"Server error: {e}", exc_info=True)
            raise
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Close the catalog HTTP client and clear the handler context."""
        logger.info("Stopping MCP server...")
        await self.service.aclose()
        if HandlerContext.get() is self.service:
            HandlerContext.set(None)
        logger.info("MCP server stopped")

    def get_capabilities(self) -> dict[str, Any]:
        return {
            "server": {
                "name": self.name,
                "version": self.version,
                "eventcatalogUrl": self.service.base_url,
            },
            "capabilities": {
                "tools": {"listChanged": False},
                "resources": {"subscribe": False, "listChanged": False},
                "prompts": {"listChanged": False},
            },
        }


def create_server(
    config: Optional[ServerConfig] = None,
    service: Optional[CatalogService] = None,
) -> EventCatalogServer:
    """Factory function to create a server instance.

    Args:
        config: Server settings. If None, they are loaded from
            ``config/server.yaml`` and the environment.
        service: Optional pre-built catalog service

    Raises:
        McpError: If the configuration is missing or invalid
    """
    if config is None:
        config = load_config()
    return EventCatalogServer(config, service=service)
