"""Tool registry for the EventCatalog MCP server.

The registry is what the server answers ``tools/list`` and ``tools/call``
from: each entry pairs a handler with the JSON Schema advertised for it.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from mcp.types import CallToolResult, Tool

from ..constants import ErrorCode, ErrorMessage
from ..decorators import fault
from .schemas import TOOL_SCHEMAS

logger = logging.getLogger(__name__)


@dataclass
class ToolMetadata:
    """Metadata for a registered tool."""

    name: str
    handler: Callable[..., Awaitable[CallToolResult]]
    schema: dict[str, Any]
    description: str = ""

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.schema.get("inputSchema", {"type": "object"}),
        )


class ToolRegistry:
    """Registry for managing MCP tools."""

    def __init__(self):
        self._tools: dict[str, ToolMetadata] = {}
        logger.debug("Tool registry initialized")

    def register(
        self,
        name: str,
        handler: Callable[..., Awaitable[CallToolResult]],
        schema: dict[str, Any] | None = None,
        description: str | None = None,
    ) -> None:
        """Register a tool.

        Args:
            name: Tool name (must be unique)
            handler: Async callable implementing the tool
            schema: Tool schema (default: the entry in ``TOOL_SCHEMAS``)
            description: Tool description (default: the schema's)

        Raises:
            ValueError: If a tool with this name is already registered
        """
        if name in self._tools:
            raise ValueError(f"Tool '{name}' already registered")

        schema = schema if schema is not None else TOOL_SCHEMAS.get(name, {})
        self._tools[name] = ToolMetadata(
            name=name,
            handler=handler,
            schema=schema,
            description=description or schema.get("description", ""),
        )
        logger.debug(f"Registered tool: {name}")

    def get(self, name: str) -> ToolMetadata | None:
        return self._tools.get(name)

    def list_tools(self) -> list[str]:
        return list(self._tools.keys())

    def to_mcp_tools(self) -> list[Tool]:
        """Tool definitions as advertised by ``tools/list``."""
        return [tool.to_tool() for tool in self._tools.values()]

    async def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> CallToolResult:
        """Invoke a tool by name with its call arguments.

        Raises:
            McpError: ``INVALID_PARAMS`` for an unknown tool or arguments that
                do not fit the handler; whatever fault the handler raises
        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning(f"Call for unknown tool {name!r}")
            raise fault(ErrorCode.INVALID_PARAMS, f"{ErrorMessage.UNKNOWN_TOOL}: {name}")

        arguments = arguments or {}
        try:
            inspect.signature(tool.handler).bind(**arguments)
        except TypeError as e:
            logger.warning(f"Arguments rejected for {name}: {e}")
            raise fault(ErrorCode.INVALID_PARAMS, f"{ErrorMessage.INVALID_PARAMS}: {e}") from e

        return await tool.handler(**arguments)

    def count(self) -> int:
        return len(self._tools)
