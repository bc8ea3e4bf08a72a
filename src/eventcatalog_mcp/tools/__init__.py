"""Tool registration system for the EventCatalog MCP server.

This package provides the tool schemas, parameter models, handlers and the
registry that ties them together.
"""

from .handlers import TOOL_HANDLERS
from .params import ToolParams, parse_params
from .registry import ToolRegistry
from .schemas import TOOL_SCHEMAS, ToolSchema, get_tool_schema, get_tool_schemas

__all__ = [
    "TOOL_HANDLERS",
    "TOOL_SCHEMAS",
    "ToolParams",
    "ToolRegistry",
    "ToolSchema",
    "get_tool_schema",
    "get_tool_schemas",
    "parse_params",
]
