"""MCP server for querying an EventCatalog site."""

from .config import ServerConfig, load_config
from .constants import ErrorCode, ErrorMessage
from .context import HandlerContext, get_catalog_service
from .decorators import handle_errors
from .server import EventCatalogServer, create_server
from .transport import HttpTransport, StdioTransport, Transport, create_transport

__all__ = [
    "EventCatalogServer",
    "create_server",
    "ServerConfig",
    "load_config",
    "Transport",
    "StdioTransport",
    "HttpTransport",
    "create_transport",
    "HandlerContext",
    "get_catalog_service",
    "handle_errors",
    "ErrorCode",
    "ErrorMessage",
]
