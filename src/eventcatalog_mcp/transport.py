"""Transport layer for the EventCatalog MCP server.

Two transports are supported: stdio (the default, used by desktop MCP hosts)
and streamable HTTP served at the configured base path.
"""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

logger = logging.getLogger(__name__)


class Transport:
    """Base transport class for MCP server communication."""

    def __init__(self, transport_type: str):
        self.transport_type = transport_type
        logger.debug(f"Initializing {transport_type} transport")

    async def run(self, mcp: FastMCP) -> None:
        """Serve ``mcp`` until the client disconnects or the process stops."""
        raise NotImplementedError("Subclasses must implement run()")


class StdioTransport(Transport):
    """stdio transport.

    Uses stdin/stdout for protocol messages, so nothing else may write to
    stdout while it runs.
    """

    def __init__(self):
        super().__init__("stdio")

    async def run(self, mcp: FastMCP) -> None:
        logger.info("Server ready. Waiting for requests on stdio...")
        await mcp.run_stdio_async()


class HttpTransport(Transport):
    """Streamable HTTP transport."""

    def __init__(self, host: str = "127.0.0.1", port: int = 3000, path: str = "/"):
        super().__init__("http")
        self.host = host
        self.port = port
        self.path = path

    async def run(self, mcp: FastMCP) -> None:
        logger.info(f"EventCatalog MCP Server running on http://{self.host}:{self.port}{self.path}")
        await mcp.run_streamable_http_async()


def create_transport(transport_type: str, **kwargs: Any) -> Transport:
    """Factory function to create a transport instance.

    Args:
        transport_type: ``stdio`` or ``http``
        **kwargs: ``host``, ``port`` and ``path`` for the HTTP transport
            (ignored by stdio)

    Raises:
        ValueError: If transport_type is not supported
    """
    if transport_type == "stdio":
        return StdioTransport()
    elif transport_type == "http":
        return HttpTransport(**kwargs)
    else:
        raise ValueError(
            f"Unsupported transport type: {transport_type}. Supported types: stdio, http"
        )
