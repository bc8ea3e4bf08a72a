"""Constants for the EventCatalog MCP server.

This module defines error codes, message templates and identifiers used
throughout the server to avoid magic strings.
"""

from enum import IntEnum

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS

SERVER_NAME = "EventCatalog MCP Server"
SERVER_VERSION = "0.1.0"

MIME_JSON = "application/json"
MIME_MARKDOWN = "text/markdown"

RESOURCE_URI_SCHEME = "eventcatalog"


class ErrorCode(IntEnum):
    """JSON-RPC error codes raised as protocol faults."""

    # Unknown tools, malformed tool arguments, bad cursors and bad configuration
    INVALID_PARAMS = INVALID_PARAMS
    # Catalog unreachable or returned an unexpected status
    INTERNAL_ERROR = INTERNAL_ERROR


class ErrorMessage:
    """Error message templates."""

    # Lookup misses (returned as error-flagged results, not faults)
    RESOURCE_NOT_FOUND = "Resource not found"
    SCHEMA_NOT_FOUND = "Schema not found"
    DOCUMENT_NOT_FOUND = "Document not found"

    # Faults
    INVALID_PARAMS = "Invalid parameters"
    UNKNOWN_TOOL = "Unknown tool"
    CATALOG_UNAVAILABLE = "Failed to retrieve content from EventCatalog"
    SERVICE_CONTEXT_NOT_SET = "Catalog service not set"
    UNEXPECTED_ERROR = "Unexpected error occurred"

    # Configuration
    URL_NOT_SET = "EVENTCATALOG_URL is not set"
    URL_INVALID = "EVENTCATALOG_URL is not a valid URL"
    PORT_INVALID = "PORT is not a valid integer"
    PAGE_SIZE_INVALID = "PAGE_SIZE must be a positive integer"
    TRANSPORT_INVALID = "MCP_TRANSPORT must be 'stdio' or 'http'"
