"""Resource management for the EventCatalog MCP server.

This package exposes catalog listings as ``eventcatalog://`` MCP resources.
"""

from .handlers import CATALOG_RESOURCES, CatalogResource, list_resources_json, make_resource_reader

__all__ = [
    "CATALOG_RESOURCES",
    "CatalogResource",
    "list_resources_json",
    "make_resource_reader",
]
