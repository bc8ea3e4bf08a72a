"""Resource handlers for the EventCatalog MCP server.

Each ``eventcatalog://`` resource is the unpaginated list of one kind of
catalog resource (or all of them), served as JSON.
"""

import json
import logging
from dataclasses import dataclass

from ..constants import RESOURCE_URI_SCHEME
from ..context import get_catalog_service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogResource:
    """A listable catalog resource."""

    name: str
    kind: str
    description: str

    @property
    def uri(self) -> str:
        return f"{RESOURCE_URI_SCHEME}://{self.kind}"


CATALOG_RESOURCES = (
    CatalogResource(
        "All Resources in EventCatalog", "all", "All messages, domains and services in EventCatalog"
    ),
    CatalogResource("All Events in EventCatalog", "events", "All events in EventCatalog"),
    CatalogResource("All Domains in EventCatalog", "domains", "All domains in EventCatalog"),
    CatalogResource("All Services in EventCatalog", "services", "All services in EventCatalog"),
    CatalogResource("All Queries in EventCatalog", "queries", "All queries in EventCatalog"),
    CatalogResource("All Commands in EventCatalog", "commands", "All commands in EventCatalog"),
    CatalogResource("All Flows in EventCatalog", "flows", "All flows in EventCatalog"),
    CatalogResource("All Teams in EventCatalog", "teams", "All teams in EventCatalog"),
    CatalogResource("All Users in EventCatalog", "users", "All users in EventCatalog"),
)


async def list_resources_json(kind: str = "all") -> str:
    """JSON document ``{"resources": [...]}`` for one kind (or ``all``)."""
    records = await get_catalog_service().list_resources(kind)
    logger.debug(f"Listed {len(records)} resources for {RESOURCE_URI_SCHEME}://{kind}")
    return json.dumps({"resources": [record.to_dict() for record in records]}, indent=2)


def make_resource_reader(kind: str):
    """Zero-argument coroutine function reading one resource, for FastMCP."""

    async def read_resource() -> str:
        return await list_resources_json(kind)

    read_resource.__name__ = f"list_{kind}"
    return read_resource

