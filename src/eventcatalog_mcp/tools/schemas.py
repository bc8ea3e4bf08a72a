"""Tool schema definitions for the EventCatalog MCP server.

Descriptions double as instructions for the calling model. ``{host_url}`` is
replaced with the catalog base URL when tools are registered.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from ..catalog.kinds import KIND_FILTERS, VERSIONED_COLLECTIONS

FILES_DIR = Path(__file__).parent.parent / "files"

HOST_PLACEHOLDER = "{host_url}"


@lru_cache(maxsize=None)
def load_text(name: str) -> str:
    """Read a bundled text file from the ``files`` directory."""
    return (FILES_DIR / name).read_text(encoding="utf-8")


def _lines(*lines: str) -> str:
    return "\n".join(lines)


_VERSIONED_TYPE = {
    "type": "string",
    "enum": list(VERSIONED_COLLECTIONS),
    "description": "The type of resource to find",
}

# Tool schema definitions following JSON Schema specification
TOOL_SCHEMAS: dict[str, dict[str, Any]] = {
    "find_resources": {
        "name": "find_resources",
        "description": _lines(
            "Find resources that are available in EventCatalog",
            "",
            "Use this tool when you need to:",
            "- Get a list of resources in EventCatalog including services, domains, events, commands, queries, flows, entities, channels, teams, users and docs",
            "- Find a resource's id and version to aid other tool requests",
            "- Page through large catalogs: pass nextCursor from a response as cursor to get the next page",
            "- Include the resource name, description, and a link to the resource",
            "- When you return a link, remove the .mdx from the end of the url",
            "- When you return a message, in brackets let me know if its a query, command or event",
            "- Ask the user if they would like more information about a specific resource",
            f"- The host URL is {HOST_PLACEHOLDER}",
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": list(KIND_FILTERS),
                    "description": 'Filter resources by type (singular or plural). Defaults to "all".',
                    "default": "all",
                },
                "search": {
                    "type": "string",
                    "description": "Search term to filter resources by name, id, or summary (case-insensitive)",
                },
                "cursor": {
                    "type": "string",
                    "description": "Pagination cursor from previous response",
                },
            },
            "required": [],
        },
    },
    "find_resource": {
        "name": "find_resource",
        "description": _lines(
            "Get more information about a service, domain, event, command, query, flow, entity or channel in EventCatalog using its id and version",
            "Use this tool when you need to:",
            "- Get more details/information about a resource in EventCatalog",
            "- Return everything you know about this resource",
            "- If the resource has a specification return links to the specification file",
            "- When you find owners the url would look something like /docs/users/{id} if its a user or /docs/teams/{id} if its a team",
            "- When you return the producers and consumers make sure they include the url to the documentation, e.g /docs/events/MyEvent/1.0.0",
            "- If the resource has a domain, include it in the response",
            "- When you return a message, in brackets let me know if its a query, command or event",
            "- If you are returning a flow (state machine) try and return the result in mermaid to the user",
            f"- If you return any URLS make sure to include the host URL {HOST_PLACEHOLDER}",
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The id of the resource to find"},
                "version": {
                    "type": "string",
                    "description": "The version of the resource to find. If not provided (or 'latest'), uses the version listed in the catalog.",
                },
                "type": _VERSIONED_TYPE,
            },
            "required": ["id", "type"],
        },
    },
    "find_owners": {
        "name": "find_owners",
        "description": _lines(
            "Find owners (teams or users) for a domain, service, message, flow or entity in EventCatalog",
            "Use this tool when you need to:",
            "- A resource in EventCatalog can have owners, use that id to find the owners",
            "- Return everything you know about the owners",
            "- When you return owners make sure they include the url to the documentation",
            f"- If you return any URLS make sure to include the host URL {HOST_PLACEHOLDER}",
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The id of the owner (user or team) to find"},
            },
            "required": ["id"],
        },
    },
    "get_schema": {
        "name": "get_schema",
        "description": _lines(
            "Returns the schema for a service, event, command or query in EventCatalog",
            "Use this tool when you need to:",
            "- Get the schema or specification (e.g. AsyncAPI, OpenAPI) for a resource in EventCatalog",
            "- Just return the schema and format to the user in a readable format",
            f"- The host URL is {HOST_PLACEHOLDER}",
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The id of the resource"},
                "version": {"type": "string", "description": "The version of the resource"},
                "type": _VERSIONED_TYPE,
                "specification": {
                    "type": "string",
                    "description": "Specification variant to fetch for services (optional)",
                },
            },
            "required": ["id", "version", "type"],
        },
    },
    "find_producers_and_consumers": {
        "name": "find_producers_and_consumers",
        "description": _lines(
            "Get the producers (sends) and consumers (receives) for services in EventCatalog",
            "Use this tool when you need to:",
            "- Find which services send or receive a message",
            "- Use the ids and versions of the messages for future requests if the user wants to dive deeper",
            "- When you return a message, in brackets let me know if its a query, command or event",
            f"- The host URL is {HOST_PLACEHOLDER}",
        ),
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    },
    "explain_ubiquitous_language_terms": {
        "name": "explain_ubiquitous_language_terms",
        "description": _lines(
            "Explain ubiquitous language terms of a domain",
            "Use this tool when you need to:",
            "- Find information about a ubiquitous language term",
            "- The term has a description and summary, return both",
            f"- If you return any URLS make sure to include the host URL {HOST_PLACEHOLDER}",
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "domain": {
                    "type": "string",
                    "description": "The domain that contains the ubiquitous language terms",
                },
            },
            "required": ["domain"],
        },
    },
    "review_schema_changes": {
        "name": "review_schema_changes",
        "description": _lines(
            "You are an expert in event-driven architecture and you are given a schema for a service, event, command or query in EventCatalog",
            "You will let the user know if there are any breaking changes to the schema, and suggest a plan to fix them",
            "The schema format can be anything (e.g. json, yaml, protobuf, etc.)",
            "- Compare the new schema with the old schema and return a list of changes in a readable format",
            "- If the schemas are the same, return an empty list",
            f"- The host URL is {HOST_PLACEHOLDER}",
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The id of the resource"},
                "version": {"type": "string", "description": "The version of the resource"},
                "type": _VERSIONED_TYPE,
                "oldSchema": {"type": "string", "description": "The old schema"},
                "newSchema": {"type": "string", "description": "The new schema"},
            },
            "required": ["id", "version", "type", "oldSchema", "newSchema"],
        },
    },
    "eventstorm_to_eventcatalog": {
        "name": "eventstorm_to_eventcatalog",
        "description": _lines(
            "Turn the given photo of an EventStorming session into an EventCatalog",
            "- Create a new folder called eventcatalog and put the files in there",
            "- Work out the domains, services, events, commands, queries, flows and entities and their relationships",
            "- Write one MDX file (index.mdx with frontmatter) per resource and include the <NodeGraph /> component",
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "photo": {
                    "type": "string",
                    "description": "The photo of the event storming session to turn into an EventCatalog",
                },
            },
            "required": ["photo"],
        },
    },
    "create_flow": {
        "name": "create_flow",
        "description": load_text("create_flow.md"),
        "inputSchema": {
            "type": "object",
            "properties": {
                "description": {
                    "type": "string",
                    "description": 'The business process description (e.g., "payment for users", "order fulfillment")',
                },
            },
            "required": ["description"],
        },
    },
    "create_eventcatalog": {
        "name": "create_eventcatalog",
        "description": _lines(
            "You are tasked to create a new EventCatalog for the user given the context they have given you.",
            "EventCatalog is an open source tool to help people document their event-driven architecture.",
            "Create a new folder in their directory called eventcatalog and put the files in there",
            "Always create the package.json and the eventcatalog.config.js file",
            "Before you are finished, verify you have all the required files and folders",
        ),
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    },
}


class ToolSchema:
    """Tool schema wrapper for easier access."""

    def __init__(self, name: str, schema: dict[str, Any]):
        self.name = name
        self.schema = schema
        self.input_schema = schema.get("inputSchema", {})

    def description(self, host_url: str = "") -> str:
        """Tool description with the catalog URL filled in."""
        return self.schema.get("description", "").replace(HOST_PLACEHOLDER, host_url)

    def get_required_params(self) -> list[str]:
        return self.input_schema.get("required", [])

    def get_properties(self) -> dict[str, Any]:
        return self.input_schema.get("properties", {})


def get_tool_schema(name: str) -> Optional[ToolSchema]:
    if name not in TOOL_SCHEMAS:
        return None
    return ToolSchema(name, TOOL_SCHEMAS[name])


def get_tool_schemas() -> dict[str, ToolSchema]:
    return {name: ToolSchema(name, schema) for name, schema in TOOL_SCHEMAS.items()}
