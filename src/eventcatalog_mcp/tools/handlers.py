"""Tool handlers for the EventCatalog MCP server.

Every handler validates its arguments into a ``tools.params`` model, runs the
query through the installed :class:`CatalogService` and answers with a
``CallToolResult``. Lookup misses come back as results flagged ``isError``;
everything else that goes wrong is turned into a protocol fault by
``handle_errors``.

Handler keyword names match the ``inputSchema`` properties in ``schemas``;
the registry binds call arguments against these signatures.
"""

import json
import logging
from typing import Any, Optional

from mcp.types import CallToolResult, TextContent

from ..catalog.fetch import SERVICES_MANIFEST_PATH
from ..catalog.kinds import KindFilter, VersionedCollection
from ..catalog.models import OwnerNotFound
from ..catalog.service import LATEST_VERSION
from ..constants import ErrorMessage
from ..context import get_catalog_service
from ..decorators import handle_errors
from .params import parse_params
from .schemas import load_text

logger = logging.getLogger(__name__)

FLOW_CREATED = "Flow created"


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def json_result(payload: Any, is_error: bool = False) -> CallToolResult:
    return text_result(json.dumps(payload, indent=2), is_error=is_error)


@handle_errors
async def find_resources(
    type: KindFilter = "all",
    search: Optional[str] = None,
    cursor: Optional[str] = None,
) -> CallToolResult:
    """List catalog resources, filtered by kind and search term, one page at a time."""
    params = parse_params("find_resources", {"type": type, "search": search, "cursor": cursor})
    service = get_catalog_service()
    page = await service.find_resources(params.type, params.search, params.cursor)
    logger.info(
        f"find_resources(type={params.type!r}, search={params.search!r}) -> "
        f"{len(page.resources)} resources, more={page.next_cursor is not None}"
    )
    return json_result(page.to_dict())


@handle_errors
async def find_resource(
    id: str,
    type: VersionedCollection,
    version: Optional[str] = None,
) -> CallToolResult:
    """Fetch the documentation page of one versioned resource.

    When no version (or ``latest``) is given, the version listed for the
    resource in the manifest is used.
    """
    params = parse_params("find_resource", {"id": id, "type": type, "version": version})
    service = get_catalog_service()

    resolved = params.version
    if resolved is None or resolved.lower() == LATEST_VERSION:
        resolved = await service.resolve_version(params.type, params.id)
        if resolved is None:
            logger.info(f"No {params.type} with id {params.id!r} in the catalog")
            return json_result(
                {"error": ErrorMessage.RESOURCE_NOT_FOUND, "id": params.id, "type": params.type},
                is_error=True,
            )

    body = await service.get_resource_body(params.type, params.id, resolved)
    if body is None:
        return json_result(
            {
                "error": ErrorMessage.RESOURCE_NOT_FOUND,
                "id": params.id,
                "type": params.type,
                "version": resolved,
            },
            is_error=True,
        )
    return text_result(body)


@handle_errors
async def find_owners(id: str) -> CallToolResult:
    """Look up an owner among users first, then teams."""
    params = parse_params("find_owners", {"id": id})
    result = await get_catalog_service().find_owner(params.id)
    return json_result(result.to_dict(), is_error=isinstance(result, OwnerNotFound))


@handle_errors
async def get_schema(
    id: str,
    version: str,
    type: VersionedCollection,
    specification: Optional[str] = None,
) -> CallToolResult:
    """Fetch the schema (or service specification) published for a resource."""
    params = parse_params(
        "get_schema",
        {"id": id, "version": version, "type": type, "specification": specification},
    )
    schema = await get_catalog_service().get_schema(
        params.type, params.id, params.version, params.specification
    )
    if schema is None:
        payload = {
            "error": ErrorMessage.SCHEMA_NOT_FOUND,
            "id": params.id,
            "version": params.version,
            "type": params.type,
        }
        if params.specification:
            payload["specification"] = params.specification
        return json_result(payload, is_error=True)
    return text_result(schema)


@handle_errors
async def find_producers_and_consumers() -> CallToolResult:
    parse_params("find_producers_and_consumers")
    service = get_catalog_service()
    text = await service.get_producers_and_consumers()
    if text is None:
        return json_result(
            {
                "error": ErrorMessage.DOCUMENT_NOT_FOUND,
                "url": service.client.url(SERVICES_MANIFEST_PATH),
            },
            is_error=True,
        )
    return text_result(text)


@handle_errors
async def explain_ubiquitous_language_terms(domain: str) -> CallToolResult:
    params = parse_params("explain_ubiquitous_language_terms", {"domain": domain})
    text = await get_catalog_service().get_ubiquitous_language(params.domain)
    if text is None:
        return json_result(
            {"error": ErrorMessage.DOCUMENT_NOT_FOUND, "domain": params.domain},
            is_error=True,
        )
    return text_result(text)


@handle_errors
async def review_schema_changes(
    id: str,
    version: str,
    type: VersionedCollection,
    oldSchema: str,
    newSchema: str,
) -> CallToolResult:
    """Accept two schema revisions; the calling model does the comparison."""
    parse_params(
        "review_schema_changes",
        {"id": id, "version": version, "type": type, "oldSchema": oldSchema, "newSchema": newSchema},
    )
    return text_result("")


@handle_errors
async def eventstorm_to_eventcatalog(photo: str) -> CallToolResult:
    parse_params("eventstorm_to_eventcatalog", {"photo": photo})
    return text_result(load_text("how_eventcatalog_works.md"))


@handle_errors
async def create_flow(description: str) -> CallToolResult:
    params = parse_params("create_flow", {"description": description})
    logger.info(f"create_flow requested for {params.description!r}")
    return text_result(FLOW_CREATED)


@handle_errors
async def create_eventcatalog() -> CallToolResult:
    parse_params("create_eventcatalog")
    return text_result(load_text("how_eventcatalog_works.md"))


# name -> handler, in the order tools are advertised
TOOL_HANDLERS = {
    handler.__name__: handler
    for handler in (
        find_resources,
        find_resource,
        find_owners,
        get_schema,
        find_producers_and_consumers,
        explain_ubiquitous_language_terms,
        review_schema_changes,
        eventstorm_to_eventcatalog,
        create_flow,
        create_eventcatalog,
    )
}
