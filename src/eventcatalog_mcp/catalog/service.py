"""Catalog service: the long-lived owner of the HTTP client and manifest cache."""

import logging
from typing import Optional

from .fetch import SERVICES_MANIFEST_PATH, CatalogClient, ManifestCache
from .kinds import resolve_kind
from .models import OwnerNotFound, OwnerResult, Page, ResourceRecord, VersionedResource
from .query import DEFAULT_PAGE_SIZE, filter_by_kind, query_resources

logger = logging.getLogger(__name__)

LATEST_VERSION = "latest"


class CatalogService:
    """Read-only queries against one EventCatalog site.

    Args:
        client: HTTP client bound to the catalog base URL
        page_size: Number of resources per ``find_resources`` page
        cache: Manifest cache; a fresh one is created when omitted
    """

    def __init__(
        self,
        client: CatalogClient,
        page_size: int = DEFAULT_PAGE_SIZE,
        cache: Optional[ManifestCache] = None,
    ):
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.client = client
        self.page_size = page_size
        self.cache = cache or ManifestCache(client)

    @classmethod
    def from_url(
        cls, base_url: str, page_size: int = DEFAULT_PAGE_SIZE, timeout: float = 30.0
    ) -> "CatalogService":
        return cls(CatalogClient(base_url, timeout=timeout), page_size=page_size)

    @property
    def base_url(self) -> str:
        return self.client.base_url

    async def get_catalog_text(self) -> str:
        return await self.cache.get_catalog_text()

    async def get_parsed_catalog(self) -> tuple[ResourceRecord, ...]:
        return await self.cache.get_parsed_catalog()

    def clear_cache(self) -> None:
        self.cache.clear()

    async def find_resources(
        self,
        kind: Optional[str] = "all",
        search: Optional[str] = None,
        cursor: Optional[str] = None,
    ) -> Page:
        resources = await self.get_parsed_catalog()
        return query_resources(
            resources, kind=kind, search=search, cursor=cursor, page_size=self.page_size
        )

    async def list_resources(self, kind: Optional[str] = "all") -> list[ResourceRecord]:
        """Unpaginated kind filter, used by the ``eventcatalog://`` resources."""
        return filter_by_kind(await self.get_parsed_catalog(), kind)

    async def resolve_version(self, collection: str, resource_id: str) -> Optional[str]:
        """Version of the first manifest entry with this id and kind."""
        kind = resolve_kind(collection)
        for resource in await self.get_parsed_catalog():
            if (
                resource.kind is kind
                and resource.id == resource_id
                and isinstance(resource, VersionedResource)
            ):
                return resource.version
        return None

    async def get_resource_body(
        self, collection: str, resource_id: str, version: str
    ) -> Optional[str]:
        return await self.client.fetch_document(
            f"/docs/{collection}/{resource_id}/{version}.mdx"
        )

    async def find_owner(self, owner_id: str) -> OwnerResult | OwnerNotFound:
        return await self.client.fetch_owner(owner_id)

    async def get_schema(
        self,
        collection: str,
        resource_id: str,
        version: str,
        specification: Optional[str] = None,
    ) -> Optional[str]:
        path = f"/api/schemas/{collection}/{resource_id}/{version}"
        if specification:
            path = f"{path}/{specification}"
        return await self.client.fetch_document(path)

    async def get_producers_and_consumers(self) -> Optional[str]:
        return await self.client.fetch_document(SERVICES_MANIFEST_PATH)

    async def get_ubiquitous_language(self, domain: str) -> Optional[str]:
        return await self.client.fetch_document(f"/docs/domains/{domain}/language.mdx")

    async def aclose(self) -> None:
        await self.client.aclose()
