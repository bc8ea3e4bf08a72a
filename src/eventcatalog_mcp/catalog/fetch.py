"""HTTP access to an EventCatalog site and the in-memory manifest cache."""

import logging
from typing import Optional

import httpx

from .kinds import ResourceKind
from .models import OwnerNotFound, OwnerResult, ResourceRecord
from .parser import ParseDiagnostics, parse_manifest

logger = logging.getLogger(__name__)

MANIFEST_PATH = "/docs/llm/llms.txt"
SERVICES_MANIFEST_PATH = "/docs/llm/llms-services.txt"
DEFAULT_TIMEOUT = 30.0

# Owners are probed in this order.
OWNER_KINDS = (ResourceKind.USER, ResourceKind.TEAM)


class CatalogClient:
    """Thin async client for the documents an EventCatalog site publishes.

    Paths are appended to the base URL, so a catalog served from a sub-path
    (``https://host/catalog``) keeps that prefix.
    """

    def __init__(
        self,
        base_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    def url(self, path: str) -> str:
        """Build an absolute URL for a catalog path."""
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _get(self, path: str) -> httpx.Response:
        url = self.url(path)
        logger.debug(f"GET {url}")
        return await self._http.get(url)

    async def fetch_manifest(self) -> str:
        """Download the catalog manifest.

        Raises:
            httpx.HTTPError: On transport failure or a non-2xx status
        """
        response = await self._get(MANIFEST_PATH)
        response.raise_for_status()
        return response.text

    async def fetch_document(self, path: str) -> Optional[str]:
        """Download a text document, returning ``None`` when it does not exist.

        Raises:
            httpx.HTTPError: On transport failure or a non-2xx status other than 404
        """
        response = await self._get(path)
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info(f"Catalog document not found: {response.url}")
            return None
        response.raise_for_status()
        return response.text

    async def fetch_owner(self, owner_id: str) -> OwnerResult | OwnerNotFound:
        """Look an owner up as a user first, then as a team."""
        searched: list[str] = []
        for kind in OWNER_KINDS:
            page_url = self.url(f"/docs/{kind.collection}/{owner_id}")
            response = await self._get(f"/docs/{kind.collection}/{owner_id}.mdx")
            if response.is_success:
                return OwnerResult(
                    kind=kind,
                    id=owner_id,
                    name=owner_id,
                    content=response.text,
                    url=page_url,
                )
            searched.append(page_url)

        logger.info(f"Owner '{owner_id}' not found as user or team")
        return OwnerNotFound(id=owner_id, searched_urls=tuple(searched))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()


class ManifestCache:
    """Memoizes the manifest text and its parsed records.

    The first read downloads and parses the manifest; later reads are served
    from memory until :meth:`clear` is called. Two concurrent first reads may
    both download, and both store an equivalent value.
    """

    def __init__(self, client: CatalogClient):
        self._client = client
        self._text: Optional[str] = None
        self._records: Optional[tuple[ResourceRecord, ...]] = None
        self.diagnostics = ParseDiagnostics()

    @property
    def is_loaded(self) -> bool:
        return self._text is not None

    async def get_catalog_text(self) -> str:
        if self._text is None:
            text = await self._client.fetch_manifest()
            logger.info(f"Fetched catalog manifest ({len(text)} characters)")
            self._text = text
        return self._text

    async def get_parsed_catalog(self) -> tuple[ResourceRecord, ...]:
        if self._records is None:
            text = await self.get_catalog_text()
            diagnostics = ParseDiagnostics()
            records = tuple(parse_manifest(text, diagnostics))
            if diagnostics.skipped:
                logger.debug(
                    f"Skipped {len(diagnostics)} manifest lines: "
                    + ", ".join(f"{s.line_number} ({s.reason})" for s in diagnostics.skipped)
                )
            logger.info(f"Parsed {len(records)} resources from manifest")
            self.diagnostics = diagnostics
            self._records = records
        return self._records

    def clear(self) -> None:
        self._text = None
        self._records = None
        self.diagnostics = ParseDiagnostics()
        logger.debug("Manifest cache cleared")
