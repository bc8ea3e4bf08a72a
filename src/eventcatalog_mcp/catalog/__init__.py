"""Catalog manifest parsing, querying and fetching."""

from .cursor import InvalidCursorError, decode_cursor, decode_cursor_or_raise, encode_cursor
from .fetch import CatalogClient, ManifestCache
from .kinds import ResourceKind, UnknownKindError, resolve_kind
from .models import (
    OwnerNotFound,
    OwnerResult,
    Page,
    ResourceRecord,
    UnversionedResource,
    VersionedResource,
)
from .parser import ParseDiagnostics, parse_manifest
from .query import DEFAULT_PAGE_SIZE, query_resources
from .service import CatalogService

__all__ = [
    "CatalogClient",
    "CatalogService",
    "DEFAULT_PAGE_SIZE",
    "InvalidCursorError",
    "ManifestCache",
    "OwnerNotFound",
    "OwnerResult",
    "Page",
    "ParseDiagnostics",
    "ResourceKind",
    "ResourceRecord",
    "UnknownKindError",
    "UnversionedResource",
    "VersionedResource",
    "decode_cursor",
    "decode_cursor_or_raise",
    "encode_cursor",
    "parse_manifest",
    "query_resources",
    "resolve_kind",
]
