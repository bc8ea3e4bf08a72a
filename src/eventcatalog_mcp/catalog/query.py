"""Kind filter, text search and cursor pagination over a catalog snapshot."""

from typing import Optional, Sequence

from .cursor import decode_cursor_or_raise, encode_cursor
from .kinds import ALL, resolve_filter
from .models import Page, ResourceRecord

DEFAULT_PAGE_SIZE = 50


def filter_by_kind(
    resources: Sequence[ResourceRecord], kind: Optional[str]
) -> list[ResourceRecord]:
    """Keep resources of one kind; ``"all"`` (or ``None``) keeps everything.

    Singular and plural spellings are both accepted.

    Raises:
        UnknownKindError: If ``kind`` is not a known spelling
    """
    wanted = resolve_filter(kind)
    if wanted == ALL:
        return list(resources)
    return [resource for resource in resources if resource.kind is wanted]


def filter_by_search(
    resources: Sequence[ResourceRecord], search: str
) -> list[ResourceRecord]:
    """Case-insensitive substring match on id, name and summary."""
    needle = search.lower()
    return [
        resource
        for resource in resources
        if needle in resource.id.lower()
        or needle in resource.name.lower()
        or (resource.summary is not None and needle in resource.summary.lower())
    ]


def paginate(
    resources: Sequence[ResourceRecord],
    cursor: Optional[str] = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    """Slice one page out of ``resources`` starting at the cursor offset.

    Raises:
        InvalidCursorError: If ``cursor`` is set but does not decode
    """
    start = decode_cursor_or_raise(cursor) if cursor else 0
    end = start + page_size
    next_cursor = encode_cursor(end) if end < len(resources) else None
    return Page(resources=tuple(resources[start:end]), next_cursor=next_cursor)


def query_resources(
    resources: Sequence[ResourceRecord],
    kind: Optional[str] = ALL,
    search: Optional[str] = None,
    cursor: Optional[str] = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    """Filter by kind, then by search term, then return the requested page."""
    filtered = filter_by_kind(resources, kind)
    if search and search.strip():
        filtered = filter_by_search(filtered, search.strip())
    return paginate(filtered, cursor=cursor, page_size=page_size)
