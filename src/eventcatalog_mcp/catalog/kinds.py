"""Resource kinds and their spellings.

Single source for every place that needs to translate between the singular
kind stored on a record (``event``), the plural collection name used in URLs
and tool parameters (``events``), and the manifest section heading
(``## Events``).
"""

from enum import Enum
from typing import Literal, Optional, Union, get_args


class ResourceKind(str, Enum):
    """Kinds of resources found in the catalog manifest."""

    EVENT = "event"
    COMMAND = "command"
    QUERY = "query"
    SERVICE = "service"
    DOMAIN = "domain"
    FLOW = "flow"
    ENTITY = "entity"
    CHANNEL = "channel"
    TEAM = "team"
    USER = "user"
    DOC = "doc"

    @property
    def versioned(self) -> bool:
        return self not in UNVERSIONED_KINDS

    @property
    def collection(self) -> str:
        return KIND_TO_COLLECTION[self]


UNVERSIONED_KINDS = frozenset({ResourceKind.TEAM, ResourceKind.USER, ResourceKind.DOC})

KIND_TO_COLLECTION: dict[ResourceKind, str] = {
    ResourceKind.EVENT: "events",
    ResourceKind.COMMAND: "commands",
    ResourceKind.QUERY: "queries",
    ResourceKind.SERVICE: "services",
    ResourceKind.DOMAIN: "domains",
    ResourceKind.FLOW: "flows",
    ResourceKind.ENTITY: "entities",
    ResourceKind.CHANNEL: "channels",
    ResourceKind.TEAM: "teams",
    ResourceKind.USER: "users",
    ResourceKind.DOC: "docs",
}

COLLECTION_TO_KIND: dict[str, ResourceKind] = {
    collection: kind for kind, collection in KIND_TO_COLLECTION.items()
}

# Manifest headings differ from collection names only for custom docs.
SECTION_TO_KIND: dict[str, ResourceKind] = {
    **{
        collection: kind
        for kind, collection in KIND_TO_COLLECTION.items()
        if kind is not ResourceKind.DOC
    },
    "custom docs": ResourceKind.DOC,
}

ALL = "all"

# Parameter spellings accepted by the tools. Kept as literals so FastMCP and
# pydantic publish them as enums; tests assert they agree with the tables above.
VersionedCollection = Literal[
    "services", "domains", "events", "commands", "queries", "flows", "entities", "channels"
]
KindFilter = Literal[
    "all",
    "events", "commands", "queries", "services", "domains", "flows",
    "entities", "channels", "teams", "users", "docs",
    "event", "command", "query", "service", "domain", "flow",
    "entity", "channel", "team", "user", "doc",
]

VERSIONED_COLLECTIONS: tuple[str, ...] = get_args(VersionedCollection)
KIND_FILTERS: tuple[str, ...] = get_args(KindFilter)


class UnknownKindError(ValueError):
    """Raised when a name is neither a kind, a collection, nor ``all``."""


def resolve_kind(name: str) -> ResourceKind:
    """Resolve a singular or plural spelling to a :class:`ResourceKind`.

    Raises:
        UnknownKindError: If ``name`` is not a known spelling
    """
    key = name.strip().lower()
    if key in COLLECTION_TO_KIND:
        return COLLECTION_TO_KIND[key]
    try:
        return ResourceKind(key)
    except ValueError:
        raise UnknownKindError(f"Unknown resource type: {name!r}") from None


def resolve_filter(name: Optional[str]) -> Union[ResourceKind, str]:
    """Resolve a kind filter, returning ``"all"`` unchanged."""
    if name is None or name.strip().lower() == ALL:
        return ALL
    return resolve_kind(name)


def section_kind(heading: str) -> Optional[ResourceKind]:
    """Map manifest heading text (without the ``##`` marker) to a kind."""
    return SECTION_TO_KIND.get(heading.strip().lower())
