"""Data types produced by the catalog layer."""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..constants import MIME_MARKDOWN
from .kinds import ResourceKind


@dataclass(frozen=True)
class VersionedResource:
    """Event, command, query, service, domain, flow, entity or channel."""

    kind: ResourceKind
    id: str
    name: str
    version: str
    url: str
    summary: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.kind.value,
            "id": self.id,
            "name": self.name,
            "version": self.version,
        }
        if self.summary is not None:
            data["summary"] = self.summary
        data["url"] = self.url
        return data


@dataclass(frozen=True)
class UnversionedResource:
    """Team, user or custom doc."""

    kind: ResourceKind
    id: str
    name: str
    url: str
    summary: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.kind.value,
            "id": self.id,
            "name": self.name,
        }
        if self.summary is not None:
            data["summary"] = self.summary
        data["url"] = self.url
        return data


ResourceRecord = Union[VersionedResource, UnversionedResource]


@dataclass(frozen=True)
class Page:
    """One page of a filtered resource listing."""

    resources: tuple[ResourceRecord, ...]
    next_cursor: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "resources": [resource.to_dict() for resource in self.resources],
        }
        if self.next_cursor is not None:
            data["nextCursor"] = self.next_cursor
        return data


@dataclass(frozen=True)
class OwnerResult:
    """Markdown page of a user or team that owns catalog resources."""

    kind: ResourceKind
    id: str
    name: str
    content: str
    url: str
    mime_type: str = MIME_MARKDOWN

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "id": self.id,
            "name": self.name,
            "content": self.content,
            "mimeType": self.mime_type,
            "url": self.url,
        }


@dataclass(frozen=True)
class OwnerNotFound:
    """Neither the user nor the team page exists for an owner id."""

    id: str
    searched_urls: tuple[str, ...] = field(default_factory=tuple)

    @property
    def message(self) -> str:
        return f"No user or team found with id '{self.id}'"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "Owner not found",
            "message": self.message,
            "searchedUrls": list(self.searched_urls),
        }
