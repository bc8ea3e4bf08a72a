"""Parser for the catalog manifest (``llms.txt``).

The manifest is markdown-ish text grouped into ``## <Section>`` blocks, one
bullet per resource::

    ## Events
    - [Order Placed - OrderPlaced - 1.0.0](https://host/docs/events/OrderPlaced/1.0.0.mdx) - Raised when an order is placed

    ## Teams
    - [platform-team](https://host/docs/teams/platform-team.mdx) - Platform Team

Versioned sections put ``name - id - version`` inside the brackets, with the
summary trailing the link. Team, user and custom-doc sections put only the id
inside the brackets and the display name after the link.

Lines that do not fit are dropped. Pass a :class:`ParseDiagnostics` to find
out which bullet lines were dropped and why.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from .kinds import ResourceKind, section_kind
from .models import ResourceRecord, UnversionedResource, VersionedResource

HEADING_MARKER = "## "
BULLET_PREFIX = "- ["
LABEL_SEPARATOR = " - "

RESOURCE_LINE = re.compile(r"- \[([^\]]+)\]\(([^)]+)\)(?:\s*-\s*(.*))?")


class SkipReason:
    NO_SECTION = "no-section"
    UNKNOWN_SECTION = "unknown-section"
    MALFORMED = "malformed"
    TOO_FEW_FIELDS = "too-few-fields"


@dataclass(frozen=True)
class SkippedLine:
    line_number: int  # 1-based
    text: str
    reason: str


@dataclass
class ParseDiagnostics:
    """Collects bullet lines that the parser dropped."""

    skipped: list[SkippedLine] = field(default_factory=list)

    def record(self, line_number: int, text: str, reason: str) -> None:
        self.skipped.append(SkippedLine(line_number, text, reason))

    def __len__(self) -> int:
        return len(self.skipped)


def parse_manifest(
    text: str,
    diagnostics: Optional[ParseDiagnostics] = None,
) -> list[ResourceRecord]:
    """Parse manifest text into resource records in document order.

    Args:
        text: Manifest contents
        diagnostics: Optional collector for dropped bullet lines

    Returns:
        List of resource records; never raises on malformed input
    """
    resources: list[ResourceRecord] = []
    section: Optional[str] = None
    kind: Optional[ResourceKind] = None

    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if line.startswith(HEADING_MARKER):
            section = line[len(HEADING_MARKER):].strip().lower()
            kind = section_kind(section)
            continue

        if not line.startswith(BULLET_PREFIX):
            continue

        if kind is None:
            if diagnostics is not None:
                reason = SkipReason.NO_SECTION if section is None else SkipReason.UNKNOWN_SECTION
                diagnostics.record(line_number, line, reason)
            continue

        match = RESOURCE_LINE.fullmatch(line)
        if match is None:
            if diagnostics is not None:
                diagnostics.record(line_number, line, SkipReason.MALFORMED)
            continue

        label, url, trailing = match.groups()
        if kind.versioned:
            resource = _versioned(kind, label, url, trailing)
        else:
            resource = _unversioned(kind, label, url, trailing)

        if resource is None:
            if diagnostics is not None:
                diagnostics.record(line_number, line, SkipReason.TOO_FEW_FIELDS)
            continue
        resources.append(resource)

    return resources


def _versioned(
    kind: ResourceKind, label: str, url: str, summary: Optional[str]
) -> Optional[VersionedResource]:
    parts = label.split(LABEL_SEPARATOR)
    if len(parts) < 3:
        return None
    return VersionedResource(
        kind=kind,
        id=parts[-2].strip(),
        name=LABEL_SEPARATOR.join(parts[:-2]).strip(),
        version=parts[-1].strip(),
        url=url.strip(),
        summary=summary.strip() if summary is not None else None,
    )


def _unversioned(
    kind: ResourceKind, label: str, url: str, trailing: Optional[str]
) -> UnversionedResource:
    resource_id = label.strip()
    name = trailing.strip() if trailing else ""
    return UnversionedResource(
        kind=kind,
        id=resource_id,
        name=name or resource_id,
        url=url.strip(),
    )
