"""Tests for the catalog manifest parser."""

import pytest

from eventcatalog_mcp.catalog.kinds import ResourceKind
from eventcatalog_mcp.catalog.models import UnversionedResource, VersionedResource
from eventcatalog_mcp.catalog.parser import ParseDiagnostics, SkipReason, parse_manifest

from conftest import SAMPLE_MANIFEST, SAMPLE_RESOURCE_COUNT


@pytest.mark.unit
class TestVersionedSections:
    """Events, commands, queries, services, domains, flows, entities and channels."""

    def test_parses_event_line(self):
        """Test parses event line."""
        text = (
            "## Events\n"
            "- [Order Placed - OrderPlaced - 1.0.0](https://example.com/docs/events/OrderPlaced/1.0.0.mdx)"
            " - Event triggered when order is placed"
        )

        result = parse_manifest(text)

        assert result == [
            VersionedResource(
                kind=ResourceKind.EVENT,
                id="OrderPlaced",
                name="Order Placed",
                version="1.0.0",
                url="https://example.com/docs/events/OrderPlaced/1.0.0.mdx",
                summary="Event triggered when order is placed",
            )
        ]

    @pytest.mark.parametrize(
        "heading,kind",
        [
            ("Events", ResourceKind.EVENT),
            ("Commands", ResourceKind.COMMAND),
            ("Queries", ResourceKind.QUERY),
            ("Services", ResourceKind.SERVICE),
            ("Domains", ResourceKind.DOMAIN),
            ("Flows", ResourceKind.FLOW),
            ("Entities", ResourceKind.ENTITY),
            ("Channels", ResourceKind.CHANNEL),
        ],
    )
    def test_section_heading_sets_kind(self, heading, kind):
        """Test section heading sets kind."""
        text = f"## {heading}\n- [Thing - Thing - 0.0.1](https://example.com/x.mdx) - A thing"

        (resource,) = parse_manifest(text)

        assert resource.kind is kind
        assert resource.version == "0.0.1"

    def test_missing_summary(self):
        """Test missing summary."""
        text = "## Services\n- [Payment Service - PaymentService - 1.0.0](https://example.com/s.mdx)"

        (resource,) = parse_manifest(text)

        assert resource.summary is None
        assert "summary" not in resource.to_dict()

    def test_name_containing_separator(self):
        """Test name containing separator."""
        text = (
            "## Events\n"
            "- [Order - Placed - Again - OrderPlacedAgain - 2.0.0](https://example.com/e.mdx) - Twice"
        )

        (resource,) = parse_manifest(text)

        assert resource.name == "Order - Placed - Again"
        assert resource.id == "OrderPlacedAgain"
        assert resource.version == "2.0.0"

    def test_fields_are_trimmed(self):
        """Test fields are trimmed."""
        text = "## Events\n- [  Spaced Name  -  SpacedId  -  1.0.0  ](https://example.com/e.mdx) -   padded  "

        (resource,) = parse_manifest(text)

        assert (resource.name, resource.id, resource.version) == ("Spaced Name", "SpacedId", "1.0.0")
        assert resource.summary == "padded"

    def test_too_few_fields_skipped(self):
        """Test too few fields skipped."""
        text = "## Events\n- [OnlyName - 1.0.0](https://example.com/e.mdx) - Nope"

        assert parse_manifest(text) == []


@pytest.mark.unit
class TestUnversionedSections:
    """Teams, users and custom docs."""

    @pytest.mark.parametrize(
        "heading,kind",
        [("Teams", ResourceKind.TEAM), ("Users", ResourceKind.USER), ("Custom Docs", ResourceKind.DOC)],
    )
    def test_section_heading_sets_kind(self, heading, kind):
        """Test section heading sets kind."""
        text = f"## {heading}\n- [some-id](https://example.com/some-id.mdx) - Some Name"

        (resource,) = parse_manifest(text)

        assert resource == UnversionedResource(
            kind=kind, id="some-id", name="Some Name", url="https://example.com/some-id.mdx"
        )

    def test_id_used_as_name_without_trailing_text(self):
        """Test id used as name without trailing text."""
        text = "## Users\n- [jdoe](https://example.com/docs/users/jdoe.mdx)"

        (resource,) = parse_manifest(text)

        assert resource.name == "jdoe"
        assert resource.to_dict() == {
            "type": "user",
            "id": "jdoe",
            "name": "jdoe",
            "url": "https://example.com/docs/users/jdoe.mdx",
        }

    def test_label_with_separator_is_kept_whole(self):
        """Test label with separator is kept whole."""
        text = "## Teams\n- [a - b](https://example.com/t.mdx) - Team"

        (resource,) = parse_manifest(text)

        assert resource.id == "a - b"


@pytest.mark.unit
class TestDocumentStructure:
    """Test document structure."""

    def test_empty_input(self):
        """Test empty input."""
        assert parse_manifest("") == []

    def test_lines_before_first_section_ignored(self):
        """Test lines before first section ignored."""
        text = "- [A - A - 1.0.0](https://example.com/a.mdx)\n## Events\n- [B - B - 1.0.0](https://example.com/b.mdx)"

        result = parse_manifest(text)

        assert [r.id for r in result] == ["B"]

    def test_unknown_section_ignored_until_next_known(self):
        """Test unknown section ignored until next known."""
        text = (
            "## Events\n"
            "- [A - A - 1.0.0](https://example.com/a.mdx)\n"
            "## Something Else\n"
            "- [B - B - 1.0.0](https://example.com/b.mdx)\n"
            "## Commands\n"
            "- [C - C - 1.0.0](https://example.com/c.mdx)\n"
        )

        result = parse_manifest(text)

        assert [(r.kind, r.id) for r in result] == [
            (ResourceKind.EVENT, "A"),
            (ResourceKind.COMMAND, "C"),
        ]

    def test_heading_match_is_case_insensitive(self):
        """Test heading match is case-insensitive."""
        text = "## EVENTS  \n- [A - A - 1.0.0](https://example.com/a.mdx)"

        assert parse_manifest(text)[0].kind is ResourceKind.EVENT

    def test_malformed_lines_ignored(self):
        """Test malformed lines ignored."""
        text = (
            "## Events\n"
            "- [Broken - Broken - 1.0.0] no link\n"
            "- plain bullet\n"
            "  - [Indented - Indented - 1.0.0](https://example.com/i.mdx)\n"
            "- [Good - Good - 1.0.0](https://example.com/g.mdx)\n"
        )

        result = parse_manifest(text)

        assert [r.id for r in result] == ["Good"]

    def test_crlf_line_endings(self):
        """Test CRLF line endings."""
        text = "## Events\r\n- [A - A - 1.0.0](https://example.com/a.mdx) - First\r\n"

        (resource,) = parse_manifest(text)

        assert resource.summary == "First"
        assert resource.url == "https://example.com/a.mdx"

    @pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x1e", "\x85", "\u2028", "\u2029"])
    def test_only_newline_ends_a_line(self, separator):
        """Other Unicode line separators stay inside the summary."""
        text = f"## Events\n- [A - A - 1.0.0](https://example.com/a.mdx) - One{separator}two\n"

        (resource,) = parse_manifest(text)

        assert resource.summary == f"One{separator}two"

    def test_document_order_and_duplicates_kept(self):
        """Test document order and duplicates kept."""
        text = (
            "## Events\n"
            "- [A - A - 1.0.0](https://example.com/a1.mdx)\n"
            "- [A - A - 2.0.0](https://example.com/a2.mdx)\n"
        )

        result = parse_manifest(text)

        assert [r.version for r in result] == ["1.0.0", "2.0.0"]

    def test_full_manifest(self):
        """Test full manifest."""
        result = parse_manifest(SAMPLE_MANIFEST)

        assert len(result) == SAMPLE_RESOURCE_COUNT
        kinds = [r.kind.value for r in result]
        assert kinds.count("event") == 3
        assert kinds.count("user") == 2
        assert all(r.url.startswith("https://catalog.example.com/docs/") for r in result)


@pytest.mark.unit
class TestParseDiagnostics:
    """Test parse diagnostics."""

    def test_reports_dropped_bullet_lines(self):
        """Test reports dropped bullet lines."""
        text = (
            "- [Early - Early - 1.0.0](https://example.com/e.mdx)\n"
            "## Events\n"
            "- [Broken](no closing paren\n"
            "- [Short - 1.0.0](https://example.com/s.mdx)\n"
            "## Mystery\n"
            "- [Lost - Lost - 1.0.0](https://example.com/l.mdx)\n"
            "Just prose\n"
        )
        diagnostics = ParseDiagnostics()

        result = parse_manifest(text, diagnostics)

        assert result == []
        assert [(s.line_number, s.reason) for s in diagnostics.skipped] == [
            (1, SkipReason.NO_SECTION),
            (3, SkipReason.MALFORMED),
            (4, SkipReason.TOO_FEW_FIELDS),
            (6, SkipReason.UNKNOWN_SECTION),
        ]
        assert len(diagnostics) == 4

    def test_clean_manifest_has_no_diagnostics(self):
        """Test clean manifest has no diagnostics."""
        diagnostics = ParseDiagnostics()

        parse_manifest(SAMPLE_MANIFEST, diagnostics)

        assert diagnostics.skipped == []
