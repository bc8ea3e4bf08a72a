"""Tests for the kind alias table."""

import pytest

from eventcatalog_mcp.catalog.kinds import (
    ALL,
    COLLECTION_TO_KIND,
    KIND_FILTERS,
    KIND_TO_COLLECTION,
    UNVERSIONED_KINDS,
    VERSIONED_COLLECTIONS,
    ResourceKind,
    UnknownKindError,
    resolve_filter,
    resolve_kind,
    section_kind,
)


@pytest.mark.unit
class TestAliasTable:
    """Test alias table."""

    def test_every_kind_has_one_collection(self):
        """Test every kind has one collection."""
        assert len(KIND_TO_COLLECTION) == len(ResourceKind) == 11
        assert set(COLLECTION_TO_KIND) == set(KIND_TO_COLLECTION.values())

    def test_mapping_is_bidirectional(self):
        """Test mapping is bidirectional."""
        for kind, collection in KIND_TO_COLLECTION.items():
            assert COLLECTION_TO_KIND[collection] is kind
            assert kind.collection == collection

    def test_irregular_plurals(self):
        """Test irregular plurals."""
        assert ResourceKind.QUERY.collection == "queries"
        assert ResourceKind.ENTITY.collection == "entities"

    def test_unversioned_kinds(self):
        """Test unversioned kinds."""
        assert UNVERSIONED_KINDS == {ResourceKind.TEAM, ResourceKind.USER, ResourceKind.DOC}
        assert not ResourceKind.TEAM.versioned
        assert ResourceKind.CHANNEL.versioned

    def test_versioned_collections_literal_matches_table(self):
        """Test versioned collections literal matches table."""
        expected = {kind.collection for kind in ResourceKind if kind.versioned}
        assert set(VERSIONED_COLLECTIONS) == expected

    def test_kind_filter_literal_matches_table(self):
        """Test kind filter literal matches table."""
        expected = {ALL} | set(COLLECTION_TO_KIND) | {kind.value for kind in ResourceKind}
        assert set(KIND_FILTERS) == expected


@pytest.mark.unit
class TestResolution:
    """Test resolution."""

    @pytest.mark.parametrize("name", ["event", "events", "Events", " EVENT "])
    def test_resolve_kind_spellings(self, name):
        """Test resolve kind spellings."""
        assert resolve_kind(name) is ResourceKind.EVENT

    def test_resolve_kind_unknown(self):
        """Test resolve kind unknown."""
        with pytest.raises(UnknownKindError):
            resolve_kind("widgets")

    def test_unknown_kind_is_value_error(self):
        """Test unknown kind is value error."""
        assert issubclass(UnknownKindError, ValueError)

    @pytest.mark.parametrize("name", [None, "all", "ALL"])
    def test_resolve_filter_all(self, name):
        """Test resolve filter all."""
        assert resolve_filter(name) == ALL

    def test_resolve_filter_kind(self):
        """Test resolve filter kind."""
        assert resolve_filter("users") is ResourceKind.USER

    @pytest.mark.parametrize(
        "heading,kind",
        [
            ("Events", ResourceKind.EVENT),
            ("queries", ResourceKind.QUERY),
            ("Custom Docs", ResourceKind.DOC),
            ("Teams", ResourceKind.TEAM),
        ],
    )
    def test_section_kind(self, heading, kind):
        """Test section kind."""
        assert section_kind(heading) is kind

    @pytest.mark.parametrize("heading", ["Docs", "Event", "Overview"])
    def test_unknown_section(self, heading):
        """Test unknown section."""
        assert section_kind(heading) is None
