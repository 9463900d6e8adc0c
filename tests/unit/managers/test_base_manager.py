"""
test_base_manager.py
--------------------
Unit tests for the EntityStorage operations shared by all managers.

Uses TermManager and UserManager as concrete BaseManager subclasses.
"""
import pytest

from umami_content.core.exceptions import DatabaseError, ValidationError
from umami_content.database.managers import (
    AliasManager,
    BlockContentManager,
    EntityStorage,
    FileManager,
    NodeManager,
    TermManager,
    UserManager,
)
from umami_content.database.models import TaxonomyTerm


class TestEntityStorageProtocol:
    """Every record type manager implements EntityStorage."""

    @pytest.mark.parametrize(
        "manager_fixture",
        ["user_manager", "term_manager", "node_manager", "file_manager", "block_manager"],
    )
    def test_managers_are_storages(self, manager_fixture, request):
        manager = request.getfixturevalue(manager_fixture)
        assert isinstance(manager, EntityStorage)

    def test_alias_manager_is_not_a_storage(self, alias_manager):
        assert not isinstance(alias_manager, EntityStorage)

    def test_entity_type_ids(self):
        assert UserManager.entity_type_id == "user"
        assert TermManager.entity_type_id == "taxonomy_term"
        assert NodeManager.entity_type_id == "node"
        assert FileManager.entity_type_id == "file"
        assert BlockContentManager.entity_type_id == "block_content"
        assert not hasattr(AliasManager, "entity_type_id")


class TestCreate:
    """Test BaseManager.create()."""

    def test_create_returns_transient_instance(self, term_manager):
        """create() builds a record without persisting it."""
        term = term_manager.create({"name": "Dessert", "vid": "tags"})
        assert isinstance(term, TaxonomyTerm)
        assert term.id is None
        assert term_manager.count() == 0

    def test_create_rejects_unknown_fields(self, term_manager):
        with pytest.raises(ValidationError) as exc_info:
            term_manager.create({"name": "Dessert", "colour": "red"})
        assert "colour" in str(exc_info.value)


class TestSave:
    """Test BaseManager.save()."""

    def test_save_assigns_id_and_uuid(self, term_manager):
        term = term_manager.save(term_manager.create({"name": "Dessert", "vid": "tags"}))
        assert term.id is not None
        assert len(term.uuid) == 36

    def test_save_honors_given_uuid(self, term_manager):
        uuid = "4c7d58a3-a45d-412d-9068-259c57e40541"
        term = term_manager.save(
            term_manager.create({"name": "Cake", "vid": "tags", "uuid": uuid})
        )
        assert term_manager.get_by_uuid(uuid) is term

    def test_save_integrity_violation_raises_database_error(self, user_manager):
        user_manager.save(user_manager.create({"name": "Grace Hamilton"}))
        with pytest.raises(DatabaseError) as exc_info:
            user_manager.save(user_manager.create({"name": "Grace Hamilton"}))
        assert "integrity" in str(exc_info.value).lower()


class TestLoadByProperties:
    """Test BaseManager.load_by_properties()."""

    @pytest.fixture
    def terms(self, term_manager):
        return [
            term_manager.save(term_manager.create({"name": name, "vid": vid}))
            for name, vid in [("Cake", "tags"), ("Dessert", "tags"), ("Cake", "courses")]
        ]

    def test_scalar_property(self, term_manager, terms):
        found = term_manager.load_by_properties(name="Cake")
        assert found == [terms[0], terms[2]]

    def test_multiple_properties(self, term_manager, terms):
        assert term_manager.load_by_properties(name="Cake", vid="courses") == [terms[2]]

    def test_list_property_matches_any(self, term_manager, terms):
        uuids = [terms[2].uuid, terms[1].uuid]
        assert term_manager.load_by_properties(uuid=uuids) == [terms[1], terms[2]]

    def test_empty_list_matches_nothing(self, term_manager, terms):
        assert term_manager.load_by_properties(uuid=[]) == []

    def test_unknown_uuids_are_ignored(self, term_manager, terms):
        found = term_manager.load_by_properties(uuid=[terms[0].uuid, "missing"])
        assert found == [terms[0]]

    def test_unknown_property_raises(self, term_manager):
        with pytest.raises(DatabaseError):
            term_manager.load_by_properties(colour="red")


class TestDelete:
    """Test BaseManager.delete()."""

    def test_delete_returns_count(self, term_manager):
        terms = [
            term_manager.save(term_manager.create({"name": name, "vid": "tags"}))
            for name in ("Cake", "Dessert")
        ]
        assert term_manager.delete(terms) == 2
        assert term_manager.count() == 0

    def test_delete_nothing(self, term_manager):
        assert term_manager.delete([]) == 0


class TestReadHelpers:
    """Test get_by_id, get_by_uuid and count."""

    def test_get_by_id(self, term_manager):
        term = term_manager.save(term_manager.create({"name": "Cake", "vid": "tags"}))
        assert term_manager.get_by_id(term.id) is term
        assert term_manager.get_by_id(9999) is None

    def test_get_by_uuid_missing(self, term_manager):
        assert term_manager.get_by_uuid("missing") is None
        assert term_manager.get_by_uuid("  ") is None

    def test_count_with_filter(self, term_manager):
        term_manager.save(term_manager.create({"name": "Cake", "vid": "tags"}))
        term_manager.save(term_manager.create({"name": "Soup", "vid": "courses"}))
        assert term_manager.count() == 2
        assert term_manager.count(vid="tags") == 1
