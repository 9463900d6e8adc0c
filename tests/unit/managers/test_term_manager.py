"""
test_term_manager.py
--------------------
Unit tests for TermManager get-or-create and term aliases.
"""
import pytest

from umami_content.core.exceptions import ValidationError
from umami_content.database.managers import term_alias


class TestTermAlias:
    """Test the term_alias helper."""

    @pytest.mark.parametrize(
        "name, vid, expected",
        [
            ("Dessert", "tags", "/tags/dessert"),
            ("Chocolate Cake", "tags", "/tags/chocolate-cake"),
            ("Mains", "recipe_category", "/recipe-category/mains"),
        ],
    )
    def test_alias(self, name, vid, expected):
        assert term_alias(name, vid) == expected


class TestTermManagerGetOrCreate:
    """Test TermManager.get_or_create()."""

    def test_creates_term_with_alias(self, term_manager):
        term, created = term_manager.get_or_create("Chocolate Cake")
        assert created is True
        assert term.vid == "tags"
        assert term.path_alias == "/tags/chocolate-cake"

    def test_reuses_term_in_same_vocabulary(self, term_manager):
        first, _ = term_manager.get_or_create("Dessert")
        second, created = term_manager.get_or_create(" Dessert ")
        assert created is False
        assert second is first
        assert term_manager.count() == 1

    def test_same_name_in_other_vocabulary_is_new(self, term_manager):
        tag, _ = term_manager.get_or_create("Dessert", "tags")
        category, created = term_manager.get_or_create("Dessert", "recipe_category")
        assert created is True
        assert category.id != tag.id

    def test_empty_name_raises(self, term_manager):
        with pytest.raises(ValidationError):
            term_manager.get_or_create("  ")

    def test_empty_vocabulary_raises(self, term_manager):
        with pytest.raises(ValidationError):
            term_manager.get_or_create("Dessert", "")


class TestTermManagerLookups:
    """Test get, exists and get_all."""

    def test_get_by_name_and_vocabulary(self, term_manager):
        term, _ = term_manager.get_or_create("Cake")
        assert term_manager.get("Cake") is term
        assert term_manager.get("Cake", "recipe_category") is None

    def test_exists(self, term_manager):
        assert term_manager.exists("Cake") is False
        term_manager.get_or_create("Cake")
        assert term_manager.exists("Cake") is True

    def test_get_all_sorted_and_filtered(self, term_manager):
        term_manager.get_or_create("Dessert")
        term_manager.get_or_create("Baking")
        term_manager.get_or_create("Mains", "recipe_category")

        assert [t.name for t in term_manager.get_all()] == ["Baking", "Dessert", "Mains"]
        assert [t.name for t in term_manager.get_all("tags")] == ["Baking", "Dessert"]
