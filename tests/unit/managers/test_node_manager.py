"""
test_node_manager.py
--------------------
Unit tests for NodeManager content record creation and lookups.
"""
import pytest
from sqlalchemy import func, select

from umami_content.core.exceptions import ValidationError
from umami_content.database.models import node_tags


class TestNodeManagerCreate:
    """Test NodeManager.create()."""

    def test_defaults_to_published(self, node_manager):
        node = node_manager.save(node_manager.create({"type": "page", "title": "Contact us"}))
        assert node.moderation_state == "published"
        assert node.status is True
        assert node.has_body is False

    def test_draft_is_unpublished(self, node_manager):
        node = node_manager.save(
            node_manager.create(
                {"type": "article", "title": "Our seasonal menu", "moderation_state": "draft"}
            )
        )
        assert node.moderation_state == "draft"
        assert node.status is False

    @pytest.mark.parametrize(
        "values",
        [{"type": "page"}, {"title": "Contact us"}, {"type": "page", "title": ""}],
    )
    def test_requires_type_and_title(self, node_manager, values):
        with pytest.raises(ValidationError):
            node_manager.create(values)

    def test_tags_by_id_and_instance(self, node_manager, term_manager):
        cake, _ = term_manager.get_or_create("Cake")
        dessert, _ = term_manager.get_or_create("Dessert")

        node = node_manager.save(
            node_manager.create(
                {"type": "article", "title": "Cake", "tags": [cake.id, dessert, cake.id]}
            )
        )

        assert node.tags == [cake, dessert]
        assert node in dessert.nodes

    def test_unknown_tag_id_raises(self, node_manager):
        with pytest.raises(ValueError):
            node_manager.create({"type": "article", "title": "Cake", "tags": [9999]})

    def test_author_and_image(self, node_manager, user_manager, file_manager, tmp_dir):
        user, _ = user_manager.get_or_create("Grace Hamilton")
        source = tmp_dir / "cake.png"
        source.write_bytes(b"png")
        image, _ = file_manager.copy_to_managed(source)

        node = node_manager.save(
            node_manager.create(
                {
                    "type": "article",
                    "title": "The perfect chocolate cake",
                    "uid": user.id,
                    "image_id": image.id,
                    "image_alt": "A slice of cake",
                }
            )
        )

        assert node.author is user
        assert node.image is image
        assert node in user.nodes


class TestNodeManagerLookups:
    """Test get_by_title, get_all and internal_path."""

    def test_get_by_title_returns_oldest(self, node_manager):
        first = node_manager.save(node_manager.create({"type": "page", "title": "About"}))
        node_manager.save(node_manager.create({"type": "article", "title": "About"}))
        assert node_manager.get_by_title("About") is first

    def test_get_by_title_with_bundle(self, node_manager):
        node_manager.save(node_manager.create({"type": "page", "title": "About"}))
        article = node_manager.save(node_manager.create({"type": "article", "title": "About"}))
        assert node_manager.get_by_title("About", bundle="article") is article

    def test_get_by_title_is_exact(self, node_manager):
        node_manager.save(node_manager.create({"type": "page", "title": "About"}))
        assert node_manager.get_by_title("about") is None

    def test_get_all_by_bundle(self, node_manager):
        node_manager.save(node_manager.create({"type": "page", "title": "A"}))
        node_manager.save(node_manager.create({"type": "article", "title": "B"}))
        assert [n.title for n in node_manager.get_all()] == ["A", "B"]
        assert [n.title for n in node_manager.get_all("article")] == ["B"]

    def test_internal_path(self, node_manager):
        node = node_manager.save(node_manager.create({"type": "page", "title": "A"}))
        assert node.internal_path == f"/node/{node.id}"

    def test_delete_removes_tag_links(self, node_manager, term_manager, db_session):
        term, _ = term_manager.get_or_create("Cake")
        node = node_manager.save(
            node_manager.create({"type": "article", "title": "Cake", "tags": [term]})
        )

        assert node_manager.delete([node]) == 1
        links = db_session.execute(select(func.count()).select_from(node_tags)).scalar()
        assert links == 0
        assert term_manager.get("Cake") is term
