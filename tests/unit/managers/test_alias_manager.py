"""
test_alias_manager.py
---------------------
Unit tests for AliasManager path and alias resolution.
"""


class TestGetAliasByPath:
    """Test AliasManager.get_alias_by_path()."""

    def test_node_alias(self, alias_manager, node_manager):
        node = node_manager.save(
            node_manager.create(
                {"type": "page", "title": "About Bread & Butter", "path_alias": "/about-us"}
            )
        )
        assert alias_manager.get_alias_by_path(node.internal_path) == "/about-us"

    def test_term_alias(self, alias_manager, term_manager):
        term, _ = term_manager.get_or_create("Dessert")
        assert alias_manager.get_alias_by_path(f"/taxonomy/term/{term.id}") == "/tags/dessert"

    def test_node_without_alias_returns_path(self, alias_manager, node_manager):
        node = node_manager.save(node_manager.create({"type": "page", "title": "Contact us"}))
        assert alias_manager.get_alias_by_path(node.internal_path) == node.internal_path

    def test_unknown_record_returns_path(self, alias_manager):
        assert alias_manager.get_alias_by_path("/node/9999") == "/node/9999"

    def test_unrecognized_path_returns_path(self, alias_manager):
        assert alias_manager.get_alias_by_path("/user/login") == "/user/login"


class TestGetPathByAlias:
    """Test AliasManager.get_path_by_alias()."""

    def test_node(self, alias_manager, node_manager):
        node = node_manager.save(
            node_manager.create({"type": "page", "title": "Contact us", "path_alias": "/contact"})
        )
        assert alias_manager.get_path_by_alias("/contact") == f"/node/{node.id}"

    def test_term(self, alias_manager, term_manager):
        term, _ = term_manager.get_or_create("Cake")
        assert alias_manager.get_path_by_alias("/tags/cake") == f"/taxonomy/term/{term.id}"

    def test_nodes_win_over_terms(self, alias_manager, node_manager, term_manager):
        term_manager.get_or_create("Cake")
        node = node_manager.save(
            node_manager.create({"type": "page", "title": "Cake", "path_alias": "/tags/cake"})
        )
        assert alias_manager.get_path_by_alias("/tags/cake") == f"/node/{node.id}"

    def test_unknown_alias(self, alias_manager):
        assert alias_manager.get_path_by_alias("/nowhere") is None
