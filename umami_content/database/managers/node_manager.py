#!/usr/bin/env python3
"""
node_manager.py
--------------------
Manager for content records (articles, press releases and pages).

create() accepts tag references as term instances or term ids, and
derives the published flag from the workflow state.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict, List, Optional

# --- Local imports ---
from umami_content.core.validators import DataValidator
from ..decorators import handle_db_errors
from ..models import EntityType, Node, TaxonomyTerm
from .base_manager import BaseManager

PUBLISHED_STATE = "published"


class NodeManager(BaseManager):
    """Storage and lookups for Node records."""

    model_class = Node
    entity_type_id = EntityType.NODE.value

    def create(self, values: Dict[str, Any]) -> Node:
        """
        Build an unsaved content record.

        Args:
            values: Field values. 'type' and 'title' are required; 'tags'
                may list TaxonomyTerm instances or ids; 'moderation_state'
                defaults to 'published' and sets the published flag.

        Returns:
            New, transient Node

        Raises:
            ValidationError: If required fields are missing or a field is unknown
        """
        DataValidator.validate_required_fields(values, ["type", "title"])

        fields = dict(values)
        tags = fields.pop("tags", None) or []
        state = fields.get("moderation_state") or PUBLISHED_STATE
        fields["moderation_state"] = state
        fields.setdefault("status", state == PUBLISHED_STATE)

        node = super().create(fields)
        for item in tags:
            term = self._resolve_object(item, TaxonomyTerm)
            if term not in node.tags:
                node.tags.append(term)
        return node

    @handle_db_errors
    def get_by_title(self, title: str, bundle: Optional[str] = None) -> Optional[Node]:
        """
        Get the first content record (by id) with an exact title.

        Args:
            title: Exact title
            bundle: Optional bundle to restrict the lookup to

        Returns:
            Node if found, None otherwise
        """
        query = self.session.query(Node).filter_by(title=title)
        if bundle:
            query = query.filter_by(type=bundle)
        return query.order_by(Node.id).first()

    @handle_db_errors
    def get_all(self, bundle: Optional[str] = None) -> List[Node]:
        """Get all content records, optionally of one bundle, ordered by id."""
        query = self.session.query(Node)
        if bundle:
            query = query.filter_by(type=bundle)
        return query.order_by(Node.id).all()
