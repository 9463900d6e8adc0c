#!/usr/bin/env python3
"""
term_manager.py
--------------------
Manager for taxonomy terms.

Terms are unique per (name, vocabulary). New terms get a URL alias built
from the sanitized vocabulary id and term name, e.g. 'Dessert' in 'tags'
becomes '/tags/dessert'.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional, Tuple

# --- Local imports ---
from umami_content.core.exceptions import ValidationError
from umami_content.core.logging_manager import safe_logger
from umami_content.core.validators import DataValidator
from umami_content.utils.slugify import css_class
from ..decorators import handle_db_errors, log_database_operation
from ..models import EntityType, TaxonomyTerm
from .base_manager import BaseManager


def term_alias(name: str, vid: str) -> str:
    """
    Build the URL alias of a term.

    Args:
        name: Term name
        vid: Vocabulary id

    Returns:
        Alias of the form '/<vocabulary>/<name>', both parts sanitized
    """
    return f"/{css_class(vid)}/{css_class(name)}"


class TermManager(BaseManager):
    """Storage and lookups for TaxonomyTerm records."""

    model_class = TaxonomyTerm
    entity_type_id = EntityType.TAXONOMY_TERM.value

    @handle_db_errors
    def get(self, name: Optional[str], vid: str = "tags") -> Optional[TaxonomyTerm]:
        """
        Get a term by exact name within a vocabulary.

        Args:
            name: Term name (surrounding whitespace ignored)
            vid: Vocabulary id

        Returns:
            Term if found, None otherwise
        """
        normalized = DataValidator.normalize_string(name)
        if not normalized:
            return None
        return (
            self.session.query(TaxonomyTerm)
            .filter_by(name=normalized, vid=vid)
            .first()
        )

    def exists(self, name: Optional[str], vid: str = "tags") -> bool:
        return self.get(name, vid) is not None

    @handle_db_errors
    def get_all(self, vid: Optional[str] = None) -> List[TaxonomyTerm]:
        """Get all terms, optionally limited to one vocabulary."""
        query = self.session.query(TaxonomyTerm)
        if vid:
            query = query.filter_by(vid=vid)
        return query.order_by(TaxonomyTerm.name).all()

    @handle_db_errors
    @log_database_operation("get_or_create_term")
    def get_or_create(self, name: str, vid: str = "tags") -> Tuple[TaxonomyTerm, bool]:
        """
        Get a term by (name, vocabulary) or create it with its alias.

        Args:
            name: Term name (surrounding whitespace is trimmed)
            vid: Vocabulary id

        Returns:
            Tuple of (term, whether it was created)

        Raises:
            ValidationError: If the name or vocabulary is empty
            DatabaseError: If the insert fails
        """
        normalized = DataValidator.normalize_string(name)
        if not normalized:
            raise ValidationError("Term name cannot be empty")
        if not vid:
            raise ValidationError("Vocabulary id cannot be empty")

        term, created = self._get_or_create(
            TaxonomyTerm,
            {"name": normalized, "vid": vid},
            {"path_alias": term_alias(normalized, vid)},
        )
        if created:
            safe_logger(self.logger).log_debug(
                f"Created term: {normalized}",
                {"term_id": term.id, "vid": vid, "path_alias": term.path_alias},
            )
        return term, created
