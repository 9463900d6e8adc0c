"""
Enumeration Types
------------------

Enum classes for the content store models.

Enums:
    - EntityType: Record type tags stored in the provenance ledger
    - UserRole: Roles assigned to seeded users
    - NodeBundle: Content record bundles
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import List


class EntityType(str, Enum):
    """
    Enumeration of record type tags.

    The order of declaration is the order in which imported records are
    deleted: records that reference others go first.
    - BLOCK_CONTENT: Block content (references nodes and files)
    - NODE: Articles, press releases and pages (reference users, terms, files)
    - TAXONOMY_TERM: Tags
    - FILE: Managed files
    - USER: Editors and authors
    """

    BLOCK_CONTENT = "block_content"
    NODE = "node"
    TAXONOMY_TERM = "taxonomy_term"
    FILE = "file"
    USER = "user"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all entity type tags."""
        return [entity_type.value for entity_type in cls]

    @classmethod
    def deletion_order(cls) -> List[str]:
        """Get entity type tags in dependency-safe deletion order."""
        return cls.choices()


class UserRole(str, Enum):
    """
    Enumeration of user roles.
    - EDITOR: Fixed editor accounts created up front
    - AUTHOR: Accounts created lazily from the author column
    """

    EDITOR = "editor"
    AUTHOR = "author"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available role choices."""
        return [role.value for role in cls]


class NodeBundle(str, Enum):
    """Enumeration of content record bundles."""

    ARTICLE = "article"
    PRESS_RELEASE = "press_release"
    PAGE = "page"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all available bundle choices."""
        return [bundle.value for bundle in cls]
