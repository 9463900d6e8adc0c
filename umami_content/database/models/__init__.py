"""
Database Models Package
------------------------

SQLAlchemy ORM models for the content store.

This package provides a modular organization of database models:
- base: Base class and uuid mixin
- enums: Enumeration types
- associations: Many-to-many relationship tables
- entities: User, TaxonomyTerm
- files: ManagedFile
- content: Node, BlockContent
- state: StateEntry

Usage:
    from umami_content.database.models import Node, User, TaxonomyTerm
"""
# Base classes
from .base import Base, UuidMixin, generate_uuid

# Enumerations
from .enums import EntityType, NodeBundle, UserRole

# Association tables
from .associations import node_tags

# Entity models
from .entities import TaxonomyTerm, User

# Files
from .files import ManagedFile

# Content models
from .content import BlockContent, Node

# Key-value state
from .state import StateEntry

__all__ = [
    # Base
    "Base",
    "UuidMixin",
    "generate_uuid",
    # Enums
    "EntityType",
    "NodeBundle",
    "UserRole",
    # Associations
    "node_tags",
    # Models
    "User",
    "TaxonomyTerm",
    "ManagedFile",
    "Node",
    "BlockContent",
    "StateEntry",
]
