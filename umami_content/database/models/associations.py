"""
Association Tables
-------------------

Many-to-many relationship tables for the content store.

- node_tags: Content records with their taxonomy terms
"""
# --- Third party imports ---
from sqlalchemy import Column, ForeignKey, Integer, Table

# --- Local imports ---
from .base import Base

node_tags = Table(
    "node_tags",
    Base.metadata,
    Column(
        "node_id",
        Integer,
        ForeignKey("nodes.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "term_id",
        Integer,
        ForeignKey("taxonomy_terms.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)
