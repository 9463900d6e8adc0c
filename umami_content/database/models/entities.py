"""
Entity Models
--------------

Models for the people and vocabulary that content records refer to.

Models:
    - User: Editors and authors
    - TaxonomyTerm: Terms grouped into vocabularies (e.g. 'tags')

Both are looked up by name with get-or-create semantics while seeding.
"""

# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import TYPE_CHECKING, List, Optional

# --- Third party imports ---
from sqlalchemy import Boolean, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

# --- Local imports ---
from .associations import node_tags
from .base import Base, UuidMixin
from .enums import UserRole

if TYPE_CHECKING:
    from .content import Node


class User(Base, UuidMixin):
    """
    Represents a user account.

    Attributes:
        id: Primary key
        uuid: Stable unique identifier
        name: Display name (unique)
        mail: E-mail address
        status: Whether the account is active
        role: Single role assignment ('editor' or 'author')

    Relationships:
        nodes: One-to-many with Node (content authored by the user)
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    mail: Mapped[Optional[str]] = mapped_column(String(255))
    status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    role: Mapped[str] = mapped_column(
        String(32), default=UserRole.AUTHOR.value, nullable=False
    )

    nodes: Mapped[List["Node"]] = relationship("Node", back_populates="author")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name='{self.name}', role='{self.role}')>"


class TaxonomyTerm(Base, UuidMixin):
    """
    Represents a taxonomy term.

    Terms are unique per (name, vocabulary). Each term gets a URL alias
    derived from its vocabulary and name, e.g. '/tags/dessert'.

    Attributes:
        id: Primary key
        uuid: Stable unique identifier
        name: Term name
        vid: Vocabulary id
        path_alias: URL alias

    Relationships:
        nodes: Many-to-many with Node
    """

    __tablename__ = "taxonomy_terms"
    __table_args__ = (UniqueConstraint("name", "vid", name="uq_term_name_vid"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    vid: Mapped[str] = mapped_column(String(64), nullable=False, default="tags")
    path_alias: Mapped[Optional[str]] = mapped_column(String(255), index=True)

    nodes: Mapped[List["Node"]] = relationship(
        "Node", secondary=node_tags, back_populates="tags"
    )

    def __repr__(self) -> str:
        return f"<TaxonomyTerm(id={self.id}, name='{self.name}', vid='{self.vid}')>"
