"""
Content Models
---------------

Models for the demo content itself.

Models:
    - Node: Articles, press releases and pages
    - BlockContent: Reusable content fragments (banner, disclaimer, promo)
"""

# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import TYPE_CHECKING, List, Optional

# --- Third party imports ---
from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

# --- Local imports ---
from .associations import node_tags
from .base import Base, UuidMixin

if TYPE_CHECKING:
    from .entities import TaxonomyTerm, User
    from .files import ManagedFile


class Node(Base, UuidMixin):
    """
    Represents a content record.

    Attributes:
        id: Primary key
        uuid: Stable unique identifier
        type: Bundle ('article', 'press_release' or 'page')
        title: Title (required)
        body_value: Rich text body
        body_format: Text format of the body (e.g. 'basic_html')
        path_alias: URL alias (e.g. '/about-us')
        moderation_state: Workflow state, 'published' by default
        status: Published flag, derived from the workflow state
        uid: Author (user) id
        image_id: Image (managed file) id
        image_alt: Alternative text of the image

    Relationships:
        author: Many-to-one with User
        image: Many-to-one with ManagedFile
        tags: Many-to-many with TaxonomyTerm
    """

    __tablename__ = "nodes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    body_value: Mapped[Optional[str]] = mapped_column(Text)
    body_format: Mapped[Optional[str]] = mapped_column(String(64))
    path_alias: Mapped[Optional[str]] = mapped_column(String(255), index=True)
    moderation_state: Mapped[str] = mapped_column(
        String(32), nullable=False, default="published"
    )
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    uid: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL")
    )
    image_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("files.id", ondelete="SET NULL")
    )
    image_alt: Mapped[Optional[str]] = mapped_column(String(512))

    author: Mapped[Optional["User"]] = relationship("User", back_populates="nodes")
    image: Mapped[Optional["ManagedFile"]] = relationship("ManagedFile")
    tags: Mapped[List["TaxonomyTerm"]] = relationship(
        "TaxonomyTerm", secondary=node_tags, back_populates="nodes"
    )

    @property
    def internal_path(self) -> str:
        """Canonical system path of the record."""
        return f"/node/{self.id}"

    @property
    def has_body(self) -> bool:
        return self.body_value is not None

    def __repr__(self) -> str:
        return f"<Node(id={self.id}, type='{self.type}', title='{self.title}')>"


class BlockContent(Base, UuidMixin):
    """
    Represents a block content instance.

    Only the fields used by the block type are set: banners and footer
    promos carry title, link, summary and image; disclaimers carry the
    disclaimer and copyright texts.

    Attributes:
        id: Primary key
        uuid: Stable unique identifier (fixed per instance)
        info: Administrative label
        type: Block type (e.g. 'banner_block')
        field_title: Displayed title
        link_uri: Link target (e.g. 'internal:/articles/...')
        link_title: Link text
        summary: Short summary text
        image_id: Image (managed file) id
        image_alt: Alternative text of the image
        disclaimer_value: Disclaimer text
        disclaimer_format: Text format of the disclaimer
        copyright_value: Copyright text
        copyright_format: Text format of the copyright
    """

    __tablename__ = "block_content"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    info: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    field_title: Mapped[Optional[str]] = mapped_column(String(255))
    link_uri: Mapped[Optional[str]] = mapped_column(String(2048))
    link_title: Mapped[Optional[str]] = mapped_column(String(255))
    summary: Mapped[Optional[str]] = mapped_column(Text)
    image_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("files.id", ondelete="SET NULL")
    )
    image_alt: Mapped[Optional[str]] = mapped_column(String(512))
    disclaimer_value: Mapped[Optional[str]] = mapped_column(Text)
    disclaimer_format: Mapped[Optional[str]] = mapped_column(String(64))
    copyright_value: Mapped[Optional[str]] = mapped_column(Text)
    copyright_format: Mapped[Optional[str]] = mapped_column(String(64))

    image: Mapped[Optional["ManagedFile"]] = relationship("ManagedFile")

    def __repr__(self) -> str:
        return f"<BlockContent(id={self.id}, type='{self.type}', info='{self.info}')>"
