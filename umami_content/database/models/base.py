"""
Base Classes and Mixins
------------------------

Foundational ORM classes for the content store.

Classes:
    - Base: Declarative base for all SQLAlchemy models
    - UuidMixin: Mixin providing a stable, unique uuid column

Every seeded record carries a uuid; the provenance ledger refers to records
by uuid rather than by their integer primary key.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import uuid as uuid_lib

# --- Third party ---
from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def generate_uuid() -> str:
    """Return a new random uuid as a string."""
    return str(uuid_lib.uuid4())


# --- Base ORM class ---
class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Serves as the declarative base for SQLAlchemy models and provides
    access to the metadata object for table creation and migrations.
    """

    pass


# --- UUID ---
class UuidMixin:
    """
    Mixin providing a universally unique identifier for a record.

    The uuid is generated on insert unless one is supplied (block content
    uses fixed uuids so that other configuration can refer to it).

    Attributes:
        uuid: 36-character uuid string, unique per table
    """

    uuid: Mapped[str] = mapped_column(
        String(36),
        unique=True,
        nullable=False,
        default=generate_uuid,
        doc="Stable unique identifier",
    )
