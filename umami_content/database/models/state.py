"""
State Models
-------------

- StateEntry: Persistent key-value entry (JSON encoded value).

The provenance ledger of seeded content is stored as one of these entries.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class StateEntry(Base):
    """
    Key-value state entry.

    Attributes:
        id: Primary key
        name: Unique key name
        value: JSON-encoded value
    """

    __tablename__ = "key_value_state"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    value: Mapped[Optional[str]] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<StateEntry(name='{self.name}')>"
