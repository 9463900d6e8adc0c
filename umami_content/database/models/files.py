"""
File Models
------------

- ManagedFile: Record wrapping a physical file copied into managed storage.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional

# --- Third party imports ---
from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

# --- Local imports ---
from .base import Base, UuidMixin


class ManagedFile(Base, UuidMixin):
    """
    Represents a file in managed storage.

    Attributes:
        id: Primary key
        uuid: Stable unique identifier
        uri: Storage URI (e.g. 'public://chocolate.jpg'), unique
        filename: Base name of the stored file
        filemime: MIME type guessed from the file name
        filesize: Size in bytes at the time of copying
        status: Whether the file is permanent
    """

    __tablename__ = "files"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    uri: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    filemime: Mapped[Optional[str]] = mapped_column(String(255))
    filesize: Mapped[Optional[int]] = mapped_column(Integer)
    status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<ManagedFile(id={self.id}, uri='{self.uri}')>"
