#!/usr/bin/env python3
"""
state_manager.py
-------------------
Persistent key-value store backed by the key_value_state table.

Values are JSON encoded, so anything json can serialize may be stored.
Writes take effect in the caller's transaction.

Usage:
    from umami_content.database.state_manager import StateManager

    state = StateManager(session, logger)
    state.set("umami_content_uuids", {"4c7d...": "block_content"})
    state.get("umami_content_uuids", {})
    state.delete("umami_content_uuids")
"""
from __future__ import annotations

import json
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from umami_content.core.exceptions import DatabaseError
from umami_content.core.logging_manager import ContentLogger, safe_logger
from .decorators import handle_db_errors
from .models import StateEntry


class StateManager:
    """
    Read and write JSON values under string keys.

    Attributes:
        session: SQLAlchemy session
        logger: Optional logger for debugging/info messages
    """

    def __init__(self, session: Session, logger: Optional[ContentLogger] = None):
        """
        Initialize state manager.

        Args:
            session: SQLAlchemy session for database operations
            logger: Optional logger for recording operations
        """
        self.session = session
        self.logger = logger

    def _entry(self, name: str) -> Optional[StateEntry]:
        return self.session.query(StateEntry).filter_by(name=name).first()

    @handle_db_errors
    def get(self, name: str, default: Any = None) -> Any:
        """
        Get the value stored under a key.

        Args:
            name: Key name
            default: Value returned when the key is absent

        Returns:
            Decoded value or default

        Raises:
            DatabaseError: If the stored value is not valid JSON
        """
        entry = self._entry(name)
        if entry is None or entry.value is None:
            return default
        try:
            return json.loads(entry.value)
        except json.JSONDecodeError as e:
            raise DatabaseError(f"Corrupt state value for '{name}': {e}") from e

    @handle_db_errors
    def set(self, name: str, value: Any) -> None:
        """
        Store a value under a key, replacing any previous value.

        Args:
            name: Key name
            value: JSON-serializable value
        """
        encoded = json.dumps(value)
        entry = self._entry(name)
        if entry is None:
            self.session.add(StateEntry(name=name, value=encoded))
        else:
            entry.value = encoded
        self.session.flush()
        safe_logger(self.logger).log_debug(f"State set: {name}")

    @handle_db_errors
    def delete(self, name: str) -> bool:
        """
        Remove a key.

        Returns:
            True if the key existed
        """
        entry = self._entry(name)
        if entry is None:
            return False
        self.session.delete(entry)
        self.session.flush()
        safe_logger(self.logger).log_debug(f"State deleted: {name}")
        return True

    @handle_db_errors
    def exists(self, name: str) -> bool:
        return self._entry(name) is not None

    @handle_db_errors
    def keys(self) -> List[str]:
        """Get all stored key names, sorted."""
        return [
            name
            for (name,) in self.session.query(StateEntry.name).order_by(StateEntry.name)
        ]
