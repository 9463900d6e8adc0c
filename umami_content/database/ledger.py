#!/usr/bin/env python3
"""
ledger.py
-------------------
Provenance ledger of seeded content.

The ledger maps the uuid of every record created by an import to the
record's entity type tag ('user', 'node', 'taxonomy_term', 'file',
'block_content'). It is stored as a single entry of the key-value store
and is read back by the delete operation to remove exactly what was
created.

Rules:
    - Merging keeps existing entries: a uuid is never re-tagged
    - Insertion order is preserved
    - Removing the last entries removes the key itself

Usage:
    ledger = ContentLedger(StateManager(session), "umami_content_uuids")
    ledger.record({node.uuid: "node"})
    ledger.by_entity_type()    # {"node": ["..."]}
    ledger.forget(["..."])
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from umami_content.core.exceptions import DatabaseError
from umami_content.core.logging_manager import ContentLogger, safe_logger
from .state_manager import StateManager

DEFAULT_LEDGER_KEY = "umami_content_uuids"


class ContentLedger:
    """
    Mapping of created uuids to entity type tags, persisted in a state key.

    Attributes:
        state: Key-value store holding the ledger
        key: Name of the state key
        logger: Optional logger
    """

    def __init__(
        self,
        state: StateManager,
        key: str = DEFAULT_LEDGER_KEY,
        logger: Optional[ContentLogger] = None,
    ):
        self.state = state
        self.key = key
        self.logger = logger

    def entries(self) -> Dict[str, str]:
        """
        Get the whole ledger.

        Returns:
            Ordered mapping of uuid to entity type tag

        Raises:
            DatabaseError: If the stored value is not a mapping
        """
        value = self.state.get(self.key, {})
        if not isinstance(value, dict):
            raise DatabaseError(
                f"Ledger '{self.key}' is corrupt: expected a mapping, "
                f"got {type(value).__name__}"
            )
        return value

    def record(self, entries: Dict[str, str]) -> int:
        """
        Merge entries into the ledger.

        Uuids already in the ledger keep their existing tag.

        Args:
            entries: Mapping of uuid to entity type tag

        Returns:
            Number of uuids that were not in the ledger before
        """
        if not entries:
            return 0
        current = self.entries()
        added = 0
        for uuid, entity_type in entries.items():
            if uuid not in current:
                current[uuid] = entity_type
                added += 1
        if added:
            self.state.set(self.key, current)
        safe_logger(self.logger).log_debug(
            "Ledger updated", {"key": self.key, "added": added, "total": len(current)}
        )
        return added

    def add(self, uuid: str, entity_type: str) -> bool:
        """Record a single uuid. Returns True if it was new."""
        return self.record({uuid: entity_type}) == 1

    def by_entity_type(self) -> Dict[str, List[str]]:
        """
        Group ledger uuids by entity type tag.

        Returns:
            Mapping of tag to uuids, both in first-seen order
        """
        groups: Dict[str, List[str]] = {}
        for uuid, entity_type in self.entries().items():
            groups.setdefault(entity_type, []).append(uuid)
        return groups

    def counts(self) -> Dict[str, int]:
        """Number of ledger entries per entity type tag."""
        return {
            entity_type: len(uuids)
            for entity_type, uuids in self.by_entity_type().items()
        }

    def forget(self, uuids: Iterable[str]) -> int:
        """
        Remove uuids from the ledger.

        The ledger key is deleted once no entries remain.

        Args:
            uuids: Uuids to remove (unknown ones are ignored)

        Returns:
            Number of removed entries
        """
        current = self.entries()
        removed = 0
        for uuid in uuids:
            if current.pop(uuid, None) is not None:
                removed += 1
        if current:
            self.state.set(self.key, current)
        else:
            self.state.delete(self.key)
        safe_logger(self.logger).log_debug(
            "Ledger entries removed",
            {"key": self.key, "removed": removed, "remaining": len(current)},
        )
        return removed

    def clear(self) -> None:
        """Remove the ledger key entirely."""
        self.state.delete(self.key)

    def __contains__(self, uuid: str) -> bool:
        return uuid in self.entries()

    def __len__(self) -> int:
        return len(self.entries())

    def is_empty(self) -> bool:
        return len(self) == 0
