#!/usr/bin/env python3
"""
Umami Content Database Package
------------------------------

SQLAlchemy-backed content store used by the seeder:
- ContentDB: engine, session scopes, schema and migrations
- Record type managers implementing EntityStorage
- StateManager: persistent key-value store
- ContentLedger: provenance ledger of seeded content
"""

from .manager import ContentDB
from umami_content.core.exceptions import DatabaseError, ValidationError
from .ledger import DEFAULT_LEDGER_KEY, ContentLedger
from .state_manager import StateManager
from .managers import EntityStorage
from .decorators import (
    log_database_operation,
    handle_db_errors,
)

__all__ = [
    # Main manager
    "ContentDB",
    # Exceptions
    "DatabaseError",
    "ValidationError",
    # State
    "StateManager",
    "ContentLedger",
    "DEFAULT_LEDGER_KEY",
    # Protocols
    "EntityStorage",
    # Decorators
    "log_database_operation",
    "handle_db_errors",
]
