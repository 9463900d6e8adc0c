#!/usr/bin/env python3
"""
managers package
--------------------
Record type managers for the content store.

Each manager implements the EntityStorage interface (create, save,
load_by_properties, delete) for one record type and adds the lookups
the seeder needs.

Available Managers:
    BaseManager: Abstract base class implementing EntityStorage
    UserManager: User accounts (get-or-create by name)
    TermManager: Taxonomy terms (get-or-create by name and vocabulary)
    NodeManager: Articles, press releases and pages
    FileManager: Managed files and their physical copies
    BlockContentManager: Block content instances
    AliasManager: Path alias resolution

Usage:
    from umami_content.database.managers import UserManager

    users = UserManager(session, logger)
"""
from .base_manager import BaseManager, EntityStorage, HasId
from .user_manager import UserManager
from .term_manager import TermManager, term_alias
from .node_manager import NodeManager
from .file_manager import FileManager
from .block_content_manager import BlockContentManager
from .alias_manager import AliasManager

__all__ = [
    "BaseManager",
    "EntityStorage",
    "HasId",
    "UserManager",
    "TermManager",
    "term_alias",
    "NodeManager",
    "FileManager",
    "BlockContentManager",
    "AliasManager",
]
