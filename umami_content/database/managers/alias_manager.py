#!/usr/bin/env python3
"""
alias_manager.py
--------------------
Path alias resolution between system paths and URL aliases.

System paths:
    /node/<id>            content records
    /taxonomy/term/<id>   taxonomy terms

Usage:
    aliases = AliasManager(session, logger)
    aliases.get_alias_by_path("/node/3")     # '/articles/dynamic-intellectual-capital'
    aliases.get_path_by_alias("/tags/cake")  # '/taxonomy/term/1'
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Optional

# --- Third party imports ---
from sqlalchemy.orm import Session

# --- Local imports ---
from umami_content.core.logging_manager import ContentLogger
from ..decorators import handle_db_errors
from ..models import Node, TaxonomyTerm

_NODE_PATH = re.compile(r"^/node/(\d+)$")
_TERM_PATH = re.compile(r"^/taxonomy/term/(\d+)$")


class AliasManager:
    """
    Resolve URL aliases of content records and taxonomy terms.

    Attributes:
        session: SQLAlchemy session
        logger: Optional logger
    """

    def __init__(self, session: Session, logger: Optional[ContentLogger] = None):
        self.session = session
        self.logger = logger

    @handle_db_errors
    def get_alias_by_path(self, path: str) -> str:
        """
        Get the URL alias of a system path.

        Args:
            path: System path, e.g. '/node/3'

        Returns:
            The alias, or the path itself when it has no alias
        """
        for pattern, model in ((_NODE_PATH, Node), (_TERM_PATH, TaxonomyTerm)):
            match = pattern.match(path)
            if match:
                entity = self.session.get(model, int(match.group(1)))
                if entity is not None and entity.path_alias:
                    return entity.path_alias
                return path
        return path

    @handle_db_errors
    def get_path_by_alias(self, alias: str) -> Optional[str]:
        """
        Get the system path behind a URL alias.

        Content records are searched before taxonomy terms; with duplicate
        aliases the oldest record wins.

        Args:
            alias: URL alias, e.g. '/tags/cake'

        Returns:
            System path, or None if no record uses the alias
        """
        node = (
            self.session.query(Node)
            .filter_by(path_alias=alias)
            .order_by(Node.id)
            .first()
        )
        if node is not None:
            return f"/node/{node.id}"

        term = (
            self.session.query(TaxonomyTerm)
            .filter_by(path_alias=alias)
            .order_by(TaxonomyTerm.id)
            .first()
        )
        if term is not None:
            return f"/taxonomy/term/{term.id}"
        return None
