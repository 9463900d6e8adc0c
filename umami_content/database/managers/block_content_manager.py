#!/usr/bin/env python3
"""
block_content_manager.py
--------------------
Manager for block content instances.
"""
from __future__ import annotations

from typing import List, Optional

from ..decorators import handle_db_errors
from ..models import BlockContent, EntityType
from .base_manager import BaseManager


class BlockContentManager(BaseManager):
    """Storage and lookups for BlockContent records."""

    model_class = BlockContent
    entity_type_id = EntityType.BLOCK_CONTENT.value

    @handle_db_errors
    def get_all(self, block_type: Optional[str] = None) -> List[BlockContent]:
        query = self.session.query(BlockContent)
        if block_type:
            query = query.filter_by(type=block_type)
        return query.order_by(BlockContent.id).all()
