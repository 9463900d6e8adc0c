#!/usr/bin/env python3
"""
user_manager.py
--------------------
Manager for user accounts.

Users are identified by their unique display name. Lookups while seeding
use get-or-create so an existing account of the same name is reused.

Usage:
    users = UserManager(session, logger)
    user, created = users.get_or_create(
        "Margaret Hopper",
        {"mail": "margaret.hopper@example.com", "role": "editor"},
    )
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict, List, Optional, Tuple

# --- Local imports ---
from umami_content.core.exceptions import ValidationError
from umami_content.core.logging_manager import safe_logger
from umami_content.core.validators import DataValidator
from ..decorators import handle_db_errors, log_database_operation
from ..models import EntityType, User, UserRole
from .base_manager import BaseManager


class UserManager(BaseManager):
    """Storage and lookups for User records."""

    model_class = User
    entity_type_id = EntityType.USER.value

    def exists(self, name: Optional[str]) -> bool:
        """
        Check if a user exists.

        Args:
            name: Display name (whitespace is normalized)

        Returns:
            True if a user with that name exists
        """
        return self.get(name) is not None

    @handle_db_errors
    def get(self, name: Optional[str]) -> Optional[User]:
        """
        Get a user by exact display name.

        Args:
            name: Display name

        Returns:
            User if found, None otherwise
        """
        return self._get_by_field(User, "name", name)

    @handle_db_errors
    def get_all(self, role: Optional[str] = None) -> List[User]:
        """Get all users, optionally filtered by role, ordered by name."""
        query = self.session.query(User)
        if role:
            query = query.filter_by(role=role)
        return query.order_by(User.name).all()

    @handle_db_errors
    @log_database_operation("get_or_create_user")
    def get_or_create(
        self, name: str, extra_fields: Optional[Dict[str, Any]] = None
    ) -> Tuple[User, bool]:
        """
        Get a user by name or create it.

        Args:
            name: Display name
            extra_fields: Fields used only when the user is created
                (mail, role, status)

        Returns:
            Tuple of (user, whether it was created)

        Raises:
            ValidationError: If the name is empty or the role is unknown
            DatabaseError: If the insert fails
        """
        normalized = DataValidator.normalize_string(name)
        if not normalized:
            raise ValidationError("User name cannot be empty")

        fields = dict(extra_fields or {})
        if "role" in fields:
            DataValidator.validate_choice(fields["role"], UserRole.choices(), "role")

        user, created = self._get_or_create(User, {"name": normalized}, fields)
        if created:
            safe_logger(self.logger).log_debug(
                f"Created user: {normalized}", {"user_id": user.id, "role": user.role}
            )
        return user, created
