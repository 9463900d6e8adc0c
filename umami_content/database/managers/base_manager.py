#!/usr/bin/env python3
"""
base_manager.py
--------------------
Base manager providing the entity storage operations and common utilities.
All record type managers inherit from this class.

Key Features:
    - EntityStorage protocol: create / save / load_by_properties / delete
    - Generic implementations of those four operations per model class
    - Get-or-create utility that reports whether a record was created
    - Object resolution helpers (instance or integer id)
    - Consistent error handling via handle_db_errors
    - Consistent logging via log_database_operation

Usage:
    Subclass BaseManager for each record type and set:
    - model_class: ORM model handled by the manager
    - entity_type_id: Ledger tag of the record type

    Override create() when values need translating (relationships, ids).

Example:
    class TermManager(BaseManager):
        model_class = TaxonomyTerm
        entity_type_id = EntityType.TAXONOMY_TERM.value

    terms = TermManager(session, logger)
    term = terms.save(terms.create({"name": "Dessert", "vid": "tags"}))
    found = terms.load_by_properties(uuid=[term.uuid])
    terms.delete(found)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC
from typing import (
    Any,
    Dict,
    Iterable,
    List,
    Optional,
    Protocol,
    Tuple,
    Type,
    TypeVar,
    Union,
    runtime_checkable,
)

# --- Third party imports ---
from sqlalchemy.orm import Mapped, Session

# --- Local imports ---
from umami_content.core.exceptions import DatabaseError, ValidationError
from umami_content.core.logging_manager import ContentLogger, safe_logger
from umami_content.core.validators import DataValidator
from ..decorators import handle_db_errors, log_database_operation


class HasId(Protocol):
    """Protocol for objects that have an id attribute."""

    id: Mapped[int]


T = TypeVar("T", bound=HasId)


@runtime_checkable
class EntityStorage(Protocol):
    """
    Storage interface for one record type.

    The seeder only talks to records through this interface, so a different
    backend can be substituted without touching seeding logic.
    """

    entity_type_id: str

    def create(self, values: Dict[str, Any]) -> Any:
        """Build an unsaved record from field values."""
        ...

    def save(self, entity: Any) -> Any:
        """Persist a record; its id and uuid are set afterwards."""
        ...

    def load_by_properties(self, **properties: Any) -> List[Any]:
        """Load records matching all properties (list values mean IN)."""
        ...

    def delete(self, entities: Iterable[Any]) -> int:
        """Delete records, returning how many were deleted."""
        ...


class BaseManager(ABC):
    """
    Abstract base manager implementing EntityStorage for a model class.

    Attributes:
        session: SQLAlchemy session for database operations
        logger: Optional logger for operation tracking
        model_class: ORM model handled by the manager (set by subclasses)
        entity_type_id: Ledger tag of the record type (set by subclasses)
    """

    model_class: Type[Any]
    entity_type_id: str

    def __init__(self, session: Session, logger: Optional[ContentLogger] = None):
        """
        Initialize the base manager.

        Args:
            session: SQLAlchemy session
            logger: Optional logger for operation tracking
        """
        self.session = session
        self.logger = logger

    # -------------------------------------------------------------------------
    # Entity Storage Operations
    # -------------------------------------------------------------------------

    def create(self, values: Dict[str, Any]) -> Any:
        """
        Build an unsaved record of the manager's model class.

        Args:
            values: Field values keyed by attribute name

        Returns:
            New, transient ORM instance

        Raises:
            ValidationError: If a key is not an attribute of the model
        """
        unknown = [key for key in values if not hasattr(self.model_class, key)]
        if unknown:
            raise ValidationError(
                f"Unknown {self.model_class.__name__} fields: {sorted(unknown)}"
            )
        return self.model_class(**values)

    @handle_db_errors
    @log_database_operation("save_entity")
    def save(self, entity: Any) -> Any:
        """
        Persist a record and flush so its id and uuid are available.

        Args:
            entity: ORM instance

        Returns:
            The same instance, now persistent

        Raises:
            DatabaseError: If the insert or update fails
        """
        self.session.add(entity)
        self.session.flush()
        safe_logger(self.logger).log_debug(
            f"Saved {self.entity_type_id}",
            {"id": entity.id, "uuid": getattr(entity, "uuid", None)},
        )
        return entity

    @handle_db_errors
    def load_by_properties(self, **properties: Any) -> List[Any]:
        """
        Load records whose attributes match all given properties.

        List, tuple and set values match any of their items.

        Args:
            **properties: attribute=value filters

        Returns:
            Matching records ordered by id

        Raises:
            DatabaseError: If a property is not a column of the model
        """
        query = self.session.query(self.model_class)
        for name, value in properties.items():
            column = getattr(self.model_class, name, None)
            if column is None:
                raise DatabaseError(
                    f"{self.model_class.__name__} has no property '{name}'"
                )
            if isinstance(value, (list, tuple, set, frozenset)):
                if not value:
                    return []
                query = query.filter(column.in_(list(value)))
            else:
                query = query.filter(column == value)
        return query.order_by(self.model_class.id).all()

    @handle_db_errors
    @log_database_operation("delete_entities")
    def delete(self, entities: Iterable[Any]) -> int:
        """
        Delete records.

        Args:
            entities: ORM instances to delete

        Returns:
            Number of deleted records
        """
        count = 0
        for entity in entities:
            self.session.delete(entity)
            count += 1
        self.session.flush()
        safe_logger(self.logger).log_debug(
            f"Deleted {self.entity_type_id} records", {"count": count}
        )
        return count

    # -------------------------------------------------------------------------
    # Core Helper Methods
    # -------------------------------------------------------------------------

    def _get_or_create(
        self,
        model_class: Type[T],
        lookup_fields: Dict[str, Any],
        extra_fields: Optional[Dict[str, Any]] = None,
    ) -> Tuple[T, bool]:
        """
        Get an existing record or create it if it doesn't exist.

        Args:
            model_class: ORM model class to query or create
            lookup_fields: Dictionary of field_name: value to filter/create
            extra_fields: Additional fields for new object creation only

        Returns:
            Tuple of (ORM instance, whether it was created)

        Notes:
            - The new object is added to the session and flushed immediately
        """
        obj = self.session.query(model_class).filter_by(**lookup_fields).first()
        if obj:
            return obj, False

        fields = lookup_fields.copy()
        if extra_fields:
            fields.update(extra_fields)

        obj = model_class(**fields)
        self.session.add(obj)
        self.session.flush()
        return obj, True

    def _resolve_object(self, item: Union[T, int], model_class: Type[T]) -> T:
        """
        Resolve an item to an ORM object.

        Handles both ORM instances and integer IDs.

        Args:
            item: Object instance or ID
            model_class: Target model class

        Returns:
            Resolved ORM object

        Raises:
            ValueError: If object not found or not persisted
            TypeError: If item type is invalid
        """
        if isinstance(item, model_class):
            if item.id is None:
                raise ValueError(f"{model_class.__name__} instance must be persisted")
            return item
        elif isinstance(item, int):
            obj = self.session.get(model_class, item)
            if obj is None:
                raise ValueError(f"No {model_class.__name__} found with id: {item}")
            return obj
        else:
            raise TypeError(
                f"Expected {model_class.__name__} instance or int, got {type(item)}"
            )

    def _get_by_field(
        self,
        model_class: Type[T],
        field_name: str,
        value: Any,
        normalize: bool = True,
    ) -> Optional[T]:
        """
        Get the first record (by id) with a specific field value.

        Args:
            model_class: ORM model class
            field_name: Field name to filter by
            value: Value to look up
            normalize: Whether to normalize string values

        Returns:
            Entity if found, None otherwise
        """
        if value is None:
            return None

        if normalize and isinstance(value, str):
            value = DataValidator.normalize_string(value)
            if not value:
                return None

        return (
            self.session.query(model_class)
            .filter_by(**{field_name: value})
            .order_by(model_class.id)
            .first()
        )

    # -------------------------------------------------------------------------
    # Generic Read Helpers
    # -------------------------------------------------------------------------

    def get_by_id(self, entity_id: int) -> Optional[Any]:
        """Get a record by primary key."""
        return self.session.get(self.model_class, entity_id)

    def get_by_uuid(self, uuid: str) -> Optional[Any]:
        """Get a record by uuid."""
        return self._get_by_field(self.model_class, "uuid", uuid)

    def count(self, **filters: Any) -> int:
        """
        Count records with optional filtering.

        Args:
            **filters: Additional filter conditions

        Returns:
            Count of matching records
        """
        query = self.session.query(self.model_class)
        if filters:
            query = query.filter_by(**filters)
        return query.count()
