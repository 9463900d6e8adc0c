#!/usr/bin/env python3
"""
decorators.py
--------------------
Decorators for storage methods.

Both decorators wrap methods of the record managers and ContentDB. When the
instance has an ``entity_type_id`` (the managers behind EntityStorage), it
is added to log records and error messages, so a failure in a delete group
or import step names the storage it happened in.

- log_database_operation: debug record with duration and result size,
  error record on failure
- handle_db_errors: SQLAlchemy errors surface as DatabaseError
"""
from functools import wraps
from time import perf_counter
from typing import Any, Callable, Dict, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from umami_content.core.exceptions import DatabaseError


def _storage_name(owner: Any) -> Optional[str]:
    return getattr(owner, "entity_type_id", None)


def _result_size(result: Any) -> Optional[int]:
    """Records touched by a call: list length, count, or one for a (record, created) pair."""
    if isinstance(result, bool):
        return None
    if isinstance(result, int):
        return result
    if isinstance(result, (list, tuple, set)):
        return 1 if isinstance(result, tuple) and len(result) == 2 else len(result)
    return None


def log_database_operation(operation_name: str):
    """
    Log a storage method call through the instance's ``logger``.

    Successful calls are logged at debug level with their duration and,
    for lists, counts and (record, created) pairs, the number of records
    involved. Failures are logged as errors and re-raised.

    Args:
        operation_name: Name used in the log records
    """

    def decorator(function: Callable) -> Callable:
        @wraps(function)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, "logger", None)
            details: Dict[str, Any] = {}
            storage = _storage_name(self)
            if storage:
                details["entity_type"] = storage

            started = perf_counter()
            try:
                result = function(self, *args, **kwargs)
            except Exception as e:
                if logger:
                    details["duration_ms"] = round((perf_counter() - started) * 1000, 2)
                    logger.log_error(e, {"operation": operation_name, **details})
                raise

            if logger:
                details["duration_ms"] = round((perf_counter() - started) * 1000, 2)
                size = _result_size(result)
                if size is not None:
                    details["records"] = size
                logger.log_debug(operation_name, details)
            return result

        return wrapper

    return decorator


def handle_db_errors(function: Callable) -> Callable:
    """
    Convert SQLAlchemy errors into DatabaseError.

    On manager methods the message names the storage, e.g.
    "Data integrity violation in node storage: UNIQUE constraint failed".

    Raises:
        DatabaseError: For integrity violations and other SQLAlchemy failures
    """

    @wraps(function)
    def wrapper(*args, **kwargs):
        storage = _storage_name(args[0]) if args else None
        where = f" in {storage} storage" if storage else ""
        try:
            return function(*args, **kwargs)
        except IntegrityError as e:
            raise DatabaseError(f"Data integrity violation{where}: {e.orig}") from e
        except SQLAlchemyError as e:
            raise DatabaseError(f"Database operation failed{where}: {e}") from e

    return wrapper
