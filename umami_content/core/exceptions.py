#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Umami demo content seeder.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in the storage layer and the seeding
pipeline.

Exception Hierarchy:
    Exception (built-in)
    ├── DatabaseError - Base for all storage-related errors
    ├── ValidationError - Data and configuration validation failures
    └── SeedError - Base for seeding pipeline failures
        ├── DataFileError - Seed data file cannot be decoded
        ├── RowMappingError - CSV row does not match its header
        ├── MissingReferenceError - Referenced content does not exist
        ├── ContentAlreadyImportedError - Ledger already holds entries
        └── TeardownError - One or more ledger groups failed to delete

Usage:
    from umami_content.core.exceptions import DatabaseError, SeedError

    try:
        seeder.import_content()
    except SeedError as e:
        logger.log_error(e)
    except DatabaseError as e:
        logger.log_error(e)
"""
from typing import Any, Dict, Optional


class DatabaseError(Exception):
    """
    Base exception for storage-related errors.

    Raised when database operations fail due to connection issues,
    query errors, integrity violations, or other database problems.
    SQLAlchemy errors raised inside managers are converted to this type.

    Examples:
        >>> raise DatabaseError("Data integrity violation: UNIQUE constraint failed")
        >>> raise DatabaseError("Unknown entity type: 'comment'")
    """

    pass


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Missing required fields (e.g. a CSV row without a title)
    - Unknown or malformed configuration values
    - Values that cannot be normalized

    Examples:
        >>> raise ValidationError("Required field 'title' missing or empty")
        >>> raise ValidationError("Unknown config keys: ['colour']")
    """

    pass


class SeedError(Exception):
    """
    Base exception for seeding pipeline failures.

    Catch this to handle any failure raised by the seeder itself (as
    opposed to storage failures, which surface as DatabaseError).
    """

    pass


class DataFileError(SeedError):
    """
    Exception for seed data files that cannot be read as text.

    Raised for CSV files and body fragments that are not valid UTF-8.

    Attributes:
        path: Path of the unreadable file
    """

    def __init__(self, path: Any, reason: str) -> None:
        self.path = path
        super().__init__(f"{path}: {reason}")


class RowMappingError(SeedError):
    """
    Exception for CSV rows that cannot be mapped onto the header.

    Raised when a row has a different number of columns than the header
    row of its file.

    Attributes:
        source: Name of the CSV file
        line: Line number of the offending row

    Examples:
        >>> raise RowMappingError("articles.csv", 4, "expected 8 columns, got 7")
    """

    def __init__(self, source: str, line: int, message: str) -> None:
        self.source = source
        self.line = line
        super().__init__(f"{source}, line {line}: {message}")


class MissingReferenceError(SeedError):
    """
    Exception for references to content that does not exist.

    Raised while importing block content when the node a link points to
    cannot be found by title. This usually means the block content step
    ran before the articles and pages it links to were imported.

    Attributes:
        title: Title that was looked up
    """

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"No content found with title: '{title}'")


class ContentAlreadyImportedError(SeedError):
    """
    Exception for importing on top of an existing import.

    Raised when the ledger already records created content. Delete the
    imported content first.
    """

    pass


class TeardownError(SeedError):
    """
    Exception for partially failed deletion of imported content.

    Raised after every ledger group has been attempted, when at least one
    group could not be deleted. Entries of the failed groups remain in the
    ledger so the deletion can be retried.

    Attributes:
        failures: Mapping of entity type to the error raised for it
        stats: Statistics of the attempted deletion, if available
    """

    def __init__(
        self, failures: Dict[str, Exception], stats: Optional[Any] = None
    ) -> None:
        self.failures = failures
        self.stats = stats
        details = "; ".join(f"{etype}: {err}" for etype, err in failures.items())
        super().__init__(f"Failed to delete {len(failures)} group(s): {details}")
