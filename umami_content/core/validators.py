#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for seeder operations.

Provides type-safe conversion, validation, and normalization functions
used by the managers, the CSV import steps and configuration loading.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .exceptions import ValidationError


class DataValidator:
    """Centralized data validation for storage and import operations."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str]
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Args:
            data: Data dictionary to validate
            required_fields: List of required field names

        Raises:
            ValidationError: If validation fails
        """
        for field in required_fields:
            if field not in data or not data[field]:
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def validate_choice(value: Any, choices: Iterable[str], field: str) -> str:
        """
        Validate that a value is one of the allowed choices.

        Args:
            value: Value to check
            choices: Allowed values
            field: Field name used in the error message

        Returns:
            The value, as a string

        Raises:
            ValidationError: If the value is not allowed
        """
        allowed = list(choices)
        if value not in allowed:
            raise ValidationError(
                f"Invalid value for '{field}': {value!r} (expected one of {allowed})"
            )
        return str(value)

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize string value.

        Strips surrounding whitespace; empty results become None.

        Args:
            value: Value to normalize

        Returns:
            Normalized string or None
        """
        if value is None:
            return None
        normalized = str(value).strip()
        return normalized or None

    @staticmethod
    def split_list(value: Any, separator: str = ",") -> List[str]:
        """
        Split a delimited string into trimmed, non-empty items.

        Args:
            value: Delimited string (e.g. "Cake, Dessert")
            separator: Item separator

        Returns:
            List of items in their original order
        """
        if not value:
            return []
        return [item.strip() for item in str(value).split(separator) if item.strip()]
