#!/usr/bin/env python3
"""
slugify.py
----------
Identifier sanitization for URL aliases.

Converts human-readable names into lowercase CSS-class style identifiers,
used to build taxonomy term aliases such as '/tags/chocolate-cake'.

Key Features:
    - Lowercase transformation
    - Space, underscore, slash and '[' become hyphens; ']' is dropped
    - Double underscores are preserved
    - Characters outside the identifier range are stripped
    - Leading digits and leading '--' / '-<digit>' are escaped

Usage:
    from umami_content.utils.slugify import css_class

    css_class("Chocolate Cake")  # "chocolate-cake"
    css_class("tags")            # "tags"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Dict, Optional

DEFAULT_FILTER: Dict[str, str] = {
    " ": "-",
    "_": "-",
    "/": "-",
    "[": "-",
    "]": "",
}

_INVALID_CHARS = re.compile(r"[^-0-9A-Z_a-z\u00a1-\uffff]")
_LEADING_DIGIT = re.compile(r"^[0-9]")
_LEADING_HYPHENS = re.compile(r"^(-[0-9])|^(--)")


def clean_css_identifier(identifier: str, filter: Optional[Dict[str, str]] = None) -> str:
    """
    Strip an identifier down to the characters valid in a CSS class.

    Args:
        identifier: Raw identifier
        filter: Substring replacements applied before stripping

    Returns:
        Sanitized identifier

    Examples:
        >>> clean_css_identifier("my_class name")
        'my-class-name'
        >>> clean_css_identifier("block__element")
        'block__element'
        >>> clean_css_identifier("3d")
        '_d'
    """
    replacements = DEFAULT_FILTER if filter is None else filter

    # Keep '__' intact unless it is explicitly filtered
    has_double_underscore = False
    if "__" not in replacements and "__" in identifier:
        identifier = identifier.replace("__", "##")
        has_double_underscore = True

    for search, replace in replacements.items():
        identifier = identifier.replace(search, replace)

    if has_double_underscore:
        identifier = identifier.replace("##", "__")

    identifier = _INVALID_CHARS.sub("", identifier)

    # Identifiers cannot start with a digit, two hyphens, or a hyphen + digit
    identifier = _LEADING_DIGIT.sub("_", identifier)
    identifier = _LEADING_HYPHENS.sub("__", identifier)
    return identifier


def css_class(text: str) -> str:
    """
    Convert text to a lowercase CSS class style identifier.

    Args:
        text: Input text

    Returns:
        Sanitized lowercase identifier

    Examples:
        >>> css_class("Chocolate Cake")
        'chocolate-cake'
        >>> css_class("Dessert")
        'dessert'
        >>> css_class("Mains/Sides")
        'mains-sides'
    """
    if not text:
        return ""
    return clean_css_identifier(text.lower())
