#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for reading bundled seed data.

Functions:
    load_csv: Read a CSV file into its header and numbered rows
    combine_row: Map a row onto the header
    read_text_asset: Read a UTF-8 text asset if it exists

Usage:
    from umami_content.utils.fs import load_csv, combine_row

    header, rows = load_csv(Path("default_content/articles.csv"))
    for line, row in rows:
        values = combine_row(header, row, line, "articles.csv")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import csv
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# --- Local imports ---
from umami_content.core.exceptions import DataFileError, RowMappingError


def load_csv(path: Path) -> Tuple[List[str], List[Tuple[int, List[str]]]]:
    """
    Read a comma-separated file with a header row.

    Blank lines are ignored. Header names are stripped of whitespace and a
    leading byte order mark is dropped.

    Args:
        path: CSV file path

    Returns:
        Tuple of (header, rows) where each row is (line number, cells)

    Raises:
        FileNotFoundError: If the file does not exist
        DataFileError: If the file is not valid UTF-8
    """
    header: List[str] = []
    rows: List[Tuple[int, List[str]]] = []
    with open(path, newline="", encoding="utf-8-sig") as handle:
        reader = csv.reader(handle)
        try:
            for cells in reader:
                if not cells or all(not cell.strip() for cell in cells):
                    continue
                if not header:
                    header = [cell.strip() for cell in cells]
                    continue
                rows.append((reader.line_num, cells))
        except UnicodeDecodeError as e:
            raise DataFileError(path, f"not valid UTF-8 ({e.reason})") from e
    return header, rows


def combine_row(
    header: List[str], row: List[str], line: int, source: str
) -> Dict[str, str]:
    """
    Map a CSV row onto the header.

    Args:
        header: Column names
        row: Cell values
        line: Line number of the row, for error messages
        source: File name, for error messages

    Returns:
        Dictionary of column name to cell value

    Raises:
        RowMappingError: If the row and header have different lengths
    """
    if len(row) != len(header):
        raise RowMappingError(
            source, line, f"expected {len(header)} columns, got {len(row)}"
        )
    return dict(zip(header, row))


def read_text_asset(path: Path) -> Optional[str]:
    """
    Read a UTF-8 text file.

    Args:
        path: File path

    Returns:
        File contents, or None if the file does not exist

    Raises:
        DataFileError: If the file is not valid UTF-8
    """
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DataFileError(path, f"not valid UTF-8 ({e.reason})") from e
