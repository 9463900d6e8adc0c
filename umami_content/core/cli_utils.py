#!/usr/bin/env python3
"""
cli_utils.py
-------------------
Shared helpers for the seeder commands.

Functions:
    setup_logger: ContentLogger for a command run
    echo_counts: Per entity type counts as bullet lines
    echo_import_warnings: Skipped rows and missing files of an import

Usage:
    from umami_content.core.cli_utils import echo_counts, setup_logger

    logger = setup_logger(log_dir, "seeder", verbose=True)
    echo_counts(stats.created, "created")
"""
import logging
from pathlib import Path
from typing import Dict

import click

from umami_content.core.cli_stats import ImportStats
from umami_content.core.logging_manager import ContentLogger


def setup_logger(log_dir: Path, component_name: str, verbose: bool = False) -> ContentLogger:
    """
    Create the logger of a command run under <log_dir>/operations.

    With verbose, progress records (INFO) are echoed to the console as
    well as warnings.
    """
    return ContentLogger(
        Path(log_dir) / "operations",
        component_name=component_name,
        console_level=logging.INFO if verbose else logging.WARNING,
    )


def echo_counts(counts: Dict[str, int], verb: str = "") -> None:
    """Print one bullet per entity type, in the order given."""
    suffix = f" {verb}" if verb else ""
    for entity_type, count in counts.items():
        click.echo(f"  • {entity_type}: {count}{suffix}")


def echo_import_warnings(stats: ImportStats) -> None:
    if stats.rows_skipped:
        click.echo(f"  ⚠️  {stats.rows_skipped} rows skipped")
    if stats.assets_missing:
        click.echo(f"  ⚠️  {stats.assets_missing} referenced files missing or unreadable")
    if stats.files_missing:
        click.echo(f"  ⚠️  {stats.files_missing} data files missing or unreadable")
