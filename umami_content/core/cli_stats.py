#!/usr/bin/env python3
"""
cli_stats.py
-------------------
Statistics tracking for seeding operations.

Provides base and specialized stats classes for tracking operation metrics
across the import and delete commands. All stats classes include timing and
basic metrics, with specialized subclasses for each operation type.

Classes:
    OperationStats: Base class for all statistics
    ImportStats: For import runs (editors, CSV steps, block content)
    TeardownStats: For deletion of imported content

Usage:
    from umami_content.core.cli_stats import ImportStats

    stats = ImportStats()
    stats.files_processed += 1
    stats.record_created("node")
    print(stats.summary())
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List


@dataclass
class OperationStats:
    """
    Base class for operation statistics.

    Tracks basic metrics common to all operations: files processed, errors,
    and elapsed time.

    Attributes:
        files_processed: Number of data files successfully processed
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)

    def duration(self) -> float:
        """
        Get elapsed time in seconds.

        Returns:
            Seconds elapsed since start_time
        """
        return (datetime.now() - self.start_time).total_seconds()

    def summary(self) -> str:
        """
        Get formatted summary string.

        Returns:
            Human-readable summary of operation statistics
        """
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON output.

        Returns:
            Dictionary with all metrics and computed duration
        """
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ImportStats(OperationStats):
    """
    Statistics for import runs.

    Attributes:
        rows_processed: CSV rows turned into content
        rows_skipped: CSV rows skipped under the 'skip' row error policy
        files_missing: Data files that could not be found or decoded (step skipped)
        assets_missing: Body fragments or images that could not be found or decoded
        created: Records created by committed steps, per entity type
    """
    rows_processed: int = 0
    rows_skipped: int = 0
    files_missing: int = 0
    assets_missing: int = 0
    created: Dict[str, int] = field(default_factory=dict)

    def record_created(self, entity_type: str, count: int = 1) -> None:
        """Count newly created records of an entity type."""
        self.created[entity_type] = self.created.get(entity_type, 0) + count

    @property
    def total_created(self) -> int:
        return sum(self.created.values())

    def summary(self) -> str:
        """Get formatted summary with import metrics."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.rows_processed} rows imported, "
            f"{self.rows_skipped} skipped, "
            f"{self.total_created} records created, "
            f"{self.assets_missing} missing assets, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with import metrics."""
        d = super().to_dict()
        d.update({
            "rows_processed": self.rows_processed,
            "rows_skipped": self.rows_skipped,
            "files_missing": self.files_missing,
            "assets_missing": self.assets_missing,
            "created": dict(self.created),
        })
        return d


@dataclass
class TeardownStats(OperationStats):
    """
    Statistics for deletion of imported content.

    Attributes:
        deleted: Number of deleted records per entity type
        failed_groups: Entity types whose deletion failed
    """
    deleted: Dict[str, int] = field(default_factory=dict)
    failed_groups: List[str] = field(default_factory=list)

    @property
    def total_deleted(self) -> int:
        return sum(self.deleted.values())

    def summary(self) -> str:
        """Get formatted summary with teardown metrics."""
        return (
            f"{self.total_deleted} records deleted, "
            f"{len(self.failed_groups)} groups failed, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with teardown metrics."""
        d = super().to_dict()
        d.update({
            "deleted": dict(self.deleted),
            "failed_groups": list(self.failed_groups),
        })
        return d
