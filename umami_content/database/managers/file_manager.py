#!/usr/bin/env python3
"""
file_manager.py
--------------------
Manager for managed files.

Physical files are copied into the managed files directory, which backs the
'public://' URI scheme. A file with the same name is replaced. Deleting a
file record also removes its physical copy. Copies made into a previously
empty destination are remembered until the session ends, so a rolled back
transaction can discard them.

Usage:
    files = FileManager(session, files_dir, logger)
    record, created = files.copy_to_managed(Path("images/banner.jpg"))
    files.realpath(record.uri)   # <files_dir>/banner.jpg
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import mimetypes
import shutil
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

# --- Third party imports ---
from sqlalchemy.orm import Session

# --- Local imports ---
from umami_content.core.exceptions import DatabaseError
from umami_content.core.logging_manager import ContentLogger, safe_logger
from ..decorators import handle_db_errors, log_database_operation
from ..models import EntityType, ManagedFile
from .base_manager import BaseManager

PUBLIC_SCHEME = "public://"


class FileManager(BaseManager):
    """
    Storage for ManagedFile records and their physical copies.

    Attributes:
        files_dir: Directory backing the public:// scheme
        new_copies: Destinations created by copy_to_managed in this session
    """

    model_class = ManagedFile
    entity_type_id = EntityType.FILE.value

    def __init__(
        self,
        session: Session,
        files_dir: Union[str, Path],
        logger: Optional[ContentLogger] = None,
    ):
        super().__init__(session, logger)
        self.files_dir = Path(files_dir)
        self.new_copies: List[Path] = []

    def realpath(self, uri: str) -> Path:
        """
        Resolve a public:// URI to its path on disk.

        Raises:
            DatabaseError: If the URI does not use the public:// scheme
        """
        if not uri.startswith(PUBLIC_SCHEME):
            raise DatabaseError(f"Unsupported file URI: {uri}")
        return self.files_dir / uri[len(PUBLIC_SCHEME):]

    @handle_db_errors
    def get_by_uri(self, uri: str) -> Optional[ManagedFile]:
        return self.session.query(ManagedFile).filter_by(uri=uri).first()

    @handle_db_errors
    @log_database_operation("copy_to_managed")
    def copy_to_managed(self, source: Union[str, Path]) -> Tuple[ManagedFile, bool]:
        """
        Copy a file into managed storage and wrap it in a record.

        The destination keeps the source's base name and is overwritten if
        it already exists. An existing record for the same URI is reused
        and refreshed.

        Args:
            source: Path of the file to copy

        Returns:
            Tuple of (file record, whether the record was created)

        Raises:
            FileNotFoundError: If the source file does not exist
            DatabaseError: If the record cannot be saved
        """
        source = Path(source)
        if not source.is_file():
            raise FileNotFoundError(f"Source file not found: {source}")

        self.files_dir.mkdir(parents=True, exist_ok=True)
        destination = self.files_dir / source.name
        if not destination.exists():
            self.new_copies.append(destination)
        shutil.copyfile(source, destination)

        uri = f"{PUBLIC_SCHEME}{source.name}"
        filemime, _ = mimetypes.guess_type(source.name)
        filesize = destination.stat().st_size

        record = self.get_by_uri(uri)
        if record is not None:
            record.filesize = filesize
            record.filemime = filemime
            self.session.flush()
            safe_logger(self.logger).log_debug(
                f"Replaced managed file: {uri}", {"file_id": record.id}
            )
            return record, False

        record = self.save(
            self.create(
                {
                    "uri": uri,
                    "filename": source.name,
                    "filemime": filemime,
                    "filesize": filesize,
                    "status": True,
                }
            )
        )
        return record, True

    @handle_db_errors
    @log_database_operation("delete_files")
    def delete(self, entities: Iterable[ManagedFile]) -> int:
        """
        Delete file records and their physical copies.

        Args:
            entities: File records to delete

        Returns:
            Number of deleted records
        """
        records = list(entities)
        paths = [self.realpath(record.uri) for record in records]
        count = super().delete(records)
        for path in paths:
            path.unlink(missing_ok=True)
        return count

    def discard_new_copies(self) -> int:
        """
        Remove the files copy_to_managed created in this session.

        Called when the session's transaction is rolled back. Replaced
        files are not restored.

        Returns:
            Number of removed files
        """
        removed = 0
        for path in self.new_copies:
            if path.exists():
                path.unlink()
                removed += 1
        if removed:
            safe_logger(self.logger).log_debug(
                "Discarded managed file copies", {"count": removed}
            )
        self.new_copies = []
        return removed
