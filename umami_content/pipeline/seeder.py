#!/usr/bin/env python3
"""
seeder.py
-------------------
Import and tear down the Umami demo content.

The seeder creates editors, articles, press releases, pages and block
content from the bundled seed data, and records the uuid and entity type of
everything it creates in a provenance ledger. Deleting the imported content
reads the ledger back and removes exactly those records.

Pipeline:
    1. editors          fixed editor accounts
    2. articles         articles.csv (tags, author, image)
    3. press_releases   press-releases.csv
    4. pages            pages.csv
    5. block_content    banner, disclaimer and footer promo

Each step runs in its own transaction. A failing step is rolled back and
halts the pipeline; earlier steps stay committed. Created records are counted
in the stats once their step commits.

Usage:
    from umami_content.pipeline.seeder import ContentSeeder

    seeder = ContentSeeder(db, SeederConfig(), logger)
    stats = seeder.import_content()
    print(stats.summary())

    teardown = seeder.delete_imported_content()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections import Counter
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

# --- Local imports ---
from umami_content.core.cli_stats import ImportStats, TeardownStats
from umami_content.core.exceptions import (
    ContentAlreadyImportedError,
    DatabaseError,
    DataFileError,
    MissingReferenceError,
    RowMappingError,
    TeardownError,
    ValidationError,
)
from umami_content.core.logging_manager import ContentLogger, safe_logger
from umami_content.core.validators import DataValidator
from umami_content.database.ledger import ContentLedger
from umami_content.database.manager import ContentDB
from umami_content.database.models import EntityType, Node, UserRole
from umami_content.utils.fs import combine_row, load_csv, read_text_asset

from .configs.content_configs import (
    ARTICLES,
    BLOCK_CONTENT,
    EDITORS,
    IMAGES_DIR,
    PAGES,
    PRESS_RELEASES,
    TAGS_VOCABULARY,
    BlockContentDefinition,
    ContentImportConfig,
)
from .configs.seeder_config import SeederConfig

CSV_COLUMNS = ("title", "body", "slug", "tags", "author", "image", "alt", "state")


def derive_email(name: str, domain: str = "example.com") -> str:
    """
    Derive a user's e-mail address from the display name.

    Examples:
        >>> derive_email("Margaret Hopper")
        'margaret.hopper@example.com'
    """
    return f"{name.replace(' ', '.').lower()}@{domain}"


class ContentSeeder:
    """
    Seeds the demo content and removes it again.

    Attributes:
        db: Content store
        config: Seeder settings
        logger: Optional logger
        stats: Statistics of the current (or last) import run
    """

    def __init__(
        self,
        db: ContentDB,
        config: Optional[SeederConfig] = None,
        logger: Optional[ContentLogger] = None,
    ):
        """
        Initialize the seeder.

        Args:
            db: Content store to seed
            config: Seeder settings (defaults apply when omitted)
            logger: Optional logger for operation tracking
        """
        self.db = db
        self.config = config or SeederConfig()
        self.logger = logger
        self.stats = ImportStats()
        self._pending: Optional[Counter] = None

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    @property
    def ledger(self) -> ContentLedger:
        """
        Ledger bound to the active session.

        Raises:
            DatabaseError: If no session is active
        """
        return ContentLedger(self.db.state, self.config.ledger_key, self.logger)

    @property
    def steps(self) -> List[Tuple[str, Callable[[], int]]]:
        """Import steps in execution order."""
        return [
            ("editors", self.import_editors),
            ("articles", self.import_articles),
            ("press_releases", self.import_press_releases),
            ("pages", self.import_pages),
            ("block_content", self.import_block_content),
        ]

    def import_content(self) -> ImportStats:
        """
        Run every import step in order.

        Returns:
            ImportStats of the run

        Raises:
            ContentAlreadyImportedError: If the ledger already holds entries
            SeedError: If a step fails on seed data
            DatabaseError: If a step fails in the content store
        """
        log = safe_logger(self.logger)
        self.stats = ImportStats()

        with self.db.session_scope():
            recorded = len(self.ledger)
        if recorded:
            raise ContentAlreadyImportedError(
                f"Ledger '{self.config.ledger_key}' already records {recorded} "
                "entities; delete the imported content first"
            )

        log.bind(ledger_key=self.config.ledger_key)
        log.log_operation(
            "import_content_start", {"content_dir": str(self.config.content_dir)}
        )
        for name, step in self.steps:
            with log.step(name):
                log.log_info("Step started")
                try:
                    created = step()
                except Exception as e:
                    self.stats.errors += 1
                    log.log_error(e, {"operation": "import_content"})
                    raise
                log.log_debug("Step finished", {"created": created})

        log.log_operation("import_content_complete", self.stats.to_dict())
        return self.stats

    # -------------------------------------------------------------------------
    # Import Steps
    # -------------------------------------------------------------------------

    def import_editors(self) -> int:
        """
        Create the fixed editor accounts.

        Existing users with the same names are reused and not ledgered.

        Returns:
            Number of created users
        """
        created = 0
        with self._step_scope():
            for name in EDITORS:
                user, is_new = self.db.users.get_or_create(
                    name,
                    {
                        "mail": derive_email(name, self.config.email_domain),
                        "status": True,
                        "role": UserRole.EDITOR.value,
                    },
                )
                if is_new:
                    self.ledger.add(user.uuid, EntityType.USER.value)
                    self._count_created(EntityType.USER.value)
                    created += 1
        return created

    def import_articles(self) -> int:
        """Import articles.csv. Returns the number of created articles."""
        return self._import_content_file(ARTICLES)

    def import_press_releases(self) -> int:
        """Import press-releases.csv. Returns the number of created press releases."""
        return self._import_content_file(PRESS_RELEASES)

    def import_pages(self) -> int:
        """Import pages.csv. Returns the number of created pages."""
        return self._import_content_file(PAGES)

    def import_block_content(self) -> int:
        """
        Create the fixed block content instances.

        Links point at existing content records looked up by exact title,
        so the articles and pages must be imported first.

        Returns:
            Number of created block content instances

        Raises:
            MissingReferenceError: If a link target does not exist
        """
        created: Dict[str, str] = {}
        with self._step_scope():
            for definition in BLOCK_CONTENT:
                block = self.db.blocks.save(
                    self.db.blocks.create(self._block_values(definition))
                )
                created[block.uuid] = EntityType.BLOCK_CONTENT.value
                safe_logger(self.logger).log_debug(
                    f"Created block content: {definition.machine_name}",
                    {"uuid": block.uuid},
                )
            self.ledger.record(created)
            self._count_created(EntityType.BLOCK_CONTENT.value, len(created))
        return len(created)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_user(self, name: str) -> int:
        """
        Get a user id by name, creating an author account if needed.

        Must be called inside db.session_scope().

        Args:
            name: Display name

        Returns:
            User id
        """
        user, is_new = self.db.users.get_or_create(
            name,
            {
                "mail": derive_email(name.strip(), self.config.email_domain),
                "status": True,
                "role": UserRole.AUTHOR.value,
            },
        )
        if is_new:
            self.ledger.add(user.uuid, EntityType.USER.value)
            self._count_created(EntityType.USER.value)
        return user.id

    def get_term(self, name: str, vocabulary: str = TAGS_VOCABULARY) -> int:
        """
        Get a term id by name within a vocabulary, creating it if needed.

        Must be called inside db.session_scope().

        Args:
            name: Term name (surrounding whitespace is trimmed)
            vocabulary: Vocabulary id

        Returns:
            Term id
        """
        term, is_new = self.db.terms.get_or_create(name.strip(), vocabulary)
        if is_new:
            self.ledger.add(term.uuid, EntityType.TAXONOMY_TERM.value)
            self._count_created(EntityType.TAXONOMY_TERM.value)
        return term.id

    def create_file_entity(self, path: Union[str, Path]) -> Optional[int]:
        """
        Copy a file into managed storage and record it.

        Must be called inside db.session_scope().

        Args:
            path: Source file

        Returns:
            File id, or None if the source file does not exist
        """
        path = Path(path)
        if not path.is_file():
            safe_logger(self.logger).log_warning(
                "Asset file not found", {"path": str(path)}
            )
            self.stats.assets_missing += 1
            return None

        record, is_new = self.db.files.copy_to_managed(path)
        if is_new:
            self.ledger.add(record.uuid, EntityType.FILE.value)
            self._count_created(EntityType.FILE.value)
        return record.id

    # -------------------------------------------------------------------------
    # Teardown
    # -------------------------------------------------------------------------

    def delete_imported_content(self) -> TeardownStats:
        """
        Delete every record listed in the ledger.

        Groups are deleted in dependency order, each in its own transaction.
        Deleted groups are removed from the ledger; a failing group is
        logged, kept in the ledger and the remaining groups are still
        attempted.

        Returns:
            TeardownStats

        Raises:
            TeardownError: If any group could not be deleted
        """
        log = safe_logger(self.logger)
        stats = TeardownStats()
        log.bind(ledger_key=self.config.ledger_key)

        with self.db.session_scope():
            groups = self.ledger.by_entity_type()

        order = [t for t in EntityType.deletion_order() if t in groups]
        order += [t for t in groups if t not in order]

        log.log_operation(
            "delete_imported_content_start",
            {t: len(groups[t]) for t in order},
        )

        failures: Dict[str, Exception] = {}
        for entity_type in order:
            uuids = groups[entity_type]
            with log.step(f"delete/{entity_type}"):
                try:
                    with self.db.session_scope():
                        storage = self.db.get_storage(entity_type)
                        entities = storage.load_by_properties(uuid=uuids)
                        deleted = storage.delete(entities)
                        self.ledger.forget(uuids)
                except (DatabaseError, OSError) as e:
                    log.log_error(e, {"operation": "delete_imported_content"})
                    failures[entity_type] = e
                    stats.failed_groups.append(entity_type)
                    stats.errors += 1
                    continue

                stats.deleted[entity_type] = deleted
                if deleted < len(uuids):
                    log.log_warning(f"{len(uuids) - deleted} records were already gone")

        log.log_operation("delete_imported_content_complete", stats.to_dict())
        if failures:
            raise TeardownError(failures, stats)
        return stats

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @contextmanager
    def _step_scope(self) -> Iterator[Counter]:
        """
        Transaction of one import step.

        Records created inside the step are added to the stats only after
        the step commits.
        """
        self._pending = Counter()
        try:
            with self.db.session_scope():
                yield self._pending
            committed = self._pending
        finally:
            self._pending = None
        for entity_type, count in committed.items():
            self.stats.record_created(entity_type, count)

    def _count_created(self, entity_type: str, count: int = 1) -> None:
        if self._pending is None:
            self.stats.record_created(entity_type, count)
        else:
            self._pending[entity_type] += count

    def _read_body(self, path: Path) -> Optional[str]:
        """Read a body fragment; missing or undecodable files count as missing assets."""
        try:
            body = read_text_asset(path)
        except DataFileError as e:
            safe_logger(self.logger).log_warning(
                "Body file unreadable", {"path": str(path), "error": str(e)}
            )
            self.stats.assets_missing += 1
            return None
        if body is None:
            safe_logger(self.logger).log_warning(
                "Body file not found", {"path": str(path)}
            )
            self.stats.assets_missing += 1
        return body

    def _import_content_file(self, config: ContentImportConfig) -> int:
        """
        Create content records from one CSV file.

        Args:
            config: Import step configuration

        Returns:
            Number of created content records

        Raises:
            RowMappingError: Malformed row (unless rows are skipped)
            ValidationError: Row without title (unless rows are skipped)
        """
        log = safe_logger(self.logger)
        path = self.config.content_dir / config.csv_file
        if not path.is_file():
            log.log_warning(
                f"Data file not found, skipping {config.name}", {"path": str(path)}
            )
            self.stats.files_missing += 1
            return 0

        try:
            header, rows = load_csv(path)
        except DataFileError as e:
            log.log_warning(
                f"Data file unreadable, skipping {config.name}", {"error": str(e)}
            )
            self.stats.files_missing += 1
            return 0

        created: Dict[str, str] = {}
        with self._step_scope():
            for line, row in rows:
                try:
                    values = self._read_row(config, header, row, line)
                except (RowMappingError, ValidationError) as e:
                    if not self.config.skip_bad_rows:
                        raise
                    log.log_warning(
                        f"Skipping row {line} of {config.csv_file}", {"error": str(e)}
                    )
                    self.stats.rows_skipped += 1
                    self.stats.errors += 1
                    continue

                node = self.db.nodes.save(self._build_node(config, values))
                created[node.uuid] = EntityType.NODE.value

            self.ledger.record(created)
            self._count_created(EntityType.NODE.value, len(created))

        self.stats.rows_processed += len(created)
        self.stats.files_processed += 1
        log.log_info(
            f"Imported {config.csv_file}",
            {"created": len(created), "bundle": config.bundle},
        )
        return len(created)

    def _read_row(
        self,
        config: ContentImportConfig,
        header: List[str],
        row: List[str],
        line: int,
    ) -> Dict[str, Optional[str]]:
        """
        Map and normalize a CSV row without touching the content store.

        Returns:
            Normalized values of the known columns (None when empty)

        Raises:
            RowMappingError: If the row does not match the header
            ValidationError: If the title is missing
        """
        data = combine_row(header, row, line, config.csv_file)
        values = {
            column: DataValidator.normalize_string(data.get(column))
            for column in CSV_COLUMNS
        }
        try:
            DataValidator.validate_required_fields(values, ["title"])
        except ValidationError as e:
            raise ValidationError(f"{config.csv_file}, line {line}: {e}") from e
        return values

    def _build_node(
        self, config: ContentImportConfig, values: Dict[str, Optional[str]]
    ) -> Node:
        """Build an unsaved content record, resolving users, terms and files."""
        node_values = {
            "type": config.bundle,
            "title": values["title"],
            "moderation_state": values["state"] or self.config.default_state,
        }

        if values["body"]:
            body = self._read_body(
                self.config.content_dir / config.body_dir / values["body"]
            )
            if body is not None:
                node_values["body_value"] = body
                node_values["body_format"] = self.config.body_format

        if values["slug"]:
            node_values["path_alias"] = "/" + values["slug"].lstrip("/")

        if config.supports_tags and values["tags"]:
            node_values["tags"] = [
                self.get_term(name, TAGS_VOCABULARY)
                for name in DataValidator.split_list(values["tags"])
            ]

        if values["author"]:
            node_values["uid"] = self.get_user(values["author"])

        if config.supports_image and values["image"]:
            file_id = self.create_file_entity(
                self.config.content_dir / IMAGES_DIR / values["image"]
            )
            if file_id is not None:
                node_values["image_id"] = file_id
                node_values["image_alt"] = values["alt"]

        return self.db.nodes.create(node_values)

    def _block_values(self, definition: BlockContentDefinition) -> Dict[str, object]:
        """
        Field values of a block content instance.

        Raises:
            MissingReferenceError: If the link target does not exist
        """
        values: Dict[str, object] = {
            "uuid": definition.uuid,
            "info": definition.info,
            "type": definition.type,
        }

        if definition.link is not None:
            node = self.db.nodes.get_by_title(definition.link.target_title)
            if node is None:
                raise MissingReferenceError(definition.link.target_title)
            alias = self.db.aliases.get_alias_by_path(node.internal_path)
            values["link_uri"] = f"internal:{alias}"
            values["link_title"] = definition.link.title

        if definition.field_title is not None:
            values["field_title"] = definition.field_title
        if definition.summary is not None:
            values["summary"] = definition.summary

        if definition.image is not None:
            file_id = self.create_file_entity(
                self.config.content_dir / IMAGES_DIR / definition.image.filename
            )
            if file_id is not None:
                values["image_id"] = file_id
                values["image_alt"] = definition.image.alt

        if definition.disclaimer is not None:
            values["disclaimer_value"] = definition.disclaimer
            values["disclaimer_format"] = self.config.body_format
        if definition.copyright is not None:
            values["copyright_value"] = definition.copyright
            values["copyright_format"] = self.config.body_format

        return values
