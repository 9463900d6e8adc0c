#!/usr/bin/env python3
"""
manager.py
--------------------
Database manager for the Umami demo content store.

Provides the ContentDB class for interacting with the SQLite database.
Handles:
    - Initialization of the database engine and sessionmaker
    - Transactional session scopes with per-session managers
    - Access to the record type managers through EntityStorage
    - The provenance ledger and key-value state of the session
    - Migration management via Alembic

Key Features:
    - Transaction management with automatic rollback
    - Managers only available inside an active session
    - Comprehensive error handling and logging

Usage:
    db = ContentDB(DB_PATH, ALEMBIC_DIR, FILES_DIR, log_dir=LOG_DIR)
    with db.session_scope():
        user, created = db.users.get_or_create("Grace Hamilton")
        db.ledger.record({user.uuid: "user"})

Notes
==============
- Migrations are handled via Alembic; fresh databases are created from the
  ORM models and stamped to head
- Logs are rotated automatically to prevent disk bloat
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

# --- Third party ---
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import Session, sessionmaker

from alembic.config import Config
from alembic import command
from alembic.runtime.migration import MigrationContext

# --- Local imports ---
from umami_content.core.exceptions import DatabaseError
from umami_content.core.logging_manager import ContentLogger
from .decorators import handle_db_errors, log_database_operation
from .ledger import DEFAULT_LEDGER_KEY, ContentLedger
from .managers import (
    AliasManager,
    BlockContentManager,
    EntityStorage,
    FileManager,
    NodeManager,
    TermManager,
    UserManager,
)
from .models import Base, EntityType
from .state_manager import StateManager


# ----- Main Database Manager -----
class ContentDB:
    """
    Main database manager for the content store.

    Attributes:
        - db_path (Path): Filesystem path to the SQLite database file.
        - alembic_dir (Path): Filesystem path to the Alembic directory.
        - files_dir (Path): Directory backing the public:// file scheme.
        - ledger_key (str): State key holding the provenance ledger.
        - engine (Engine): SQLAlchemy engine instance.
        - SessionLocal (sessionmaker): SQLAlchemy session factory.

    Usage:
        db = ContentDB("data/umami_content.db", "data/alembic", "data/files")
        with db.session_scope() as session:
            nodes = db.nodes.get_all("article")
    """

    # ---- Initialization ----
    def __init__(
        self,
        db_path: Union[str, Path],
        alembic_dir: Union[str, Path],
        files_dir: Union[str, Path],
        log_dir: Optional[Union[str, Path]] = None,
        ledger_key: str = DEFAULT_LEDGER_KEY,
    ) -> None:
        """
        Initialize database engine and session factory.

        Args:
            db_path (str | Path): Path to the SQLite file.
            alembic_dir (str | Path): Path to the Alembic directory.
            files_dir (str | Path): Managed files directory.
            log_dir (str | Path): Directory for log files (optional)
            ledger_key (str): State key of the provenance ledger
        """
        self.db_path = Path(db_path).expanduser().resolve()
        self.alembic_dir = Path(alembic_dir).expanduser().resolve()
        self.files_dir = Path(files_dir).expanduser().resolve()
        self.ledger_key = ledger_key

        # --- Logging ---
        if log_dir:
            self.log_dir = Path(log_dir).expanduser().resolve() / "system"
            self.logger: Optional[ContentLogger] = ContentLogger(
                self.log_dir,
                component_name="database",
            )
            self.logger.bind(ledger_key=ledger_key)
        else:
            self.logger = None

        # Per-session managers (set in session_scope)
        self._users: Optional[UserManager] = None
        self._terms: Optional[TermManager] = None
        self._nodes: Optional[NodeManager] = None
        self._files: Optional[FileManager] = None
        self._blocks: Optional[BlockContentManager] = None
        self._aliases: Optional[AliasManager] = None
        self._state: Optional[StateManager] = None
        self._ledger: Optional[ContentLedger] = None

        self._setup_engine()

    def _setup_engine(self) -> None:
        """Initialize database engine and session factory."""
        try:
            if self.logger:
                self.logger.log_operation(
                    "database_init_start",
                    {
                        "db_path": str(self.db_path),
                        "alembic_dir": str(self.alembic_dir),
                    },
                )

            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            self.engine: Engine = create_engine(
                f"sqlite:///{self.db_path}",
                echo=False,
                future=True,
                pool_pre_ping=True,
            )

            self.SessionLocal: sessionmaker = sessionmaker(
                bind=self.engine,
                autoflush=True,
                expire_on_commit=False,
                future=True,
            )

            self.alembic_cfg: Config = self._setup_alembic()

            if not self.db_path.exists():
                self.initialize_schema()

            if self.logger:
                self.logger.log_operation("database_init_complete", {"success": True})

        except Exception as e:
            if self.logger:
                self.logger.log_error(e, {"operation": "database_init"})
            raise DatabaseError(f"Database initialization failed: {e}") from e

    # ---- Session Management ----
    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around operations with logging.

        Also initializes the managers, the state store and the ledger for
        use within the session. They are available via properties
        (db.users, db.nodes, db.ledger, etc.)

        Usage:
            with db.session_scope() as session:
                term, _ = db.terms.get_or_create("Dessert")
                db.ledger.record({term.uuid: "taxonomy_term"})

        Raises:
            DatabaseError: If a session is already active on this instance
        """
        if self._state is not None:
            raise DatabaseError("A session is already active on this database")

        session = self.SessionLocal()
        session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")

        self._users = UserManager(session, self.logger)
        self._terms = TermManager(session, self.logger)
        self._nodes = NodeManager(session, self.logger)
        self._files = FileManager(session, self.files_dir, self.logger)
        self._blocks = BlockContentManager(session, self.logger)
        self._aliases = AliasManager(session, self.logger)
        self._state = StateManager(session, self.logger)
        self._ledger = ContentLedger(self._state, self.ledger_key, self.logger)

        if self.logger:
            self.logger.log_debug("session_start", {"session_id": session_id})

        try:
            yield session
            session.commit()
            if self.logger:
                self.logger.log_debug("session_commit", {"session_id": session_id})

        except Exception as e:
            session.rollback()
            self._files.discard_new_copies()
            if self.logger:
                self.logger.log_error(
                    e, {"operation": "session_rollback", "session_id": session_id}
                )
            raise
        finally:
            self._users = None
            self._terms = None
            self._nodes = None
            self._files = None
            self._blocks = None
            self._aliases = None
            self._state = None
            self._ledger = None

            session.close()
            if self.logger:
                self.logger.log_debug("session_close", {"session_id": session_id})

    @property
    def in_session(self) -> bool:
        """Whether a session_scope is currently active."""
        return self._state is not None

    # -------------------------------------------------------------------------
    # Manager Properties
    # -------------------------------------------------------------------------

    @staticmethod
    def _require(manager, name: str):
        if manager is None:
            raise DatabaseError(
                f"{name} requires active session. "
                "Use within session_scope: "
                "with db.session_scope() as session: ..."
            )
        return manager

    @property
    def users(self) -> UserManager:
        """
        Access UserManager for user operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._users, "UserManager")

    @property
    def terms(self) -> TermManager:
        """
        Access TermManager for taxonomy term operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._terms, "TermManager")

    @property
    def nodes(self) -> NodeManager:
        """
        Access NodeManager for content record operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._nodes, "NodeManager")

    @property
    def files(self) -> FileManager:
        """
        Access FileManager for managed file operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._files, "FileManager")

    @property
    def blocks(self) -> BlockContentManager:
        """
        Access BlockContentManager for block content operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._blocks, "BlockContentManager")

    @property
    def aliases(self) -> AliasManager:
        """
        Access AliasManager for path alias resolution.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._aliases, "AliasManager")

    @property
    def state(self) -> StateManager:
        """
        Access the key-value state store.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._state, "StateManager")

    @property
    def ledger(self) -> ContentLedger:
        """
        Access the provenance ledger of seeded content.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return self._require(self._ledger, "ContentLedger")

    def storages(self) -> Dict[str, EntityStorage]:
        """
        Get the storage of every record type, keyed by entity type tag.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        return {
            EntityType.BLOCK_CONTENT.value: self.blocks,
            EntityType.NODE.value: self.nodes,
            EntityType.TAXONOMY_TERM.value: self.terms,
            EntityType.FILE.value: self.files,
            EntityType.USER.value: self.users,
        }

    def get_storage(self, entity_type: str) -> EntityStorage:
        """
        Get the storage of one record type.

        Args:
            entity_type: Entity type tag (e.g. 'node')

        Returns:
            Manager implementing EntityStorage

        Raises:
            DatabaseError: If the tag is unknown or no session is active
        """
        storages = self.storages()
        if entity_type not in storages:
            raise DatabaseError(f"Unknown entity type: '{entity_type}'")
        return storages[entity_type]

    # ---- Alembic setup ----
    def _setup_alembic(self) -> Config:
        """Setup Alembic configuration."""
        try:
            if self.logger:
                self.logger.log_debug("Setting up Alembic configuration...")

            alembic_cfg: Config = Config(str(self.alembic_dir.parent / "alembic.ini"))
            alembic_cfg.set_main_option("script_location", str(self.alembic_dir))
            alembic_cfg.set_main_option("sqlalchemy.url", f"sqlite:///{self.db_path}")
            alembic_cfg.set_main_option(
                "file_template",
                "%%(year)d%%(month).2d%%(day).2d_%%(hour).2d%%(minute).2d_%%(slug)s",
            )

            if self.logger:
                self.logger.log_debug("Alembic configuration setup complete")
            return alembic_cfg
        except Exception as e:
            if self.logger:
                self.logger.log_error(e, {"operation": "setup_alembic"})
            raise DatabaseError(f"Alembic configuration failed: {e}") from e

    @handle_db_errors
    @log_database_operation("init_alembic")
    def init_alembic(self) -> None:
        """
        Initialize Alembic in the configured directory.

        Actions:
            Creates Alembic directory with standard structure
            Updates alembic/env.py to import the content store metadata
        """
        try:
            if not self.alembic_dir.is_dir():
                command.init(self.alembic_cfg, str(self.alembic_dir))
                self._update_alembic_env()
            elif self.logger:
                self.logger.log_debug(
                    f"Alembic already initialized in {self.alembic_dir}"
                )
        except Exception as e:
            raise DatabaseError(f"Alembic initialization failed: {e}") from e

    def _update_alembic_env(self) -> None:
        """Update the generated alembic/env.py to import the ORM models."""
        env_path = self.alembic_dir / "env.py"

        try:
            if env_path.exists():
                content = env_path.read_text(encoding="utf-8")

                import_line = "from umami_content.database.models import Base\n"
                target_metadata_line = "target_metadata = Base.metadata"

                if "target_metadata = None" in content:
                    updated_content = content.replace(
                        "target_metadata = None",
                        f"{import_line}\n{target_metadata_line}",
                    )
                    env_path.write_text(updated_content, encoding="utf-8")
                    if self.logger:
                        self.logger.log_operation(
                            "alembic_env_updated", {"env_path": str(env_path)}
                        )
        except OSError as e:
            if self.logger:
                self.logger.log_error(e, {"operation": "update_alembic_env"})
            raise DatabaseError(f"Could not update Alembic environment: {e}") from e

    @handle_db_errors
    @log_database_operation("initialize_schema")
    def initialize_schema(self) -> None:
        """
        Initialize database - create tables if needed and run migrations.

        Actions:
            Checks if the database is fresh (no tables)
            If fresh,
                creates all tables from the ORM models
                stamps the Alembic revision to head (when Alembic is set up)
            If not,
                runs pending migrations to update schema
        """
        try:
            with self.engine.connect() as conn:
                table_names = self.engine.dialect.get_table_names(conn)
                is_fresh_db: bool = len(table_names) == 0

            if is_fresh_db:
                Base.metadata.create_all(bind=self.engine)
                if self.logger:
                    self.logger.log_operation(
                        "fresh_database_created",
                        {"tables_created": len(Base.metadata.tables)},
                    )
                if (self.alembic_dir / "env.py").exists():
                    command.stamp(self.alembic_cfg, "head")
            elif (self.alembic_dir / "env.py").exists():
                self.upgrade_database()
                if self.logger:
                    self.logger.log_operation(
                        "existing_database_migrated",
                        {"table_count": len(table_names)},
                    )
            else:
                # Without migrations, only add tables that are missing
                Base.metadata.create_all(bind=self.engine)

        except DatabaseError:
            raise
        except Exception as e:
            raise DatabaseError(f"Could not initialize database: {e}") from e

    @handle_db_errors
    @log_database_operation("upgrade_database")
    def upgrade_database(self, revision: str = "head") -> None:
        """
        Upgrade the database schema to the specified Alembic revision.

        Args:
            revision (str, optional):
                The target revision to upgrade to.
                Defaults to 'head' (latest revision).
        """
        try:
            command.upgrade(self.alembic_cfg, revision)
        except Exception as e:
            raise DatabaseError(f"Database upgrade failed: {e}") from e

    def get_migration_history(self) -> Dict[str, Optional[str]]:
        """
        Get the current migration status of the database.

        Returns:
            Dictionary with keys:
                - 'current_revision' (str | None):
                  Current Alembic revision of the database.
                - 'status' (str):
                  Either 'up_to_date' or 'needs_migration'.
        """
        try:
            with self.engine.connect() as conn:
                context = MigrationContext.configure(conn)
                current_rev = context.get_current_revision()
        except Exception as e:
            if self.logger:
                self.logger.log_error(e, {"operation": "get_migration_history"})
            raise DatabaseError(f"Could not read migration history: {e}") from e

        return {
            "current_revision": current_rev,
            "status": "up_to_date" if current_rev else "needs_migration",
        }

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()

    def __enter__(self) -> "ContentDB":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()
