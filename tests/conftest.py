"""
conftest.py
-----------
Shared pytest fixtures for the content seeder tests.

Provides fixtures for:
- Database setup and teardown
- Record type managers bound to a test session
- A writable copy of the bundled seed data
- A seeder over the test database
"""
import shutil
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_db_path(tmp_dir):
    """Create temporary test database path."""
    return tmp_dir / "test.db"


@pytest.fixture
def test_alembic_dir(tmp_dir):
    """Path to a (not yet initialized) Alembic directory."""
    return tmp_dir / "alembic"


@pytest.fixture
def files_dir(tmp_dir):
    """Managed files directory."""
    return tmp_dir / "files"


@pytest.fixture
def content_dir(tmp_dir):
    """Writable copy of the bundled seed data."""
    from umami_content.core.paths import DEFAULT_CONTENT_DIR

    target = tmp_dir / "content"
    shutil.copytree(DEFAULT_CONTENT_DIR, target)
    return target


@pytest.fixture
def empty_content_dir(tmp_dir):
    """Empty content directory for hand-written seed data."""
    target = tmp_dir / "custom_content"
    target.mkdir()
    return target


# ----- Database Fixtures -----

@pytest.fixture
def test_db(test_db_path, test_alembic_dir, files_dir):
    """
    Create test database instance with schema.

    Returns a ContentDB instance with an initialized schema.
    Database is torn down after the test.
    """
    from umami_content.database.manager import ContentDB
    from umami_content.database.models import Base
    from sqlalchemy import create_engine

    # Create engine and initialize schema
    engine = create_engine(f"sqlite:///{test_db_path}")
    Base.metadata.create_all(engine)

    db = ContentDB(
        db_path=test_db_path,
        alembic_dir=test_alembic_dir,
        files_dir=files_dir,
    )

    yield db

    # Cleanup
    db.dispose()
    engine.dispose()
    if test_db_path.exists():
        test_db_path.unlink()


@pytest.fixture
def db_session(test_db):
    """
    Create a database session for tests.

    Provides a session with automatic rollback after test.
    """
    with test_db.session_scope() as session:
        yield session
        session.rollback()


@pytest.fixture
def user_manager(db_session):
    """Create UserManager instance."""
    from umami_content.database.managers import UserManager
    return UserManager(db_session)


@pytest.fixture
def term_manager(db_session):
    """Create TermManager instance."""
    from umami_content.database.managers import TermManager
    return TermManager(db_session)


@pytest.fixture
def node_manager(db_session):
    """Create NodeManager instance."""
    from umami_content.database.managers import NodeManager
    return NodeManager(db_session)


@pytest.fixture
def file_manager(db_session, files_dir):
    """Create FileManager instance."""
    from umami_content.database.managers import FileManager
    return FileManager(db_session, files_dir)


@pytest.fixture
def block_manager(db_session):
    """Create BlockContentManager instance."""
    from umami_content.database.managers import BlockContentManager
    return BlockContentManager(db_session)


@pytest.fixture
def alias_manager(db_session):
    """Create AliasManager instance."""
    from umami_content.database.managers import AliasManager
    return AliasManager(db_session)


@pytest.fixture
def state_manager(db_session):
    """Create StateManager instance."""
    from umami_content.database.state_manager import StateManager
    return StateManager(db_session)


@pytest.fixture
def ledger(state_manager):
    """Create a ContentLedger over the test state store."""
    from umami_content.database.ledger import ContentLedger
    return ContentLedger(state_manager)


# ----- Seeder Fixtures -----

@pytest.fixture
def seeder(test_db, content_dir):
    """ContentSeeder over the test database and a copy of the bundled content."""
    from umami_content.pipeline.configs import SeederConfig
    from umami_content.pipeline.seeder import ContentSeeder

    return ContentSeeder(test_db, SeederConfig(content_dir=content_dir))


@pytest.fixture
def custom_seeder(test_db, empty_content_dir):
    """ContentSeeder over the test database and an empty content directory."""
    from umami_content.pipeline.configs import SeederConfig
    from umami_content.pipeline.seeder import ContentSeeder

    return ContentSeeder(test_db, SeederConfig(content_dir=empty_content_dir))
