"""
Umami Demo Content
==================

Seeds and tears down the Umami demo content (articles, press releases,
pages, block content, editors, tags and images) in a SQLite content store,
recording everything it creates in a provenance ledger so the content can
be removed again exactly.

Main Components:
    - pipeline: ContentSeeder and seed definitions
    - database: SQLAlchemy models, record type managers, ledger
    - core: Logging, validation, paths, exceptions, statistics
    - utils: CSV reading and identifier sanitization
    - cli: `umami-content` command line interface

Example Usage:
    >>> from umami_content.database import ContentDB
    >>> from umami_content.pipeline import ContentSeeder
    >>> from umami_content.core.paths import DB_PATH, ALEMBIC_DIR, FILES_DIR
    >>> db = ContentDB(DB_PATH, ALEMBIC_DIR, FILES_DIR)
    >>> stats = ContentSeeder(db).import_content()
"""

__version__ = "1.0.0"
