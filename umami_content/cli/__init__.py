#!/usr/bin/env python3
"""
Umami Demo Content CLI
-----------------------

Command-line interface for seeding and removing the demo content.

This module provides the main CLI group and shared context setup
for all commands.

Command Structure:
    - Setup & Initialization (init, reset)
    - Content (import, delete)
    - Ledger (status)

Usage:
    # Create the database and Alembic environment
    umami-content init

    # Import the bundled demo content
    umami-content import

    # Show what the ledger records
    umami-content status

    # Remove everything that was imported
    umami-content delete --yes
"""
import click
import logging
from pathlib import Path

from umami_content.core.cli_utils import setup_logger
from umami_content.core.exceptions import ValidationError
from umami_content.core.logging_manager import handle_cli_error
from umami_content.core.paths import ALEMBIC_DIR, DB_PATH, FILES_DIR, LOG_DIR
from umami_content.database import ContentDB
from umami_content.pipeline import ContentSeeder
from umami_content.pipeline.configs import SeederConfig


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    default=str(DB_PATH),
    help="Path to database file",
)
@click.option(
    "--alembic-dir",
    type=click.Path(),
    default=str(ALEMBIC_DIR),
    help="Path to Alembic directory",
)
@click.option(
    "--files-dir",
    type=click.Path(),
    default=None,
    help="Managed files directory (default: config value or data/files)",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Path to log directory",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with seeder settings",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Show progress, detailed errors and tracebacks",
)
@click.pass_context
def cli(ctx, db_path, alembic_dir, files_dir, log_dir, config_path, verbose):
    """Umami Demo Content Seeder"""

    # Suppress Alembic INFO logging by default
    logging.getLogger("alembic").setLevel(logging.WARNING)

    ctx.ensure_object(dict)
    ctx.obj["db_path"] = Path(db_path)
    ctx.obj["alembic_dir"] = Path(alembic_dir)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "seeder", verbose=verbose)

    try:
        config = SeederConfig.from_yaml(config_path) if config_path else SeederConfig()
    except ValidationError as e:
        handle_cli_error(ctx, e, "load_config", {"config": config_path})

    if files_dir:
        ctx.obj["files_dir"] = Path(files_dir)
    elif config.files_dir:
        ctx.obj["files_dir"] = config.files_dir
    else:
        ctx.obj["files_dir"] = FILES_DIR
    ctx.obj["config"] = config


def get_db(ctx) -> ContentDB:
    """Get or create database instance from context."""
    if "db" not in ctx.obj:
        ctx.obj["db"] = ContentDB(
            db_path=ctx.obj["db_path"],
            alembic_dir=ctx.obj["alembic_dir"],
            files_dir=ctx.obj["files_dir"],
            log_dir=ctx.obj["log_dir"],
            ledger_key=ctx.obj["config"].ledger_key,
        )
    return ctx.obj["db"]


def get_seeder(ctx) -> ContentSeeder:
    """Create a seeder over the context's database and config."""
    return ContentSeeder(get_db(ctx), ctx.obj["config"], logger=ctx.obj["logger"])


# Import and register command modules
# These imports must come after CLI group definition
from .setup import init, reset  # noqa: E402
from .content import import_content, delete_content  # noqa: E402
from .ledger import status  # noqa: E402

cli.add_command(init)
cli.add_command(reset)
cli.add_command(import_content)
cli.add_command(delete_content)
cli.add_command(status)


if __name__ == "__main__":
    cli(obj={})
