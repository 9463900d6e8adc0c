"""
Setup & Initialization Commands
--------------------------------

Database and Alembic initialization commands.

Commands:
    - init: Initialize database and Alembic
    - reset: Reset database (dangerous!)
"""
import shutil

import click

from umami_content.core.logging_manager import handle_cli_error
from umami_content.core.exceptions import DatabaseError
from . import get_db


@click.command()
@click.option("--alembic-only", is_flag=True, help="Initialize Alembic only")
@click.option("--db-only", is_flag=True, help="Initialize database only")
@click.pass_context
def init(ctx, alembic_only, db_only):
    """Initialize database and Alembic (complete setup)."""
    try:
        db = get_db(ctx)

        if alembic_only:
            click.echo("📁 Initializing Alembic...")
            db.init_alembic()
            click.echo("✅ Alembic initialized!")
        elif db_only:
            click.echo("🗄️  Initializing database schema...")
            db.initialize_schema()
            click.echo("✅ Database initialized!")
        else:
            click.echo("🚀 Initializing content database...")
            click.echo("📁 Initializing Alembic...")
            db.init_alembic()
            click.echo("🗄️  Initializing database schema...")
            db.initialize_schema()
            click.echo("✅ Complete setup finished!")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "init")


@click.command()
@click.confirmation_option(prompt="⚠️  This will DELETE the database! Are you sure?")
@click.option("--purge-files", is_flag=True, help="Also delete managed files")
@click.pass_context
def reset(ctx, purge_files):
    """Reset database (DANGEROUS - deletes all data and the ledger!)."""
    try:
        db_path = ctx.obj["db_path"]
        files_dir = ctx.obj["files_dir"]

        click.echo("🗑️  Resetting database...")

        if db_path.exists():
            db_path.unlink()
            click.echo(f"  Deleted: {db_path}")

        if purge_files and files_dir.exists():
            shutil.rmtree(files_dir)
            click.echo(f"  Deleted: {files_dir}")

        click.echo("🔄 Reinitializing...")
        db = get_db(ctx)
        db.init_alembic()
        db.initialize_schema()

        click.echo("✅ Database reset complete!")

        if not purge_files:
            click.echo("💡 Tip: Use --purge-files to also remove copied files")

    except (DatabaseError, OSError) as e:
        handle_cli_error(ctx, e, "reset")
