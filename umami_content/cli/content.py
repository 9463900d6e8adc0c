"""
Content Commands
-----------------

Import and removal of the demo content.

Commands:
    - import: Run the import pipeline
    - delete: Delete everything recorded in the ledger
"""
import json
from pathlib import Path

import click

from umami_content.core.cli_utils import echo_counts, echo_import_warnings
from umami_content.core.logging_manager import handle_cli_error
from umami_content.core.exceptions import (
    DatabaseError,
    SeedError,
    TeardownError,
    ValidationError,
)
from umami_content.pipeline.configs import RowErrorPolicy
from . import get_seeder


@click.command("import")
@click.option(
    "--content-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with CSV files, bodies and images (default: bundled content)",
)
@click.option("--skip-bad-rows", is_flag=True, help="Skip malformed CSV rows instead of aborting")
@click.option("--json", "as_json", is_flag=True, help="Print statistics as JSON")
@click.pass_context
def import_content(ctx, content_dir, skip_bad_rows, as_json):
    """Import the demo content."""
    try:
        ctx.obj["config"] = ctx.obj["config"].with_overrides(
            content_dir=Path(content_dir) if content_dir else None,
            on_row_error=RowErrorPolicy.SKIP if skip_bad_rows else None,
        )
        seeder = get_seeder(ctx)

        if not as_json:
            click.echo(f"📥 Importing content from {seeder.config.content_dir}...")
        stats = seeder.import_content()

        if as_json:
            click.echo(json.dumps(stats.to_dict(), indent=2))
            return

        click.echo("\n✅ Import Complete:")
        echo_counts(stats.created, "created")
        echo_import_warnings(stats)
        click.echo(f"\n{stats.summary()}")

    except (SeedError, DatabaseError, ValidationError, OSError) as e:
        handle_cli_error(ctx, e, "import")


@click.command("delete")
@click.confirmation_option(prompt="⚠️  This will DELETE all imported content! Are you sure?")
@click.pass_context
def delete_content(ctx):
    """Delete all imported content recorded in the ledger."""
    try:
        seeder = get_seeder(ctx)
        click.echo("🗑️  Deleting imported content...")
        stats = seeder.delete_imported_content()

        if not stats.deleted:
            click.echo("💡 Nothing to delete: the ledger is empty")
            return

        click.echo("\n✅ Deletion Complete:")
        echo_counts(stats.deleted, "deleted")
        click.echo(f"\n{stats.summary()}")

    except TeardownError as e:
        if e.stats is not None:
            echo_counts(e.stats.deleted, "deleted")
        handle_cli_error(ctx, e, "delete", {"failed_groups": list(e.failures)})
    except DatabaseError as e:
        handle_cli_error(ctx, e, "delete")
