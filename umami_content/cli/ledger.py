"""
Ledger Commands
----------------

Inspection of the provenance ledger.

Commands:
    - status: Show ledger entries per entity type
"""
import json

import click

from umami_content.core.cli_utils import echo_counts
from umami_content.core.logging_manager import handle_cli_error
from umami_content.core.exceptions import DatabaseError
from . import get_db


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print counts as JSON")
@click.pass_context
def status(ctx, as_json):
    """Show what the ledger records as imported."""
    try:
        db = get_db(ctx)
        with db.session_scope():
            counts = db.ledger.counts()

        if as_json:
            click.echo(json.dumps({"ledger_key": db.ledger_key, "counts": counts}, indent=2))
            return

        click.echo(f"📒 Ledger: {db.ledger_key}")
        if not counts:
            click.echo("  No imported content recorded")
            return
        echo_counts(counts)
        click.echo(f"\nTotal: {sum(counts.values())}")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "status")
