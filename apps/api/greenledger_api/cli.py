"""CLI commands for Green Ledger."""

import sys

import click

from greenledger_api.ledger import LedgerService
from greenledger_api.log_config import configure_logging
from greenledger_api.settings import get_settings
from greenledger_api.storage import JSONCollectionStore
from greenledger_api.storage.seed import seed_demo_company


@click.group()
@click.option("--data-dir", type=click.Path(file_okay=False), default=None, help="Override DATA_DIR.")
@click.pass_context
def cli(ctx: click.Context, data_dir):
    """Green Ledger CLI."""
    settings = get_settings()
    configure_logging(settings)
    ctx.obj = JSONCollectionStore(data_dir or settings.data_dir)


@cli.command("init-data")
@click.pass_obj
def init_data(store: JSONCollectionStore):
    """Create the data directory and empty collection files."""
    store.initialize()
    click.echo(f"✓ Data files ready in {store.data_dir}")


@cli.command()
@click.pass_obj
def seed(store: JSONCollectionStore):
    """Seed a demo company with sample activities."""
    click.echo("Seeding demo data...")
    company = seed_demo_company(store)
    click.echo(f"✓ Demo company: {company['name']} ({company['id']})")


@cli.command("verify-ledger")
@click.pass_obj
def verify_ledger(store: JSONCollectionStore):
    """Verify the activity hash chain."""
    result = LedgerService(store).verify()
    if result.valid:
        click.echo(f"✓ Ledger intact ({result.length} activities)")
        return
    click.echo(
        f"✗ Ledger broken at index {result.first_invalid_index} of {result.length}",
        err=True,
    )
    sys.exit(1)


@cli.command()
@click.option("--host", default=None, help="Bind address (default: API_HOST).")
@click.option("--port", type=int, default=None, help="Port (default: API_PORT).")
@click.pass_obj
def serve(store: JSONCollectionStore, host, port):
    """Run the API server."""
    import uvicorn

    from greenledger_api.main import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(settings, store),
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


if __name__ == "__main__":
    cli()
