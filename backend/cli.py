#!/usr/bin/env python3
"""
CLI for catalog maintenance and quick statistics

Commands:
    seed   - Replace the transaction catalog from the seed source or a JSON file
    stats  - Print monthly statistics, bar chart and pie chart data as JSON

Usage:
    python cli.py seed
    python cli.py seed --url https://example.com/transactions.json
    python cli.py seed --file data/product_transaction.json
    python cli.py stats --month March

Note: with STORE_BACKEND=memory the catalog only lives for the duration of
the command, so `seed` is only useful against the SQL store.
"""

import json
import sys

import click


def get_app():
    """Create the Flask app so the configured store is available."""
    from app import create_app
    return create_app()


@click.group()
@click.version_option(version="1.0.0", prog_name="transactions-cli")
def cli():
    """Sale transaction catalog CLI."""
    pass


@cli.command("seed")
@click.option("--url", default=None, help="Seed source URL (defaults to SEED_SOURCE_URL)")
@click.option("--file", "file_path", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Load from a local JSON array instead of the remote source")
def seed(url, file_path):
    """Replace every transaction with the seed data."""
    from db.store import StoreUnavailable
    from services.seed_loader import SeedDataError, initialize_from_source, load_seed_data

    if url and file_path:
        raise click.UsageError("Use either --url or --file, not both")

    app = get_app()
    with app.app_context():
        store = app.extensions['transaction_store']
        try:
            if file_path:
                with open(file_path, encoding="utf-8") as f:
                    source_records = json.load(f)
                if not isinstance(source_records, list):
                    raise click.ClickException(f"{file_path} must contain a JSON array")
                result = load_seed_data(store, source_records)
            else:
                result = initialize_from_source(
                    store,
                    url or app.config['SEED_SOURCE_URL'],
                    timeout=app.config['SEED_TIMEOUT_SECONDS'],
                )
        except SeedDataError as e:
            click.secho(f"Invalid seed data: {e}", fg="red")
            sys.exit(1)
        except StoreUnavailable as e:
            click.secho(f"Error: {e}", fg="red")
            if e.cause is not None:
                click.secho(f"  cause: {e.cause}", fg="red")
            sys.exit(1)

    click.secho(f"Loaded {result['recordsLoaded']} transactions", fg="green")


@cli.command("stats")
@click.option("--month", required=True, help="Full month name, e.g. March")
def stats(month):
    """Print summary, bar chart and pie chart data for a month."""
    from dataclasses import asdict
    from services.aggregation_service import get_summary, get_histogram, get_category_counts
    from services.month_resolver import InvalidMonth

    app = get_app()
    with app.app_context():
        store = app.extensions['transaction_store']
        reference_year = app.config['REFERENCE_YEAR']
        try:
            summary = get_summary(store, month, reference_year=reference_year)
            histogram = get_histogram(store, month, reference_year=reference_year)
            categories = get_category_counts(store, month, reference_year=reference_year)
        except InvalidMonth:
            raise click.BadParameter(f"{month!r} is not a full English month name", param_hint="--month")

    click.echo(json.dumps({
        "month": month,
        "statistics": {
            "totalAmount": summary.total_amount,
            "count": summary.count,
            "totalNotSold": summary.total_not_sold,
        },
        "barChart": [asdict(b) for b in histogram],
        "pieChart": [asdict(c) for c in categories],
    }, indent=2))


if __name__ == "__main__":
    cli()
