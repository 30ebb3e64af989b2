r"""AviList checklist query CLI.

Usage:
    avilist load --version short --family Turdidae --rank species
    avilist stats --version full
    avilist fields --version short
"""

import sys
from pathlib import Path
from typing import Any

import click
import pandas as pd

from avilist.checklist import (
    avilist_stats,
    field_metadata,
    format_stats,
    format_summary,
    load_avilist,
)
from avilist.config import ConfigManager
from avilist.datasets import VALID_RANKS, VALID_VERSIONS, DatasetRegistry
from avilist.exceptions import DataUnavailableError, InvalidArgumentError
from avilist.system.path_resolver import PathResolver
from avilist.utils.structlog_configurator import configure_structlog


def _fail(message: str) -> None:
    click.echo(click.style(f"✗ {message}", fg="red"), err=True)
    sys.exit(1)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to an avilist YAML config file",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """Query the AviList Global Avian Checklist."""
    resolver = PathResolver()
    manager = ConfigManager(resolver)
    if config_path is not None:
        manager.config_path = config_path

    try:
        config = manager.load()
    except ValueError as e:
        _fail(f"Invalid configuration: {e}")
        return

    configure_structlog(config)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["registry"] = DatasetRegistry(PathResolver(config.data_dir))


@cli.command()
@click.option("--version", "version", type=click.Choice(VALID_VERSIONS), help="Dataset version")
@click.option("--rank", "ranks", multiple=True, type=click.Choice(VALID_RANKS), help="Rank to keep")
@click.option("--family", "families", multiple=True, help="Family name to keep")
@click.option("--order", "orders", multiple=True, help="Order name to keep")
@click.option("--region", "regions", multiple=True, help="Type locality text to match")
@click.option("--limit", type=int, help="Number of rows to print")
@click.pass_obj
def load(
    obj: dict[str, Any],
    version: str | None,
    ranks: tuple[str, ...],
    families: tuple[str, ...],
    orders: tuple[str, ...],
    regions: tuple[str, ...],
    limit: int | None,
) -> None:
    """Load the checklist with optional filters and print a preview."""
    config = obj["config"]
    try:
        result = load_avilist(
            version=version or config.default_version,
            filter_rank=ranks or None,
            families=families or None,
            orders=orders or None,
            region=regions or None,
            registry=obj["registry"],
        )
    except (InvalidArgumentError, DataUnavailableError) as e:
        _fail(str(e))
        return

    rows = config.preview_rows if limit is None else limit
    with pd.option_context("display.max_columns", None, "display.width", None):
        click.echo(result.data.head(rows).to_string(index=False))
    click.echo()
    click.echo(format_summary(result))

    for diagnostic in result.diagnostics:
        click.echo(click.style(f"! {diagnostic.message}", fg="yellow"), err=True)


@cli.command()
@click.option("--version", "version", type=click.Choice(VALID_VERSIONS), help="Dataset version")
@click.pass_obj
def stats(obj: dict[str, Any], version: str | None) -> None:
    """Print summary statistics for a dataset version."""
    config = obj["config"]
    try:
        dataset_stats = avilist_stats(
            version=version or config.default_version, registry=obj["registry"]
        )
    except (InvalidArgumentError, DataUnavailableError) as e:
        _fail(str(e))
        return

    click.echo(format_stats(dataset_stats))


@cli.command()
@click.option("--version", "version", type=click.Choice(VALID_VERSIONS), help="Only this version")
@click.pass_obj
def fields(obj: dict[str, Any], version: str | None) -> None:
    """Describe the fields of the bundled tables."""
    try:
        metadata = field_metadata(version=version, registry=obj["registry"])
    except (InvalidArgumentError, DataUnavailableError) as e:
        _fail(str(e))
        return

    for row in metadata.itertuples(index=False):
        versions = []
        if row.in_full_version:
            versions.append("full")
        if row.in_short_version:
            versions.append("short")
        click.echo(f"{row.field_name}: {row.description}")
        click.echo(f"    type={row.data_type} source={row.source} versions={','.join(versions)}")


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
