r"""AviList bundle builder CLI.

This script turns the official AviList workbooks into the CSV bundle read by
the dataset registry.

Usage:
    avilist-prepare build \
        --full-xlsx AviList-v2025-11Jun-extended.xlsx \
        --short-xlsx AviList-v2025-11Jun-short.xlsx \
        --output-dir src/avilist/data
"""

import sys
from pathlib import Path

import click

from avilist.config import AviListConfig
from avilist.preparation import (
    build_field_metadata,
    check_quality,
    clean_full_table,
    clean_short_table,
    read_workbook,
    write_bundle,
)
from avilist.utils.structlog_configurator import configure_structlog

DEFAULT_FULL_SHEET = "AviList v2025 extended"


@click.group()
def cli() -> None:
    """AviList dataset bundle builder."""
    configure_structlog(AviListConfig())


@cli.command()
@click.option(
    "--full-xlsx",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Path to the extended AviList workbook",
)
@click.option(
    "--short-xlsx",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Path to the short AviList workbook",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    required=True,
    help="Directory to write the CSV bundle to",
)
@click.option(
    "--full-sheet",
    default=DEFAULT_FULL_SHEET,
    show_default=True,
    help="Sheet of the extended workbook holding the checklist",
)
def build(full_xlsx: Path, short_xlsx: Path, output_dir: Path, full_sheet: str) -> None:
    """Build the dataset bundle from the AviList workbooks."""
    click.echo("Building AviList bundle...")
    click.echo(f"Full workbook: {full_xlsx}")
    click.echo(f"Short workbook: {short_xlsx}")
    click.echo(f"Output: {output_dir}")
    click.echo()

    try:
        full = clean_full_table(read_workbook(full_xlsx, sheet=full_sheet))
        short = clean_short_table(read_workbook(short_xlsx))
        metadata = build_field_metadata(full, short)
    except (FileNotFoundError, KeyError, ValueError) as e:
        click.echo(click.style(f"✗ Error reading workbooks: {e}", fg="red"), err=True)
        sys.exit(1)

    short_only = sorted(set(short.columns) - set(full.columns))
    if short_only:
        click.echo(f"Fields unique to short version: {', '.join(short_only)}")

    report = check_quality(full)
    click.echo(f"Missing scientific names: {report.missing_scientific_names}")
    click.echo(f"Missing families: {report.missing_families}")
    click.echo(f"Missing orders: {report.missing_orders}")
    click.echo(f"Missing ranks: {report.missing_ranks}")
    for line in report.warnings():
        click.echo(click.style(f"! {line}", fg="yellow"), err=True)

    written = write_bundle(full, short, metadata, output_dir)
    for path in written.values():
        click.echo(f"- {path}")

    click.echo(click.style("✓ Bundle built successfully", fg="green"))


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
