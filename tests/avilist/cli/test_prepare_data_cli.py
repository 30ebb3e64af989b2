"""Tests for the bundle builder CLI."""

import pandas as pd
import pytest
from click.testing import CliRunner

from avilist.cli.prepare_data import DEFAULT_FULL_SHEET, cli


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup(mocker):
    """Leave global logging configuration alone."""
    mocker.patch("avilist.cli.prepare_data.configure_structlog")


@pytest.fixture
def workbooks(tmp_path, full_table, short_table):
    """Write extended and short workbooks with spreadsheet-style headers."""
    full_xlsx = tmp_path / "extended.xlsx"
    short_xlsx = tmp_path / "short.xlsx"

    full = full_table.rename(columns=lambda c: c.replace("_", " "))
    full.to_excel(full_xlsx, sheet_name=DEFAULT_FULL_SHEET, index=False, engine="openpyxl")
    short = short_table.rename(columns=lambda c: c.replace("_", " "))
    short.to_excel(short_xlsx, index=False, engine="openpyxl")
    return full_xlsx, short_xlsx


class TestBuildCommand:
    """Test bundle building."""

    def test_build(self, runner, tmp_path, workbooks):
        """Should clean the workbooks and write the bundle."""
        full_xlsx, short_xlsx = workbooks
        output_dir = tmp_path / "bundle"

        result = runner.invoke(
            cli,
            [
                "build",
                "--full-xlsx",
                str(full_xlsx),
                "--short-xlsx",
                str(short_xlsx),
                "--output-dir",
                str(output_dir),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Building AviList bundle..." in result.output
        assert f"Full workbook: {full_xlsx}" in result.output
        assert "Missing families: 2" in result.output
        assert "Missing ranks: 0" in result.output
        assert "✓ Bundle built successfully" in result.output

        full = pd.read_csv(output_dir / "avilist_2025.csv")
        assert "Taxon_rank" in full.columns
        assert full["Sequence"].tolist() == list(range(1, 14))
        metadata = pd.read_csv(output_dir / "avilist_metadata.csv")
        assert len(metadata) == 10

    def test_unreadable_workbook(self, runner, tmp_path, workbooks, mocker):
        """Should exit with an error when a workbook cannot be read."""
        full_xlsx, short_xlsx = workbooks
        mocker.patch(
            "avilist.cli.prepare_data.read_workbook",
            side_effect=ValueError("Worksheet named 'x' not found"),
        )

        result = runner.invoke(
            cli,
            [
                "build",
                "--full-xlsx",
                str(full_xlsx),
                "--short-xlsx",
                str(short_xlsx),
                "--output-dir",
                str(tmp_path / "bundle"),
            ],
        )

        assert result.exit_code == 1
        assert "✗ Error reading workbooks: Worksheet named 'x' not found" in result.output
        assert not (tmp_path / "bundle").exists()

    def test_missing_workbook_rejected(self, runner, tmp_path):
        """Should reject workbook paths that do not exist."""
        result = runner.invoke(
            cli,
            [
                "build",
                "--full-xlsx",
                str(tmp_path / "nope.xlsx"),
                "--short-xlsx",
                str(tmp_path / "nope.xlsx"),
                "--output-dir",
                str(tmp_path),
            ],
        )

        assert result.exit_code == 2
