"""Cleaning of the raw AviList workbook sheets.

The official release ships as two Excel workbooks (extended and short). Both
are read as text and normalised here: column names are made identifier-safe,
text fields are trimmed, ranks are lower-cased, URL fields are either a
``http(s)://`` link or missing, and rows are put in taxonomic sequence.
"""

import re
from pathlib import Path

import pandas as pd
import structlog

from avilist.datasets.schema import URL_FIELDS

logger = structlog.get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")
_TRAILING_UNDERSCORES = re.compile(r"_+$")
_URL_PREFIX = r"^https?://"

FULL_TRIMMED_FIELDS: tuple[str, ...] = (
    "Scientific_name",
    "English_name_AviList",
    "English_name_Clements_v2024",
    "Order",
    "Family",
    "Family_English_name",
    "Authority",
    "Species_code_Cornell_Lab",
    "AvibaseID",
)

SHORT_TRIMMED_FIELDS: tuple[str, ...] = (
    "Scientific_name",
    "Order",
    "Family",
    "Authority",
)


def clean_column_name(name: str) -> str:
    """Make a spreadsheet header identifier-safe.

    Whitespace runs become ``_``, any other non-alphanumeric character
    becomes ``_`` and trailing underscores are dropped.

    >>> clean_column_name("English name Clements v2024")
    'English_name_Clements_v2024'
    """
    name = _WHITESPACE.sub("_", str(name))
    name = _NON_IDENTIFIER.sub("_", name)
    return _TRAILING_UNDERSCORES.sub("", name)


def read_workbook(path: Path, sheet: str | int | None = None) -> pd.DataFrame:
    """Read one AviList workbook sheet with every cell as text.

    Args:
        path: Path to the ``.xlsx`` file
        sheet: Sheet name or index (first sheet when None)

    Raises:
        FileNotFoundError: If the workbook does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Workbook not found: {path}")

    frame = pd.read_excel(path, sheet_name=sheet or 0, dtype=str, engine="openpyxl")
    logger.info(
        "Read AviList workbook",
        path=str(path),
        sheet=sheet,
        rows=len(frame),
        columns=len(frame.columns),
    )
    return frame


def _strip(series: pd.Series) -> pd.Series:
    stripped = series.astype("string").str.strip()
    return stripped.astype(object).where(stripped.notna(), None)


def _clean_url(series: pd.Series) -> pd.Series:
    """Keep well-formed http(s) links; anything else (including "") is missing."""
    text = series.astype("string").str.strip()
    valid = text.str.contains(_URL_PREFIX, regex=True, na=False).fillna(False).astype(bool)
    return text.astype(object).where(valid, None)


def _clean_common(raw: pd.DataFrame, trimmed: tuple[str, ...]) -> pd.DataFrame:
    df = raw.rename(columns=clean_column_name)

    df["Sequence"] = pd.to_numeric(df["Sequence"], errors="coerce").astype("Int64")
    df["Taxon_rank"] = _strip(df["Taxon_rank"]).str.lower()

    for column in trimmed:
        if column in df.columns:
            df[column] = _strip(df[column])

    return df


def clean_full_table(raw: pd.DataFrame) -> pd.DataFrame:
    """Clean the extended workbook into the full checklist table."""
    df = _clean_common(raw, FULL_TRIMMED_FIELDS)

    for column in URL_FIELDS:
        if column in df.columns:
            df[column] = _clean_url(df[column])

    return df.sort_values("Sequence", kind="stable").reset_index(drop=True)


def clean_short_table(raw: pd.DataFrame) -> pd.DataFrame:
    """Clean the short workbook into the short checklist table."""
    df = _clean_common(raw, SHORT_TRIMMED_FIELDS)

    for column in df.columns:
        if "English_name" in column:
            df[column] = _strip(df[column])

    return df.sort_values("Sequence", kind="stable").reset_index(drop=True)
