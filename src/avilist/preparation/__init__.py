"""Build-time preparation of the dataset bundle.

Turns the official AviList workbooks into the CSV files the registry reads.
Nothing here runs when the checklist is queried.
"""

from avilist.preparation.bundle import write_bundle
from avilist.preparation.cleaning import (
    clean_column_name,
    clean_full_table,
    clean_short_table,
    read_workbook,
)
from avilist.preparation.metadata import build_field_metadata
from avilist.preparation.quality import QualityReport, check_quality

__all__ = [
    "QualityReport",
    "build_field_metadata",
    "check_quality",
    "clean_column_name",
    "clean_full_table",
    "clean_short_table",
    "read_workbook",
    "write_bundle",
]
