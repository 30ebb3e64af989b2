"""AviList Global Avian Checklist (v2025) as pandas tables.

Typical use::

    from avilist import load_avilist, avilist_stats

    thrushes = load_avilist(version="short", families="Turdidae", filter_rank="species")
    print(thrushes.summary.filtered_records)
    print(avilist_stats())
"""

from avilist.checklist import (
    CITATION,
    RELEASE_DATE,
    ChecklistResult,
    ChecklistStats,
    Diagnostic,
    DiagnosticKind,
    FilterSummary,
    avilist_stats,
    field_metadata,
    load_avilist,
)
from avilist.datasets import DatasetRegistry
from avilist.exceptions import DataUnavailableError, InvalidArgumentError

__all__ = [
    "CITATION",
    "ChecklistResult",
    "ChecklistStats",
    "DataUnavailableError",
    "DatasetRegistry",
    "Diagnostic",
    "DiagnosticKind",
    "FilterSummary",
    "InvalidArgumentError",
    "RELEASE_DATE",
    "avilist_stats",
    "field_metadata",
    "load_avilist",
]
