"""Checklist accessor package.

This package contains the query surface over the bundled tables:
- load_avilist / avilist_stats: Filtered loading and summary statistics
- ChecklistResult: Filtered rows with provenance and diagnostics
- Reference views: Name variants, authorities, order and family summaries
"""

from avilist.checklist.accessor import avilist_stats, compute_stats, field_metadata, load_avilist
from avilist.checklist.display import format_stats, format_summary
from avilist.checklist.models import (
    CITATION,
    RELEASE_DATE,
    ChecklistResult,
    ChecklistStats,
    Diagnostic,
    DiagnosticKind,
    FilterArguments,
    FilterSummary,
    Provenance,
)
from avilist.checklist.reference import (
    authority_patterns,
    family_info,
    name_disagreements,
    name_variations,
    order_info,
)

__all__ = [
    "CITATION",
    "ChecklistResult",
    "ChecklistStats",
    "Diagnostic",
    "DiagnosticKind",
    "FilterArguments",
    "FilterSummary",
    "Provenance",
    "RELEASE_DATE",
    "authority_patterns",
    "avilist_stats",
    "compute_stats",
    "family_info",
    "field_metadata",
    "format_stats",
    "format_summary",
    "load_avilist",
    "name_disagreements",
    "name_variations",
    "order_info",
]
