"""Result types returned by the checklist accessors.

Summary statistics and provenance travel alongside the filtered DataFrame
rather than as extra columns, so the table always keeps the bundled schema.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

import pandas as pd

CITATION = (
    "AviList Core Team. 2025. AviList: The Global Avian Checklist, v2025. "
    "https://doi.org/10.2173/avilist.v2025"
)
RELEASE_DATE = "2025-06-11"  # AviList v2025 release date


class DiagnosticKind(str, Enum):
    """Kinds of non-fatal conditions reported by ``load_avilist``."""

    FILTER_MISMATCH = "filter_mismatch"  # Requested values not present in the table
    SCHEMA_GAP = "schema_gap"  # Column needed by a filter step is absent


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal condition encountered while filtering."""

    kind: DiagnosticKind
    message: str

    def __str__(self) -> str:
        """Return the diagnostic as a single line."""
        return f"[{self.kind.value}] {self.message}"


@dataclass(frozen=True)
class FilterArguments:
    """Echo of the filter arguments a result was produced with."""

    rank: tuple[str, ...] | None = None
    families: tuple[str, ...] | None = None
    orders: tuple[str, ...] | None = None
    region: tuple[str, ...] | None = None

    def active(self) -> dict[str, tuple[str, ...]]:
        """Return only the filters that were supplied."""
        return {name: value for name, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class FilterSummary:
    """Statistics describing one ``load_avilist`` call."""

    version: str
    original_records: int
    filtered_records: int
    records_filtered_out: int
    filter_efficiency: float  # Percentage of source rows removed, one decimal
    species_count: int
    subspecies_count: int
    families_count: int
    orders_count: int
    filters_applied: FilterArguments = field(default_factory=FilterArguments)

    def to_dict(self) -> dict[str, Any]:
        """Return the summary as plain Python values."""
        return asdict(self)


@dataclass(frozen=True)
class ChecklistStats:
    """Statistics computed directly from a checklist table."""

    total_records: int
    species_count: int
    subspecies_count: int
    genera_count: int
    families_count: int
    orders_count: int
    fields_count: int
    version: str
    loaded_at: datetime | None = None
    last_updated: str = RELEASE_DATE
    citation: str = CITATION

    def to_dict(self) -> dict[str, Any]:
        """Return the statistics as plain Python values."""
        return asdict(self)


@dataclass(frozen=True)
class Provenance:
    """How a checklist result was produced."""

    version: str
    loaded_at: datetime
    filters: FilterArguments
    summary: FilterSummary
    citation: str = CITATION


@dataclass
class ChecklistResult:
    """Filtered checklist rows together with their provenance.

    ``diagnostics`` lists the non-fatal conditions met while filtering, in the
    order they occurred.
    """

    data: pd.DataFrame
    provenance: Provenance
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def summary(self) -> FilterSummary:
        """Shortcut for ``provenance.summary``."""
        return self.provenance.summary

    def __len__(self) -> int:
        """Return the number of rows in the filtered table."""
        return len(self.data)

    def __str__(self) -> str:
        """Return the table followed by the summary block."""
        from avilist.checklist.display import format_summary

        return f"{self.data.to_string(index=False)}\n\n{format_summary(self)}"
