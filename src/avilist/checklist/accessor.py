"""Load, filter and summarise the AviList checklist.

``load_avilist`` selects the full or short table from the dataset registry,
applies the optional rank, family, order and region filters in that order,
and returns the filtered rows with provenance attached. ``avilist_stats``
reports summary statistics for a loaded result or a raw table.

Bad arguments raise ``InvalidArgumentError`` before any data is touched.
Everything else (requested names that are absent, columns a filter needs
but the table lacks) is recorded as a ``Diagnostic`` on the result and
logged as a warning; the call still returns a well-defined table.
"""

from collections.abc import Iterable
from datetime import UTC, datetime

import pandas as pd
import structlog

from avilist.checklist.models import (
    ChecklistResult,
    ChecklistStats,
    Diagnostic,
    DiagnosticKind,
    FilterArguments,
    FilterSummary,
    Provenance,
)
from avilist.datasets.registry import DatasetRegistry, get_default_registry
from avilist.datasets.schema import (
    TYPE_LOCALITY_FIELD,
    VALID_RANKS,
    VALID_VERSIONS,
    TableName,
)
from avilist.exceptions import InvalidArgumentError

logger = structlog.get_logger(__name__)

RANK_FIELD = "Taxon_rank"
FAMILY_FIELD = "Family"
ORDER_FIELD = "Order"
SCIENTIFIC_NAME_FIELD = "Scientific_name"

# Number of available values quoted when a family/order filter matches nothing.
MAX_EXAMPLES = 5

GENUS_PATTERN = r"^([A-Z][a-z]+)"

FilterValues = str | Iterable[str] | None


def _as_tuple(values: FilterValues) -> tuple[str, ...] | None:
    """Normalise a filter argument; a lone string is a one-element filter."""
    if values is None:
        return None
    if isinstance(values, str):
        return (values,)
    return tuple(values)


def _validate_version(version: str) -> None:
    if version not in VALID_VERSIONS:
        raise InvalidArgumentError(
            f"Invalid version: {version!r}\nValid options are: {', '.join(VALID_VERSIONS)}"
        )


def _validate_ranks(ranks: tuple[str, ...]) -> None:
    invalid = [rank for rank in dict.fromkeys(ranks) if rank not in VALID_RANKS]
    if invalid:
        raise InvalidArgumentError(
            f"Invalid taxonomic rank(s): {', '.join(map(str, invalid))}\n"
            f"Valid options are: {', '.join(VALID_RANKS)}"
        )


class _DiagnosticLog:
    """Collects diagnostics for one call and mirrors them to the logger."""

    def __init__(self, version: str):
        self.entries: list[Diagnostic] = []
        self._logger = logger.bind(version=version)

    def report(self, kind: DiagnosticKind, message: str) -> None:
        self.entries.append(Diagnostic(kind=kind, message=message))
        self._logger.warning(message, kind=kind.value)


def _filter_by_rank(
    data: pd.DataFrame, ranks: tuple[str, ...], diagnostics: _DiagnosticLog
) -> pd.DataFrame:
    if RANK_FIELD not in data.columns:
        diagnostics.report(
            DiagnosticKind.SCHEMA_GAP,
            f"{RANK_FIELD} column not found. Rank filtering skipped.",
        )
        return data
    return data[data[RANK_FIELD].isin(ranks)]


def _filter_by_taxon(
    data: pd.DataFrame,
    column: str,
    requested: tuple[str, ...],
    label: str,
    diagnostics: _DiagnosticLog,
) -> tuple[pd.DataFrame, bool]:
    """Keep rows whose ``column`` is one of the requested names.

    Returns the filtered frame and whether filtering may continue. When none
    of the requested names exist the frame is emptied and filtering stops.
    """
    if column not in data.columns:
        diagnostics.report(
            DiagnosticKind.SCHEMA_GAP,
            f"{column} column not found. {label.capitalize()} filtering skipped.",
        )
        return data, True

    available = data[column].dropna().unique().tolist()
    available_set = set(available)
    matched = [name for name in dict.fromkeys(requested) if name in available_set]

    if not matched:
        examples = ", ".join(map(str, available[:MAX_EXAMPLES])) or "none"
        ellipsis = "..." if len(available) > MAX_EXAMPLES else ""
        diagnostics.report(
            DiagnosticKind.FILTER_MISMATCH,
            f"No matching {label} found. Available {label} include: {examples}{ellipsis}",
        )
        return data.iloc[0:0], False

    missing = [name for name in dict.fromkeys(requested) if name not in available_set]
    if missing:
        diagnostics.report(
            DiagnosticKind.FILTER_MISMATCH,
            f"Some {label} not found: {', '.join(map(str, missing))}",
        )

    return data[data[column].isin(matched)], True


def _filter_by_region(
    data: pd.DataFrame, region: tuple[str, ...], diagnostics: _DiagnosticLog
) -> pd.DataFrame:
    """Keep rows whose type locality mentions any region token.

    Matching is a case-insensitive literal substring test on free text, not a
    geographic lookup.
    """
    if TYPE_LOCALITY_FIELD not in data.columns:
        diagnostics.report(
            DiagnosticKind.SCHEMA_GAP,
            f"{TYPE_LOCALITY_FIELD} column not found. Region filtering skipped.",
        )
        return data

    localities = data[TYPE_LOCALITY_FIELD].astype("string").str.lower()
    mask = pd.Series(False, index=data.index)
    for token in region:
        matches = localities.str.contains(str(token).lower(), regex=False, na=False)
        mask |= matches.fillna(False).astype(bool)
    data = data[mask]

    if data.empty:
        diagnostics.report(
            DiagnosticKind.FILTER_MISMATCH,
            f"No records found for region(s): {', '.join(map(str, region))}",
        )
    return data


def count_rank(data: pd.DataFrame, rank: str) -> int:
    """Count rows of one taxonomic rank."""
    if RANK_FIELD not in data.columns:
        return 0
    return int((data[RANK_FIELD] == rank).sum())


def count_distinct(data: pd.DataFrame, column: str) -> int:
    """Count distinct non-null values of a column (0 if the column is absent)."""
    if column not in data.columns:
        return 0
    return int(data[column].nunique(dropna=True))


def count_genera(data: pd.DataFrame) -> int:
    """Count distinct genus names among species rows.

    The genus is the leading capitalised word of the scientific name.
    """
    if RANK_FIELD not in data.columns or SCIENTIFIC_NAME_FIELD not in data.columns:
        return 0
    names = data.loc[data[RANK_FIELD] == "species", SCIENTIFIC_NAME_FIELD].astype("string")
    genera = names.str.extract(GENUS_PATTERN, expand=False)
    return int(genera.nunique(dropna=True))


def filter_efficiency(original: int, filtered: int) -> float:
    """Percentage of source rows removed by filtering, rounded to one decimal."""
    if original == 0:
        return 0.0
    return round(100 * (1 - filtered / original), 1)


def _summarise(
    data: pd.DataFrame, version: str, original_rows: int, filters: FilterArguments
) -> FilterSummary:
    filtered_rows = len(data)
    return FilterSummary(
        version=version,
        original_records=original_rows,
        filtered_records=filtered_rows,
        records_filtered_out=original_rows - filtered_rows,
        filter_efficiency=filter_efficiency(original_rows, filtered_rows),
        species_count=count_rank(data, "species"),
        subspecies_count=count_rank(data, "subspecies"),
        families_count=count_distinct(data, FAMILY_FIELD),
        orders_count=count_distinct(data, ORDER_FIELD),
        filters_applied=filters,
    )


def load_avilist(
    version: str = "full",
    filter_rank: FilterValues = None,
    families: FilterValues = None,
    orders: FilterValues = None,
    region: FilterValues = None,
    registry: DatasetRegistry | None = None,
) -> ChecklistResult:
    """Load the AviList checklist with optional filtering.

    Args:
        version: "full" for all fields of the extended dataset, "short" for the
            essential taxonomic fields only
        filter_rank: Taxonomic ranks to keep ("species", "subspecies", "genus",
            "family", "order")
        families: Family names to keep (e.g. "Turdidae")
        orders: Order names to keep (e.g. "Passeriformes")
        region: Free-text tokens matched case-insensitively against the type
            locality (full version only)
        registry: Registry to read from (defaults to the process-wide registry)

    Returns:
        ChecklistResult with the filtered rows, provenance and any diagnostics

    Raises:
        InvalidArgumentError: If the version or any rank is not recognised
        DataUnavailableError: If the bundled table cannot be loaded
    """
    _validate_version(version)
    filters = FilterArguments(
        rank=_as_tuple(filter_rank),
        families=_as_tuple(families),
        orders=_as_tuple(orders),
        region=_as_tuple(region),
    )
    if filters.rank is not None:
        _validate_ranks(filters.rank)

    registry = registry or get_default_registry()
    source = registry.get(TableName(version))
    original_rows = len(source)
    diagnostics = _DiagnosticLog(version)

    data = source
    if filters.rank is not None:
        data = _filter_by_rank(data, filters.rank, diagnostics)

    proceed = True
    if filters.families is not None:
        data, proceed = _filter_by_taxon(
            data, FAMILY_FIELD, filters.families, "families", diagnostics
        )
    if proceed and filters.orders is not None:
        data, proceed = _filter_by_taxon(data, ORDER_FIELD, filters.orders, "orders", diagnostics)
    if proceed and filters.region is not None:
        data = _filter_by_region(data, filters.region, diagnostics)

    # Always hand back a new frame so callers cannot alter the registry's copy.
    data = data.reset_index(drop=True)

    summary = _summarise(data, version, original_rows, filters)
    provenance = Provenance(
        version=version,
        loaded_at=datetime.now(UTC),
        filters=filters,
        summary=summary,
    )

    logger.debug(
        "Loaded AviList checklist",
        version=version,
        original_records=original_rows,
        filtered_records=summary.filtered_records,
        filters=list(filters.active()),
    )
    return ChecklistResult(data=data, provenance=provenance, diagnostics=diagnostics.entries)


def compute_stats(
    data: pd.DataFrame, version: str, loaded_at: datetime | None = None
) -> ChecklistStats:
    """Compute dataset statistics directly from a checklist table."""
    return ChecklistStats(
        total_records=len(data),
        species_count=count_rank(data, "species"),
        subspecies_count=count_rank(data, "subspecies"),
        genera_count=count_genera(data),
        families_count=count_distinct(data, FAMILY_FIELD),
        orders_count=count_distinct(data, ORDER_FIELD),
        fields_count=len(data.columns),
        version=version,
        loaded_at=loaded_at,
    )


def avilist_stats(
    table: ChecklistResult | pd.DataFrame | None = None,
    version: str = "full",
    registry: DatasetRegistry | None = None,
) -> FilterSummary | ChecklistStats:
    """Get summary statistics for AviList data.

    Args:
        table: A result from ``load_avilist`` (its summary is returned as is),
            a bare checklist DataFrame, or None to load ``version``
        version: Dataset version to load, or to label a bare DataFrame with
        registry: Registry to read from when loading

    Returns:
        The result's FilterSummary, or ChecklistStats computed from the table
    """
    if isinstance(table, ChecklistResult):
        return table.provenance.summary

    if table is None:
        logger.info("Loading AviList data for statistics", version=version)
        result = load_avilist(version=version, registry=registry)
        return compute_stats(
            result.data, result.provenance.version, result.provenance.loaded_at
        )

    _validate_version(version)
    return compute_stats(table, version)


def field_metadata(
    version: str | None = None, registry: DatasetRegistry | None = None
) -> pd.DataFrame:
    """Return the field metadata table.

    Args:
        version: Restrict to fields present in "full" or "short"; None for all
        registry: Registry to read from (defaults to the process-wide registry)
    """
    if version is not None:
        _validate_version(version)
    registry = registry or get_default_registry()
    metadata = registry.get(TableName.METADATA)
    if version is not None:
        metadata = metadata[metadata[f"in_{version}_version"]]
    return metadata.reset_index(drop=True)
