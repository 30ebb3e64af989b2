"""Plain-text rendering of checklist summaries."""

from avilist.checklist.models import ChecklistResult, ChecklistStats, FilterSummary


def format_summary(result: ChecklistResult | FilterSummary) -> str:
    """Render the summary block printed after a filtered table.

    Args:
        result: A checklist result, or its summary

    Returns:
        Multi-line summary text
    """
    summary = result.summary if isinstance(result, ChecklistResult) else result

    records = str(summary.filtered_records)
    if summary.original_records != summary.filtered_records:
        records += f" ({summary.filter_efficiency}% filtered)"

    lines = [
        "AviList Summary:",
        f"  Version: {summary.version}",
        f"  Records: {records}",
        f"  Species: {summary.species_count}",
        f"  Families: {summary.families_count}",
        f"  Orders: {summary.orders_count}",
    ]

    active_filters = summary.filters_applied.active()
    if active_filters:
        lines.append(f"  Filters: {', '.join(active_filters)}")

    return "\n".join(lines)


def format_stats(stats: ChecklistStats) -> str:
    """Render dataset statistics as aligned ``label: value`` lines."""
    rows = [
        ("Version", stats.version),
        ("Total records", f"{stats.total_records:,}"),
        ("Species", f"{stats.species_count:,}"),
        ("Subspecies", f"{stats.subspecies_count:,}"),
        ("Genera", f"{stats.genera_count:,}"),
        ("Families", f"{stats.families_count:,}"),
        ("Orders", f"{stats.orders_count:,}"),
        ("Fields", str(stats.fields_count)),
        ("Loaded at", stats.loaded_at.isoformat() if stats.loaded_at else "unknown"),
        ("Last updated", stats.last_updated),
    ]
    width = max(len(label) for label, _ in rows)
    lines = [f"{label.ljust(width)}  {value}" for label, value in rows]
    lines.append("")
    lines.append(f"Citation: {stats.citation}")
    return "\n".join(lines)
