"""Generation of the field metadata table.

Descriptions, data types and sources are derived from the cleaned field names,
so the metadata stays in step with whatever columns a release ships.
"""

import re

import pandas as pd

# Exact field names with a fixed description.
_EXACT_DESCRIPTIONS: dict[str, str] = {
    "Sequence": "Sequential numbering for taxonomic order",
    "Taxon_rank": "Taxonomic rank (species, subspecies, etc.)",
    "Order": "Taxonomic order",
    "Family": "Taxonomic family",
    "Scientific_name": "Scientific binomial name",
    "Authority": "Author and year of original description",
    "AvibaseID": "Avibase database identifier",
    "Protonym": "Original name as first published",
}

# (pattern on the lower-cased name, description), first match wins.
_PATTERN_DESCRIPTIONS: tuple[tuple[str, str], ...] = (
    (r"family.*english", "English name of the family"),
    (r"english.*name.*avilist", "English common name (AviList)"),
    (r"english.*name.*clements", "English common name (Clements 2024)"),
    (r"bibliographic", "Bibliographic details of original description"),
    (r"species.*code.*cornell", "Cornell Lab species code"),
    (r"birdlife.*url", "BirdLife DataZone species page URL"),
    (r"birds.*world.*url", "Birds of the World species account URL"),
    (r"original.*description.*url", "URL to original species description"),
    (r"gender.*genus", "Grammatical gender of the genus name"),
    (r"type.*species", "Type species of the genus"),
    (r"type.*locality", "Type locality where species was first collected"),
    (r"title.*original", "Title of the original species description"),
)

_SOURCES: tuple[tuple[str, str], ...] = (
    (r"clements", "Clements"),
    (r"cornell", "Cornell Lab"),
    (r"birdlife", "BirdLife"),
    (r"avibase", "Avibase"),
    (r"birds.*world", "Cornell Lab"),
)


def describe_field(field_name: str) -> str:
    """Return a human-readable description for a field name."""
    if field_name in _EXACT_DESCRIPTIONS:
        return _EXACT_DESCRIPTIONS[field_name]

    lowered = field_name.lower()
    for pattern, description in _PATTERN_DESCRIPTIONS:
        if re.search(pattern, lowered):
            return description

    # Generic fallbacks for fields added by later releases
    if lowered.endswith("url"):
        return f"URL link for {re.sub(r'_URL$', '', field_name)}"
    if "code" in lowered:
        words = re.findall(r"[A-Za-z0-9]+", field_name)
        return f"Species code from {words[-1] if words else field_name}"
    if lowered.endswith("id"):
        return f"Database identifier for {re.sub(r'ID$', '', field_name)}"
    if "name" in lowered:
        return f"Name field: {field_name}"
    return f"Data field: {field_name.replace('_', ' ')}"


def field_data_type(field_name: str) -> str:
    """Return the documented data type of a field."""
    if field_name == "Sequence":
        return "numeric"
    if "url" in field_name.lower():
        return "character (URL)"
    return "character"


def field_source(field_name: str) -> str:
    """Return the naming authority or database a field originates from."""
    lowered = field_name.lower()
    for pattern, source in _SOURCES:
        if re.search(pattern, lowered):
            return source
    return "AviList"


def build_field_metadata(full: pd.DataFrame, short: pd.DataFrame) -> pd.DataFrame:
    """Build one metadata row per distinct field of the full and short tables.

    Returns:
        DataFrame with ``field_name``, ``description``, ``data_type``,
        ``source``, ``in_full_version`` and ``in_short_version``, sorted by
        field name
    """
    full_fields = list(full.columns)
    short_fields = list(short.columns)
    all_fields = list(dict.fromkeys(full_fields + short_fields))

    metadata = pd.DataFrame(
        {
            "field_name": all_fields,
            "description": [describe_field(f) for f in all_fields],
            "data_type": [field_data_type(f) for f in all_fields],
            "source": [field_source(f) for f in all_fields],
            "in_full_version": [f in full_fields for f in all_fields],
            "in_short_version": [f in short_fields for f in all_fields],
        }
    )
    return metadata.sort_values("field_name").reset_index(drop=True)
