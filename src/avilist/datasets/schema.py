"""Schema descriptors for the bundled AviList tables.

Each bundled table is described by a ``TableSchema`` naming the file it is
read from and the fields it is expected to carry. Field names are the cleaned
spreadsheet column names produced by the preparation pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum


class TableName(str, Enum):
    """Names of the tables held by the dataset registry."""

    FULL = "full"
    SHORT = "short"
    METADATA = "metadata"


VALID_RANKS: tuple[str, ...] = ("species", "subspecies", "genus", "family", "order")
VALID_VERSIONS: tuple[str, ...] = (TableName.FULL.value, TableName.SHORT.value)

# Field used by the region filter. Only the full table carries it.
TYPE_LOCALITY_FIELD = "Type_locality"

URL_FIELDS: tuple[str, ...] = (
    "BirdLife_DataZone_URL",
    "Birds_of_the_World_URL",
    "Original_description_URL",
)

SHORT_FIELDS: tuple[str, ...] = (
    "Sequence",
    "Taxon_rank",
    "Order",
    "Family",
    "Family_English_name",
    "Scientific_name",
    "Authority",
    "Bibliographic_details",
    "English_name_AviList",
    "English_name_Clements_v2024",
    "Range",
    "Extinct_or_possibly_extinct",
    "Species_code_Cornell_Lab",
    "AvibaseID",
)

FULL_FIELDS: tuple[str, ...] = (
    "Sequence",
    "Taxon_rank",
    "Order",
    "Family",
    "Family_English_name",
    "Scientific_name",
    "Authority",
    "Bibliographic_details",
    "English_name_AviList",
    "English_name_Clements_v2024",
    "English_name_BirdLife_v9",
    "Proposal_number",
    "Decision_summary",
    "Range",
    "Extinct_or_possibly_extinct",
    "IUCN_Red_List_Category",
    "BirdLife_DataZone_URL",
    "Species_code_Cornell_Lab",
    "Birds_of_the_World_URL",
    "AvibaseID",
    "Gender_of_genus",
    "Type_species_of_genus",
    TYPE_LOCALITY_FIELD,
    "Title_of_original_description",
    "Original_description_URL",
    "Protonym",
)

METADATA_FIELDS: tuple[str, ...] = (
    "field_name",
    "description",
    "data_type",
    "source",
    "in_full_version",
    "in_short_version",
)


@dataclass(frozen=True)
class TableSchema:
    """Descriptor for one bundled table."""

    name: TableName
    filename: str
    fields: tuple[str, ...]
    optional_fields: frozenset[str] = field(default_factory=frozenset)

    @property
    def required_fields(self) -> tuple[str, ...]:
        """Fields every copy of this table must carry."""
        return tuple(f for f in self.fields if f not in self.optional_fields)

    def missing_fields(self, columns) -> list[str]:
        """Return required fields absent from ``columns``."""
        present = set(columns)
        return [f for f in self.required_fields if f not in present]


SCHEMAS: dict[TableName, TableSchema] = {
    TableName.FULL: TableSchema(
        name=TableName.FULL,
        filename="avilist_2025.csv",
        fields=FULL_FIELDS,
        optional_fields=frozenset({TYPE_LOCALITY_FIELD}),
    ),
    TableName.SHORT: TableSchema(
        name=TableName.SHORT,
        filename="avilist_2025_short.csv",
        fields=SHORT_FIELDS,
    ),
    TableName.METADATA: TableSchema(
        name=TableName.METADATA,
        filename="avilist_metadata.csv",
        fields=METADATA_FIELDS,
    ),
}
