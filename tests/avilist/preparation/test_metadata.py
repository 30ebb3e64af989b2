import pytest

from avilist.preparation.metadata import (
    build_field_metadata,
    describe_field,
    field_data_type,
    field_source,
)


class TestDescribeField:
    """Test field descriptions."""

    @pytest.mark.parametrize(
        "field_name,description",
        [
            ("Sequence", "Sequential numbering for taxonomic order"),
            ("Family_English_name", "English name of the family"),
            ("English_name_AviList", "English common name (AviList)"),
            ("English_name_Clements_v2024", "English common name (Clements 2024)"),
            ("BirdLife_DataZone_URL", "BirdLife DataZone species page URL"),
            ("Type_locality", "Type locality where species was first collected"),
            ("Type_species_of_genus", "Type species of the genus"),
        ],
    )
    def test_known_fields(self, field_name, description):
        """Should describe the released fields."""
        assert describe_field(field_name) == description

    @pytest.mark.parametrize(
        "field_name,description",
        [
            ("Xeno_canto_URL", "URL link for Xeno_canto"),
            ("Code_eBird", "Species code from eBird"),
            ("GBIFID", "Database identifier for GBIF"),
            ("Spanish_name", "Name field: Spanish_name"),
            ("Extinct_or_possibly_extinct", "Data field: Extinct or possibly extinct"),
        ],
    )
    def test_fallbacks(self, field_name, description):
        """Should produce a generic description for unknown fields."""
        assert describe_field(field_name) == description


class TestFieldTypeAndSource:
    """Test data type and source attribution."""

    def test_data_types(self):
        """Should flag Sequence as numeric and URLs as URL text."""
        assert field_data_type("Sequence") == "numeric"
        assert field_data_type("Birds_of_the_World_URL") == "character (URL)"
        assert field_data_type("Family") == "character"

    @pytest.mark.parametrize(
        "field_name,source",
        [
            ("English_name_Clements_v2024", "Clements"),
            ("Species_code_Cornell_Lab", "Cornell Lab"),
            ("Birds_of_the_World_URL", "Cornell Lab"),
            ("English_name_BirdLife_v9", "BirdLife"),
            ("AvibaseID", "Avibase"),
            ("Scientific_name", "AviList"),
        ],
    )
    def test_sources(self, field_name, source):
        """Should attribute fields to their originating authority."""
        assert field_source(field_name) == source


class TestBuildFieldMetadata:
    """Test metadata table generation."""

    def test_one_row_per_field(self, full_table, short_table):
        """Should describe every distinct field, sorted by name."""
        metadata = build_field_metadata(full_table, short_table)

        assert len(metadata) == len(full_table.columns)
        names = metadata["field_name"].tolist()
        assert names == sorted(names)

    def test_version_membership(self, full_table, short_table):
        """Should record which versions carry each field."""
        metadata = build_field_metadata(full_table, short_table).set_index("field_name")

        assert metadata.loc["Type_locality", "in_full_version"]
        assert not metadata.loc["Type_locality", "in_short_version"]
        assert metadata["in_full_version"].all()
        assert metadata["in_short_version"].sum() == len(short_table.columns)
