from avilist.datasets.schema import (
    SCHEMAS,
    TYPE_LOCALITY_FIELD,
    VALID_RANKS,
    TableName,
)


class TestSchemas:
    """Test the table schema declarations."""

    def test_short_fields_subset_of_full(self):
        """Should declare every short field in the full table too."""
        full = set(SCHEMAS[TableName.FULL].fields)
        short = set(SCHEMAS[TableName.SHORT].fields)

        assert short < full
        assert TYPE_LOCALITY_FIELD in full - short

    def test_type_locality_is_optional(self):
        """Should not require the type locality column."""
        schema = SCHEMAS[TableName.FULL]

        assert TYPE_LOCALITY_FIELD not in schema.required_fields
        assert TYPE_LOCALITY_FIELD not in schema.missing_fields(["Sequence"])

    def test_missing_fields_in_declared_order(self):
        """Should list absent required fields in schema order."""
        schema = SCHEMAS[TableName.SHORT]

        missing = schema.missing_fields(schema.fields[2:])

        assert missing == list(schema.fields[:2])

    def test_valid_ranks(self):
        """Should accept the five taxonomic ranks."""
        assert set(VALID_RANKS) == {"species", "subspecies", "genus", "family", "order"}
