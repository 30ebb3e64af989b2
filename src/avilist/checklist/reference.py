"""Derived reference views over a checklist table.

These are the lookups the data preparation step used to pre-compute: common
name variants, frequent authorities, and per-order / per-family species
summaries. Each function takes a checklist DataFrame (full or short) and
returns a new DataFrame; the input is never modified.
"""

import pandas as pd

from avilist.checklist.accessor import FAMILY_FIELD, ORDER_FIELD, RANK_FIELD, SCIENTIFIC_NAME_FIELD

AVILIST_NAME_FIELD = "English_name_AviList"
CLEMENTS_NAME_FIELD = "English_name_Clements_v2024"
FAMILY_ENGLISH_FIELD = "Family_English_name"
AUTHORITY_FIELD = "Authority"

EXAMPLES_PER_GROUP = 3


def _species_rows(df: pd.DataFrame) -> pd.DataFrame:
    return df[df[RANK_FIELD] == "species"]


def _first_unique(values: pd.Series, limit: int = EXAMPLES_PER_GROUP) -> str:
    return ", ".join(map(str, values.dropna().unique()[:limit]))


def name_variations(df: pd.DataFrame) -> pd.DataFrame:
    """List every English name each species is known by.

    Returns:
        DataFrame with ``Scientific_name``, ``source`` (the naming authority's
        column) and ``common_name``, one row per distinct name, sorted by
        scientific name
    """
    name_columns = [c for c in (AVILIST_NAME_FIELD, CLEMENTS_NAME_FIELD) if c in df.columns]
    species = _species_rows(df)[[SCIENTIFIC_NAME_FIELD, *name_columns]]
    long = species.melt(
        id_vars=SCIENTIFIC_NAME_FIELD,
        value_vars=name_columns,
        var_name="source",
        value_name="common_name",
    )
    long = long.dropna(subset=["common_name"]).drop_duplicates()
    return long.sort_values(SCIENTIFIC_NAME_FIELD, kind="stable").reset_index(drop=True)


def name_disagreements(df: pd.DataFrame) -> pd.DataFrame:
    """Species whose AviList and Clements English names differ.

    Rows missing either name are not counted as disagreements.
    """
    species = _species_rows(df)
    both = species[AVILIST_NAME_FIELD].notna() & species[CLEMENTS_NAME_FIELD].notna()
    differ = species[AVILIST_NAME_FIELD] != species[CLEMENTS_NAME_FIELD]
    columns = [SCIENTIFIC_NAME_FIELD, AVILIST_NAME_FIELD, CLEMENTS_NAME_FIELD]
    return species.loc[both & differ, columns].reset_index(drop=True)


def authority_patterns(df: pd.DataFrame, top_n: int = 100) -> pd.DataFrame:
    """Most frequent species authorities, most common first."""
    species = _species_rows(df)
    counts = species[AUTHORITY_FIELD].dropna().value_counts()
    return (
        counts.rename_axis(AUTHORITY_FIELD)
        .reset_index(name="n")
        .head(top_n)
    )


def order_info(df: pd.DataFrame) -> pd.DataFrame:
    """Species and family counts per order, largest orders first."""
    species = _species_rows(df)
    grouped = species.groupby(ORDER_FIELD, sort=False)
    info = pd.DataFrame(
        {
            "species_count": grouped.size(),
            "families_count": grouped[FAMILY_FIELD].nunique(),
            "example_families": grouped[FAMILY_FIELD].agg(_first_unique),
        }
    ).reset_index()
    return info.sort_values("species_count", ascending=False, kind="stable").reset_index(drop=True)


def family_info(df: pd.DataFrame) -> pd.DataFrame:
    """Species counts per family, grouped by order with larger families first."""
    species = _species_rows(df)
    keys = [ORDER_FIELD, FAMILY_FIELD, FAMILY_ENGLISH_FIELD]
    grouped = species.groupby(keys, sort=False, dropna=False)
    info = pd.DataFrame(
        {
            "species_count": grouped.size(),
            "example_species": grouped[SCIENTIFIC_NAME_FIELD].agg(
                lambda names: ", ".join(map(str, names.dropna().head(EXAMPLES_PER_GROUP)))
            ),
        }
    ).reset_index()
    return info.sort_values(
        [ORDER_FIELD, "species_count"], ascending=[True, False], kind="stable"
    ).reset_index(drop=True)
