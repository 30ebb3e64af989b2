from pathlib import Path

import pandas as pd
import pytest

from avilist.datasets.registry import DatasetRegistry
from avilist.system.path_resolver import BUNDLED_DATA_DIR, PathResolver

SHORT_COLUMNS = [
    "Sequence",
    "Taxon_rank",
    "Order",
    "Family",
    "Family_English_name",
    "Scientific_name",
    "Authority",
    "English_name_AviList",
    "English_name_Clements_v2024",
]

# (sequence, rank, order, family, family english, scientific name, authority,
#  avilist name, clements name, type locality)
CHECKLIST_ROWS = [
    (1, "order", "Accipitriformes", None, None, "Accipitriformes", "Vieillot, 1816",
     None, None, None),
    (2, "family", "Accipitriformes", "Accipitridae", "Hawks, Eagles, and Kites", "Accipitridae",
     "Vieillot, 1816", None, None, None),
    (3, "species", "Accipitriformes", "Accipitridae", "Hawks, Eagles, and Kites",
     "Accipiter nisus", "(Linnaeus, 1758)", "Eurasian Sparrowhawk", "Eurasian Sparrowhawk",
     "Europe = Sweden"),
    (4, "species", "Accipitriformes", "Accipitridae", "Hawks, Eagles, and Kites",
     "Aquila chrysaetos", "(Linnaeus, 1758)", "Golden Eagle", "Golden Eagle", "Sweden"),
    (5, "order", "Passeriformes", None, None, "Passeriformes", "Linnaeus, 1758",
     None, None, None),
    (6, "family", "Passeriformes", "Turdidae", "Thrushes", "Turdidae", "Rafinesque, 1815",
     None, None, None),
    (7, "genus", "Passeriformes", "Turdidae", "Thrushes", "Turdus", "Linnaeus, 1758",
     None, None, None),
    (8, "species", "Passeriformes", "Turdidae", "Thrushes", "Turdus merula", "Linnaeus, 1758",
     "Common Blackbird", "Eurasian Blackbird", "Europe = Sweden"),
    (9, "subspecies", "Passeriformes", "Turdidae", "Thrushes", "Turdus merula merula",
     "Linnaeus, 1758", None, None, "Europe = Sweden"),
    (10, "species", "Passeriformes", "Turdidae", "Thrushes", "Turdus migratorius",
     "Linnaeus, 1766", "American Robin", "American Robin", "South Carolina, USA"),
    (11, "species", "Passeriformes", "Turdidae", "Thrushes", "Catharus ustulatus",
     "(Nuttall, 1840)", "Swainson's Thrush", None, "Fort Vancouver, Washington, USA"),
    (12, "species", "Passeriformes", "Muscicapidae", "Old World Flycatchers",
     "Erithacus rubecula", "(Linnaeus, 1758)", "European Robin", "European Robin",
     "European Sweden"),
    (13, "subspecies", "Passeriformes", "Muscicapidae", "Old World Flycatchers",
     "Erithacus rubecula rubecula", "(Linnaeus, 1758)", None, None, None),
]


@pytest.fixture
def full_table() -> pd.DataFrame:
    """Provide a small full-version checklist table."""
    frame = pd.DataFrame(CHECKLIST_ROWS, columns=[*SHORT_COLUMNS, "Type_locality"])
    frame["Sequence"] = frame["Sequence"].astype("Int64")
    return frame


@pytest.fixture
def short_table(full_table) -> pd.DataFrame:
    """Provide the short-version counterpart of ``full_table``."""
    return full_table[SHORT_COLUMNS].copy()


@pytest.fixture
def metadata_table() -> pd.DataFrame:
    """Provide a field metadata table describing ``full_table``."""
    rows = [
        (field, f"Description of {field}", "character", "AviList", True, field in SHORT_COLUMNS)
        for field in sorted([*SHORT_COLUMNS, "Type_locality"])
    ]
    return pd.DataFrame(
        rows,
        columns=[
            "field_name",
            "description",
            "data_type",
            "source",
            "in_full_version",
            "in_short_version",
        ],
    )


@pytest.fixture
def registry(full_table, short_table, metadata_table) -> DatasetRegistry:
    """Provide a registry holding the in-memory test tables."""
    return DatasetRegistry.from_tables(
        {"full": full_table, "short": short_table, "metadata": metadata_table}
    )


@pytest.fixture
def bundled_registry(monkeypatch) -> DatasetRegistry:
    """Provide a fresh registry reading the CSV bundle shipped with the package."""
    monkeypatch.delenv("AVILIST_DATA_DIR", raising=False)
    return DatasetRegistry(PathResolver(BUNDLED_DATA_DIR))


@pytest.fixture
def path_resolver(tmp_path: Path, monkeypatch) -> PathResolver:
    """Provide a PathResolver whose data and config live under ``tmp_path``."""
    monkeypatch.delenv("AVILIST_DATA_DIR", raising=False)
    monkeypatch.setenv("AVILIST_CONFIG", str(tmp_path / "config" / "avilist.yaml"))
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return PathResolver(data_dir)
