"""Data quality checks run after cleaning."""

from dataclasses import dataclass, field

import pandas as pd

from avilist.datasets.schema import VALID_RANKS


@dataclass
class QualityReport:
    """Findings from a quality pass over a cleaned checklist table."""

    total_records: int
    duplicate_species: list[str] = field(default_factory=list)
    missing_scientific_names: int = 0
    missing_families: int = 0
    missing_orders: int = 0
    missing_ranks: int = 0
    unexpected_ranks: list[str] = field(default_factory=list)
    duplicate_sequences: list[int] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """Whether any finding should stop the table from being bundled as is."""
        return bool(
            self.duplicate_species
            or self.missing_ranks
            or self.unexpected_ranks
            or self.duplicate_sequences
        )

    def warnings(self) -> list[str]:
        """Human-readable lines for each blocking finding."""
        lines = []
        if self.duplicate_species:
            lines.append(
                f"Found {len(self.duplicate_species)} duplicate species names: "
                + ", ".join(self.duplicate_species)
            )
        if self.missing_ranks:
            lines.append(f"Found {self.missing_ranks} records without a taxonomic rank")
        if self.unexpected_ranks:
            lines.append("Found unexpected taxonomic ranks: " + ", ".join(self.unexpected_ranks))
        if self.duplicate_sequences:
            lines.append(
                "Found repeated Sequence values: " + ", ".join(map(str, self.duplicate_sequences))
            )
        return lines


def check_quality(df: pd.DataFrame) -> QualityReport:
    """Check a cleaned checklist table for duplicates, gaps and rank anomalies."""
    species = df[df["Taxon_rank"] == "species"]
    duplicated = species.loc[
        species["Scientific_name"].duplicated(keep=False), "Scientific_name"
    ]

    ranks = df["Taxon_rank"].dropna().unique()
    sequences = df["Sequence"].dropna()

    return QualityReport(
        total_records=len(df),
        duplicate_species=sorted(duplicated.dropna().unique().tolist()),
        missing_scientific_names=int(df["Scientific_name"].isna().sum()),
        missing_families=int(df["Family"].isna().sum()),
        missing_orders=int(df["Order"].isna().sum()),
        missing_ranks=int(df["Taxon_rank"].isna().sum()),
        unexpected_ranks=sorted(str(r) for r in ranks if r not in VALID_RANKS),
        duplicate_sequences=sorted(int(s) for s in sequences[sequences.duplicated()].unique()),
    )
