"""Process-wide storage for the bundled AviList tables.

The registry reads each table from the CSV bundle the first time it is
requested and keeps it resident afterwards. Tables are never modified once
loaded; accessors derive filtered copies from them.
"""

import threading
from collections.abc import Mapping
from pathlib import Path

import pandas as pd
import structlog

from avilist.datasets.schema import SCHEMAS, TableName
from avilist.exceptions import DataUnavailableError, InvalidArgumentError
from avilist.system.path_resolver import PathResolver

logger = structlog.get_logger(__name__)

# Columns converted after reading; everything else stays text.
_INTEGER_COLUMNS: dict[TableName, tuple[str, ...]] = {
    TableName.FULL: ("Sequence",),
    TableName.SHORT: ("Sequence",),
}
_BOOLEAN_COLUMNS: dict[TableName, tuple[str, ...]] = {
    TableName.METADATA: ("in_full_version", "in_short_version"),
}
_BOOLEAN_VALUES = {"true": True, "false": False}


def _resolve_table_name(table_name: TableName | str) -> TableName:
    try:
        return TableName(table_name)
    except ValueError:
        valid = ", ".join(t.value for t in TableName)
        raise InvalidArgumentError(
            f"Unknown table '{table_name}'. Valid options are: {valid}"
        ) from None


class DatasetRegistry:
    """Lazily loaded, read-only holder for the full, short and metadata tables."""

    def __init__(self, path_resolver: PathResolver | None = None):
        """Initialize the registry.

        Args:
            path_resolver: Resolver locating the bundle files (defaults to the
                bundled package data, or AVILIST_DATA_DIR when set)
        """
        self.path_resolver = path_resolver or PathResolver()
        self._tables: dict[TableName, pd.DataFrame] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_tables(cls, tables: Mapping[TableName | str, pd.DataFrame]) -> "DatasetRegistry":
        """Build a registry around frames that are already in memory.

        Tables not supplied are still read lazily from the default bundle.
        """
        registry = cls()
        for name, frame in tables.items():
            registry._tables[_resolve_table_name(name)] = frame
        return registry

    def get(self, table_name: TableName | str) -> pd.DataFrame:
        """Return a table, reading it from the bundle on first access.

        Args:
            table_name: One of "full", "short" or "metadata"

        Returns:
            The resident DataFrame. Callers must not modify it.

        Raises:
            InvalidArgumentError: If the table name is not recognised
            DataUnavailableError: If the bundle file is missing or unreadable
        """
        name = _resolve_table_name(table_name)

        table = self._tables.get(name)
        if table is not None:
            return table

        with self._lock:
            # Another thread may have finished the load while we waited.
            table = self._tables.get(name)
            if table is None:
                table = self._read_table(name)
                self._tables[name] = table
        return table

    def is_loaded(self, table_name: TableName | str) -> bool:
        """Check whether a table is already resident."""
        return _resolve_table_name(table_name) in self._tables

    def _read_table(self, name: TableName) -> pd.DataFrame:
        """Read one table from its bundle file."""
        path: Path = self.path_resolver.get_data_file_path(SCHEMAS[name].filename)
        if not path.exists():
            raise DataUnavailableError(
                f"Could not load the '{name.value}' AviList table: {path} not found. "
                "Make sure the avilist package is properly installed."
            )

        try:
            # Only empty cells are missing; literal "NA" is a valid range code.
            frame = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
            frame = self._convert_columns(name, frame)
        except (ValueError, OSError) as e:
            raise DataUnavailableError(
                f"Could not parse the '{name.value}' AviList table from {path}: {e}"
            ) from e

        missing = SCHEMAS[name].missing_fields(frame.columns)
        if missing:
            logger.warning(
                "Bundled table is missing expected fields",
                table=name.value,
                missing_fields=missing,
            )

        logger.debug("Loaded AviList table", table=name.value, rows=len(frame), path=str(path))
        return frame

    @staticmethod
    def _convert_columns(name: TableName, frame: pd.DataFrame) -> pd.DataFrame:
        """Convert the non-text columns of a freshly read table."""
        for column in _INTEGER_COLUMNS.get(name, ()):
            if column in frame.columns:
                frame[column] = pd.to_numeric(frame[column]).astype("Int64")
        for column in _BOOLEAN_COLUMNS.get(name, ()):
            if column in frame.columns:
                values = frame[column].str.lower().map(_BOOLEAN_VALUES)
                if values.isna().any():
                    raise ValueError(f"column {column} holds non-boolean values")
                frame[column] = values.astype(bool)
        return frame


_default_registry: DatasetRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> DatasetRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = DatasetRegistry()
    return _default_registry
