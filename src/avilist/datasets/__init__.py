"""Bundled dataset package.

This package contains the read-only storage for the AviList tables:
- DatasetRegistry: Lazy, lock-guarded holder of the full, short and metadata tables
- TableSchema: Per-table descriptors naming bundle files and expected fields
"""

from avilist.datasets.registry import DatasetRegistry, get_default_registry
from avilist.datasets.schema import SCHEMAS, VALID_RANKS, VALID_VERSIONS, TableName, TableSchema

__all__ = [
    "DatasetRegistry",
    "SCHEMAS",
    "TableName",
    "TableSchema",
    "VALID_RANKS",
    "VALID_VERSIONS",
    "get_default_registry",
]
