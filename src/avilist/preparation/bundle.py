"""Writing the dataset bundle read by the registry."""

from pathlib import Path

import pandas as pd
import structlog

from avilist.datasets.schema import SCHEMAS, TableName

logger = structlog.get_logger(__name__)


def write_bundle(
    full: pd.DataFrame,
    short: pd.DataFrame,
    metadata: pd.DataFrame,
    output_dir: Path,
) -> dict[TableName, Path]:
    """Write the three bundle files into ``output_dir``.

    Returns:
        Mapping of table name to the file written
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written: dict[TableName, Path] = {}

    tables = {TableName.FULL: full, TableName.SHORT: short, TableName.METADATA: metadata}
    for name, frame in tables.items():
        path = output_dir / SCHEMAS[name].filename
        frame.to_csv(path, index=False)
        written[name] = path
        logger.info("Wrote bundle table", table=name.value, rows=len(frame), path=str(path))

    return written
