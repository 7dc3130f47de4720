"""Load freelancer records from a delimited file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd

from freelancer_graph.records import Freelancer
from freelancer_graph.utils.io_utils import default_settings
from freelancer_graph.utils.schema_utils import (
    CATEGORICAL_COLUMNS,
    FREELANCER_ID,
    NUMERIC_COLUMNS,
)

logger = logging.getLogger(__name__)


class IngestError(ValueError):
    """Raised when an input file cannot be turned into freelancer records."""


def load_freelancers(
    path: str | Path,
    settings: Optional[dict[str, Any]] = None,
) -> list[Freelancer]:
    """Load freelancer records from a CSV file.

    Categorical cells are read verbatim as strings; empty cells stay empty
    strings rather than becoming NaN.

    Args:
        path: Path to the input file
        settings: Settings dictionary; ``ingest.columns`` maps canonical
            field names to input headers

    Returns:
        Records in file order

    Raises:
        FileNotFoundError: If the file does not exist
        IngestError: On missing columns, bad numbers, or bad ids

    """
    ingest_settings = (settings or default_settings()).get("ingest", {})
    columns: dict[str, str] = {
        **default_settings()["ingest"]["columns"],
        **ingest_settings.get("columns", {}),
    }
    delimiter = ingest_settings.get("delimiter", ",")

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    try:
        df = pd.read_csv(
            path,
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
        )
    except pd.errors.EmptyDataError as e:
        raise IngestError(f"Input file {path} is empty") from e
    logger.info(f"Read {len(df)} rows from {path}")

    missing = [header for header in columns.values() if header not in df.columns]
    if missing:
        raise IngestError(f"Input file {path} is missing columns: {missing}")

    df = df[list(columns.values())].rename(columns={v: k for k, v in columns.items()})

    ids = _parse_numeric(df, FREELANCER_ID, columns[FREELANCER_ID])
    invalid_ids = (ids % 1 != 0) | (ids < 0)
    if invalid_ids.any():
        bad_row = int(df.index[invalid_ids][0])
        raise IngestError(
            f"Column '{columns[FREELANCER_ID]}' row {bad_row}: id must be a non-negative integer",
        )
    duplicated = ids[ids.duplicated()]
    if not duplicated.empty:
        raise IngestError(f"Duplicate freelancer ids: {sorted({int(v) for v in duplicated})}")

    numeric = {
        column: _parse_numeric(df, column, columns[column]) for column in NUMERIC_COLUMNS
    }

    records = [
        Freelancer(
            id=int(ids.iat[row]),
            **{column: df[column].iat[row] for column in CATEGORICAL_COLUMNS},
            **{column: float(values.iat[row]) for column, values in numeric.items()},
        )
        for row in range(len(df))
    ]
    logger.info(f"Loaded {len(records)} freelancer records")
    return records


def _parse_numeric(df: pd.DataFrame, column: str, header: str) -> pd.Series:
    values = pd.to_numeric(df[column].str.strip(), errors="coerce")
    invalid = values.isna()
    if invalid.any():
        row = int(df.index[invalid][0])
        raise IngestError(
            f"Column '{header}' row {row}: cannot parse {df[column].iat[row]!r} as a number",
        )
    return values
