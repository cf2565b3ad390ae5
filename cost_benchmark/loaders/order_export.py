"""
Load Order Export

Reads the per-order cost export (CSV) into RawOrderRow values.

Every column is read as text; parsing and defaulting happen in
pipeline.normalize. Empty cells come back as "" rather than null.
"""

from pathlib import Path

import polars as pl

from ..pipeline.columns import INPUT_COLUMNS, resolve_columns
from ..pipeline.normalize import RawOrderRow


DEFAULT_INPUT_FILE = "input.csv"


class OrderExportError(ValueError):
    """Raised when the export file cannot be read as CSV."""


def load_order_rows(path: str | Path = DEFAULT_INPUT_FILE) -> list[RawOrderRow]:
    """
    Load order rows from a CSV export.

    Args:
        path: CSV file with the headers listed in pipeline.columns.INPUT_COLUMNS

    Returns:
        One RawOrderRow per data row, in file order

    Raises:
        FileNotFoundError: If path does not exist
        OrderExportError: If the file is not well-formed CSV (ragged rows, bad encoding)
        MissingHeaderError: If any required header is absent
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Order export not found: {path}")

    try:
        df = pl.read_csv(path, infer_schema=False)  # Keep every field as text
    except pl.exceptions.PolarsError as e:
        raise OrderExportError(f"Could not read order export {path}: {e}") from e

    return rows_from_frame(df)


def rows_from_frame(df: pl.DataFrame) -> list[RawOrderRow]:
    """
    Convert a DataFrame holding the export headers into RawOrderRow values.

    Extra columns are ignored. Headers are checked before any row is built.
    Null cells (empty fields in the CSV) become "".
    """
    resolve_columns(df.columns)
    headers = {field: header for header, field in INPUT_COLUMNS.items()}

    selected = df.select([
        pl.col(headers[field]).cast(pl.Utf8).fill_null("").alias(field)
        for field in RawOrderRow._fields
    ])

    return [RawOrderRow(*values) for values in selected.iter_rows()]
