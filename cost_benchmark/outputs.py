"""
Report Outputs

Writes orders, rejected rows and averages to disk.

    output.json       - normalized orders
    errors.json       - rows rejected during normalization
    avg_output.json   - report averages
    output.csv        - report averages (region, shipping_method, label, avg)

JSON has no inf/nan, so non-finite values are written as null.
"""

import json
from pathlib import Path
from typing import Iterable

import polars as pl

from .pipeline import AverageRecord, Order, RawOrderRow, REPORT_COLS


ORDERS_JSON = "output.json"
ERRORS_JSON = "errors.json"
AVERAGES_JSON = "avg_output.json"
AVERAGES_CSV = "output.csv"


def _write_json(records: list[dict], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, indent=2, allow_nan=False))
    return path


def write_orders_json(orders: Iterable[Order], path: str | Path) -> Path:
    return _write_json([order.to_dict() for order in orders], Path(path))


def write_errors_json(rows: Iterable[RawOrderRow], path: str | Path) -> Path:
    return _write_json([row.to_dict() for row in rows], Path(path))


def write_averages_json(averages: Iterable[AverageRecord], path: str | Path) -> Path:
    return _write_json([record.to_dict() for record in averages], Path(path))


def averages_frame(averages: Iterable[AverageRecord]) -> pl.DataFrame:
    """
    Tabular form of the report.

    Returns:
        DataFrame with columns REPORT_COLS, avg as Float64 (inf/nan kept)
    """
    records = list(averages)
    return pl.DataFrame(
        {
            "region": [record.region.key for record in records],
            "shipping_method": [record.shipping_method for record in records],
            "label": [record.label for record in records],
            "avg": [record.avg for record in records],
        },
        schema={
            "region": pl.Utf8,
            "shipping_method": pl.Utf8,
            "label": pl.Utf8,
            "avg": pl.Float64,
        },
    ).select(REPORT_COLS)


def write_averages_csv(averages: Iterable[AverageRecord], path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    averages_frame(averages).write_csv(path)
    return path


def write_all(
    orders: list[Order],
    errors: list[RawOrderRow],
    averages: list[AverageRecord],
    output_dir: str | Path,
) -> list[Path]:
    """Write every output file into output_dir, returning the paths written."""
    output_dir = Path(output_dir)
    return [
        write_orders_json(orders, output_dir / ORDERS_JSON),
        write_errors_json(errors, output_dir / ERRORS_JSON),
        write_averages_json(averages, output_dir / AVERAGES_JSON),
        write_averages_csv(averages, output_dir / AVERAGES_CSV),
    ]
