"""
Pipeline Package

Core classification and aggregation logic (source-agnostic):
- zips / weights: classify a raw zip and weight
- normalize: raw export row -> Order (or rejection)
- aggregate: Orders -> running sums -> averages
- report: averages -> sorted AverageRecord rows
"""

from .columns import INPUT_COLUMNS, REQUIRED_INPUT_COLS, REPORT_COLS, MissingHeaderError, resolve_columns
from .zips import ZipParseError, parse_zip, region_from_zip
from .weights import weight_range_from_lbs, weight_range_from_str
from .normalize import RawOrderRow, Order, normalize_order, normalize_orders
from .aggregate import Counter, Aggregator, FinalAverages
from .report import AverageRecord, assemble_report, COST_PER_DOLLAR_LABEL, COST_PER_POUND_LABEL
