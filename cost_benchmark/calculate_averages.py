"""
Shipping Cost Benchmark Calculator

Rows in, averages out. The input can come from any source (CSV export,
DataFrame, manual creation) as long as each row is a RawOrderRow.

STEPS
-----
    normalize_orders()  - classify each row into an Order, or reject it
    Aggregator          - running sums per (region, method) and
                          (region, weight, method), plus the Region.ALL rollup
    assemble_report()   - Economy/Ground averages, labelled and sorted

OUTPUT
------
    BenchmarkResult.orders    - normalized orders, in input order
    BenchmarkResult.errors    - rows rejected for an unparseable weight
    BenchmarkResult.averages  - AverageRecord rows for the report

USAGE
-----
    from cost_benchmark.calculate_averages import calculate_averages
    result = calculate_averages(rows)
"""

from typing import Iterable, NamedTuple

from .pipeline import (
    AverageRecord,
    Aggregator,
    Order,
    RawOrderRow,
    assemble_report,
    normalize_orders,
)


class BenchmarkResult(NamedTuple):
    orders: list[Order]
    errors: list[RawOrderRow]
    averages: list[AverageRecord]


def calculate_averages(rows: Iterable[RawOrderRow]) -> BenchmarkResult:
    """
    Run the full benchmark over a sequence of raw rows.

    All rows are consumed before any average is computed.
    """
    orders, errors = normalize_orders(rows)
    averages = Aggregator().add_all(orders).finalize()
    return BenchmarkResult(
        orders=orders,
        errors=errors,
        averages=assemble_report(averages),
    )
