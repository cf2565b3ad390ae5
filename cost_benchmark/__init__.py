"""
Shipping Cost Benchmark

Classifies per-order shipping spend by destination region, carrier service and
weight bucket, then averages it into a flat benchmarking report.

USAGE
-----
    from cost_benchmark.calculate_averages import calculate_averages
    result = calculate_averages(rows)
"""

from .version import VERSION

__all__ = ["VERSION"]
