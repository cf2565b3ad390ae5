"""
Report Assembly

Flattens finalized averages into AverageRecord rows.

    cost_rate rows  -> label "Cost per $"
    per_pound rows  -> label "$ per Pound"
    weight rows     -> label = weight bucket display name

Only methods in REPORTED_METHODS (Economy, Ground) are kept. Rows are sorted
by the region's display name ("Alaska" < "All Regions" < "Great Plains" ...).
"""

from typing import NamedTuple

from ..data.reference import Region, report_shipping_method
from .aggregate import FinalAverages
from .arithmetic import finite_or_none

COST_PER_DOLLAR_LABEL = "Cost per $"
COST_PER_POUND_LABEL = "$ per Pound"


class AverageRecord(NamedTuple):
    region: Region
    shipping_method: str
    label: str
    avg: float

    def to_dict(self) -> dict[str, str | float | None]:
        return {
            "region": self.region.key,
            "shipping_method": self.shipping_method,
            "label": self.label,
            "avg": finite_or_none(self.avg),
        }


def assemble_report(averages: FinalAverages) -> list[AverageRecord]:
    """Filter, label and sort finalized averages into report rows."""
    records = []

    for (region, shipping_method), avg in averages.cost_rate.items():
        if not report_shipping_method(shipping_method):
            continue
        records.append(AverageRecord(region, shipping_method.display_name, COST_PER_DOLLAR_LABEL, avg))

    for (region, shipping_method), avg in averages.per_pound.items():
        if not report_shipping_method(shipping_method):
            continue
        records.append(AverageRecord(region, shipping_method.display_name, COST_PER_POUND_LABEL, avg))

    for (region, weight_range, shipping_method), avg in averages.weight.items():
        if not report_shipping_method(shipping_method):
            continue
        records.append(AverageRecord(region, shipping_method.display_name, weight_range.display_name, avg))

    records.sort(key=lambda record: record.region.display_name)
    return records
