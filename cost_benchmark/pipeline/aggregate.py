"""
Order Aggregation

Accumulates normalized orders into three running-sum tables and finalizes
them into averages.

TABLES
------
    cost_rate   (region, method)            -> avg shipping cost / avg retail value
    per_pound   (region, method)            -> avg of per-order shipping cost per lb
    weight      (region, weight, method)    -> avg shipping cost

cost_rate and per_pound share a key shape but are tracked separately; each
feeds a different average.

Every order is added under its own region and, unless the region is in
ROLLUP_EXCLUDED_REGIONS, again under Region.ALL.

USAGE
-----
    aggregator = Aggregator()
    for order in orders:
        aggregator.add(order)
    averages = aggregator.finalize()
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple

from ..data.reference import Region, ShippingMethod, WeightRange, ROLLUP_EXCLUDED_REGIONS
from .arithmetic import divide
from .normalize import Order

MethodKey = tuple[Region, ShippingMethod]
WeightKey = tuple[Region, WeightRange, ShippingMethod]


# =============================================================================
# COUNTER
# =============================================================================

@dataclass
class Counter:
    """Running sums for one aggregation key."""

    total_retail_cost: float = 0.0
    total_item_count: int = 0
    total_shipping_cost: float = 0.0
    total_shipping_cost_per_pound: float = 0.0

    def update(self, retail_cost: float, shipping_cost: float, shipping_cost_per_pound: float) -> None:
        self.total_retail_cost += retail_cost
        self.total_item_count += 1
        self.total_shipping_cost += shipping_cost
        self.total_shipping_cost_per_pound += shipping_cost_per_pound

    def cost_per_dollar(self) -> float:
        """Ratio of averages: avg shipping cost / avg retail value."""
        avg_retail_cost = divide(self.total_retail_cost, self.total_item_count)
        avg_shipping_cost = divide(self.total_shipping_cost, self.total_item_count)
        return divide(avg_shipping_cost, avg_retail_cost)

    def cost_per_pound(self) -> float:
        """Average of the per-order shipping cost per pound."""
        return divide(self.total_shipping_cost_per_pound, self.total_item_count)

    def average_shipping_cost(self) -> float:
        return divide(self.total_shipping_cost, self.total_item_count)


# =============================================================================
# FINAL AVERAGES
# =============================================================================

class FinalAverages(NamedTuple):
    """Read-only averages produced by Aggregator.finalize()."""

    cost_rate: Mapping[MethodKey, float]
    per_pound: Mapping[MethodKey, float]
    weight: Mapping[WeightKey, float]


# =============================================================================
# AGGREGATOR
# =============================================================================

class Aggregator:
    """Owns the three aggregation tables for a single pass over the orders."""

    def __init__(self):
        self.cost_rate_counters: dict[MethodKey, Counter] = {}
        self.per_pound_counters: dict[MethodKey, Counter] = {}
        self.weight_counters: dict[WeightKey, Counter] = {}

    def add(self, order: Order) -> None:
        self._add_for_region(order, order.region)

        # Region.ALL is the continental US total
        if order.region in ROLLUP_EXCLUDED_REGIONS:
            return
        self._add_for_region(order, Region.ALL)

    def add_all(self, orders: Iterable[Order]) -> "Aggregator":
        for order in orders:
            self.add(order)
        return self

    def _add_for_region(self, order: Order, region: Region) -> None:
        method_key = (region, order.shipping_method)
        weight_key = (region, order.ship_weight, order.shipping_method)

        _update(self.cost_rate_counters, method_key, order)
        _update(self.per_pound_counters, method_key, order)
        _update(self.weight_counters, weight_key, order)

    def finalize(self) -> FinalAverages:
        return FinalAverages(
            cost_rate=MappingProxyType({
                key: counter.cost_per_dollar()
                for key, counter in self.cost_rate_counters.items()
            }),
            per_pound=MappingProxyType({
                key: counter.cost_per_pound()
                for key, counter in self.per_pound_counters.items()
            }),
            weight=MappingProxyType({
                key: counter.average_shipping_cost()
                for key, counter in self.weight_counters.items()
            }),
        )


def _update(table: dict, key: tuple, order: Order) -> None:
    counter = table.get(key)
    if counter is None:
        counter = table[key] = Counter()
    counter.update(order.retail_value, order.shipping_cost, order.shipping_cost_per_pound)
