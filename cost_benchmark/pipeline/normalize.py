"""
Order Normalization

Turns a raw export row into a classified Order.

REJECTION
---------
A row is rejected only when its weight is not a number, since the weight is
needed for the per-pound cost. Every other malformed field is absorbed:

    zip             -> Region.INTERNATIONAL
    carrier service -> ShippingMethod.UNKNOWN
    value / costs   -> 0.0

A weight of 0 is NOT rejected: shipping_cost_per_pound becomes inf (or nan when
the cost is also 0) and is carried into the aggregates unchanged.
"""

from typing import Iterable, NamedTuple

from ..data.reference import Region, ShippingMethod, WeightRange, get_shipping_method
from .arithmetic import divide, finite_or_none
from .parsing import parse_float, parse_float_or_zero
from .weights import weight_range_from_lbs
from .zips import region_from_zip


class RawOrderRow(NamedTuple):
    """The seven export fields of one order, as text."""

    zip: str
    retail_value: str
    ship_weight: str
    shipping_method: str
    label_cost: str
    packaging_cost: str
    labor_cost: str

    def to_dict(self) -> dict[str, str]:
        return self._asdict()


class Order(NamedTuple):
    ship_weight: WeightRange
    retail_value: float
    shipping_cost: float
    shipping_cost_per_pound: float
    shipping_method: ShippingMethod
    region: Region

    def to_dict(self) -> dict[str, str | float | None]:
        """JSON-ready form: enums by key, non-finite floats as None."""
        return {
            "ship_weight": self.ship_weight.key,
            "retail_value": finite_or_none(self.retail_value),
            "shipping_cost": finite_or_none(self.shipping_cost),
            "shipping_cost_per_pound": finite_or_none(self.shipping_cost_per_pound),
            "shipping_method": self.shipping_method.display_name,
            "region": self.region.key,
        }


def normalize_order(row: RawOrderRow) -> Order | None:
    """
    Build an Order from a raw row.

    Returns:
        The Order, or None if the weight cannot be parsed
    """
    try:
        weight_lbs = parse_float(row.ship_weight)
    except ValueError:
        return None

    label_cost = parse_float_or_zero(row.label_cost)
    packaging_cost = parse_float_or_zero(row.packaging_cost)
    labor_cost = parse_float_or_zero(row.labor_cost)
    shipping_cost = label_cost + packaging_cost + labor_cost

    return Order(
        ship_weight=weight_range_from_lbs(weight_lbs),
        retail_value=parse_float_or_zero(row.retail_value),
        shipping_cost=shipping_cost,
        shipping_cost_per_pound=divide(shipping_cost, weight_lbs),
        shipping_method=get_shipping_method(row.shipping_method),
        region=region_from_zip(row.zip),
    )


def normalize_orders(rows: Iterable[RawOrderRow]) -> tuple[list[Order], list[RawOrderRow]]:
    """Split rows into normalized orders and rejected raw rows, preserving order."""
    orders = []
    errors = []
    for row in rows:
        order = normalize_order(row)
        if order is None:
            errors.append(row)
        else:
            orders.append(order)
    return orders, errors
