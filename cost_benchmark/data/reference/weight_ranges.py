"""
Weight Buckets

Orders are bucketed on the weight reported in the export (lbs):

    weight < 2.0            -> UNDER_2_LBS
    2.0 <= weight < 5.0     -> BETWEEN_2_AND_5_LBS
    weight >= 5.0           -> OVER_5_LBS
    unparseable             -> UNKNOWN
"""

from enum import Enum

UNDER_2_LBS_MAX = 2.0            # Exclusive upper bound
BETWEEN_2_AND_5_LBS_MAX = 5.0    # Exclusive upper bound


class WeightRange(Enum):
    """Member value is the label used for the weight rows of the report."""

    UNDER_2_LBS = "Orders under 2 Pounds"
    BETWEEN_2_AND_5_LBS = "Orders between 2 and 5 pounds"
    OVER_5_LBS = "Orders over 5 Pounds"
    UNKNOWN = "Orders where weight is not known"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """Identifier written to JSON outputs (e.g. "Under2Lbs")."""
        return WEIGHT_RANGE_KEYS[self]


WEIGHT_RANGE_KEYS = {
    WeightRange.UNDER_2_LBS: "Under2Lbs",
    WeightRange.BETWEEN_2_AND_5_LBS: "Between2And5Lbs",
    WeightRange.OVER_5_LBS: "Over5Lbs",
    WeightRange.UNKNOWN: "Unknown",
}
