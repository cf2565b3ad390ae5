"""Weight bucketing on the raw export weight."""

from ..data.reference import WeightRange, UNDER_2_LBS_MAX, BETWEEN_2_AND_5_LBS_MAX
from .parsing import parse_float


def weight_range_from_lbs(weight_lbs: float) -> WeightRange:
    # NaN fails both comparisons and lands in OVER_5_LBS
    if weight_lbs < UNDER_2_LBS_MAX:
        return WeightRange.UNDER_2_LBS
    if weight_lbs < BETWEEN_2_AND_5_LBS_MAX:
        return WeightRange.BETWEEN_2_AND_5_LBS
    return WeightRange.OVER_5_LBS


def weight_range_from_str(weight_text: str) -> WeightRange:
    """
    Text-input form of weight_range_from_lbs; unparseable weights are UNKNOWN.

    normalize_order parses the weight itself (it also needs the number for the
    per-pound cost) and calls weight_range_from_lbs, so for any row it keeps,
    its bucket equals weight_range_from_str(row.ship_weight). Rows whose
    weight would bucket as UNKNOWN are the rejected rows.
    """
    try:
        weight_lbs = parse_float(weight_text)
    except ValueError:
        return WeightRange.UNKNOWN
    return weight_range_from_lbs(weight_lbs)
