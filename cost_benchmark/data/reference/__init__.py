"""
Reference Data

Static lookup tables for zips, regions, carrier services and weight buckets.
"""

from .zip_ranges import Province, ZipRange, ZIP_RANGES, find_province
from .regions import (
    Region,
    PROVINCE_REGION,
    ROLLUP_EXCLUDED_REGIONS,
    region_from_province,
)
from .service_mapping import (
    ShippingMethod,
    SERVICE_MAPPING,
    REPORTED_METHODS,
    get_shipping_method,
    report_shipping_method,
)
from .weight_ranges import WeightRange, UNDER_2_LBS_MAX, BETWEEN_2_AND_5_LBS_MAX


# =============================================================================
# VALIDATION
# =============================================================================

def validate_reference_data() -> None:
    """
    Validate reference table integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    for position, zip_range in enumerate(ZIP_RANGES):
        if zip_range.low > zip_range.high:
            errors.append(
                f"ZIP_RANGES[{position}]: low {zip_range.low} > high {zip_range.high}"
            )
        if zip_range.low < 0:
            errors.append(f"ZIP_RANGES[{position}]: negative zip {zip_range.low}")

    for province in Province:
        if province not in PROVINCE_REGION:
            errors.append(f"{province.value}: no region assigned")

    if Region.ALL in PROVINCE_REGION.values():
        errors.append("Region.ALL is a rollup key and cannot be assigned to a province")

    for label, method in SERVICE_MAPPING.items():
        if not isinstance(method, ShippingMethod):
            errors.append(f"SERVICE_MAPPING[{label!r}]: {method!r} is not a ShippingMethod")

    if errors:
        raise ValueError("Reference data errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_reference_data()

__all__ = [
    # Zip ranges
    "Province",
    "ZipRange",
    "ZIP_RANGES",
    "find_province",
    # Regions
    "Region",
    "PROVINCE_REGION",
    "ROLLUP_EXCLUDED_REGIONS",
    "region_from_province",
    # Carrier services
    "ShippingMethod",
    "SERVICE_MAPPING",
    "REPORTED_METHODS",
    "get_shipping_method",
    "report_shipping_method",
    # Weight buckets
    "WeightRange",
    "UNDER_2_LBS_MAX",
    "BETWEEN_2_AND_5_LBS_MAX",
    # Validation
    "validate_reference_data",
]
