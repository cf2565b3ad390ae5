"""
Benchmark Data

Static reference tables used to classify orders.

Structure:
    - reference/: zip ranges, regions, carrier services, weight buckets
"""

from .reference import (
    Province,
    ZipRange,
    ZIP_RANGES,
    find_province,
    Region,
    PROVINCE_REGION,
    ROLLUP_EXCLUDED_REGIONS,
    region_from_province,
    ShippingMethod,
    SERVICE_MAPPING,
    REPORTED_METHODS,
    get_shipping_method,
    report_shipping_method,
    WeightRange,
    UNDER_2_LBS_MAX,
    BETWEEN_2_AND_5_LBS_MAX,
)

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
]
