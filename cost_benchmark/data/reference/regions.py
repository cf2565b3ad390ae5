"""
Reporting Regions

Groups provinces into the destination regions used in the benchmark report.

ROLLUP
------
Region.ALL is never assigned to an order. It is the aggregation key for the
continental total, which takes every order except those in
ROLLUP_EXCLUDED_REGIONS. Puerto Rico is NOT excluded.
"""

from enum import Enum

from .zip_ranges import Province


class Region(Enum):
    """Member value is the display name used in the report."""

    ALL = "All Regions"
    NORTHEAST = "Northeast"
    MID_ATLANTIC = "Mid-Atlantic"
    SOUTHEAST = "Southeast"
    MIDWEST = "Midwest"
    GREAT_PLAINS = "Great Plains"
    SOUTHWEST = "Southwest"
    MOUNTAIN = "Mountain"
    WEST_COAST = "West Coast"
    PUERTO_RICO = "Puerto Rico"
    HAWAII = "Hawaii"
    ALASKA = "Alaska"
    INTERNATIONAL = "International"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """Identifier written to JSON/CSV outputs (e.g. "MidAtlantic")."""
        return REGION_KEYS[self]


REGION_KEYS = {
    Region.ALL: "All",
    Region.NORTHEAST: "Northeast",
    Region.MID_ATLANTIC: "MidAtlantic",
    Region.SOUTHEAST: "Southeast",
    Region.MIDWEST: "Midwest",
    Region.GREAT_PLAINS: "GreatPlains",
    Region.SOUTHWEST: "Southwest",
    Region.MOUNTAIN: "Mountain",
    Region.WEST_COAST: "WestCoast",
    Region.PUERTO_RICO: "PuertoRico",
    Region.HAWAII: "Hawaii",
    Region.ALASKA: "Alaska",
    Region.INTERNATIONAL: "International",
}


REGION_PROVINCES = {
    Region.NORTHEAST: ("ME", "NH", "VT", "MA", "RI", "CT", "NY", "NJ", "PA"),
    Region.MID_ATLANTIC: ("DC", "DE", "MD", "VA", "WV", "NC"),
    Region.SOUTHEAST: ("KY", "LA", "AR", "SC", "GA", "FL", "AL", "MS", "TN"),
    Region.MIDWEST: ("OH", "MI", "IN", "IL", "WI", "MN", "IA", "MO"),
    Region.GREAT_PLAINS: ("ND", "SD", "NE", "KS", "OK"),
    Region.SOUTHWEST: ("TX", "NM", "AZ"),
    Region.MOUNTAIN: ("CO", "WY", "MT", "ID", "UT", "NV"),
    Region.WEST_COAST: ("CA", "OR", "WA"),
    Region.PUERTO_RICO: ("PR",),
    Region.HAWAII: ("HI",),
    Region.ALASKA: ("AK",),
}

PROVINCE_REGION = {
    Province(code): region
    for region, codes in REGION_PROVINCES.items()
    for code in codes
}

# Orders in these regions stay out of the Region.ALL rollup
ROLLUP_EXCLUDED_REGIONS = frozenset({
    Region.INTERNATIONAL,
    Region.ALASKA,
    Region.HAWAII,
})


def region_from_province(province: Province) -> Region:
    return PROVINCE_REGION[province]
