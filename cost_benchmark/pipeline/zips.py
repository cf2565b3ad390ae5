"""
Zip Code Resolution

Recipient zip text -> zip integer -> province -> region.

Zip text may carry a +4 suffix ("20044-2932"); only the part before the first
hyphen is used. Resolution never fails: unparseable zips and zips outside every
US range resolve to Region.INTERNATIONAL.
"""

import re

from ..data.reference import Province, Region, find_province, region_from_province

ZIP_PATTERN = re.compile(r"\+?[0-9]+")


class ZipParseError(ValueError):
    """Raised when the zip prefix is empty or not a non-negative integer."""


def parse_zip(zip_text: str) -> int:
    """
    Parse the 5-digit part of a zip code.

    Args:
        zip_text: Raw zip, optionally with a "-NNNN" suffix

    Returns:
        Zip as an integer (leading zeros dropped: "00601" -> 601)

    Raises:
        ZipParseError: If zip_text is empty or the prefix is not numeric
    """
    if not zip_text:
        raise ZipParseError("No zip code")

    prefix = zip_text.split("-")[0]
    if not ZIP_PATTERN.fullmatch(prefix):
        raise ZipParseError(f"Invalid zip code: {zip_text!r}")

    return int(prefix)


def province_from_zip(zip_text: str) -> Province | None:
    """Province for a raw zip, or None when it is unparseable or not in any range."""
    try:
        zip_code = parse_zip(zip_text)
    except ZipParseError:
        return None
    return find_province(zip_code)


def region_from_zip(zip_text: str) -> Region:
    province = province_from_zip(zip_text)
    if province is None:
        return Region.INTERNATIONAL
    return region_from_province(province)
