"""
Numeric Field Parsing

Export values are parsed strictly: no surrounding whitespace, no digit
separators. Decimal and exponent forms are accepted, as are inf/infinity/nan
in any case.
"""

import re

FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


def parse_float(text: str) -> float:
    """Parse a float, raising ValueError for anything outside the export grammar."""
    if not FLOAT_PATTERN.fullmatch(text):
        raise ValueError(f"Invalid float: {text!r}")
    return float(text)


def parse_float_or_zero(text: str) -> float:
    """Parse a cost/value field; unparseable values count as 0.0."""
    try:
        return parse_float(text)
    except ValueError:
        return 0.0
