"""
Column Schema Definitions

Documents the input headers, how they map onto RawOrderRow fields, and the
report output columns.
"""


# =============================================================================
# REQUIRED INPUT COLUMNS (must be present in the source export)
# =============================================================================

# Export header -> RawOrderRow field
INPUT_COLUMNS = {
    "Recipient Zip": "zip",                                 # Destination zip, may carry +4
    "Retail Value (Ref)": "retail_value",                   # Order retail value ($)
    "Weight of Units Shipped (lbs)": "ship_weight",         # Shipped weight (lbs)
    "Carrier Service": "shipping_method",                   # Free-text carrier service label
    "Label (Carrier) Spend": "label_cost",                  # Carrier label cost ($)
    "Material (Packaging) Spend": "packaging_cost",         # Packaging cost ($)
    "Labor (Pick/Pack) Spend": "labor_cost",                # Pick/pack labor cost ($)
}

REQUIRED_INPUT_COLS = list(INPUT_COLUMNS)


# =============================================================================
# REPORT COLUMNS (AverageRecord, in output order)
# =============================================================================

REPORT_COLS = [
    "region",               # Region key (e.g. "MidAtlantic", "All")
    "shipping_method",      # Shipping method display name
    "label",                # "Cost per $", "$ per Pound", or weight bucket name
    "avg",                  # Averaged value
]


# =============================================================================
# VALIDATION
# =============================================================================

class MissingHeaderError(ValueError):
    """Raised when the source table lacks one or more required headers."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required column(s): {', '.join(missing)}")


def resolve_columns(headers: list[str]) -> dict[str, int]:
    """
    Find the position of every required header.

    Args:
        headers: Header row of the source table

    Returns:
        RawOrderRow field name -> column index

    Raises:
        MissingHeaderError: If any required header is absent (lists all of them)
    """
    positions = {}
    for index, header in enumerate(headers):
        field = INPUT_COLUMNS.get(header)
        if field is not None:
            positions[field] = index

    missing = [header for header, field in INPUT_COLUMNS.items() if field not in positions]
    if missing:
        raise MissingHeaderError(missing)

    return positions
