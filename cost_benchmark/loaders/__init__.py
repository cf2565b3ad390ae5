"""
Loaders Package

Source-specific readers for order export data.
"""

from .order_export import load_order_rows, rows_from_frame, OrderExportError, DEFAULT_INPUT_FILE

__all__ = [
    "load_order_rows",
    "rows_from_frame",
    "OrderExportError",
    "DEFAULT_INPUT_FILE",
]
