"""Report version, stamped into the run summary."""

VERSION = "2025.12.1"
