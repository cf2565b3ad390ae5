"""
Build Shipping Cost Benchmark Report
====================================

Reads the per-order cost export, classifies every order and writes the
benchmark averages.

Outputs (in --output-dir):
    output.json       Normalized orders
    errors.json       Rows rejected because the weight is not a number
    avg_output.json   Report averages
    output.csv        Report averages as a flat table

Usage:
    python -m cost_benchmark.scripts.build_report
    python -m cost_benchmark.scripts.build_report --input exports/orders.csv
    python -m cost_benchmark.scripts.build_report --output-dir reports/2025-12
    python -m cost_benchmark.scripts.build_report --dry-run
"""

import argparse
import sys
from pathlib import Path

from cost_benchmark.calculate_averages import BenchmarkResult, calculate_averages
from cost_benchmark.loaders import load_order_rows, DEFAULT_INPUT_FILE
from cost_benchmark.outputs import write_all
from cost_benchmark.version import VERSION


# =============================================================================
# PIPELINE
# =============================================================================

def run_pipeline(input_path: Path) -> BenchmarkResult:
    """Load the export and compute the report."""
    print(f"  Loading orders from {input_path}...")
    rows = load_order_rows(input_path)
    print(f"  Loaded {len(rows):,} rows")

    print("  Calculating averages...")
    return calculate_averages(rows)


def print_summary(result: BenchmarkResult) -> None:
    print("\n" + "=" * 60)
    print("REPORT SUMMARY")
    print("=" * 60)
    print(f"Orders normalized: {len(result.orders):,}")
    print(f"Rows rejected: {len(result.errors):,}")
    print(f"Report rows: {len(result.averages):,}")

    regions = sorted({record.region.display_name for record in result.averages})
    if regions:
        print(f"Regions reported: {', '.join(regions)}")


# =============================================================================
# MAIN
# =============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Build the shipping cost benchmark report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m cost_benchmark.scripts.build_report
  python -m cost_benchmark.scripts.build_report --input exports/orders.csv
  python -m cost_benchmark.scripts.build_report --output-dir reports/2025-12
  python -m cost_benchmark.scripts.build_report --dry-run
        """
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=Path(DEFAULT_INPUT_FILE),
        help=f"Order export CSV (default: {DEFAULT_INPUT_FILE})"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for output files (default: current directory)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute the report but don't write any files"
    )

    args = parser.parse_args()

    print("=" * 60)
    print(f"SHIPPING COST BENCHMARK (v{VERSION})")
    print("=" * 60)

    try:
        print("\nStep 1: Calculating report...")
        result = run_pipeline(args.input)
        print_summary(result)

        if args.dry_run:
            print(f"\n[DRY RUN] Would write outputs to: {args.output_dir}")
            return

        print(f"\nStep 2: Writing outputs to {args.output_dir}...")
        for path in write_all(result.orders, result.errors, result.averages, args.output_dir):
            print(f"  Saved {path}")

    except KeyboardInterrupt:
        print("\n\nCancelled.")
        sys.exit(1)
    except (FileNotFoundError, ValueError) as e:
        print(f"\nError: {e}")
        sys.exit(1)

    print("\n" + "=" * 60)
    print("Done.")
    print("=" * 60)


if __name__ == "__main__":
    main()
