"""
Tests for the export loader, output writers and the build_report script

Run with: pytest cost_benchmark/tests/test_outputs.py -v
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import json
import math
import warnings

import polars as pl
import pytest

from cost_benchmark.calculate_averages import calculate_averages
from cost_benchmark.data.reference import Region
from cost_benchmark.loaders import OrderExportError, load_order_rows, rows_from_frame
from cost_benchmark.outputs import (
    AVERAGES_CSV,
    AVERAGES_JSON,
    ERRORS_JSON,
    ORDERS_JSON,
    averages_frame,
    write_all,
    write_averages_json,
)
from cost_benchmark.pipeline import REPORT_COLS, AverageRecord, MissingHeaderError, RawOrderRow
from cost_benchmark.scripts import build_report


HEADER = (
    "Order Number,Recipient Zip,Retail Value (Ref),Weight of Units Shipped (lbs),"
    "Carrier Service,Label (Carrier) Spend,Material (Packaging) Spend,Labor (Pick/Pack) Spend"
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def export_csv(tmp_path):
    """Small export: two reportable orders, one rejected row, one zero-weight row."""
    path = tmp_path / "input.csv"
    path.write_text("\n".join([
        HEADER,
        "1001,68102,60.00,3,FedEx Ground,4.00,1.50,0.50",
        "1002,00601,20.00,1.5,UPS SurePost,3.00,,1.00",
        "1003,10016,45.00,unknown,FedEx Ground,5.00,1.00,1.00",
        "1004,20044-2932,30.00,0,FedEx Ground,2.00,0.50,0.50",
    ]) + "\n")
    return path


# =============================================================================
# LOADER TESTS
# =============================================================================

class TestLoadOrderRows:
    """Tests for load_order_rows / rows_from_frame."""

    def test_loads_rows_in_order(self, export_csv):
        rows = load_order_rows(export_csv)
        assert [row.zip for row in rows] == ["68102", "00601", "10016", "20044-2932"]

    def test_fields_kept_as_text(self, export_csv):
        row = load_order_rows(export_csv)[0]
        assert row == RawOrderRow("68102", "60.00", "3", "FedEx Ground", "4.00", "1.50", "0.50")

    def test_empty_cell_is_empty_string(self, export_csv):
        row = load_order_rows(export_csv)[1]
        assert row.packaging_cost == ""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_order_rows(tmp_path / "nope.csv")

    def test_column_order_does_not_matter(self):
        df = pl.DataFrame({
            "Labor (Pick/Pack) Spend": ["0.5"],
            "Carrier Service": ["USPS Priority Mail"],
            "Recipient Zip": ["80202"],
            "Weight of Units Shipped (lbs)": ["7"],
            "Retail Value (Ref)": ["99"],
            "Material (Packaging) Spend": ["1"],
            "Label (Carrier) Spend": ["9"],
        })
        (row,) = rows_from_frame(df)
        assert row.zip == "80202"
        assert row.shipping_method == "USPS Priority Mail"
        assert row.labor_cost == "0.5"

    def test_null_cells_become_empty_strings(self):
        df = pl.DataFrame(
            {
                "Recipient Zip": [None],
                "Retail Value (Ref)": ["10"],
                "Weight of Units Shipped (lbs)": ["1"],
                "Carrier Service": ["FedEx Ground"],
                "Label (Carrier) Spend": ["1"],
                "Material (Packaging) Spend": ["1"],
                "Labor (Pick/Pack) Spend": ["1"],
            },
            schema={
                "Recipient Zip": pl.Utf8,
                "Retail Value (Ref)": pl.Utf8,
                "Weight of Units Shipped (lbs)": pl.Utf8,
                "Carrier Service": pl.Utf8,
                "Label (Carrier) Spend": pl.Utf8,
                "Material (Packaging) Spend": pl.Utf8,
                "Labor (Pick/Pack) Spend": pl.Utf8,
            },
        )
        assert rows_from_frame(df)[0].zip == ""

    def test_empty_cells_load_without_warnings(self, tmp_path):
        """Empty fields read as "" with no deprecated read_csv options in play."""
        path = tmp_path / "input.csv"
        path.write_text(
            HEADER + "\n"
            "1001,,60.00,3,FedEx Ground,4.00,,0.50\n"
        )

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            (row,) = load_order_rows(path)

        assert row.zip == ""
        assert row.packaging_cost == ""
        assert row.label_cost == "4.00"

    def test_ragged_rows_raise(self, tmp_path):
        path = tmp_path / "input.csv"
        path.write_text(HEADER + "\n1001,10016,60.00,3,FedEx Ground,4.00,1.50,0.50,extra\n")

        with pytest.raises(OrderExportError) as exc_info:
            load_order_rows(path)

        assert isinstance(exc_info.value, ValueError)
        assert str(path) in str(exc_info.value)

    def test_invalid_utf8_raises(self, tmp_path):
        path = tmp_path / "input.csv"
        path.write_bytes(HEADER.encode() + b"\n1001,10016,60.00,3,FedEx \xff\xfe Ground,4.00,1.50,0.50\n")

        with pytest.raises(OrderExportError):
            load_order_rows(path)

    def test_missing_headers_listed(self, tmp_path):
        path = tmp_path / "input.csv"
        path.write_text("Recipient Zip,Carrier Service,Retail Value (Ref)\n10016,FedEx Ground,10\n")

        with pytest.raises(MissingHeaderError) as exc_info:
            load_order_rows(path)

        assert exc_info.value.missing == [
            "Weight of Units Shipped (lbs)",
            "Label (Carrier) Spend",
            "Material (Packaging) Spend",
            "Labor (Pick/Pack) Spend",
        ]
        assert "Label (Carrier) Spend" in str(exc_info.value)

    def test_headers_are_exact(self):
        """Header matching is case and whitespace sensitive."""
        df = pl.DataFrame({
            "recipient zip": ["10016"],
            "Retail Value (Ref)": ["10"],
            "Weight of Units Shipped (lbs)": ["1"],
            "Carrier Service": ["FedEx Ground"],
            "Label (Carrier) Spend": ["1"],
            "Material (Packaging) Spend": ["1"],
            "Labor (Pick/Pack) Spend": ["1"],
        })
        with pytest.raises(MissingHeaderError) as exc_info:
            rows_from_frame(df)
        assert exc_info.value.missing == ["Recipient Zip"]


# =============================================================================
# OUTPUT TESTS
# =============================================================================

class TestOutputs:
    """Tests for the JSON and CSV writers."""

    def test_write_all_creates_files(self, export_csv, tmp_path):
        result = calculate_averages(load_order_rows(export_csv))
        output_dir = tmp_path / "out"

        paths = write_all(result.orders, result.errors, result.averages, output_dir)

        assert [path.name for path in paths] == [ORDERS_JSON, ERRORS_JSON, AVERAGES_JSON, AVERAGES_CSV]
        for path in paths:
            assert path.exists()

    def test_orders_json(self, export_csv, tmp_path):
        result = calculate_averages(load_order_rows(export_csv))
        write_all(result.orders, result.errors, result.averages, tmp_path)

        orders = json.loads((tmp_path / ORDERS_JSON).read_text())
        assert len(orders) == 3
        assert orders[0] == {
            "ship_weight": "Between2And5Lbs",
            "retail_value": 60.0,
            "shipping_cost": 6.0,
            "shipping_cost_per_pound": 2.0,
            "shipping_method": "Ground",
            "region": "GreatPlains",
        }
        assert orders[1]["region"] == "PuertoRico"
        # Zero weight: per-pound cost is infinite and written as null
        assert orders[2]["shipping_cost_per_pound"] is None

    def test_errors_json(self, export_csv, tmp_path):
        result = calculate_averages(load_order_rows(export_csv))
        write_all(result.orders, result.errors, result.averages, tmp_path)

        errors = json.loads((tmp_path / ERRORS_JSON).read_text())
        assert errors == [{
            "zip": "10016",
            "retail_value": "45.00",
            "ship_weight": "unknown",
            "shipping_method": "FedEx Ground",
            "label_cost": "5.00",
            "packaging_cost": "1.00",
            "labor_cost": "1.00",
        }]

    def test_non_finite_average_written_as_null(self, tmp_path):
        records = [
            AverageRecord(Region.ALL, "Ground", "$ per Pound", math.inf),
            AverageRecord(Region.ALL, "Ground", "Cost per $", 0.1),
        ]
        path = write_averages_json(records, tmp_path / AVERAGES_JSON)

        data = json.loads(path.read_text())
        assert data[0]["avg"] is None
        assert data[1]["avg"] == pytest.approx(0.1)

    def test_json_is_indented(self, tmp_path):
        records = [AverageRecord(Region.ALL, "Ground", "Cost per $", 0.1)]
        path = write_averages_json(records, tmp_path / AVERAGES_JSON)
        assert '\n  {\n    "region": "All"' in path.read_text()

    def test_averages_frame(self):
        frame = averages_frame([
            AverageRecord(Region.MID_ATLANTIC, "Economy", "Orders under 2 Pounds", 4.25),
        ])
        assert frame.columns == REPORT_COLS
        assert frame.schema["avg"] == pl.Float64
        assert frame.row(0) == ("MidAtlantic", "Economy", "Orders under 2 Pounds", 4.25)

    def test_averages_frame_empty(self):
        frame = averages_frame([])
        assert frame.columns == REPORT_COLS
        assert frame.height == 0

    def test_csv_matches_report(self, export_csv, tmp_path):
        result = calculate_averages(load_order_rows(export_csv))
        write_all(result.orders, result.errors, result.averages, tmp_path)

        frame = pl.read_csv(tmp_path / AVERAGES_CSV, infer_schema=False)
        assert frame.columns == REPORT_COLS
        assert frame.height == len(result.averages)
        assert frame["region"].to_list() == [record.region.key for record in result.averages]


# =============================================================================
# SCRIPT TESTS
# =============================================================================

class TestBuildReportScript:
    """Tests for build_report.main."""

    def test_writes_outputs(self, export_csv, tmp_path, monkeypatch, capsys):
        output_dir = tmp_path / "report"
        monkeypatch.setattr(
            sys, "argv",
            ["build_report", "--input", str(export_csv), "--output-dir", str(output_dir)],
        )

        build_report.main()

        for name in [ORDERS_JSON, ERRORS_JSON, AVERAGES_JSON, AVERAGES_CSV]:
            assert (output_dir / name).exists()
        out = capsys.readouterr().out
        assert "Orders normalized: 3" in out
        assert "Rows rejected: 1" in out

    def test_dry_run_writes_nothing(self, export_csv, tmp_path, monkeypatch, capsys):
        output_dir = tmp_path / "report"
        monkeypatch.setattr(
            sys, "argv",
            ["build_report", "--input", str(export_csv), "--output-dir", str(output_dir), "--dry-run"],
        )

        build_report.main()

        assert not output_dir.exists()
        assert "[DRY RUN]" in capsys.readouterr().out

    def test_missing_header_exits(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "input.csv"
        path.write_text("Recipient Zip\n10016\n")
        monkeypatch.setattr(sys, "argv", ["build_report", "--input", str(path), "--output-dir", str(tmp_path)])

        with pytest.raises(SystemExit) as exc_info:
            build_report.main()

        assert exc_info.value.code == 1
        assert "Error: Missing required column(s)" in capsys.readouterr().out
        assert not (tmp_path / ORDERS_JSON).exists()

    def test_missing_input_exits(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["build_report", "--input", str(tmp_path / "nope.csv")])

        with pytest.raises(SystemExit) as exc_info:
            build_report.main()

        assert exc_info.value.code == 1
        assert "Order export not found" in capsys.readouterr().out

    def test_malformed_csv_exits(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "input.csv"
        path.write_text(HEADER + "\n1001,10016,60.00,3,FedEx Ground,4.00,1.50,0.50,extra,more\n")
        monkeypatch.setattr(sys, "argv", ["build_report", "--input", str(path), "--dry-run"])

        with pytest.raises(SystemExit) as exc_info:
            build_report.main()

        assert exc_info.value.code == 1
        assert "Error: Could not read order export" in capsys.readouterr().out
