"""
Tests for CSV bill-of-materials import.
"""

import pytest

from radio_reliability.bom_import import load_components_csv, normalize_selector
from radio_reliability.errors import ParseError, ValidationError
from radio_reliability.scheme import Scheme

HEADER = "kind,mtbf,failure_rate,reliability,failure_tolerance,nominal_value"


def _write(tmp_path, text, name="bom.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadComponentsCsv:

    def test_all_kinds(self, tmp_path):
        path = _write(
            tmp_path,
            HEADER + ",resistance,tolerance,voltage,gain,rated_voltage,rating,inductance\n"
            "1,1000,0.1,0.9,0.01,100,100,5,,,,,\n"
            "2,1000,0.1,0.9,0.01,4.7,,,16,,,,\n"
            "3,1000,0.1,0.9,0.01,1,,,12,80,,,\n"
            "Diode,1000,0.1,0.9,0.01,1,,,,,50,2,\n"
            "5,1000,0.1,0.9,0.01,1,,,,,,,0.001\n",
        )
        entries = load_components_csv(path)
        assert [e.selector for e in entries] == ["1", "2", "3", "4", "5"]
        assert entries[0].specific == {"resistance": 100.0, "tolerance": 5.0}
        assert entries[1].specific == {"voltage": 16.0}
        assert entries[2].specific == {"gain": 80.0, "voltage": 12.0}
        assert entries[3].specific == {"rated_voltage": 50.0, "rating": 2.0}
        assert entries[4].specific == {"inductance": 0.001}

    def test_specific_columns_optional(self, tmp_path):
        path = _write(tmp_path, HEADER + "\n4,10,0.5,0.5,0,3\n")
        entry = load_components_csv(path)[0]
        assert entry.specific == {}
        assert entry.failure_rate == 0.5

    def test_header_case_and_spaces(self, tmp_path):
        path = _write(tmp_path, "Kind, MTBF,Failure_Rate,Reliability,Failure_Tolerance,Nominal_Value\n1,1,0.1,1,0,1\n")
        assert load_components_csv(path)[0].mtbf == 1.0

    def test_missing_column(self, tmp_path):
        path = _write(tmp_path, "kind,mtbf\n1,10\n")
        with pytest.raises(ValidationError) as exc:
            load_components_csv(path)
        assert "failure_rate" in str(exc.value)

    def test_blank_required_value(self, tmp_path):
        path = _write(tmp_path, HEADER + "\n1,,0.1,0.9,0,1\n")
        with pytest.raises(ParseError) as exc:
            load_components_csv(path)
        assert "row 2" in exc.value.field

    def test_non_numeric_value(self, tmp_path):
        path = _write(tmp_path, HEADER + "\n1,10,0.1,0.9,0,1\n1,10,lots,0.9,0,1\n")
        with pytest.raises(ParseError) as exc:
            load_components_csv(path)
        assert exc.value.raw == "lots"

    def test_unknown_kind_passed_through(self, tmp_path):
        """The scheme, not the importer, decides what to do with unknown kinds."""
        path = _write(tmp_path, HEADER + "\n9,10,0.1,0.9,0,1\n1,10,0.2,0.9,0,2\n")
        entries = load_components_csv(path)
        scheme = Scheme()
        assert scheme.input_components(entries) == 1
        assert scheme.store.bucket(2)[0].nominal_value == 2.0

    def test_missing_file(self, tmp_path):
        path = tmp_path / "nope.csv"
        with pytest.raises(ValidationError) as exc:
            load_components_csv(path)
        assert "nope.csv" in str(exc.value)

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path, "")
        with pytest.raises(ValidationError):
            load_components_csv(path)

    def test_malformed_rows(self, tmp_path):
        path = _write(tmp_path, HEADER + "\n1,10,0.1,0.9,0,1\n1,10,0.1,0.9,0,1,7,8,9\n")
        with pytest.raises(ValidationError):
            load_components_csv(path)


class TestNormalizeSelector:

    @pytest.mark.parametrize(
        "raw,selector",
        [("resistor", "1"), ("Capacitor", "2"), (" TRANSISTOR ", "3"), ("diode", "4"), ("inductor", "5")],
    )
    def test_kind_names(self, raw, selector):
        assert normalize_selector(raw) == selector

    @pytest.mark.parametrize("raw,selector", [("1", "1"), (" 4 ", "4"), ("9", "9"), ("fuse", "fuse")])
    def test_other_text_unchanged(self, raw, selector):
        assert normalize_selector(raw) == selector
