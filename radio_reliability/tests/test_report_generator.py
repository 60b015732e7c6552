"""
Tests for reliability report generation.
"""

import json

import pytest

from radio_reliability.components import ComponentInput
from radio_reliability.report_generator import ReportData, ReportGenerator
from radio_reliability.scheme import Scheme


@pytest.fixture
def report_data():
    scheme = Scheme(name="Test board")
    scheme.input_components(
        [
            ComponentInput("1", 1000.0, 0.1, 0.9, 0.01, 100.0, {"resistance": 100.0, "tolerance": 5.0}),
            ComponentInput("2", 2000.0, 0.2, 0.8, 0.01, 4.7, {"voltage": 16.0}),
        ]
    )
    metrics = scheme.calculate_reliability(2)
    return ReportData.from_scheme(scheme, metrics)


class TestReportGenerator:

    def test_text(self, report_data):
        text = ReportGenerator().generate(report_data, "text")
        assert text.startswith("Reliability report: Test board\n")
        assert "Connection: parallel (2 components)" in text
        assert "0.28000" in text

    def test_markdown(self, report_data):
        md = ReportGenerator().generate(report_data, "md")
        assert md.startswith("# Reliability Report")
        assert "| Failure probability | 0.72000 |" in md
        assert "| 2 | capacitor | Конденсатор | 4.7 | 2000 | 0.2 |" in md

    def test_csv(self, report_data):
        lines = ReportGenerator().generate(report_data, "csv").splitlines()
        assert lines[0] == "kind,name,nominal_value,mtbf,failure_rate,reliability,failure_tolerance"
        assert lines[1] == '"resistor","Резистор",100.0,1000.0,0.1,0.9,0.01'
        assert len(lines) == 3

    def test_json(self, report_data):
        data = json.loads(ReportGenerator().generate(report_data, "json"))
        assert data["meta"]["scheme"] == "Test board"
        assert data["metrics"]["connection"] == "parallel"
        assert data["components"][1]["voltage"] == 16.0
        assert data["components"][1]["capacity"] == 4.7

    def test_json_non_finite(self):
        scheme = Scheme()
        scheme.input_components([ComponentInput("1", 10.0, 0.0, 1.0, 0.0, 1.0)])
        data = ReportData.from_scheme(scheme, scheme.calculate_reliability(1))
        out = json.loads(ReportGenerator().generate_json(data))
        assert out["metrics"]["reliability"] == "inf"

    def test_unknown_format_falls_back_to_text(self, report_data):
        assert ReportGenerator().generate(report_data, "pdf").startswith("Reliability report")

    def test_write_uses_extension(self, report_data, tmp_path):
        path = tmp_path / "r.md"
        ReportGenerator().write(report_data, str(path))
        assert path.read_text(encoding="utf-8").startswith("# Reliability Report")

    def test_generated_at_default(self, report_data):
        assert report_data.generated_at
