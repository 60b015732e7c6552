"""
Report Generator
================
Reliability reports for a calculated scheme in text, Markdown, CSV and JSON.

Author:  Eliot Abramo
"""

import json
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from .reliability_math import ReliabilityMetrics
from .scheme import Scheme


@dataclass
class ReportData:
    """Container for all report data."""
    scheme_name: str
    metrics: ReliabilityMetrics
    components: List[Dict] = field(default_factory=list)
    precision: int = 5

    generated_at: str = None

    def __post_init__(self):
        if not self.generated_at:
            self.generated_at = datetime.now().isoformat()

    @classmethod
    def from_scheme(cls, scheme: Scheme, metrics: ReliabilityMetrics) -> "ReportData":
        return cls(
            scheme_name=scheme.name,
            metrics=metrics,
            components=[r.to_dict() for r in scheme.components],
            precision=scheme.precision,
        )


METRIC_LABELS = [
    ("reliability", "Reliability"),
    ("failure_probability", "Failure probability"),
    ("failure_density", "Failure density"),
    ("failure_intensity", "Failure intensity"),
    ("average_mtbf", "Average MTBF"),
    ("gamma_percent_mtbf", "Gamma-percent MTBF"),
]

COMPONENT_COLUMNS = ["kind", "name", "nominal_value", "mtbf", "failure_rate", "reliability", "failure_tolerance"]


def _json_number(v):
    # JSON has no inf/nan
    if isinstance(v, float) and not math.isfinite(v):
        return str(v)
    return v


class ReportGenerator:

    def _metric_rows(self, data: ReportData):
        m = data.metrics.to_dict()
        return [(label, f"{m[key]:.{data.precision}f}") for key, label in METRIC_LABELS]

    def generate_text(self, data: ReportData) -> str:
        lines = [
            f"Reliability report: {data.scheme_name}",
            f"Generated: {data.generated_at}",
            f"Connection: {data.metrics.connection} ({data.metrics.n_components} components)",
            "",
        ]
        width = max(len(label) for label, _ in METRIC_LABELS)
        for label, value in self._metric_rows(data):
            lines.append(f"{label:<{width}}  {value}")
        return "\n".join(lines) + "\n"

    def generate_markdown(self, data: ReportData) -> str:
        generated = datetime.fromisoformat(data.generated_at).strftime('%Y-%m-%d %H:%M')
        md = f"""# Reliability Report

**Scheme:** {data.scheme_name}
**Generated:** {generated}
**Connection:** {data.metrics.connection}

## Metrics

| Metric | Value |
|--------|-------|
"""
        for label, value in self._metric_rows(data):
            md += f"| {label} | {value} |\n"

        md += "\n## Components\n\n| # | Kind | Name | Nominal | MTBF | Failure rate |\n|---|---|---|---|---|---|\n"
        for i, c in enumerate(data.components, 1):
            md += f"| {i} | {c.get('kind','')} | {c.get('name','')} | {c.get('nominal_value',0):g} | {c.get('mtbf',0):g} | {c.get('failure_rate',0):g} |\n"
        return md

    def generate_csv(self, data: ReportData) -> str:
        lines = [",".join(COMPONENT_COLUMNS)]
        for c in data.components:
            lines.append(",".join(f'"{c.get(col, "")}"' if col in ("kind", "name") else repr(c.get(col, 0.0)) for col in COMPONENT_COLUMNS))
        return "\n".join(lines) + "\n"

    def generate_json(self, data: ReportData) -> str:
        output = {
            "meta": {"scheme": data.scheme_name, "generated": data.generated_at},
            "metrics": {k: _json_number(v) for k, v in data.metrics.to_dict().items()},
            "components": data.components,
        }
        return json.dumps(output, indent=2, ensure_ascii=False)

    def generate(self, data: ReportData, format: str = "text") -> str:
        return {"text": self.generate_text, "txt": self.generate_text,
                "markdown": self.generate_markdown, "md": self.generate_markdown,
                "csv": self.generate_csv, "json": self.generate_json}.get(format.lower(), self.generate_text)(data)

    def write(self, data: ReportData, path: str, format: Optional[str] = None) -> str:
        """Write the report to ``path``; format defaults to the file extension."""
        if format is None:
            format = path.rsplit(".", 1)[-1] if "." in path else "text"
        content = self.generate(data, format)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return content
