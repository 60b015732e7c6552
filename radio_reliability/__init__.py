"""
Radio Reliability Calculator
============================
Reliability metrics for schemes of radio components.

Version: 1.0.0

Features:
- 5 component kinds: resistor, capacitor, transistor, diode, inductor
- Bucketed component store with insertion-ordered calculation sequence
- Series and parallel connection reliability
- Derived metrics: failure probability, failure density, failure intensity,
  average MTBF, gamma-percent MTBF
- Interactive prompts (Russian / English) or CSV bill-of-materials input
- Text, Markdown, CSV and JSON reports

Designed and developed by Eliot Abramo
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Eliot Abramo"

# Expose main classes for external use
from .components import (
    ComponentKind,
    ComponentRecord,
    ComponentInput,
    Resistor,
    Capacitor,
    Transistor,
    Diode,
    Inductor,
    build_component,
    get_component_kinds,
    get_field_definitions,
    kind_from_selector,
)

from .component_store import ComponentStore

from .reliability_math import (
    ConnectionType,
    ReliabilityMetrics,
    compute_metrics,
    lambda_series,
    r_parallel_from_rates,
    series_reliability,
)

from .scheme import Scheme

from .config import SchemeSettings, load_settings

from .errors import (
    SchemeError,
    ParseError,
    ValidationError,
    EmptySchemeError,
    InvalidChoiceError,
)

from .bom_import import load_components_csv

from .report_generator import ReportData, ReportGenerator
