"""
Scheme
======
An electronic scheme: a named set of radio components and the reliability
calculations over them.

The scheme consumes already-parsed ComponentInput entries; prompting is the
job of the front-end (see cli.py and bom_import.py). Display methods return
lines rather than printing so the front-end decides where they go.

Author:  Eliot Abramo
"""

import logging
from typing import Iterable, List, Optional

from .component_store import DEFAULT_BUCKET_COUNT, ComponentStore
from .components import ComponentInput, ComponentRecord, build_component, kind_from_selector
from .config import SchemeSettings
from .errors import ValidationError
from .i18n import Messages
from .reliability_math import (
    ConnectionType,
    ReliabilityMetrics,
    compute_metrics,
    format_fixed,
    lambda_series,
    r_parallel_from_rates,
)

logger = logging.getLogger(__name__)


class Scheme:
    """Owns one ComponentStore and every record in it."""

    def __init__(
        self,
        name: Optional[str] = None,
        bucket_count: int = DEFAULT_BUCKET_COUNT,
        messages: Optional[Messages] = None,
        strict_kinds: bool = False,
        precision: int = 5,
        reliability_precision: int = 2,
    ):
        self.messages = messages or Messages()
        self.name = name if name is not None else self.messages.get("scheme.default_name")
        self.store = ComponentStore(bucket_count)
        self.strict_kinds = strict_kinds
        self.precision = precision
        self.reliability_precision = reliability_precision

    @classmethod
    def from_settings(cls, settings: SchemeSettings, messages: Optional[Messages] = None) -> "Scheme":
        return cls(
            name=settings.scheme_name,
            bucket_count=settings.bucket_count,
            messages=messages or Messages(settings.language),
            strict_kinds=settings.strict_kinds,
            precision=settings.precision,
            reliability_precision=settings.reliability_precision,
        )

    @property
    def components(self) -> List[ComponentRecord]:
        """Records in insertion order."""
        return self.store.records

    def __len__(self) -> int:
        return len(self.store)

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def add_component(self, key: int, record: ComponentRecord) -> None:
        self.store.insert(key, record)

    def input_component(self, index: int, entry: ComponentInput) -> Optional[ComponentRecord]:
        """Build and store the record for the ``index``-th (0-based) entry.

        Stored under key ``index + 1``. An unknown kind selector skips the
        entry and returns None, or raises ValidationError in strict mode.
        """
        kind = kind_from_selector(entry.selector)
        if kind is None:
            if self.strict_kinds:
                raise ValidationError(f"Unknown component kind selector: {entry.selector!r}")
            logger.warning("Skipping entry %d: unknown kind selector %r", index + 1, entry.selector)
            return None
        record = build_component(
            kind,
            entry.shared_fields(),
            entry.specific,
            name=self.messages.kind_label(kind),
        )
        self.add_component(index + 1, record)
        return record

    def input_components(self, entries: Iterable[ComponentInput]) -> int:
        """Store every entry; returns how many records were actually stored."""
        stored = 0
        for i, entry in enumerate(entries):
            if self.input_component(i, entry) is not None:
                stored += 1
        return stored

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def display_components(self) -> List[str]:
        """Scheme name, then detail lines in bucket order."""
        return [self.messages.get("display.scheme", name=self.name)] + self.store.output()

    def display_connection_scheme(self) -> List[str]:
        """Name and nominal value of each component in insertion order."""
        lines = [self.messages.get("display.connection_header")]
        for record in self.store:
            lines.append(
                self.messages.get(
                    "display.connection_line",
                    name=record.name,
                    value=format_fixed(record.nominal_value, 2),
                )
            )
        return lines

    # -------------------------------------------------------------------------
    # Calculations
    # -------------------------------------------------------------------------

    def calculate_reliability_sequential(self) -> float:
        """Total failure rate of a series connection (0.0 when empty)."""
        return lambda_series(r.failure_rate for r in self.store)

    def calculate_reliability_parallel(self) -> float:
        """1 - product(1 - failure_rate) over all components (0.0 when empty)."""
        return r_parallel_from_rates(r.failure_rate for r in self.store)

    def calculate_reliability(self, choice) -> ReliabilityMetrics:
        """Metrics for menu choice 1 (series) or 2 (parallel).

        Raises InvalidChoiceError for any other choice and EmptySchemeError
        when the scheme has no components.
        """
        connection = ConnectionType.from_choice(choice)
        return compute_metrics(self.store.records, connection, scheme_name=self.name)

    def format_metrics(self, metrics: ReliabilityMetrics) -> List[str]:
        m = self.messages
        p = self.precision
        key = "result.series" if metrics.connection == ConnectionType.SERIES else "result.parallel"
        return [
            m.get(key, value=format_fixed(metrics.reliability, self.reliability_precision)),
            m.get("result.failure_probability", value=format_fixed(metrics.failure_probability, p)),
            m.get("result.failure_density", value=format_fixed(metrics.failure_density, p)),
            m.get("result.failure_intensity", value=format_fixed(metrics.failure_intensity, p)),
            m.get("result.average_mtbf", value=format_fixed(metrics.average_mtbf, p)),
            m.get("result.gamma_percent_mtbf", value=format_fixed(metrics.gamma_percent_mtbf, p)),
        ]

    def calculate_and_display_reliability(self, choice) -> List[str]:
        return self.format_metrics(self.calculate_reliability(choice))
