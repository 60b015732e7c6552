"""
Scheme Reliability Calculations
===============================
Aggregate reliability formulas for a homogeneous series or parallel scheme.

Series:
    failure intensity   = sum(failure_rate_i)
    reliability         = 1 / failure intensity
Parallel:
    reliability         = 1 - product(1 - failure_rate_i)

The series "reliability" is the reciprocal of the total failure rate, not a
probability. It is kept exactly as the metric set below depends on it.

Derived metrics (both topologies):
    failure probability = 1 - R
    failure density     = failure probability / R
    failure intensity   = sum(failure_rate_i)
    average MTBF        = sum(MTBF_i) / N
    gamma-percent MTBF  = sum(MTBF_i) * R

Author:  Eliot Abramo
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Sequence

import numpy as np

from .components import ComponentRecord
from .errors import EmptySchemeError, InvalidChoiceError, ParseError

logger = logging.getLogger(__name__)


# =============================================================================
# Input parsing -- fail loudly with the offending field
# =============================================================================


def parse_float(raw, field: str = "value") -> float:
    """Parse a float, raising ParseError naming ``field`` on failure."""
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)
    text = str(raw).strip() if raw is not None else ""
    try:
        return float(text)
    except ValueError:
        raise ParseError(field, raw) from None


def parse_int(raw, field: str = "count") -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw).strip() if raw is not None else ""
    try:
        return int(text)
    except ValueError:
        raise ParseError(field, raw) from None


def safe_divide(num: float, den: float) -> float:
    """IEEE-754 division: x/0 gives +-inf, 0/0 and inf/inf give nan."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


# =============================================================================
# System topology types
# =============================================================================
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ConnectionType:
    """Scheme connection modes, selected by menu choice."""

    SERIES = "series"
    PARALLEL = "parallel"

    CHOICES = {1: SERIES, 2: PARALLEL}

    def __init__(self, value: Optional[str] = None):
        self._value = value or self.SERIES

    @classmethod
    def from_choice(cls, choice) -> "ConnectionType":
        """Map menu choice 1 / 2 to a connection type.

        Text is read like a stream integer extraction: the leading integer
        counts and anything after it is ignored ("1.0" -> 1, "2abc" -> 2).
        """
        if isinstance(choice, cls):
            return choice
        if isinstance(choice, int) and not isinstance(choice, bool):
            key = choice
        else:
            match = _LEADING_INT.match(str(choice)) if choice is not None else None
            if match is None:
                raise InvalidChoiceError(choice)
            key = int(match.group(1))
        if key not in cls.CHOICES:
            raise InvalidChoiceError(choice)
        return cls(cls.CHOICES[key])

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, ConnectionType):
            return self.value == other.value
        return self.value == other

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ConnectionType({self.value!r})"


# =============================================================================
# Aggregate formulas
# =============================================================================


def _as_array(values: Iterable[float]) -> np.ndarray:
    return np.fromiter((float(v) for v in values), dtype=float)


def lambda_series(rates: Iterable[float]) -> float:
    """Series system total failure rate = sum. 0.0 when empty."""
    arr = _as_array(rates)
    if arr.size == 0:
        return 0.0
    return float(arr.sum())


def r_parallel_from_rates(rates: Iterable[float]) -> float:
    """Parallel system: R = 1 - product(1 - rate_i). 0.0 when empty."""
    arr = _as_array(rates)
    if arr.size == 0:
        return 0.0
    return float(1.0 - np.prod(1.0 - arr))


def series_reliability(rates: Iterable[float]) -> float:
    """Reciprocal of the total failure rate."""
    return safe_divide(1.0, lambda_series(rates))


def total_mtbf(records: Iterable[ComponentRecord]) -> float:
    return float(_as_array(r.mtbf for r in records).sum())


# =============================================================================
# Derived metric set
# =============================================================================


@dataclass(frozen=True)
class ReliabilityMetrics:
    """Reliability and the five derived metrics of one calculation."""

    connection: str
    reliability: float
    failure_probability: float
    failure_density: float
    failure_intensity: float
    average_mtbf: float
    gamma_percent_mtbf: float
    n_components: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "connection": self.connection,
            "reliability": self.reliability,
            "failure_probability": self.failure_probability,
            "failure_density": self.failure_density,
            "failure_intensity": self.failure_intensity,
            "average_mtbf": self.average_mtbf,
            "gamma_percent_mtbf": self.gamma_percent_mtbf,
            "n_components": self.n_components,
        }


def compute_metrics(
    records: Sequence[ComponentRecord], connection, scheme_name: str = ""
) -> ReliabilityMetrics:
    """Compute reliability for ``connection`` and the derived metric set.

    Raises EmptySchemeError when ``records`` is empty.
    """
    if not isinstance(connection, ConnectionType):
        connection = ConnectionType.from_choice(connection)
    if not records:
        raise EmptySchemeError(scheme_name)

    rates = [r.failure_rate for r in records]
    if connection == ConnectionType.SERIES:
        reliability = series_reliability(rates)
    else:
        reliability = r_parallel_from_rates(rates)

    failure_probability = 1.0 - reliability
    mtbf_sum = total_mtbf(records)
    metrics = ReliabilityMetrics(
        connection=connection.value,
        reliability=reliability,
        failure_probability=failure_probability,
        failure_density=safe_divide(failure_probability, reliability),
        failure_intensity=lambda_series(rates),
        average_mtbf=mtbf_sum / len(records),
        gamma_percent_mtbf=mtbf_sum * reliability,
        n_components=len(records),
    )
    logger.debug("Computed %s metrics over %d components", connection, len(records))
    return metrics


# =============================================================================
# Formatting utilities
# =============================================================================


def format_fixed(value: float, precision: int = 5) -> str:
    return f"{value:.{precision}f}"
