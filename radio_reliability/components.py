"""
Radio Component Records
=======================
Data model for the five supported component kinds.

A ComponentRecord carries the reliability fields shared by every kind
(MTBF, failure rate, reliability, failure tolerance, nominal value) and a
kind payload holding the electrical fields specific to that kind.

No range validation is performed here: negative or out-of-domain values
are stored exactly as entered.

Author:  Eliot Abramo
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Union


class ComponentKind:
    """Closed set of supported component kinds."""

    RESISTOR = "resistor"
    CAPACITOR = "capacitor"
    TRANSISTOR = "transistor"
    DIODE = "diode"
    INDUCTOR = "inductor"

    ALL = (RESISTOR, CAPACITOR, TRANSISTOR, DIODE, INDUCTOR)


# Menu selector -> kind, in menu order
SELECTOR_TO_KIND = {
    "1": ComponentKind.RESISTOR,
    "2": ComponentKind.CAPACITOR,
    "3": ComponentKind.TRANSISTOR,
    "4": ComponentKind.DIODE,
    "5": ComponentKind.INDUCTOR,
}


# =============================================================================
# Kind payloads
# =============================================================================


@dataclass(frozen=True)
class Resistor:
    resistance: float = 0.0
    tolerance: float = 0.0


@dataclass(frozen=True)
class Capacitor:
    # capacity mirrors the record's nominal value
    capacity: float = 0.0
    voltage: float = 0.0


@dataclass(frozen=True)
class Transistor:
    gain: float = 0.0
    voltage: float = 0.0


@dataclass(frozen=True)
class Diode:
    rated_voltage: float = 0.0
    rating: float = 0.0


@dataclass(frozen=True)
class Inductor:
    inductance: float = 0.0


ComponentPayload = Union[Resistor, Capacitor, Transistor, Diode, Inductor]

PAYLOAD_TYPES = {
    ComponentKind.RESISTOR: Resistor,
    ComponentKind.CAPACITOR: Capacitor,
    ComponentKind.TRANSISTOR: Transistor,
    ComponentKind.DIODE: Diode,
    ComponentKind.INDUCTOR: Inductor,
}


@dataclass(frozen=True)
class ComponentRecord:
    """One component of a scheme. Immutable once built."""

    mtbf: float
    failure_rate: float
    reliability: float
    failure_tolerance: float
    name: str
    nominal_value: float
    payload: ComponentPayload = field(default_factory=Resistor)

    @property
    def kind(self) -> str:
        for kind, payload_type in PAYLOAD_TYPES.items():
            if isinstance(self.payload, payload_type):
                return kind
        raise TypeError(f"Unsupported payload {type(self.payload).__name__}")

    def get_details(self) -> str:
        """Human-readable detail line: ``name: nominal``."""
        return f"{self.name}: {format_number(self.nominal_value)}"

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "kind": self.kind,
            "name": self.name,
            "mtbf": self.mtbf,
            "failure_rate": self.failure_rate,
            "reliability": self.reliability,
            "failure_tolerance": self.failure_tolerance,
            "nominal_value": self.nominal_value,
        }
        for f in fields(self.payload):
            d[f.name] = getattr(self.payload, f.name)
        return d


def format_number(value: float) -> str:
    """General number format with six significant digits (100, 0.1, 1e+06)."""
    return f"{value:g}"


# =============================================================================
# Field definitions for the input layers
# =============================================================================

SHARED_FIELDS = {
    "mtbf": {"type": "float", "default": 0.0, "prompt": "prompt.mtbf"},
    "failure_rate": {"type": "float", "default": 0.0, "prompt": "prompt.failure_rate"},
    "reliability": {"type": "float", "default": 0.0, "prompt": "prompt.reliability"},
    "failure_tolerance": {
        "type": "float",
        "default": 0.0,
        "prompt": "prompt.failure_tolerance",
    },
    "nominal_value": {"type": "float", "default": 0.0, "prompt": "prompt.nominal_value"},
}


def get_component_kinds() -> List[str]:
    """Return all supported kind names in menu order."""
    return list(ComponentKind.ALL)


def kind_from_selector(selector: str) -> Optional[str]:
    """Map a menu selector ("1".."5") to a kind. None if unknown."""
    if selector is None:
        return None
    return SELECTOR_TO_KIND.get(str(selector).strip())


def get_field_definitions(kind: str) -> Dict[str, Dict[str, Any]]:
    """Return kind-specific field definitions, in prompt order."""
    if kind == ComponentKind.RESISTOR:
        return {
            "resistance": {"type": "float", "default": 0.0, "prompt": "prompt.resistance"},
            "tolerance": {"type": "float", "default": 0.0, "prompt": "prompt.tolerance"},
        }
    if kind == ComponentKind.CAPACITOR:
        return {
            "voltage": {"type": "float", "default": 0.0, "prompt": "prompt.voltage"},
        }
    if kind == ComponentKind.TRANSISTOR:
        return {
            "gain": {"type": "float", "default": 0.0, "prompt": "prompt.gain"},
            "voltage": {"type": "float", "default": 0.0, "prompt": "prompt.voltage"},
        }
    if kind == ComponentKind.DIODE:
        return {
            "rated_voltage": {
                "type": "float",
                "default": 0.0,
                "prompt": "prompt.rated_voltage",
            },
            "rating": {"type": "float", "default": 0.0, "prompt": "prompt.rating"},
        }
    if kind == ComponentKind.INDUCTOR:
        return {
            "inductance": {"type": "float", "default": 0.0, "prompt": "prompt.inductance"},
        }
    raise KeyError(f"Unknown component kind: {kind!r}")


def build_component(
    kind: str,
    shared: Mapping[str, float],
    specific: Optional[Mapping[str, float]] = None,
    name: Optional[str] = None,
) -> ComponentRecord:
    """Construct the ComponentRecord variant for ``kind``.

    ``shared`` must provide every key of SHARED_FIELDS. Kind-specific values
    missing from ``specific`` fall back to their field default; unknown keys
    are ignored.
    """
    specific = dict(specific or {})
    defs = get_field_definitions(kind)
    values = {k: specific.get(k, d["default"]) for k, d in defs.items()}
    nominal = shared["nominal_value"]
    if kind == ComponentKind.CAPACITOR:
        values["capacity"] = nominal

    return ComponentRecord(
        mtbf=shared["mtbf"],
        failure_rate=shared["failure_rate"],
        reliability=shared["reliability"],
        failure_tolerance=shared["failure_tolerance"],
        name=name if name is not None else kind.capitalize(),
        nominal_value=nominal,
        payload=PAYLOAD_TYPES[kind](**values),
    )


@dataclass
class ComponentInput:
    """Already-parsed field values for one component, as supplied by an input layer."""

    selector: str
    mtbf: float = 0.0
    failure_rate: float = 0.0
    reliability: float = 0.0
    failure_tolerance: float = 0.0
    nominal_value: float = 0.0
    specific: Dict[str, float] = field(default_factory=dict)

    def shared_fields(self) -> Dict[str, float]:
        return {k: getattr(self, k) for k in SHARED_FIELDS}
