"""
Bill-of-materials import.

Reads component entries from a CSV file so a scheme can be filled without the
interactive prompts. One row per component:

    kind,mtbf,failure_rate,reliability,failure_tolerance,nominal_value,resistance,...

``kind`` is a menu selector ("1".."5") or a kind name ("resistor", ...).
Kind-specific columns are optional; blank cells fall back to 0.0. Rows whose
kind is unknown are passed through unchanged so the scheme applies its own
unknown-kind policy.

Author:  Eliot Abramo
"""

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from .components import (
    SELECTOR_TO_KIND,
    SHARED_FIELDS,
    ComponentInput,
    get_field_definitions,
    kind_from_selector,
)
from .errors import ParseError, ValidationError
from .reliability_math import parse_float

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["kind"] + list(SHARED_FIELDS)

KIND_TO_SELECTOR = {kind: selector for selector, kind in SELECTOR_TO_KIND.items()}


def normalize_selector(raw: str) -> str:
    """Menu selector for a kind name ("Diode" -> "4"); other text unchanged."""
    s = raw.strip()
    return KIND_TO_SELECTOR.get(s.lower(), s)


def load_components_csv(path: Union[str, Path]) -> List[ComponentInput]:
    """Read ComponentInput entries from a CSV bill of materials."""
    # Everything as text so parse errors can name the raw cell
    try:
        df = pd.read_csv(path, dtype=str, skipinitialspace=True)
    except (OSError, UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise ValidationError(f"{path}: cannot read CSV ({e})") from e
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValidationError(f"{path}: missing column(s) {', '.join(missing)}")

    entries = []
    for row_no, row in enumerate(df.to_dict("records"), start=2):
        raw_kind = row.get("kind")
        selector = "" if pd.isna(raw_kind) else normalize_selector(raw_kind)

        shared = {}
        for name in SHARED_FIELDS:
            value = row.get(name)
            if pd.isna(value):
                raise ParseError(f"{name} (row {row_no})", "")
            shared[name] = parse_float(value, f"{name} (row {row_no})")

        specific = {}
        kind = kind_from_selector(selector)
        if kind is not None:
            for name in get_field_definitions(kind):
                value = row.get(name)
                if value is None or pd.isna(value):
                    continue
                specific[name] = parse_float(value, f"{name} (row {row_no})")

        entries.append(ComponentInput(selector=selector, specific=specific, **shared))

    logger.info("Loaded %d component rows from %s", len(entries), path)
    return entries
