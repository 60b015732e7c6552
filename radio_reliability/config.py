"""
Scheme Settings
===============
Runtime settings for the calculator, optionally read from a JSON file.

Default lookup: ``radio_reliability.json`` in the working directory. A
missing or unreadable file yields the defaults; unknown keys are ignored.

Author:  Eliot Abramo
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .component_store import DEFAULT_BUCKET_COUNT
from .i18n import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "radio_reliability.json"


@dataclass
class SchemeSettings:
    """Calculator settings."""

    scheme_name: Optional[str] = None  # None -> localized default name
    bucket_count: int = DEFAULT_BUCKET_COUNT
    language: str = DEFAULT_LANGUAGE
    strict_kinds: bool = False  # True: unknown kind raises instead of skipping
    precision: int = 5
    reliability_precision: int = 2
    log_level: str = "WARNING"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SchemeSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))
        defaults = cls()
        strict_kinds = d.get("strict_kinds", defaults.strict_kinds)
        if not isinstance(strict_kinds, bool):
            # JSON booleans only
            logger.warning("strict_kinds must be true or false, got %r; using default", strict_kinds)
            strict_kinds = defaults.strict_kinds
        return cls(
            scheme_name=d.get("scheme_name", defaults.scheme_name),
            bucket_count=int(d.get("bucket_count", defaults.bucket_count)),
            language=str(d.get("language", defaults.language)),
            strict_kinds=strict_kinds,
            precision=int(d.get("precision", defaults.precision)),
            reliability_precision=int(
                d.get("reliability_precision", defaults.reliability_precision)
            ),
            log_level=str(d.get("log_level", defaults.log_level)).upper(),
        )


def default_settings_path() -> Path:
    return Path.cwd() / SETTINGS_FILENAME


def load_settings(path: Optional[Union[str, Path]] = None) -> SchemeSettings:
    """Load settings from ``path``. Returns defaults if the file doesn't exist."""
    path = Path(path) if path is not None else default_settings_path()
    if not path.exists():
        return SchemeSettings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not read settings %s: %s", path, e)
        return SchemeSettings()
    if not isinstance(data, dict):
        logger.warning("Settings file %s is not a JSON object", path)
        return SchemeSettings()
    try:
        return SchemeSettings.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning("Invalid value in settings %s: %s", path, e)
        return SchemeSettings()
