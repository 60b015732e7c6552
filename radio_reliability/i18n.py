"""
Message catalogue loader.

Prompts, labels and result lines live in ``locales/<lang>.json``. Russian is
the reference catalogue; English is provided as an alternative.

Author:  Eliot Abramo
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
LOCALE_DIR = BASE_DIR / "locales"

DEFAULT_LANGUAGE = "ru"
SUPPORTED_LANGUAGES = ("ru", "en")


def _load_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning("Locale file not found: %s", path)
    except json.JSONDecodeError as e:
        logger.error("Error decoding locale %s: %s", path, e)
    return {}


class Messages:
    """Lookup of user-visible strings for one language."""

    def __init__(self, language: str = DEFAULT_LANGUAGE, locale_dir: Path = LOCALE_DIR):
        if language not in SUPPORTED_LANGUAGES:
            logger.warning("Unsupported language %r, using %r", language, DEFAULT_LANGUAGE)
            language = DEFAULT_LANGUAGE
        self.language = language
        self._fallback = _load_json(Path(locale_dir) / f"{DEFAULT_LANGUAGE}.json")
        if language == DEFAULT_LANGUAGE:
            self._texts = self._fallback
        else:
            self._texts = _load_json(Path(locale_dir) / f"{language}.json")

    def get(self, key: str, **kwargs) -> str:
        text = self._texts.get(key, self._fallback.get(key, f"[{key}]"))
        return text.format(**kwargs) if kwargs else text

    def kind_label(self, kind: str) -> str:
        return self.get(f"kind.{kind}")
