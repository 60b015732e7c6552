"""
Scheme Errors
=============
Exception hierarchy raised by the reliability core and the input layers.

Author:  Eliot Abramo
"""

from typing import Optional


class SchemeError(Exception):
    """Base class for every error raised by radio_reliability."""


class ParseError(SchemeError, ValueError):
    """A field value could not be parsed as a number."""

    def __init__(self, field: str, raw: object, message: Optional[str] = None):
        self.field = field
        self.raw = raw
        super().__init__(message or f"Cannot parse {field!r} from {raw!r}")


class ValidationError(SchemeError, ValueError):
    """Structurally invalid input (unknown component kind, missing column)."""


class EmptySchemeError(SchemeError):
    """Derived metrics were requested for a scheme without components."""

    def __init__(self, scheme_name: str = ""):
        self.scheme_name = scheme_name
        super().__init__(f"Scheme {scheme_name!r} has no components")


class InvalidChoiceError(SchemeError, ValueError):
    """Connection topology choice is neither series (1) nor parallel (2)."""

    def __init__(self, choice: object):
        self.choice = choice
        super().__init__(f"Invalid connection choice: {choice!r}")
