"""
Domain models and value objects.

Contains the canonical sign-magnitude decimal value and its working magnitude form.
"""

from src.core.domain.decimal_value import (
    FRACTION_DIGITS_PATTERN,
    INTEGER_DIGITS_PATTERN,
    DecimalValue,
    Magnitude,
    Sign,
)

__all__ = [
    "FRACTION_DIGITS_PATTERN",
    "INTEGER_DIGITS_PATTERN",
    "DecimalValue",
    "Magnitude",
    "Sign",
]
