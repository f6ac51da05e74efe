"""
Core math modules

Валидация десятичных литералов и точная арифметика произвольной точности
над строковым представлением (без конверсии во float).
"""

# Literal Grammar
from src.core.math.literal_grammar import (
    # Constants
    DECIMAL_POINT,
    REASON_EMPTY,
    REASON_MISSING_FRACTION_DIGITS,
    REASON_MISSING_INTEGER_DIGITS,
    REASON_SIGN_ONLY,
    REASON_UNEXPECTED_CHARACTER,
    # Exceptions
    InvalidLiteralError,
    # Types
    LiteralCheck,
    # Functions
    check_literal,
    is_valid_literal,
)

# Normalizer
from src.core.math.normalizer import (
    normalize,
    strip_leading_zeros,
    strip_trailing_zeros,
)

# Decimal Arithmetic
from src.core.math.decimal_arithmetic import (
    Ordering,
    add,
    add_magnitude,
    align_fractions,
    compare_magnitude,
    negate,
    sub_magnitude,
)

# Formatter
from src.core.math.formatter import format_decimal

__all__ = [
    # Literal Grammar — Constants
    "DECIMAL_POINT",
    "REASON_EMPTY",
    "REASON_MISSING_FRACTION_DIGITS",
    "REASON_MISSING_INTEGER_DIGITS",
    "REASON_SIGN_ONLY",
    "REASON_UNEXPECTED_CHARACTER",
    # Literal Grammar — Exceptions
    "InvalidLiteralError",
    # Literal Grammar — Types
    "LiteralCheck",
    # Literal Grammar — Functions
    "check_literal",
    "is_valid_literal",
    # Normalizer
    "normalize",
    "strip_leading_zeros",
    "strip_trailing_zeros",
    # Decimal Arithmetic — Types
    "Ordering",
    # Decimal Arithmetic — Functions
    "add",
    "add_magnitude",
    "align_fractions",
    "compare_magnitude",
    "negate",
    "sub_magnitude",
    # Formatter
    "format_decimal",
]
