"""
Formatter — Рендеринг DecimalValue в каноническую строку

Точная инверсия нормализации: "0" для нуля, '-' только для отрицательных,
'+' никогда не выводится, '.' только при непустой дробной части.
"""

from src.core.domain.decimal_value import DecimalValue, Sign
from src.core.math.literal_grammar import DECIMAL_POINT


def format_decimal(value: DecimalValue) -> str:
    """
    Каноническая строка значения.

    Examples:
        >>> format_decimal(DecimalValue(sign=Sign.NEGATIVE, integer_digits="0", fraction_digits="005"))
        '-0.005'
    """
    if value.is_zero():
        return "0"

    sign = "-" if value.sign == Sign.NEGATIVE else ""
    if value.fraction_digits:
        return f"{sign}{value.integer_digits}{DECIMAL_POINT}{value.fraction_digits}"
    return f"{sign}{value.integer_digits}"
