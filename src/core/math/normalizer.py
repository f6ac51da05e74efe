"""
Decimal Normalizer — Парсинг литерала в каноническое DecimalValue

Алгоритм:
1. Знак: опциональный '+'/'-' (по умолчанию POSITIVE)
2. Разделение по '.' на целую и дробную подстроки
3. Удаление ведущих нулей целой части (минимум одна цифра: "0007" → "7")
4. Удаление завершающих нулей дробной части
5. Ноль всегда положительный ("-0.000" → "0")

Предусловие проверяется структурно: невалидный литерал → InvalidLiteralError.
"""

from src.core.domain.decimal_value import DecimalValue, Sign
from src.core.math.literal_grammar import (
    DECIMAL_POINT,
    InvalidLiteralError,
    check_literal,
)


def strip_leading_zeros(digits: str) -> str:
    """
    Удаление ведущих нулей с сохранением минимум одной цифры.

    Examples:
        >>> strip_leading_zeros("0007")
        '7'
        >>> strip_leading_zeros("000")
        '0'
    """
    stripped = digits.lstrip("0")
    return stripped or "0"


def strip_trailing_zeros(digits: str) -> str:
    """Удаление завершающих нулей (для дробной части)"""
    return digits.rstrip("0")


def normalize(text: str) -> DecimalValue:
    """
    Нормализация валидного литерала.

    Args:
        text: Десятичный литерал (например, "+0001.0")

    Returns:
        Каноническое DecimalValue

    Raises:
        InvalidLiteralError: Если text не соответствует грамматике литерала

    Examples:
        >>> normalize("-0001.005")
        DecimalValue(sign=<Sign.NEGATIVE: '-'>, integer_digits='1', fraction_digits='005')
    """
    check = check_literal(text)
    if not check.is_valid:
        raise InvalidLiteralError(text, check.reason)

    sign = Sign.POSITIVE
    body = text
    if body[0] in (Sign.POSITIVE.value, Sign.NEGATIVE.value):
        sign = Sign(body[0])
        body = body[1:]

    raw_integer, _, raw_fraction = body.partition(DECIMAL_POINT)

    integer_digits = strip_leading_zeros(raw_integer)
    fraction_digits = strip_trailing_zeros(raw_fraction)

    if integer_digits == "0" and not fraction_digits:
        return DecimalValue.zero()

    return DecimalValue(
        sign=sign,
        integer_digits=integer_digits,
        fraction_digits=fraction_digits,
    )
