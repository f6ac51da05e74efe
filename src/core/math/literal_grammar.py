"""
Literal Grammar — Валидация десятичных литералов

Грамматика (строка целиком, без конверсии в float):

    literal  := [sign] digits ["." digits]
    sign     := "+" | "-"
    digits   := ("0" | "1" | ... | "9")+

Допустимо: "1", "+1", "-1", "1.0", "+0001.0", "-0001.005"
Недопустимо: "", "+", "-", "A", "+-1", "-5.", "-.5", "1.", ".1", "1.2.3", "-5.-5"

Только ASCII цифры: unicode-цифры, пробелы и разделители групп отклоняются.
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# ГРАММАТИКА
# =============================================================================

SIGN_CHARS: Final[str] = "+-"
# Явный набор ASCII цифр: str.isdigit() принимает и unicode-цифры
DIGIT_CHARS: Final[str] = "0123456789"
DECIMAL_POINT: Final[str] = "."

# Коды причин отклонения
REASON_EMPTY: Final[str] = "empty"
REASON_SIGN_ONLY: Final[str] = "sign_only"
REASON_MISSING_INTEGER_DIGITS: Final[str] = "missing_integer_digits"
REASON_MISSING_FRACTION_DIGITS: Final[str] = "missing_fraction_digits"
REASON_UNEXPECTED_CHARACTER: Final[str] = "unexpected_character"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidLiteralError(ValueError):
    """
    Строка не соответствует грамматике десятичного литерала.

    Поднимается нормализатором: вызывающий код обязан проверять литералы
    через is_valid_literal / check_literal до нормализации.
    """

    def __init__(self, literal: str, reason: str) -> None:
        self.literal = literal
        self.reason = reason
        super().__init__(f"'{literal}' is not a valid decimal literal ({reason})")


# =============================================================================
# РЕЗУЛЬТАТ ПРОВЕРКИ
# =============================================================================


@dataclass(frozen=True)
class LiteralCheck:
    """Результат проверки литерала."""

    literal: str
    is_valid: bool
    reason: str

    # Диагностика
    details: str


def is_valid_literal(text: str) -> bool:
    """
    Проверка соответствия строки грамматике десятичного литерала.

    Чистая функция без side effects. Тонкая обёртка над check_literal:
    грамматика описана в одном месте.

    Examples:
        >>> is_valid_literal("+0001.0")
        True
        >>> is_valid_literal("-5.")
        False
    """
    return check_literal(text).is_valid


def check_literal(text: str) -> LiteralCheck:
    """
    Проверка литерала с указанием причины отклонения.

    Сканирует строку по грамматике и возвращает первую найденную ошибку.

    Args:
        text: Проверяемая строка

    Returns:
        LiteralCheck с кодом причины (пустой для валидного литерала)
    """
    if not text:
        return LiteralCheck(
            literal=text,
            is_valid=False,
            reason=REASON_EMPTY,
            details="Empty string",
        )

    pos = 0
    if text[pos] in SIGN_CHARS:
        pos += 1
        if pos == len(text):
            return LiteralCheck(
                literal=text,
                is_valid=False,
                reason=REASON_SIGN_ONLY,
                details=f"Sign '{text}' without digits",
            )

    # Целая часть: минимум одна цифра
    int_start = pos
    while pos < len(text) and text[pos] in DIGIT_CHARS:
        pos += 1
    if pos == int_start:
        reason = (
            REASON_MISSING_INTEGER_DIGITS
            if text[pos] == DECIMAL_POINT
            else REASON_UNEXPECTED_CHARACTER
        )
        return LiteralCheck(
            literal=text,
            is_valid=False,
            reason=reason,
            details=f"Expected digit at position {pos}, got '{text[pos]}'",
        )

    if pos < len(text) and text[pos] == DECIMAL_POINT:
        pos += 1
        # Дробная часть: минимум одна цифра после точки
        frac_start = pos
        while pos < len(text) and text[pos] in DIGIT_CHARS:
            pos += 1
        if pos == frac_start:
            return LiteralCheck(
                literal=text,
                is_valid=False,
                reason=REASON_MISSING_FRACTION_DIGITS,
                details=f"Expected digit after '.' at position {pos}",
            )

    if pos < len(text):
        return LiteralCheck(
            literal=text,
            is_valid=False,
            reason=REASON_UNEXPECTED_CHARACTER,
            details=f"Unexpected character '{text[pos]}' at position {pos}",
        )

    return LiteralCheck(
        literal=text,
        is_valid=True,
        reason="",
        details="PASS",
    )
