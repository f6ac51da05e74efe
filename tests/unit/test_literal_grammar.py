"""
Тесты для модуля Literal Grammar

Проверяет:
1. Таблицу допустимых/недопустимых литералов
2. Коды причин отклонения check_literal
3. Согласованность check_literal и is_valid_literal
4. Совпадение сканера с эталонным регулярным выражением
"""

import itertools
import re

import pytest

from src.core.math.literal_grammar import (
    REASON_EMPTY,
    REASON_MISSING_FRACTION_DIGITS,
    REASON_MISSING_INTEGER_DIGITS,
    REASON_SIGN_ONLY,
    REASON_UNEXPECTED_CHARACTER,
    InvalidLiteralError,
    LiteralCheck,
    check_literal,
    is_valid_literal,
)

VALID_LITERALS = [
    "1",
    "+1",
    "-1",
    "1.0",
    "+0001.0",
    "-0001.005",
    "0",
    "-0",
    "000",
    "0.000",
    "123456789012345678901234567890.098765432109876543210",
]

INVALID_LITERALS = [
    "",
    "+",
    "-",
    "A",
    "+-1",
    "-5.",
    "-.5",
    "1.",
    ".1",
    "1.2.3",
    "-5.-5",
    " 1",
    "1 ",
    "1 2",
    "1e5",
    "1,000",
    "1_000",
    "0x10",
    "++1",
    "1-",
    "١٢",  # арабско-индийские цифры
    "１",  # fullwidth digit
    "\t",
    ".",
]


# =============================================================================
# ТАБЛИЦА ЛИТЕРАЛОВ
# =============================================================================


class TestIsValidLiteral:
    """Тесты для is_valid_literal"""

    @pytest.mark.parametrize("literal", VALID_LITERALS)
    def test_valid_literals_accepted(self, literal: str) -> None:
        """Литералы по грамматике принимаются"""
        assert is_valid_literal(literal) is True

    @pytest.mark.parametrize("literal", INVALID_LITERALS)
    def test_invalid_literals_rejected(self, literal: str) -> None:
        """Литералы вне грамматики отклоняются"""
        assert is_valid_literal(literal) is False

    def test_trailing_newline_rejected(self) -> None:
        """fullmatch не допускает завершающий перевод строки"""
        assert is_valid_literal("1\n") is False


# =============================================================================
# ПРИЧИНЫ ОТКЛОНЕНИЯ
# =============================================================================


class TestCheckLiteral:
    """Тесты для check_literal"""

    @pytest.mark.parametrize(
        "literal,reason",
        [
            ("", REASON_EMPTY),
            ("+", REASON_SIGN_ONLY),
            ("-", REASON_SIGN_ONLY),
            ("-.5", REASON_MISSING_INTEGER_DIGITS),
            (".1", REASON_MISSING_INTEGER_DIGITS),
            ("-5.", REASON_MISSING_FRACTION_DIGITS),
            ("1.", REASON_MISSING_FRACTION_DIGITS),
            ("-5.-5", REASON_MISSING_FRACTION_DIGITS),
            ("A", REASON_UNEXPECTED_CHARACTER),
            ("+-1", REASON_UNEXPECTED_CHARACTER),
            ("1.2.3", REASON_UNEXPECTED_CHARACTER),
            ("12a", REASON_UNEXPECTED_CHARACTER),
            ("1.5x", REASON_UNEXPECTED_CHARACTER),
        ],
    )
    def test_rejection_reason(self, literal: str, reason: str) -> None:
        """Код причины соответствует первой ошибке грамматики"""
        result = check_literal(literal)
        assert result.is_valid is False
        assert result.reason == reason
        assert result.literal == literal

    def test_valid_literal_has_empty_reason(self) -> None:
        """Валидный литерал: пустая причина, details=PASS"""
        result = check_literal("+0001.0")
        assert result == LiteralCheck(
            literal="+0001.0", is_valid=True, reason="", details="PASS"
        )

    def test_details_name_position(self) -> None:
        """details указывает позицию ошибки"""
        result = check_literal("12a")
        assert "position 2" in result.details
        assert "'a'" in result.details

    @pytest.mark.parametrize("literal", VALID_LITERALS + INVALID_LITERALS)
    def test_consistent_with_is_valid_literal(self, literal: str) -> None:
        """check_literal(s).is_valid == is_valid_literal(s) для всех s"""
        assert check_literal(literal).is_valid == is_valid_literal(literal)

    def test_result_immutable(self) -> None:
        """LiteralCheck frozen"""
        result = check_literal("1")
        with pytest.raises(AttributeError):
            result.is_valid = False  # type: ignore

    def test_matches_reference_regex_exhaustively(self) -> None:
        """Все строки длины <= 4 над алфавитом "+-.05a" совпадают с эталоном"""
        reference = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")
        for length in range(5):
            for chars in itertools.product("+-.05a", repeat=length):
                literal = "".join(chars)
                expected = reference.fullmatch(literal) is not None
                assert check_literal(literal).is_valid is expected, literal


class TestInvalidLiteralError:
    """Тесты для InvalidLiteralError"""

    def test_is_value_error(self) -> None:
        """InvalidLiteralError — подкласс ValueError"""
        error = InvalidLiteralError("-5.", REASON_MISSING_FRACTION_DIGITS)
        assert isinstance(error, ValueError)
        assert error.literal == "-5."
        assert error.reason == REASON_MISSING_FRACTION_DIGITS
        assert "'-5.' is not a valid decimal literal" in str(error)
