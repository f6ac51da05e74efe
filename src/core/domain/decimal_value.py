"""
DecimalValue — Каноническое представление десятичного числа

Immutable Pydantic модель знак + модуль (sign-magnitude), в которой
цифры хранятся строками без конверсии во float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. integer_digits: только '0'-'9', длина >= 1, "0" или без ведущих нулей
2. fraction_digits: только '0'-'9', пустая или без завершающих нулей
3. Ноль представлен единственным образом: (+, "0", "")
4. Отрицательный ноль запрещён на уровне валидации модели

Magnitude — рабочая беззнаковая форма для арифметики: цифры хранятся
как tuple[int, ...] (значения 0-9), а не символы.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Tuple

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак десятичного значения"""

    POSITIVE = "+"
    NEGATIVE = "-"

    def flipped(self) -> "Sign":
        """Противоположный знак"""
        return Sign.NEGATIVE if self == Sign.POSITIVE else Sign.POSITIVE


# =============================================================================
# DECIMAL VALUE MODEL
# =============================================================================

# Целая часть: "0" или цифры без ведущего нуля
INTEGER_DIGITS_PATTERN: Final[str] = r"^(0|[1-9][0-9]*)$"

# Дробная часть: пустая или цифры без завершающего нуля
FRACTION_DIGITS_PATTERN: Final[str] = r"^([0-9]*[1-9])?$"


class DecimalValue(BaseModel):
    """
    Нормализованное десятичное значение.

    Immutable модель (frozen=True). Создаётся только нормализатором
    (из валидного литерала) или арифметическим движком (как результат
    сложения). Любая операция возвращает новый экземпляр.
    """

    sign: Sign = Field(Sign.POSITIVE, description="Знак значения (+/-)")
    integer_digits: str = Field(
        "0",
        min_length=1,
        pattern=INTEGER_DIGITS_PATTERN,
        description="Цифры целой части без ведущих нулей",
    )
    fraction_digits: str = Field(
        "",
        pattern=FRACTION_DIGITS_PATTERN,
        description="Цифры дробной части без завершающих нулей (может быть пустой)",
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_canonical_zero(self) -> "DecimalValue":
        """Ноль всегда положительный"""
        if self.is_zero() and self.sign == Sign.NEGATIVE:
            raise ValueError("zero must be positive (negative zero is not canonical)")
        return self

    @classmethod
    def zero(cls) -> "DecimalValue":
        """Канонический ноль: (+, "0", "")"""
        return cls(sign=Sign.POSITIVE, integer_digits="0", fraction_digits="")

    def is_zero(self) -> bool:
        """Значение равно нулю"""
        return self.integer_digits == "0" and not self.fraction_digits

    def is_negative(self) -> bool:
        return self.sign == Sign.NEGATIVE

    def magnitude(self) -> "Magnitude":
        """Модуль значения в рабочей цифровой форме"""
        return Magnitude.from_value(self)

    def negate(self) -> "DecimalValue":
        """
        Смена знака без изменения модуля.

        Ноль остаётся каноническим (положительным).
        """
        if self.is_zero():
            return self
        return self.model_copy(update={"sign": self.sign.flipped()})


# =============================================================================
# MAGNITUDE (рабочая форма)
# =============================================================================


@dataclass(frozen=True)
class Magnitude:
    """
    Беззнаковый модуль десятичного числа.

    Промежуточные значения могут быть невыровненными (padding нулями),
    каноническая форма восстанавливается в to_value().
    """

    integer_digits: Tuple[int, ...]
    fraction_digits: Tuple[int, ...] = ()

    @classmethod
    def from_value(cls, value: DecimalValue) -> "Magnitude":
        return cls(
            integer_digits=tuple(int(ch) for ch in value.integer_digits),
            fraction_digits=tuple(int(ch) for ch in value.fraction_digits),
        )

    def stripped(self) -> "Magnitude":
        """
        Удаление избыточных нулей.

        Ведущие нули целой части удаляются до длины 1, завершающие нули
        дробной части удаляются полностью.
        """
        integer = self.integer_digits or (0,)
        first = next((i for i, d in enumerate(integer) if d), len(integer) - 1)

        fraction = self.fraction_digits
        end = next((i + 1 for i in range(len(fraction) - 1, -1, -1) if fraction[i]), 0)

        # Один срез на каждую часть: O(длина модуля)
        return Magnitude(integer_digits=integer[first:], fraction_digits=fraction[:end])

    def is_zero(self) -> bool:
        return all(d == 0 for d in self.integer_digits) and all(
            d == 0 for d in self.fraction_digits
        )

    def to_value(self, sign: Sign = Sign.POSITIVE) -> DecimalValue:
        """
        Конверсия в каноническое DecimalValue.

        Args:
            sign: Желаемый знак результата

        Returns:
            DecimalValue; для нулевого модуля знак принудительно POSITIVE
        """
        canonical = self.stripped()
        if canonical.is_zero():
            return DecimalValue.zero()
        return DecimalValue(
            sign=sign,
            integer_digits="".join(str(d) for d in canonical.integer_digits),
            fraction_digits="".join(str(d) for d in canonical.fraction_digits),
        )
