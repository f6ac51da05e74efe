"""
Decimal Arithmetic — Точное сложение десятичных значений произвольной точности

Все операции выполняются над модулями (Magnitude: цифры 0-9 в tuple),
знак обрабатывается отдельным слоем (add).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакой конверсии во float: только поразрядная арифметика
2. Выравнивание дробных частей нулями справа перед сравнением и арифметикой
3. Вычитание модулей всегда из большего (упорядочивание внутри sub_magnitude)
4. Нулевой результат всегда положительный
5. Все операции чистые: входные значения не изменяются

ФОРМУЛЫ:
    sign(a) == sign(b):  a + b = sign(a) * (|a| + |b|)
    sign(a) != sign(b):  a + b = sign(max(|a|, |b|)) * (max(|a|,|b|) - min(|a|,|b|))
"""

from enum import IntEnum
from typing import List, Tuple, Union

from src.core.domain.decimal_value import DecimalValue, Magnitude

# DecimalValue или рабочий модуль
MagnitudeLike = Union[DecimalValue, Magnitude]


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(IntEnum):
    """Результат сравнения модулей"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# ВЫРАВНИВАНИЕ
# =============================================================================


def _as_magnitude(value: MagnitudeLike) -> Magnitude:
    if isinstance(value, DecimalValue):
        return value.magnitude()
    return value


def align_fractions(a: MagnitudeLike, b: MagnitudeLike) -> Tuple[Magnitude, Magnitude]:
    """
    Выравнивание длины дробных частей.

    Более короткая дробная часть дополняется нулями справа. Значение не
    меняется (завершающие нули не влияют на величину), меняется только масштаб.

    Args:
        a: Первый операнд
        b: Второй операнд

    Returns:
        (a', b') с равной длиной fraction_digits
    """
    ma = _as_magnitude(a)
    mb = _as_magnitude(b)
    scale = max(len(ma.fraction_digits), len(mb.fraction_digits))

    def pad(m: Magnitude) -> Magnitude:
        return Magnitude(
            integer_digits=m.integer_digits,
            fraction_digits=m.fraction_digits + (0,) * (scale - len(m.fraction_digits)),
        )

    return pad(ma), pad(mb)


def _align_integers(a: Tuple[int, ...], b: Tuple[int, ...]) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Дополнение целых частей нулями слева до равной длины"""
    width = max(len(a), len(b))
    return (0,) * (width - len(a)) + a, (0,) * (width - len(b)) + b


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitude(a: MagnitudeLike, b: MagnitudeLike) -> Ordering:
    """
    Сравнение |a| и |b|.

    Порядок сравнения после выравнивания:
    1. Длина целой части (длиннее → больше, ведущих нулей нет)
    2. Цифры целой части лексикографически
    3. Выровненные цифры дробной части лексикографически

    Args:
        a: Первый операнд
        b: Второй операнд

    Returns:
        Ordering.LESS / EQUAL / GREATER
    """
    ma, mb = align_fractions(_as_magnitude(a).stripped(), _as_magnitude(b).stripped())

    if len(ma.integer_digits) != len(mb.integer_digits):
        return Ordering.LESS if len(ma.integer_digits) < len(mb.integer_digits) else Ordering.GREATER

    if ma.integer_digits != mb.integer_digits:
        return Ordering.LESS if ma.integer_digits < mb.integer_digits else Ordering.GREATER

    if ma.fraction_digits != mb.fraction_digits:
        return Ordering.LESS if ma.fraction_digits < mb.fraction_digits else Ordering.GREATER

    return Ordering.EQUAL


# =============================================================================
# АРИФМЕТИКА МОДУЛЕЙ
# =============================================================================


def _split(digits: List[int], scale: int) -> Magnitude:
    """Разделение сплошной последовательности цифр на целую и дробную части"""
    cut = len(digits) - scale
    return Magnitude(integer_digits=tuple(digits[:cut]), fraction_digits=tuple(digits[cut:]))


def add_magnitude(a: MagnitudeLike, b: MagnitudeLike) -> Magnitude:
    """
    Сложение модулей |a| + |b| (школьный алгоритм с переносом).

    Перенос распространяется от младшей цифры дробной части до старшей
    цифры целой части; финальный перенос добавляет новую старшую цифру.

    Returns:
        Канонический (stripped) модуль суммы
    """
    ma, mb = align_fractions(a, b)
    int_a, int_b = _align_integers(ma.integer_digits, mb.integer_digits)
    scale = len(ma.fraction_digits)

    digits_a = int_a + ma.fraction_digits
    digits_b = int_b + mb.fraction_digits

    result: List[int] = [0] * len(digits_a)
    carry = 0
    for i in range(len(digits_a) - 1, -1, -1):
        total = digits_a[i] + digits_b[i] + carry
        result[i] = total % 10
        carry = total // 10

    if carry:
        result.insert(0, carry)

    return _split(result, scale).stripped()


def sub_magnitude(a: MagnitudeLike, b: MagnitudeLike) -> Magnitude:
    """
    Вычитание модулей (школьный алгоритм с заёмом).

    Уменьшаемое всегда больший из модулей: операнды упорядочиваются через
    compare_magnitude, поэтому для |a| >= |b| результат равен |a| - |b|,
    а обратный порядок невозможен.

    Returns:
        Канонический (stripped) модуль разности; полное сокращение → "0"
    """
    if compare_magnitude(a, b) == Ordering.LESS:
        a, b = b, a

    ma, mb = align_fractions(a, b)
    int_a, int_b = _align_integers(ma.integer_digits, mb.integer_digits)
    scale = len(ma.fraction_digits)

    minuend = int_a + ma.fraction_digits
    subtrahend = int_b + mb.fraction_digits

    result: List[int] = [0] * len(minuend)
    borrow = 0
    for i in range(len(minuend) - 1, -1, -1):
        digit = minuend[i] - borrow - subtrahend[i]
        if digit < 0:
            digit += 10
            borrow = 1
        else:
            borrow = 0
        result[i] = digit

    return _split(result, scale).stripped()


# =============================================================================
# ЗНАКОВОЕ СЛОЖЕНИЕ
# =============================================================================


def add(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """
    Точное знаковое сложение a + b.

    - Нулевой операнд → возвращается другой операнд без изменений
    - Одинаковые знаки → сумма модулей с общим знаком
    - Разные знаки → разность модулей со знаком большего по модулю;
      равные модули → канонический ноль

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Каноническое DecimalValue суммы

    Examples:
        >>> from src.core.math.normalizer import normalize
        >>> from src.core.math.formatter import format_decimal
        >>> format_decimal(add(normalize("0.1"), normalize("0.2")))
        '0.3'
    """
    if a.is_zero():
        return b
    if b.is_zero():
        return a

    if a.sign == b.sign:
        return add_magnitude(a, b).to_value(a.sign)

    ordering = compare_magnitude(a, b)
    if ordering == Ordering.EQUAL:
        return DecimalValue.zero()
    if ordering == Ordering.GREATER:
        return sub_magnitude(a, b).to_value(a.sign)
    return sub_magnitude(b, a).to_value(b.sign)


def negate(value: DecimalValue) -> DecimalValue:
    """Смена знака (модуль не меняется, ноль остаётся положительным)"""
    return value.negate()
