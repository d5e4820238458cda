"""
Magnitude Engine — беззнаковая арифметика над digit-слотами

Модуль работает с модулями (magnitude) больших целых чисел, представленных
как tuple слотов base-100 (least-significant first):
- Нормализация (удаление старших нулевых слотов)
- Сравнение модулей
- Сложение с переносом (carry)
- Вычитание с заёмом (borrow)
- Умножение (schoolbook convolution)

Знак здесь не существует: все функции принимают и возвращают
неотрицательные модули. Знаковая логика живёт в src.core.math.bigint.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый слот результата лежит в [0, BASE)
2. Результат никогда не содержит старших нулевых слотов
3. Ноль представлен пустым tuple ()
4. Аргументы никогда не мутируются, результат всегда новый tuple
"""

from enum import Enum
from typing import Final, Sequence

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание одного digit-слота
BASE: Final[int] = 100

# Ширина слота в десятичных символах (для рендеринга)
DIGIT_WIDTH: Final[int] = 2

Digits = tuple[int, ...]


# =============================================================================
# TYPES
# =============================================================================


class MagnitudeOrder(int, Enum):
    """Результат сравнения двух модулей"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def trim_digits(digits: Sequence[int]) -> Digits:
    """
    Удаление старших нулевых слотов.

    Идемпотентна: trim_digits(trim_digits(d)) == trim_digits(d).
    Нулевой модуль любой длины схлопывается в ().

    Examples:
        >>> trim_digits([45, 23, 1, 0, 0])
        (45, 23, 1)
        >>> trim_digits([0, 0])
        ()
    """
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    return tuple(digits[:end])


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitude(a: Digits, b: Digits) -> MagnitudeOrder:
    """
    Сравнение модулей |a| и |b|.

    Нормализованные последовательности не содержат старших нулей, поэтому
    при разной длине порядок определяется длиной. При равной длине слоты
    сравниваются от старшего к младшему до первого несовпадения.

    Args:
        a: Нормализованный модуль
        b: Нормализованный модуль

    Returns:
        MagnitudeOrder.LESS / EQUAL / GREATER
    """
    if len(a) != len(b):
        return MagnitudeOrder.LESS if len(a) < len(b) else MagnitudeOrder.GREATER

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return MagnitudeOrder.LESS if a[i] < b[i] else MagnitudeOrder.GREATER

    # Включая случай двух пустых модулей (оба ноль)
    return MagnitudeOrder.EQUAL


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitude(a: Digits, b: Digits) -> Digits:
    """
    Сложение модулей |a| + |b| с переносом в base 100.

    Scratch длиной max(len(a), len(b)) + 1, затем trim.

    Examples:
        >>> add_magnitude((99, 99), (1,))
        (0, 0, 1)
    """
    size = max(len(a), len(b))
    result = [0] * (size + 1)
    carry = 0

    for i in range(size):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, result[i] = divmod(total, BASE)

    result[size] = carry
    return trim_digits(result)


def subtract_magnitude(a: Digits, b: Digits) -> Digits:
    """
    Вычитание модулей |a| - |b| с заёмом (borrow).

    Предусловие |a| >= |b| проверяется явно: вызов с обратным порядком
    операндов является ошибкой вызывающего кода.

    Args:
        a: Уменьшаемое (больший или равный модуль)
        b: Вычитаемое

    Returns:
        Нормализованный модуль разности

    Raises:
        ValueError: Если |a| < |b|
    """
    if compare_magnitude(a, b) is MagnitudeOrder.LESS:
        raise ValueError(
            f"subtract_magnitude requires |a| >= |b|, got "
            f"{len(a)}-slot minuend below {len(b)}-slot subtrahend"
        )

    result = [0] * len(a)
    borrow = 0

    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        result[i] = diff

    return trim_digits(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitude(a: Digits, b: Digits) -> Digits:
    """
    Умножение модулей |a| * |b| (schoolbook, O(len(a) * len(b))).

    Произведение каждой пары слотов (i, j) накапливается в позиции i + j
    scratch-последовательности длиной len(a) + len(b), перенос остаётся
    в пределах base 100.

    Examples:
        >>> multiply_magnitude((45, 23, 1), (2,))
        (90, 46, 2)
        >>> multiply_magnitude((), (7,))
        ()
    """
    if not a or not b:
        return ()

    result = [0] * (len(a) + len(b))

    for i, x in enumerate(a):
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, BASE)

        pos = i + len(b)
        while carry:
            carry, result[pos] = divmod(result[pos] + carry, BASE)
            pos += 1

    return trim_digits(result)
