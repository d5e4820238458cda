"""
Тесты для модуля Magnitude Engine

Проверяет:
1. Нормализацию (trim старших нулевых слотов)
2. Сравнение модулей
3. Сложение с переносом
4. Вычитание с заёмом и проверку предусловия
5. Умножение (schoolbook)
"""

import pytest

from src.core.math.magnitude import (
    BASE,
    DIGIT_WIDTH,
    MagnitudeOrder,
    add_magnitude,
    compare_magnitude,
    multiply_magnitude,
    subtract_magnitude,
    trim_digits,
)


def to_digits(value: int) -> tuple[int, ...]:
    """Oracle: неотрицательный int → слоты base 100"""
    digits = []
    while value > 0:
        value, slot = divmod(value, BASE)
        digits.append(slot)
    return tuple(digits)


MAGNITUDES = [0, 1, 9, 99, 100, 101, 9999, 10000, 12345, 33669900, 10**20 + 7, 2**64]


# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================


class TestConstants:
    """Тесты параметров представления"""

    def test_base_and_width(self) -> None:
        """Base 100, два десятичных символа на слот"""
        assert BASE == 100
        assert DIGIT_WIDTH == 2
        assert 10**DIGIT_WIDTH == BASE


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestTrimDigits:
    """Тесты для trim_digits"""

    def test_strips_high_order_zeros(self) -> None:
        """Старшие нулевые слоты удаляются"""
        assert trim_digits([99, 66, 33, 0, 0]) == (99, 66, 33)

    def test_keeps_low_order_zeros(self) -> None:
        """Младшие и внутренние нули сохраняются"""
        assert trim_digits([0, 0, 5]) == (0, 0, 5)
        assert trim_digits([0, 7, 0, 3, 0]) == (0, 7, 0, 3)

    def test_all_zero_collapses_to_empty(self) -> None:
        """Нулевой модуль любой длины → ()"""
        assert trim_digits([0]) == ()
        assert trim_digits([0, 0, 0]) == ()
        assert trim_digits([]) == ()

    def test_idempotent(self) -> None:
        """trim_digits идемпотентна"""
        for digits in ([1, 2, 0], [0, 0], [5], [], [0, 0, 1, 0]):
            once = trim_digits(digits)
            assert trim_digits(once) == once

    def test_returns_tuple(self) -> None:
        """Результат всегда tuple (новый объект)"""
        source = [1, 2, 3]
        result = trim_digits(source)
        assert isinstance(result, tuple)
        source[0] = 9
        assert result == (1, 2, 3)


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestCompareMagnitude:
    """Тесты для compare_magnitude"""

    def test_length_decides_when_different(self) -> None:
        """При разной длине решает длина"""
        assert compare_magnitude((99, 99), (0, 0, 1)) is MagnitudeOrder.LESS
        assert compare_magnitude((0, 0, 1), (99, 99)) is MagnitudeOrder.GREATER

    def test_most_significant_mismatch_decides(self) -> None:
        """При равной длине решает старший несовпадающий слот"""
        assert compare_magnitude((99, 1), (0, 2)) is MagnitudeOrder.LESS
        assert compare_magnitude((0, 2), (99, 1)) is MagnitudeOrder.GREATER
        assert compare_magnitude((1, 5, 7), (2, 5, 7)) is MagnitudeOrder.LESS

    def test_equal(self) -> None:
        """Одинаковые модули равны"""
        assert compare_magnitude((45, 23, 1), (45, 23, 1)) is MagnitudeOrder.EQUAL

    def test_both_empty_equal(self) -> None:
        """Два нуля равны"""
        assert compare_magnitude((), ()) is MagnitudeOrder.EQUAL

    def test_matches_int_ordering(self) -> None:
        """Сравнение согласовано с порядком int"""
        for x in MAGNITUDES:
            for y in MAGNITUDES:
                expected = (x > y) - (x < y)
                assert compare_magnitude(to_digits(x), to_digits(y)) == expected

    def test_order_values(self) -> None:
        """MagnitudeOrder совместим с -1/0/1"""
        assert MagnitudeOrder.LESS == -1
        assert MagnitudeOrder.EQUAL == 0
        assert MagnitudeOrder.GREATER == 1


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ / ВЫЧИТАНИЯ
# =============================================================================


class TestAddMagnitude:
    """Тесты для add_magnitude"""

    def test_carry_propagates_to_new_slot(self) -> None:
        """Перенос создаёт новый старший слот"""
        assert add_magnitude((99, 99), (1,)) == (0, 0, 1)

    def test_zero_identity(self) -> None:
        """|a| + 0 == |a|"""
        assert add_magnitude((45, 23, 1), ()) == (45, 23, 1)
        assert add_magnitude((), (45, 23, 1)) == (45, 23, 1)
        assert add_magnitude((), ()) == ()

    def test_matches_int_addition(self) -> None:
        """Сложение согласовано с int"""
        for x in MAGNITUDES:
            for y in MAGNITUDES:
                assert add_magnitude(to_digits(x), to_digits(y)) == to_digits(x + y)

    def test_slots_in_range(self) -> None:
        """Каждый слот результата в [0, BASE)"""
        result = add_magnitude(to_digits(10**30 - 1), to_digits(10**30 - 1))
        assert all(0 <= slot < BASE for slot in result)
        assert result[-1] != 0


class TestSubtractMagnitude:
    """Тесты для subtract_magnitude"""

    def test_borrow_propagates(self) -> None:
        """Заём проходит через несколько слотов"""
        assert subtract_magnitude((0, 0, 1), (1,)) == (99, 99)

    def test_equal_operands_give_zero(self) -> None:
        """|a| - |a| == ()"""
        assert subtract_magnitude((45, 23, 1), (45, 23, 1)) == ()

    def test_result_trimmed(self) -> None:
        """Результат без старших нулей"""
        assert subtract_magnitude((5, 0, 1), (0, 0, 1)) == (5,)

    def test_matches_int_subtraction(self) -> None:
        """Вычитание согласовано с int при |a| >= |b|"""
        for x in MAGNITUDES:
            for y in MAGNITUDES:
                big, small = max(x, y), min(x, y)
                assert subtract_magnitude(to_digits(big), to_digits(small)) == to_digits(
                    big - small
                )

    def test_precondition_violation_raises(self) -> None:
        """|a| < |b| является ошибкой вызывающего кода"""
        with pytest.raises(ValueError, match="requires"):
            subtract_magnitude((1,), (2,))

        with pytest.raises(ValueError, match="requires"):
            subtract_magnitude((), (1,))


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ
# =============================================================================


class TestMultiplyMagnitude:
    """Тесты для multiply_magnitude"""

    def test_zero_operand(self) -> None:
        """Умножение на ноль → ()"""
        assert multiply_magnitude((), (7,)) == ()
        assert multiply_magnitude((7,), ()) == ()

    def test_single_slot(self) -> None:
        """Умножение на один слот"""
        assert multiply_magnitude((45, 23, 1), (2,)) == (90, 46, 2)

    def test_carry_chain(self) -> None:
        """99..99 * 99..99 даёт длинную цепочку переносов"""
        x = 10**40 - 1
        assert multiply_magnitude(to_digits(x), to_digits(x)) == to_digits(x * x)

    def test_scenario_product(self) -> None:
        """12345 * 336699"""
        assert multiply_magnitude((45, 23, 1), (99, 66, 33)) == to_digits(12345 * 336699)

    def test_matches_int_multiplication(self) -> None:
        """Умножение согласовано с int"""
        for x in MAGNITUDES:
            for y in MAGNITUDES:
                assert multiply_magnitude(to_digits(x), to_digits(y)) == to_digits(x * y)
