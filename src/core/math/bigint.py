"""
BigInt — знаковое целое произвольной точности

Immutable Pydantic модель: знак + модуль в виде digit-слотов base 100
(least-significant first). Каждая операция возвращает новый
нормализованный экземпляр, операнды никогда не мутируются.

Слои:
- Представление и нормализация (канонический ноль, trim старших нулей)
- Знаковая арифметика (+, -, *, унарный минус) поверх magnitude engine
- Полный порядок и равенство

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Канонический ноль ⇔ digits == () ⇔ sign is False
2. digits никогда не содержит старшего нулевого слота
3. Каждый слот лежит в [0, BASE)
4. Любой путь создания (from_digits/from_int, прямое построение,
   model_validate, payload) даёт только каноническое представление или ошибку
"""

from typing import Annotated, Any, Final, Iterable, Optional

from pydantic import BaseModel, Field, StrictBool, StrictInt, model_validator

from src.core.math.magnitude import (
    BASE,
    MagnitudeOrder,
    add_magnitude,
    compare_magnitude,
    multiply_magnitude,
    subtract_magnitude,
    trim_digits,
)
from src.core.math.rendering import render_digits

# Один digit-слот: целое в [0, BASE)
Slot = Annotated[StrictInt, Field(ge=0, lt=BASE)]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigit(ValueError):
    """
    Digit-слот вне диапазона [0, BASE) при явном построении из слотов.

    Ошибка восстановимая: значение не обрезается и не clamp-ится,
    вызывающий код получает индекс и значение некорректного слота.
    """

    def __init__(self, index: int, value: object):
        self.index = index
        self.value = value
        super().__init__(
            f"Invalid digit slot at index {index}: {value!r} "
            f"(expected int in [0, {BASE}))"
        )


def _validate_slots(digits: Iterable[int]) -> list[int]:
    slots = list(digits)
    for index, slot in enumerate(slots):
        if isinstance(slot, bool) or not isinstance(slot, int) or not 0 <= slot < BASE:
            raise InvalidDigit(index, slot)
    return slots


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Знаковое целое произвольной точности.

    Нормализующие конструкторы: from_digits(sign, digits) и from_int(value).
    Прямое построение BigInt(sign=..., digits=...) и model_validate принимают
    только каноническую форму (иначе ValidationError).

    Examples:
        >>> str(BigInt.from_digits(True, [45, 23, 1]))
        '-12345'
        >>> BigInt.from_digits(True, [0, 0]) == BigInt()
        True
    """

    sign: StrictBool = Field(False, description="True для отрицательного значения")
    digits: tuple[Slot, ...] = Field(
        (), description="Слоты base 100, least-significant first, без старших нулей"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def check_canonical(self) -> "BigInt":
        """
        Проверка канонической формы.

        Срабатывает для путей, минующих нормализующие конструкторы
        (прямое построение, model_validate, загрузка payload).
        """
        if self.digits and self.digits[-1] == 0:
            raise ValueError(
                f"digits must not carry a high-order zero slot: {self.digits}"
            )
        if self.sign and not self.digits:
            raise ValueError("canonical zero must be non-negative")
        return self

    @classmethod
    def from_digits(cls, sign: bool, digits: Iterable[int]) -> "BigInt":
        """
        Построение из знака и упорядоченной последовательности слотов.

        Каждый слот валидируется до trim: значение вне [0, BASE) не
        обрезается, а приводит к InvalidDigit. Старшие нулевые слоты
        удаляются, нулевой модуль даёт канонический ноль независимо от sign.

        Args:
            sign: True для отрицательного значения
            digits: Слоты base 100, least-significant first

        Raises:
            InvalidDigit: Если слот не int в [0, BASE)
        """
        trimmed = trim_digits(_validate_slots(digits))
        return cls(sign=bool(trimmed) and bool(sign), digits=trimmed)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """
        Построение из встроенного int.

        Модуль раскладывается повторным делением на BASE, знак сохраняется
        отдельно. Python int не ограничен по ширине, поэтому асимметричный
        минимум (например, -2**63) обрабатывается без особых случаев.

        Raises:
            TypeError: Если value не int (bool отклоняется)

        Examples:
            >>> BigInt.from_int(-12345).digits
            (45, 23, 1)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"BigInt.from_int expects int, got {type(value).__name__}")

        magnitude = abs(value)
        digits = []
        while magnitude > 0:
            magnitude, slot = divmod(magnitude, BASE)
            digits.append(slot)
        return cls.from_digits(value < 0, digits)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return not self.digits

    def is_negative(self) -> bool:
        return self.sign and not self.is_zero()

    def signum(self) -> int:
        """-1, 0 или 1 в зависимости от знака значения"""
        if self.is_zero():
            return 0
        return -1 if self.sign else 1

    def to_payload(self) -> dict[str, Any]:
        """Сериализация в JSON-совместимый dict (контракт big_int.json)"""
        return self.model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Signed arithmetic
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        # Для нуля from_digits сам оставит знак неотрицательным
        return BigInt.from_digits(not self.sign, self.digits)

    def __abs__(self) -> "BigInt":
        return BigInt.from_digits(False, self.digits)

    def __add__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented

        if self.sign == rhs.sign:
            return BigInt.from_digits(self.sign, add_magnitude(self.digits, rhs.digits))

        order = compare_magnitude(self.digits, rhs.digits)
        if order is MagnitudeOrder.EQUAL:
            return BigInt()
        if order is MagnitudeOrder.GREATER:
            return BigInt.from_digits(self.sign, subtract_magnitude(self.digits, rhs.digits))
        return BigInt.from_digits(rhs.sign, subtract_magnitude(rhs.digits, self.digits))

    __radd__ = __add__

    def __sub__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + (-self)

    def __mul__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented

        if self.is_zero() or rhs.is_zero():
            return BigInt()
        return BigInt.from_digits(
            self.sign != rhs.sign, multiply_magnitude(self.digits, rhs.digits)
        )

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Ordering and equality
    # -------------------------------------------------------------------------

    def _compare(self, rhs: "BigInt") -> int:
        # Канонический ноль всегда неотрицателен: разные знаки => оба ненулевые
        if self.sign != rhs.sign:
            return -1 if self.sign else 1

        order = compare_magnitude(self.digits, rhs.digits)
        # Оба отрицательные: больший модуль => меньшее значение
        return -order.value if self.sign else order.value

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented

        if self.is_zero() and rhs.is_zero():
            return True
        return self.sign == rhs.sign and self.digits == rhs.digits

    def __hash__(self) -> int:
        # Согласован с равенством BigInt == int
        return hash(int(self))

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) >= 0

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        value = 0
        for slot in reversed(self.digits):
            value = value * BASE + slot
        return -value if self.sign else value

    def __str__(self) -> str:
        return render_digits(self.sign, self.digits)


def _coerce(value: object) -> Optional[BigInt]:
    """Приведение операнда к BigInt (int допускается, bool и прочее нет)"""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt.from_int(value)
    return None


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[BigInt] = BigInt()
ONE: Final[BigInt] = BigInt(digits=(1,))
