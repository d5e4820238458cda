"""
Rational — точная рациональная арифметика поверх BigInt

Immutable Pydantic модель: пара numerator / denominator (оба BigInt).

Нормализация (после каждого построения):
- Знаменатель никогда не ноль (ZeroDenominator при построении)
- Отрицательный знаменатель => знак переносится в числитель
- Нулевой числитель => знаменатель принудительно равен 1

ВАЖНО: сокращение дроби (gcd) НЕ выполняется. Численно равные дроби могут
хранить разные модули (2/4 и 1/2). Равенство корректно только потому,
что выполняется перекрёстным умножением: a/b == c/d ⇔ a·d == b·c.

ФОРМУЛЫ:
    a/b + c/d = (ad + bc) / bd
    a/b - c/d = (ad - bc) / bd
    a/b * c/d = (ac) / (bd)
    a/b / c/d = (ad) / (bc),  c != 0
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.core.math.bigint import ONE, ZERO, BigInt
from src.core.math.rendering import render_fraction

IntLike = Union[BigInt, int]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroDenominator(ZeroDivisionError):
    """
    Нулевой знаменатель при построении Rational или деление на нулевой Rational.

    Восстановимая ошибка: вызывающий код обрабатывает её явно, ненормализованный
    или бессмысленный Rational никогда не создаётся.
    """

    pass


def _to_big_int(value: IntLike) -> BigInt:
    if isinstance(value, BigInt):
        return value
    return BigInt.from_int(value)


# =============================================================================
# RATIONAL MODEL
# =============================================================================


class Rational(BaseModel):
    """
    Рациональное число numerator / denominator произвольной точности.

    Нормализующий конструктор: Rational.of(numerator, denominator=1).
    Прямое построение Rational(numerator=..., denominator=...) и
    model_validate принимают только нормализованную форму.

    Examples:
        >>> str(Rational.of(2, -5))
        '-2/5'
        >>> str(Rational.of(0, 7))
        '0'
        >>> Rational.of(2, 4) == Rational.of(1, 2)
        True
    """

    numerator: BigInt = Field(ZERO, description="Числитель (может быть отрицательным)")
    denominator: BigInt = Field(ONE, description="Знаменатель (всегда положительный)")

    model_config = {"frozen": True}  # Immutable

    # Хэш по хранимому представлению не согласован с перекрёстным равенством
    __hash__ = None  # type: ignore[assignment]

    @model_validator(mode="after")
    def check_normalized(self) -> "Rational":
        """
        Проверка нормализованной формы для путей, минующих Rational.of.
        """
        if self.denominator.is_zero():
            raise ValueError("denominator cannot be zero")
        if self.denominator.is_negative():
            raise ValueError(f"denominator must be positive, got {self.denominator}")
        if self.numerator.is_zero() and self.denominator != ONE:
            raise ValueError(
                f"zero numerator requires denominator 1, got {self.denominator}"
            )
        return self

    @classmethod
    def of(cls, numerator: IntLike, denominator: IntLike = 1) -> "Rational":
        """
        Построение из пары числитель / знаменатель с нормализацией.

        Args:
            numerator: Числитель (BigInt или int)
            denominator: Знаменатель (BigInt или int, default: 1)

        Returns:
            Нормализованный Rational

        Raises:
            ZeroDenominator: Если знаменатель равен нулю (на каждом вызове)
            TypeError: Если аргумент не BigInt и не int
        """
        num = _to_big_int(numerator)
        den = _to_big_int(denominator)

        if den.is_zero():
            raise ZeroDenominator(f"Rational denominator cannot be zero (numerator={num})")

        if den.is_negative():
            num, den = -num, -den

        # Канонический ноль: 0/1
        if num.is_zero():
            den = ONE

        return cls(numerator=num, denominator=den)

    def is_zero(self) -> bool:
        return self.numerator.is_zero()

    def to_payload(self) -> dict[str, Any]:
        """Сериализация в JSON-совместимый dict (контракт rational.json)"""
        return self.model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Rational":
        return Rational.of(-self.numerator, self.denominator)

    def __add__(self, other: object) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational.of(
            self.numerator * rhs.denominator + self.denominator * rhs.numerator,
            self.denominator * rhs.denominator,
        )

    __radd__ = __add__

    def __sub__(self, other: object) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational.of(
            self.numerator * rhs.denominator - self.denominator * rhs.numerator,
            self.denominator * rhs.denominator,
        )

    def __rsub__(self, other: object) -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational.of(
            self.numerator * rhs.numerator,
            self.denominator * rhs.denominator,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented

        if rhs.is_zero():
            raise ZeroDenominator(f"Division by zero rational number ({self} / {rhs})")
        return Rational.of(
            self.numerator * rhs.denominator,
            self.denominator * rhs.numerator,
        )

    def __rtruediv__(self, other: object) -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.numerator * rhs.denominator == self.denominator * rhs.numerator

    def __str__(self) -> str:
        denominator = None if self.denominator == ONE else str(self.denominator)
        return render_fraction(str(self.numerator), denominator)


def _coerce(value: object) -> Optional[Rational]:
    """Приведение операнда к Rational (BigInt и int как n/1)"""
    if isinstance(value, Rational):
        return value
    if isinstance(value, BigInt) or (isinstance(value, int) and not isinstance(value, bool)):
        return Rational.of(value)
    return None
