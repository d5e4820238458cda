"""
Core math modules

Точная арифметика: знаковые целые произвольной точности (BigInt) и
рациональные числа поверх них (Rational).
"""

# Magnitude engine
from src.core.math.magnitude import (
    BASE,
    DIGIT_WIDTH,
    Digits,
    MagnitudeOrder,
    add_magnitude,
    compare_magnitude,
    multiply_magnitude,
    subtract_magnitude,
    trim_digits,
)

# BigInt
from src.core.math.bigint import (
    ONE,
    ZERO,
    BigInt,
    InvalidDigit,
)

# Rational
from src.core.math.rational import (
    Rational,
    ZeroDenominator,
)

# Rendering
from src.core.math.rendering import (
    render_digits,
    render_fraction,
)

__all__ = [
    # Magnitude — Constants
    "BASE",
    "DIGIT_WIDTH",
    # Magnitude — Types
    "Digits",
    "MagnitudeOrder",
    # Magnitude — Functions
    "add_magnitude",
    "compare_magnitude",
    "multiply_magnitude",
    "subtract_magnitude",
    "trim_digits",
    # BigInt
    "BigInt",
    "InvalidDigit",
    "ONE",
    "ZERO",
    # Rational
    "Rational",
    "ZeroDenominator",
    # Rendering
    "render_digits",
    "render_fraction",
]
