"""
Contract Validation Module

Модуль для валидации JSON payload значений BigInt и Rational.
"""

from .validators import (
    BigIntValidator,
    ContractValidator,
    RationalValidator,
    SchemaLoader,
    load_big_int,
    load_rational,
    validate_big_int_payload,
    validate_rational_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntValidator",
    "RationalValidator",
    # Functions
    "validate_big_int_payload",
    "validate_rational_payload",
    "load_big_int",
    "load_rational",
]
