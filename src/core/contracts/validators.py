"""
JSON Schema Contract Validators

Модуль для валидации сериализованных значений (payload) согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema для проверки
соответствия данных схемам.

Схемы (src/core/contracts/schema/):
- big_int.json: {"sign": bool, "digits": [0..99, ...]}
- rational.json: {"numerator": <big_int>, "denominator": <big_int, > 0>}

Схема проверяет форму payload; каноничность (отсутствие старших нулевых
слотов, неотрицательный ноль, 0/1) проверяют model validators BigInt/Rational.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.core.math.bigint import BigInt
from src.core.math.rational import Rational


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'big_int')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class BigIntValidator(ContractValidator):
    """Валидатор для big_int контракта"""

    def __init__(self):
        super().__init__("big_int")


class RationalValidator(ContractValidator):
    """Валидатор для rational контракта"""

    def __init__(self):
        super().__init__("rational")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_int_payload(data: Dict[str, Any]) -> None:
    """
    Валидация big_int payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BigIntValidator().validate(data)


def validate_rational_payload(data: Dict[str, Any]) -> None:
    """
    Валидация rational payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RationalValidator().validate(data)


def load_big_int(data: Dict[str, Any]) -> BigInt:
    """
    Загрузка BigInt из payload.

    Сначала проверяется контракт (форма), затем каноничность через
    model validator.

    Raises:
        jsonschema.ValidationError: Нарушение контракта big_int.json
        pydantic.ValidationError: Неканоническое представление
    """
    validate_big_int_payload(data)
    return BigInt.model_validate(data)


def load_rational(data: Dict[str, Any]) -> Rational:
    """
    Загрузка Rational из payload.

    Raises:
        jsonschema.ValidationError: Нарушение контракта rational.json
        pydantic.ValidationError: Неканоническое или ненормализованное представление
    """
    validate_rational_payload(data)
    return Rational.model_validate(data)
