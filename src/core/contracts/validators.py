"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (src/core/contracts/schema/):
- unsigned_bigint.json — каноническая десятичная запись UnsignedBigint
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'unsigned_bigint')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
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


def contract_schema(schema_name: str) -> Dict[str, Any]:
    """
    Схема контракта для встраивания в другую JSON Schema.

    Используется как JSON schema поля Pydantic модели: ключ "$schema"
    допустим только в корневом документе, поэтому он отбрасывается.

    Returns:
        Новый dict (кэш загрузчика не изменяется)
    """
    schema = _SCHEMA_LOADER.load_schema(schema_name)
    return {key: value for key, value in schema.items() if key != "$schema"}


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        """
        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (default: глобальный)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class UnsignedBigintValidator(ContractValidator):
    """Валидатор сериализованной (десятичной) формы UnsignedBigint."""

    def __init__(self):
        super().__init__("unsigned_bigint")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_unsigned_bigint(data: Any) -> None:
    """
    Валидация сериализованного UnsignedBigint.

    Args:
        data: JSON значение (ожидается каноническая десятичная строка)

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    UnsignedBigintValidator().validate(data)
