"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных UnsignedBigint.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    UnsignedBigintValidator,
    contract_schema,
    validate_unsigned_bigint,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UnsignedBigintValidator",
    # Functions
    "contract_schema",
    "validate_unsigned_bigint",
]
