"""
Domain models and value objects.

Contains the UnsignedBigint value type and its configuration.
"""

from src.core.domain.unsigned_bigint import (
    DEFAULT_CONFIG,
    BigintConfig,
    UnsignedBigint,
)

__all__ = [
    "DEFAULT_CONFIG",
    "BigintConfig",
    "UnsignedBigint",
]
