"""
Core math modules для беззнаковых bigint

Ядро арифметики над limbs: нормализация, parse/render, сравнение,
сложение и вычитание с carry/borrow pass.
"""

# Limbs kernel
from src.core.math.limbs import (
    # Representation constants
    BASE,
    CANONICAL_DECIMAL_PATTERN,
    CHUNK_DIGITS,
    UINT32_MODULUS,
    # Exceptions
    BigintError,
    CanonicalFormViolation,
    ParseError,
    Underflow,
    # Normalization
    check_canonical,
    is_canonical,
    trim_limbs,
    # Parse / render
    parse_limbs,
    render_limbs,
    # Native int
    limbs_from_int,
    limbs_to_int,
    limbs_to_uint32,
    # Kernels
    add_limbs_inplace,
    compare_limbs,
    sub_limbs_inplace,
)

__all__ = [
    # Constants
    "BASE",
    "CANONICAL_DECIMAL_PATTERN",
    "CHUNK_DIGITS",
    "UINT32_MODULUS",
    # Exceptions
    "BigintError",
    "CanonicalFormViolation",
    "ParseError",
    "Underflow",
    # Normalization
    "check_canonical",
    "is_canonical",
    "trim_limbs",
    # Parse / render
    "parse_limbs",
    "render_limbs",
    # Native int
    "limbs_from_int",
    "limbs_to_int",
    "limbs_to_uint32",
    # Kernels
    "add_limbs_inplace",
    "compare_limbs",
    "sub_limbs_inplace",
]
