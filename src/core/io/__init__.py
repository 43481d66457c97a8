"""
Stream I/O adapters for UnsignedBigint.
"""

from src.core.io.text_stream import (
    iter_bigints,
    read_bigint,
    read_token,
    write_bigint,
)

__all__ = [
    "iter_bigints",
    "read_bigint",
    "read_token",
    "write_bigint",
]
