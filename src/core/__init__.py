"""
Core value type, limb arithmetic kernels, and invariants.

This package contains the unsigned arbitrary-precision integer and the
building blocks it is made of:

- core.math       : limb kernels (trim, parse/render, compare, add/subtract)
- core.domain     : UnsignedBigint value type and its config
- core.io         : whitespace-delimited text stream adapter
- core.contracts  : JSON Schema contract for the serialized form
"""
