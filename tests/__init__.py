"""
Test suite for the unsigned bigint library

Contains:
- tests/unit/          : Unit tests for kernels, value type, adapters, contracts
"""
