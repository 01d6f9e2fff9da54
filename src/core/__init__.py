"""
Core decimal arithmetic: digit store, construction and arithmetic primitives.

This module contains the BigUInt value type and the algorithms built on it.
It has no I/O and no shared state.
"""
