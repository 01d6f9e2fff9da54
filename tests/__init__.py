"""
Test suite for decimal-biguint

Contains:
- tests/unit/          : Unit tests for individual modules
"""
