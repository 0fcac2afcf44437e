"""
Test suite for algebraic-numerics

Contains:
- tests/unit/          : Unit tests for individual modules
"""
