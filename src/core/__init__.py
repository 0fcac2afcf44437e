"""
Core algebraic interfaces and fixed-width numeric types.

This module contains the capability-set contracts (algebra) and their
concrete instances for Int8, Int, Float and Complex (numeric).
"""
