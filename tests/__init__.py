"""
Test suite for exact-numerics

Contains:
- tests/unit/          : Unit tests for individual modules
"""
