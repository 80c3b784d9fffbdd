"""
Core numeric value types, mathematical primitives, and invariants.

This module contains the foundational building blocks that are independent
of any consumer (verification routines, reports, etc.).
"""
