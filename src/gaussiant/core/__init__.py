"""
Core domain model, number-theoretic primitives and contracts.

Everything here is pure and independent of I/O.
"""
