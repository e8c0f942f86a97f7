"""
Test suite for gaussiant

Contains:
- tests/unit/          : Unit tests for individual modules
"""
