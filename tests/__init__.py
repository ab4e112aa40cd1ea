"""
Test suite for lars

Contains:
- tests/unit/          : Unit tests for vectors, matrices and numerical core
"""
