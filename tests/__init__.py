"""
Test suite for polynomial-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
