"""
Test suite for exact decimal addition

Contains:
- tests/unit/          : Unit tests for core math, domain, contracts and batch driver
"""
