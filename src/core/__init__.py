"""
Core domain models, decimal arithmetic primitives, and report contracts.

This module contains the foundational building blocks that are independent
of input/output (files, console, CLI).
"""
