"""
Core domain models, numerical primitives, and contracts.

This module contains the foundational building blocks of the calculator
that are independent of the pipeline stages built on top of them.
"""
