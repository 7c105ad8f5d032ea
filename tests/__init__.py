"""
Test suite for the expression calculator

Contains:
- tests/unit/          : Unit tests for individual modules and pipeline stages
"""
