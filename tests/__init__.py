"""
Test suite for mathi

Contains:
- tests/unit/          : Unit tests for individual modules
"""
