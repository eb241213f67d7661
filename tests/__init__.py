"""
Test suite for finite-float

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
