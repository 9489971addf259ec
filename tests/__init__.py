"""
Test suite for geomalg

Contains:
- tests/unit/          : Unit tests for individual modules
"""
