"""
Test suite for structcomm

Contains:
- tests/unit/          : Unit tests for individual modules
"""
