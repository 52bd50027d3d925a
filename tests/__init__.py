"""
Test suite for doubleset-kata

Contains:
- tests/unit/          : Unit tests for DoubleSet, its parser and text capitalization
"""
