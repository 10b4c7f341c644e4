"""
Test suite for numconv

Contains:
- tests/unit/          : Unit tests for codecs, domain models, contracts and the converter
"""
