"""
Core codecs, domain models, and payload contracts.

This package holds the pure conversion logic. It performs no I/O apart from
loading the bundled JSON Schema files.
"""
