"""
numconv: number conversion engine

Roman numerals, English number words and number bases, with a converter
facade that turns raw form-field text into display-ready responses.
"""

__version__ = "1.0.0"
