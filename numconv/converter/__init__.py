"""Converter: single-field facade over the codecs.

- Parses raw field text per mode
- Dispatches to the Roman / words / base codec
- Produces display-ready responses checked against the JSON contracts
"""

from .converter import Converter, ConverterConfig
from .input_parsing import (
    parse_decimal,
    parse_leading_integer,
    parse_rounded_integer,
    round_half_up,
)

__all__ = [
    "Converter",
    "ConverterConfig",
    "parse_decimal",
    "parse_leading_integer",
    "parse_rounded_integer",
    "round_half_up",
]
