"""
Input guards shared by the codecs

Each guard returns None when the input is acceptable, or the Failure the
codec should hand back unchanged.
"""

from typing import Optional

from numconv.core.domain.result import ErrorKind, Failure, failure


def is_integer(value) -> bool:
    """
    True for int values, excluding bool.

    Examples:
        >>> is_integer(3)
        True
        >>> is_integer(True)
        False
        >>> is_integer(3.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def require_integer(value, name: str = "value") -> Optional[Failure]:
    if not is_integer(value):
        return failure(
            ErrorKind.INVALID_NUMBER,
            f"{name} must be an integer, got {type(value).__name__}",
        )
    return None


def require_in_range(value: int, low: int, high: int, message: str) -> Optional[Failure]:
    """
    Guard for a closed integer domain [low, high].

    Args:
        value: Checked integer
        low: Inclusive lower bound
        high: Inclusive upper bound
        message: Text reported to the user when out of range

    Returns:
        None if low <= value <= high, otherwise an OUT_OF_RANGE Failure
    """
    if low > high:
        raise ValueError(f"Empty range: low={low} > high={high}")

    if value < low or value > high:
        return failure(ErrorKind.OUT_OF_RANGE, message)
    return None


def require_non_blank(text: str, message: str) -> Optional[Failure]:
    if not text or not text.strip():
        return failure(ErrorKind.EMPTY_INPUT, message)
    return None
