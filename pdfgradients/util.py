"""
Various utilities that could not be gathered logically in a specific module.

The contents of this module are internal to pdfgradients, and not part of the public API.
They may change at any time without prior warning or any deprecation period,
in non-backward-compatible ways.
"""

import decimal
import math
from typing import Iterable, Union

Number = Union[int, float, decimal.Decimal]
NumberClass = (int, float, decimal.Decimal)


def format_number(x: Number, digits: int = 6) -> str:
    """
    Format a real number in fixed (non-exponential) notation, as required by PDF.

    Trailing zeros and a trailing decimal point are stripped: ``0.5``, ``100``, ``-0.25``.

    Args:
        x (int, float, Decimal): the number to format
        digits (int): maximum number of decimal digits
    Returns:
        The number's string representation.
    Raises:
        ValueError: for infinite or NaN values, which PDF cannot represent
    """
    if not math.isfinite(x):
        raise ValueError(f"PDF real numbers must be finite, got {x}")
    # snap tiny values to zero to avoid "-0" and scientific notation
    if abs(x) < 1e-12:
        x = 0.0
    s = f"{x:.{digits}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    if s.startswith("."):
        s = "0" + s
    if s.startswith("-."):
        s = s.replace("-.", "-0.", 1)
    return s


def format_numbers(values: Iterable[Number], digits: int = 6) -> list[str]:
    return [format_number(value, digits) for value in values]
