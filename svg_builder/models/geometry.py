"""
Plain 2D geometry values used by the shape models.
"""

from typing import NamedTuple, Sequence, Union

# Type definitions
PointLike = Union['Point', Sequence[float]]

# General format with six significant digits, matching a default C++ ostream
NUMBER_FORMAT = "g"


class Point(NamedTuple):
    """A point in user coordinates."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def coerce(cls, value: PointLike) -> 'Point':
        """
        Build a point from a Point or any (x, y) pair.

        Args:
            value: Point instance or two-item sequence

        Returns:
            Point instance
        """
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)


def format_number(value: float) -> str:
    """
    Format a number for an SVG attribute value.

    Integral values print without a decimal point ("50", "1"), other
    values use up to six significant digits ("0.5", "3.14159") and very
    large or small magnitudes switch to exponent form ("1e+07").

    Args:
        value: Number to format

    Returns:
        Text representation
    """
    return format(float(value), NUMBER_FORMAT)
