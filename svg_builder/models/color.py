"""
Color model for SVG generation.
A color is either absent, a named color string or an explicit RGB triple.
"""

from typing import NamedTuple, Optional, Tuple, Union

from svg_builder.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Type definitions
RGB = Tuple[int, int, int]

# Constants
NONE_COLOR_TEXT = "none"


class ColorError(Exception):
    """Custom exception for color-related errors."""
    pass


class Rgb(NamedTuple):
    """
    Explicit RGB channel values.

    Channels are meant to be 0-255 but are not clamped; they are
    emitted exactly as given.
    """
    red: int = 0
    green: int = 0
    blue: int = 0

    def to_svg_string(self) -> str:
        """Render as rgb(R,G,B)."""
        return f"rgb({self.red},{self.green},{self.blue})"

    def __str__(self) -> str:
        return self.to_svg_string()


ColorValue = Union['Color', Rgb, RGB, str, None]


class Color:
    """
    Immutable tri-state color: absent, named or RGB.

    Named colors are stored verbatim; any text is accepted without
    validation or escaping.
    """

    __slots__ = ('_value',)

    def __init__(self, value: ColorValue = None):
        """
        Initialize a color.

        Args:
            value: None for no color, a color name, an Rgb value, an
                (r, g, b) tuple or another Color

        Raises:
            ColorError: If the value has an unsupported type
        """
        if value is None or isinstance(value, str):
            self._value = value
        elif isinstance(value, Color):
            self._value = value._value
        elif isinstance(value, tuple) and len(value) == 3:
            self._value = Rgb(*value)
        else:
            logger.error(f"Unsupported color value: {value!r}")
            raise ColorError(f"Unsupported color format: {value!r}")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> 'Color':
        """
        Create a color from RGB values.

        Args:
            red: Red channel
            green: Green channel
            blue: Blue channel

        Returns:
            Color instance
        """
        return cls(Rgb(red, green, blue))

    @property
    def is_none(self) -> bool:
        """Check if this is the absent color."""
        return self._value is None

    @property
    def name(self) -> Optional[str]:
        """Get the color name, if this is a named color."""
        return self._value if isinstance(self._value, str) else None

    @property
    def rgb(self) -> Optional[Rgb]:
        """Get the RGB channels, if this is an RGB color."""
        return self._value if isinstance(self._value, Rgb) else None

    def to_svg_string(self) -> str:
        """
        Convert to an SVG attribute value.

        Returns:
            "none", the color name verbatim, or "rgb(R,G,B)"
        """
        if self._value is None:
            return NONE_COLOR_TEXT
        if isinstance(self._value, Rgb):
            return self._value.to_svg_string()
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Color, self._value))

    def __str__(self) -> str:
        return self.to_svg_string()

    def __repr__(self) -> str:
        return f"Color({self._value!r})"


# Shared default for shapes without a fill or stroke
NONE_COLOR = Color()


def parse_color(value: ColorValue) -> Color:
    """
    Convert any accepted color input to a Color.

    Args:
        value: Color, Rgb, (r, g, b) tuple, color name or None

    Returns:
        Color instance
    """
    if isinstance(value, Color):
        return value
    if value is None:
        return NONE_COLOR
    return Color(value)
