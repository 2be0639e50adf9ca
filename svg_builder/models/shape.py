"""
Shape models for SVG generation.
Provides the shared style contract with chained setters and the
Circle, Polyline and Text shapes with their markup serialization.
"""

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, List, Optional, Tuple

from typing_extensions import Self

from svg_builder.utils.io import Sink, write_markup
from svg_builder.utils.logger import get_logger
from svg_builder.models.color import Color, ColorValue, NONE_COLOR, parse_color
from svg_builder.models.geometry import Point, PointLike, format_number

# Configure logger
logger = get_logger(__name__)

# Constants
DEFAULT_STROKE_WIDTH = 1.0
DEFAULT_FONT_SIZE = 1


class ShapeType(Enum):
    """Enum for the supported SVG shape types."""
    CIRCLE = auto()
    POLYLINE = auto()
    TEXT = auto()


class ShapeError(Exception):
    """Custom exception for shape-related errors."""
    pass


def _attribute(name: str, value: Any) -> str:
    """Render one attribute followed by its separating space."""
    return f'{name}="{value}" '


class Shape(ABC):
    """
    Base class for SVG shapes.

    Holds the style attributes shared by every shape. Each setter
    mutates the shape in place and returns it, so calls can be chained:

        Circle().set_fill_color("white").set_radius(6)
    """

    __slots__ = ('_fill', '_stroke', '_stroke_width',
                 '_stroke_line_cap', '_stroke_line_join')

    shape_type: ShapeType

    def __init__(self):
        self._fill: Color = NONE_COLOR
        self._stroke: Color = NONE_COLOR
        self._stroke_width: float = DEFAULT_STROKE_WIDTH
        self._stroke_line_cap: Optional[str] = None
        self._stroke_line_join: Optional[str] = None

    @property
    def fill_color(self) -> Color:
        """Get fill color."""
        return self._fill

    @property
    def stroke_color(self) -> Color:
        """Get stroke color."""
        return self._stroke

    @property
    def stroke_width(self) -> float:
        """Get stroke width."""
        return self._stroke_width

    @property
    def stroke_line_cap(self) -> Optional[str]:
        """Get stroke line cap, if set."""
        return self._stroke_line_cap

    @property
    def stroke_line_join(self) -> Optional[str]:
        """Get stroke line join, if set."""
        return self._stroke_line_join

    def set_fill_color(self, color: ColorValue) -> Self:
        """
        Set the fill color.

        Args:
            color: Color, Rgb, (r, g, b) tuple or color name

        Returns:
            This shape
        """
        self._fill = parse_color(color)
        return self

    def set_stroke_color(self, color: ColorValue) -> Self:
        """
        Set the stroke color.

        Args:
            color: Color, Rgb, (r, g, b) tuple or color name

        Returns:
            This shape
        """
        self._stroke = parse_color(color)
        return self

    def set_stroke_width(self, width: float) -> Self:
        """Set the stroke width. Any value is accepted."""
        self._stroke_width = width
        return self

    def set_stroke_line_cap(self, line_cap: str) -> Self:
        """Set the stroke-linecap value, e.g. "round"."""
        self._stroke_line_cap = line_cap
        return self

    def set_stroke_line_join(self, line_join: str) -> Self:
        """Set the stroke-linejoin value, e.g. "bevel"."""
        self._stroke_line_join = line_join
        return self

    def _paint_attributes(self) -> str:
        return (_attribute('fill', self._fill.to_svg_string())
                + _attribute('stroke', self._stroke.to_svg_string()))

    def _stroke_width_attribute(self) -> str:
        return _attribute('stroke-width', format_number(self._stroke_width))

    def _line_attributes(self) -> str:
        parts = []
        if self._stroke_line_cap is not None:
            parts.append(_attribute('stroke-linecap', self._stroke_line_cap))
        if self._stroke_line_join is not None:
            parts.append(_attribute('stroke-linejoin', self._stroke_line_join))
        return ''.join(parts)

    def _copy_style_to(self, shape: 'Shape') -> None:
        shape._fill = self._fill
        shape._stroke = self._stroke
        shape._stroke_width = self._stroke_width
        shape._stroke_line_cap = self._stroke_line_cap
        shape._stroke_line_join = self._stroke_line_join

    def _style_state(self) -> Tuple[Any, ...]:
        return (self._fill, self._stroke, self._stroke_width,
                self._stroke_line_cap, self._stroke_line_join)

    @abstractmethod
    def _state(self) -> Tuple[Any, ...]:
        """Shape-specific state used for equality."""

    @abstractmethod
    def to_svg_string(self) -> str:
        """
        Convert shape to its SVG markup.

        Returns:
            SVG element string
        """

    @abstractmethod
    def copy(self) -> Self:
        """
        Create an independent copy of the shape.

        Returns:
            Copied shape
        """

    def render(self, sink: Sink) -> None:
        """
        Write the shape's markup to a sink.

        Args:
            sink: Writable text or binary stream

        Raises:
            OSError: If writing to the sink fails
        """
        write_markup(sink, self.to_svg_string())

    def __eq__(self, other: object) -> bool:
        """Check if shapes are equal."""
        if not isinstance(other, Shape):
            return NotImplemented
        return (type(self) is type(other)
                and self._style_state() == other._style_state()
                and self._state() == other._state())

    __hash__ = None

    def __str__(self) -> str:
        return self.to_svg_string()

    def __repr__(self) -> str:
        """Debug representation."""
        return f"{self.__class__.__name__}(fill={self._fill!r}, stroke={self._stroke!r})"


class Circle(Shape):
    """
    Circle shape. Radius is not bounds checked.
    """

    __slots__ = ('_center', '_radius')

    shape_type = ShapeType.CIRCLE

    def __init__(self):
        super().__init__()
        self._center = Point()
        self._radius = 0.0

    @property
    def center(self) -> Point:
        """Get center point."""
        return self._center

    @property
    def radius(self) -> float:
        """Get radius."""
        return self._radius

    def set_center(self, center: PointLike) -> 'Circle':
        """
        Set the center point.

        Args:
            center: Point or (x, y) pair

        Returns:
            This circle
        """
        self._center = Point.coerce(center)
        return self

    def set_radius(self, radius: float) -> 'Circle':
        """Set the radius."""
        self._radius = radius
        return self

    def to_svg_string(self) -> str:
        return (
            '<circle '
            + _attribute('cx', format_number(self._center.x))
            + _attribute('cy', format_number(self._center.y))
            + _attribute('r', format_number(self._radius))
            + self._paint_attributes()
            + self._stroke_width_attribute()
            + self._line_attributes()
            + '/>'
        )

    def copy(self) -> 'Circle':
        circle = Circle()
        self._copy_style_to(circle)
        circle._center = self._center
        circle._radius = self._radius
        return circle

    def _state(self) -> Tuple[Any, ...]:
        return (self._center, self._radius)

    def __repr__(self) -> str:
        return f"Circle(center={self._center}, radius={self._radius})"


class Polyline(Shape):
    """
    Polyline through an ordered list of points.

    Zero, one or repeated points are all allowed.
    """

    __slots__ = ('_points',)

    shape_type = ShapeType.POLYLINE

    def __init__(self):
        super().__init__()
        self._points: List[Point] = []

    @property
    def points(self) -> Tuple[Point, ...]:
        """Get points in insertion order."""
        return tuple(self._points)

    def add_point(self, point: PointLike) -> 'Polyline':
        """
        Append a point.

        Args:
            point: Point or (x, y) pair

        Returns:
            This polyline
        """
        self._points.append(Point.coerce(point))
        return self

    def to_svg_string(self) -> str:
        # Every point, including the last one, is followed by a space
        points = ''.join(
            f"{format_number(point.x)},{format_number(point.y)} "
            for point in self._points
        )
        return (
            '<polyline '
            + _attribute('points', points)
            + self._paint_attributes()
            + self._stroke_width_attribute()
            + self._line_attributes()
            + '/>'
        )

    def copy(self) -> 'Polyline':
        polyline = Polyline()
        self._copy_style_to(polyline)
        polyline._points = list(self._points)
        return polyline

    def _state(self) -> Tuple[Any, ...]:
        return tuple(self._points)

    def __repr__(self) -> str:
        return f"Polyline(points={len(self._points)})"


class Text(Shape):
    """
    Text label anchored at a point with an optional offset.

    The content is written without XML escaping.
    """

    __slots__ = ('_point', '_offset', '_font_size', '_font_family', '_data')

    shape_type = ShapeType.TEXT

    def __init__(self):
        super().__init__()
        self._point = Point()
        self._offset = Point()
        self._font_size = DEFAULT_FONT_SIZE
        self._font_family: Optional[str] = None
        self._data = ""

    @property
    def point(self) -> Point:
        """Get anchor point."""
        return self._point

    @property
    def offset(self) -> Point:
        """Get offset from the anchor point."""
        return self._offset

    @property
    def font_size(self) -> int:
        """Get font size."""
        return self._font_size

    @property
    def font_family(self) -> Optional[str]:
        """Get font family, if set."""
        return self._font_family

    @property
    def data(self) -> str:
        """Get text content."""
        return self._data

    def set_point(self, point: PointLike) -> 'Text':
        """Set the anchor point."""
        self._point = Point.coerce(point)
        return self

    def set_offset(self, offset: PointLike) -> 'Text':
        """Set the dx/dy offset."""
        self._offset = Point.coerce(offset)
        return self

    def set_font_size(self, size: int) -> 'Text':
        """Set the font size."""
        self._font_size = size
        return self

    def set_font_family(self, family: str) -> 'Text':
        """Set the font family."""
        self._font_family = family
        return self

    def set_data(self, data: str) -> 'Text':
        """Set the text content."""
        self._data = data
        return self

    def to_svg_string(self) -> str:
        parts = [
            '<text ',
            _attribute('x', format_number(self._point.x)),
            _attribute('y', format_number(self._point.y)),
            _attribute('dx', format_number(self._offset.x)),
            _attribute('dy', format_number(self._offset.y)),
            self._paint_attributes(),
            _attribute('font-size', self._font_size),
            self._stroke_width_attribute(),
        ]
        # Font family goes out under stroke-linejoin to stay byte-compatible
        # with existing output; see DESIGN.md.
        if self._font_family is not None:
            parts.append(_attribute('stroke-linejoin', self._font_family))
        parts.append(self._line_attributes())
        parts.append(f'>{self._data}</text>')
        return ''.join(parts)

    def copy(self) -> 'Text':
        text = Text()
        self._copy_style_to(text)
        text._point = self._point
        text._offset = self._offset
        text._font_size = self._font_size
        text._font_family = self._font_family
        text._data = self._data
        return text

    def _state(self) -> Tuple[Any, ...]:
        return (self._point, self._offset, self._font_size,
                self._font_family, self._data)

    def __repr__(self) -> str:
        return f"Text(point={self._point}, data={self._data!r})"
