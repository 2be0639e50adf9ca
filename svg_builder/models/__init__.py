"""
SVG Builder - Data Models
=========================
This package contains the color, geometry, shape and document models.
"""

from svg_builder.models.color import (
    ColorError, Rgb, Color, NONE_COLOR, parse_color
)
from svg_builder.models.geometry import Point, format_number
from svg_builder.models.shape import (
    ShapeType, ShapeError, Shape, Circle, Polyline, Text
    )
from svg_builder.models.document import RenderError, Document

__all__ = [
    'ColorError', 'Rgb', 'Color', 'NONE_COLOR', 'parse_color',
    'Point', 'format_number',
    'ShapeType', 'ShapeError', 'Shape', 'Circle', 'Polyline', 'Text',
    'RenderError', 'Document'
]
