"""
SVG Builder Package
===================
This package builds SVG documents in memory: construct shapes, style
them through chained setters, add them to a Document and render it
to any writable stream.
"""

__version__ = "0.1.0"

from svg_builder.core import CONFIG, configure, Profiler
from svg_builder.models import (
    ColorError, Rgb, Color, NONE_COLOR,
    Point,
    ShapeType, ShapeError, Shape, Circle, Polyline, Text,
    RenderError, Document
)

# Make key components available at package level
__all__ = [
    'CONFIG',
    'configure',
    'Profiler',
    'ColorError',
    'Rgb',
    'Color',
    'NONE_COLOR',
    'Point',
    'ShapeType',
    'ShapeError',
    'Shape',
    'Circle',
    'Polyline',
    'Text',
    'RenderError',
    'Document'
]
