"""
Document model: an ordered collection of shapes rendered as one SVG document.
"""

import io
from typing import Iterator, List, Tuple

from svg_builder.core import Profiler
from svg_builder.utils.io import Sink, is_binary_sink, write_markup
from svg_builder.utils.logger import get_logger, log_exception
from svg_builder.models.shape import Shape, ShapeError, Circle, Polyline, Text

# Configure logger
logger = get_logger(__name__)

# Closed set of shapes a document accepts
SHAPE_CLASSES = (Circle, Polyline, Text)

# Document envelope
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_VERSION = "1.1"
SVG_OPEN_TAG = f'<svg xmlns="{SVG_NAMESPACE}" version="{SVG_VERSION}">'
SVG_CLOSE_TAG = "</svg>"


class RenderError(OSError):
    """Raised when writing a rendered document to its sink fails."""
    pass


class Document:
    """
    Ordered, heterogeneous collection of shapes.

    Shapes are copied on add, so the document exclusively owns what it
    renders: changing a shape after adding it does not change the
    document. Shapes are rendered in insertion order.
    """

    def __init__(self):
        self._shapes: List[Shape] = []

    @property
    def shapes(self) -> Tuple[Shape, ...]:
        """Get copies of the owned shapes in insertion order."""
        return tuple(shape.copy() for shape in self._shapes)

    def add(self, shape: Shape) -> None:
        """
        Append a copy of a shape to the document.

        Args:
            shape: Circle, Polyline or Text

        Raises:
            ShapeError: If the value is not a supported shape
        """
        if not isinstance(shape, SHAPE_CLASSES):
            logger.error(f"Cannot add {type(shape).__name__} to a document")
            raise ShapeError(
                f"Unsupported shape: {type(shape).__name__}, expected one of "
                f"{', '.join(cls.__name__ for cls in SHAPE_CLASSES)}"
            )

        self._shapes.append(shape.copy())
        logger.debug(f"Added {shape.shape_type.name} as shape #{len(self._shapes)}")

    def _chunks(self) -> Iterator[str]:
        yield XML_DECLARATION + SVG_OPEN_TAG
        for shape in self._shapes:
            yield shape.to_svg_string()
        yield SVG_CLOSE_TAG

    def render(self, sink: Sink) -> None:
        """
        Write the complete SVG document to a sink.

        Text streams receive str. Raw and buffered streams, and file-like
        objects opened in a binary mode, receive UTF-8 encoded bytes.
        Nothing is buffered: a failed write leaves the sink partially
        written.

        Args:
            sink: Writable text or binary stream

        Raises:
            RenderError: If writing to the sink fails
        """
        binary = is_binary_sink(sink)

        with Profiler("document_render"):
            try:
                for chunk in self._chunks():
                    write_markup(sink, chunk, binary)
            except OSError as e:
                log_exception(logger, e, context={"shapes": len(self._shapes)})
                raise RenderError(f"Failed to write SVG document: {e}") from e

        logger.debug(f"Rendered document with {len(self._shapes)} shapes")

    def to_svg_string(self) -> str:
        """
        Render the document to a string.

        Returns:
            Complete SVG document
        """
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __repr__(self) -> str:
        return f"Document(shapes={len(self._shapes)})"
