#!/usr/bin/env python
"""
Basic example script for building an SVG document.

Draws a thick polyline between two points, marks each end with a
white circle and labels the ends "C" and "C++", then prints the
document to stdout.

Usage:
    python basic_usage.py > languages.svg
"""
import logging
import sys

from svg_builder import Circle, Document, Point, Polyline, Rgb, Text
from svg_builder.utils.logger import setup_logging


def build_document() -> Document:
    """Build the example document."""
    svg = Document()

    svg.add(
        Polyline()
        .set_stroke_color(Rgb(255, 198, 63))
        .set_stroke_width(16)
        .set_stroke_line_cap("round")
        .add_point(Point(50, 50))
        .add_point(Point(250, 250))
    )

    for point in (Point(50, 50), Point(250, 250)):
        svg.add(
            Circle()
            .set_fill_color("white")
            .set_radius(6)
            .set_center(point)
        )

    for point, label in ((Point(50, 50), "C"), (Point(250, 250), "C++")):
        svg.add(
            Text()
            .set_point(point)
            .set_offset(Point(10, -10))
            .set_font_size(20)
            .set_font_family("Verdana")
            .set_fill_color("black")
            .set_data(label)
        )

    return svg


def main() -> int:
    """Main entry point for the example script."""
    # Logs go to stderr so stdout holds only the SVG
    logger = setup_logging(log_level=logging.WARNING, stream=sys.stderr)

    try:
        build_document().render(sys.stdout)
        sys.stdout.write("\n")
        return 0
    except OSError as e:
        logger.error(f"Rendering failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
