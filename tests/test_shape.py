"""
Tests for the shape models.
"""

import io
import unittest

from svg_builder.models.color import Color, Rgb
from svg_builder.models.geometry import Point, format_number
from svg_builder.models.shape import Circle, Polyline, Text, ShapeType


class TestFormatNumber(unittest.TestCase):
    """Tests for numeric attribute formatting."""

    def test_integral_values(self):
        self.assertEqual(format_number(1.0), "1")
        self.assertEqual(format_number(50), "50")
        self.assertEqual(format_number(-10), "-10")
        self.assertEqual(format_number(0.0), "0")

    def test_fractional_values(self):
        self.assertEqual(format_number(0.5), "0.5")
        self.assertEqual(format_number(3.14159265), "3.14159")

    def test_large_values(self):
        self.assertEqual(format_number(10000000), "1e+07")
        self.assertEqual(format_number(123456), "123456")


class TestDefaultStyle(unittest.TestCase):
    """Shapes with no style configured."""

    def test_default_style_block(self):
        """Every shape renders the default fill, stroke and width."""
        for shape in (Circle(), Polyline(), Text()):
            with self.subTest(shape=type(shape).__name__):
                markup = shape.to_svg_string()
                self.assertIn('fill="none" stroke="none" ', markup)
                self.assertIn('stroke-width="1" ', markup)
                self.assertNotIn('stroke-linecap', markup)
                self.assertNotIn('stroke-linejoin', markup)

    def test_default_properties(self):
        circle = Circle()
        self.assertTrue(circle.fill_color.is_none)
        self.assertTrue(circle.stroke_color.is_none)
        self.assertEqual(circle.stroke_width, 1.0)
        self.assertIsNone(circle.stroke_line_cap)
        self.assertIsNone(circle.stroke_line_join)


class TestChaining(unittest.TestCase):
    """Tests for the chained setter contract."""

    def test_setters_return_same_instance(self):
        circle = Circle()
        self.assertIs(circle.set_fill_color("white"), circle)
        self.assertIs(circle.set_stroke_color(Rgb(1, 2, 3)), circle)
        self.assertIs(circle.set_stroke_width(2), circle)
        self.assertIs(circle.set_stroke_line_cap("round"), circle)
        self.assertIs(circle.set_stroke_line_join("bevel"), circle)
        self.assertIs(circle.set_center(Point(1, 2)), circle)
        self.assertIs(circle.set_radius(3), circle)

        polyline = Polyline()
        self.assertIs(polyline.set_stroke_width(4).add_point((1, 1)), polyline)

        text = Text()
        chained = (text.set_point(Point(1, 1)).set_offset(Point(0, 0))
                   .set_font_size(3).set_font_family("Arial").set_data("x")
                   .set_fill_color("black"))
        self.assertIs(chained, text)

    def test_later_calls_see_earlier_mutations(self):
        circle = Circle().set_fill_color("white").set_radius(6).set_fill_color("red")
        self.assertEqual(circle.fill_color, Color("red"))
        self.assertEqual(circle.radius, 6)

    def test_fill_accepts_color_or_text(self):
        self.assertEqual(Circle().set_fill_color(Color("white")).fill_color,
                         Circle().set_fill_color("white").fill_color)


class TestCircle(unittest.TestCase):
    """Tests for Circle markup."""

    def test_minimal(self):
        circle = Circle().set_center(Point(50, 50)).set_radius(6).set_fill_color("white")
        self.assertEqual(
            circle.to_svg_string(),
            '<circle cx="50" cy="50" r="6" fill="white" stroke="none" stroke-width="1" />'
        )

    def test_full_style(self):
        circle = (Circle()
                  .set_center((1.5, -2))
                  .set_radius(-3)
                  .set_fill_color(Rgb(1, 2, 3))
                  .set_stroke_color("black")
                  .set_stroke_width(0.25)
                  .set_stroke_line_cap("round")
                  .set_stroke_line_join("miter"))
        self.assertEqual(
            circle.to_svg_string(),
            '<circle cx="1.5" cy="-2" r="-3" fill="rgb(1,2,3)" stroke="black" '
            'stroke-width="0.25" stroke-linecap="round" stroke-linejoin="miter" />'
        )

    def test_type_tag(self):
        self.assertEqual(Circle().shape_type, ShapeType.CIRCLE)


class TestPolyline(unittest.TestCase):
    """Tests for Polyline markup."""

    def test_points_keep_trailing_space(self):
        polyline = Polyline().add_point(Point(50, 50)).add_point(Point(250, 250))
        self.assertIn('points="50,50 250,250 "', polyline.to_svg_string())

    def test_no_points(self):
        self.assertEqual(
            Polyline().to_svg_string(),
            '<polyline points="" fill="none" stroke="none" stroke-width="1" />'
        )

    def test_duplicate_points_preserved(self):
        polyline = Polyline().add_point((1, 2)).add_point((1, 2)).add_point((0.5, 3))
        self.assertEqual(polyline.points, (Point(1, 2), Point(1, 2), Point(0.5, 3)))
        self.assertIn('points="1,2 1,2 0.5,3 "', polyline.to_svg_string())

    def test_styled(self):
        polyline = (Polyline()
                    .set_stroke_color(Rgb(255, 198, 63))
                    .set_stroke_width(16)
                    .set_stroke_line_cap("round")
                    .add_point(Point(50, 50))
                    .add_point(Point(250, 250)))
        self.assertEqual(
            polyline.to_svg_string(),
            '<polyline points="50,50 250,250 " fill="none" stroke="rgb(255,198,63)" '
            'stroke-width="16" stroke-linecap="round" />'
        )


class TestText(unittest.TestCase):
    """Tests for Text markup."""

    def test_defaults(self):
        self.assertEqual(
            Text().to_svg_string(),
            '<text x="0" y="0" dx="0" dy="0" fill="none" stroke="none" '
            'font-size="1" stroke-width="1" ></text>'
        )

    def test_label(self):
        text = (Text()
                .set_point(Point(50, 50))
                .set_offset(Point(10, -10))
                .set_font_size(20)
                .set_font_family("Verdana")
                .set_fill_color("black")
                .set_data("C"))
        self.assertEqual(
            text.to_svg_string(),
            '<text x="50" y="50" dx="10" dy="-10" fill="black" stroke="none" '
            'font-size="20" stroke-width="1" stroke-linejoin="Verdana" >C</text>'
        )

    def test_font_family_and_line_join_both_emitted(self):
        """Font family and line join share the stroke-linejoin attribute name."""
        text = (Text()
                .set_font_family("Verdana")
                .set_stroke_line_cap("butt")
                .set_stroke_line_join("round"))
        markup = text.to_svg_string()
        self.assertTrue(markup.endswith(
            'stroke-width="1" stroke-linejoin="Verdana" stroke-linecap="butt" '
            'stroke-linejoin="round" ></text>'
        ))
        self.assertEqual(markup.count('stroke-linejoin='), 2)

    def test_data_not_escaped(self):
        text = Text().set_data("a < b & c")
        self.assertIn('>a < b & c</text>', text.to_svg_string())


class TestCopyAndRender(unittest.TestCase):
    """Tests for copy, equality and render."""

    def test_copy_is_independent(self):
        polyline = Polyline().add_point((1, 1)).set_fill_color("red")
        clone = polyline.copy()
        self.assertEqual(clone, polyline)
        self.assertIsNot(clone, polyline)

        polyline.add_point((2, 2))
        self.assertEqual(len(clone.points), 1)
        self.assertNotEqual(clone, polyline)

    def test_copy_keeps_text_state(self):
        text = Text().set_data("hi").set_font_family("Arial").set_stroke_line_cap("round")
        self.assertEqual(text.copy().to_svg_string(), text.to_svg_string())

    def test_different_types_not_equal(self):
        self.assertNotEqual(Circle(), Polyline())

    def test_render_writes_markup(self):
        circle = Circle().set_radius(2)
        sink = io.StringIO()
        circle.render(sink)
        self.assertEqual(sink.getvalue(), circle.to_svg_string())
        self.assertEqual(str(circle), circle.to_svg_string())


if __name__ == "__main__":
    unittest.main()
