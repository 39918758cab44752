import unittest

from featuremap.errors import ConfigurationError, ShapePreconditionError
from featuremap.feature import Feature, Location, PixelRange
from featuremap.glyphs import (
    DirectedGenericGlyph,
    DirectedSplicedGlyph,
    GenericGlyph,
    GlyphKind,
    SplicedGlyph,
    TriangleGlyph,
    glyph_class,
)
from featuremap.image_map import ImageMap
from featuremap.styles import FEATURE_ARROW_LENGTH
from featuremap.surface import Surface

WHITE = (255, 255, 255)


class TestTriangleGlyph(unittest.TestCase):
    def test_extents_span_two_arrow_lengths(self):
        for pos in (0, 7, 400, 799):
            f = Feature("snp", pos, pos)
            g = TriangleGlyph(f, [PixelRange(pos, pos)], None)
            self.assertEqual(g.right_pixel() - g.left_pixel(), 2 * FEATURE_ARROW_LENGTH)
            self.assertEqual(g.left_pixel(), pos - FEATURE_ARROW_LENGTH)

    def test_draw_arrow(self):
        with Surface(40, 20) as s:
            f = Feature("snp", 20, 20)
            g = TriangleGlyph(f, [PixelRange(20, 20)], s.context(0, 5, (255, 0, 0)))
            g.draw()
            px = s.image.load()
            # tip at (20, 5), base along y = 10
            self.assertEqual(px[20, 5], (255, 0, 0))
            self.assertEqual(px[20, 9], (255, 0, 0))
            self.assertEqual(px[5, 9], WHITE)
            self.assertEqual(px[20, 15], WHITE)

    def test_non_point_feature_fails_without_drawing(self):
        with Surface(40, 20) as s:
            before = s.image.tobytes()
            f = Feature("range", 10, 12)
            g = TriangleGlyph(f, [PixelRange(10, 12)], s.context())
            with self.assertRaises(ShapePreconditionError) as cm:
                g.draw()
            self.assertIn("Start and stop are not the same", str(cm.exception))
            self.assertEqual(s.image.tobytes(), before)


class TestRectangleGlyphs(unittest.TestCase):
    def test_generic_extents(self):
        f = Feature("gene", 10, 100)
        g = GenericGlyph(f, [PixelRange(8, 80)], None)
        self.assertEqual((g.left_pixel(), g.right_pixel()), (8, 80))

    def test_generic_draw(self):
        with Surface(50, 20) as s:
            g = GenericGlyph(Feature("gene", 1, 2), [PixelRange(10, 30)], s.context(0, 0, (0, 0, 255)))
            g.draw()
            px = s.image.load()
            self.assertEqual(px[20, 5], (0, 0, 255))
            self.assertEqual(px[40, 5], WHITE)
            self.assertEqual(px[20, 15], WHITE)

    def test_directed_extents_follow_strand(self):
        fwd = DirectedGenericGlyph(Feature("a", 1, 10, strand="+"), [PixelRange(10, 30)], None)
        rev = DirectedGenericGlyph(Feature("b", 1, 10, strand="-"), [PixelRange(10, 30)], None)
        none = DirectedGenericGlyph(Feature("c", 1, 10), [PixelRange(10, 30)], None)
        self.assertEqual((fwd.left_pixel(), fwd.right_pixel()), (10, 30 + FEATURE_ARROW_LENGTH))
        self.assertEqual((rev.left_pixel(), rev.right_pixel()), (10 - FEATURE_ARROW_LENGTH, 30))
        self.assertEqual((none.left_pixel(), none.right_pixel()), (10, 30))

    def test_directed_head_dropped_when_chopped(self):
        f = Feature("a", 1, 10, strand="+")
        f.chopped_at_stop = True
        g = DirectedGenericGlyph(f, [PixelRange(10, 30)], None)
        self.assertEqual(g.right_pixel(), 30)

    def test_directed_draws_head(self):
        with Surface(60, 20) as s:
            g = DirectedGenericGlyph(Feature("a", 1, 10, strand="+"), [PixelRange(10, 30)], s.context())
            g.draw()
            self.assertEqual(s.image.load()[32, 5], (0, 0, 0))

    def test_spliced_blocks_and_gaps(self):
        f = Feature("tx", 1, 100, [Location(1, 20), Location(60, 100)])
        with Surface(60, 20) as s:
            g = SplicedGlyph(f, [PixelRange(0, 10), PixelRange(30, 50)], s.context())
            self.assertEqual((g.left_pixel(), g.right_pixel()), (0, 50))
            g.draw()
            px = s.image.load()
            self.assertEqual(px[5, 8], (0, 0, 0))
            self.assertEqual(px[40, 8], (0, 0, 0))
            # connector rises to the top between blocks, gap interior below it stays empty
            self.assertEqual(px[20, 0], (0, 0, 0))
            self.assertEqual(px[20, 9], WHITE)

    def test_directed_spliced_reverse_extents(self):
        f = Feature("tx", 1, 100, [Location(1, 20), Location(60, 100)], strand="-")
        g = DirectedSplicedGlyph(f, [PixelRange(0, 10), PixelRange(30, 50)], None)
        self.assertEqual((g.left_pixel(), g.right_pixel()), (-FEATURE_ARROW_LENGTH, 50))


class TestGlyphKind(unittest.TestCase):
    def test_resolve(self):
        self.assertIs(GlyphKind.resolve("triangle"), GlyphKind.TRIANGLE)
        self.assertIs(GlyphKind.resolve("Directed_Spliced"), GlyphKind.DIRECTED_SPLICED)
        self.assertIs(GlyphKind.resolve(GlyphKind.GENERIC), GlyphKind.GENERIC)
        self.assertIs(glyph_class("spliced"), SplicedGlyph)

    def test_unknown(self):
        with self.assertRaises(ConfigurationError):
            GlyphKind.resolve("hexagon")


class TestRegisterArea(unittest.TestCase):
    def test_area_from_extents(self):
        image_map = ImageMap()
        with Surface(100, 100) as s:
            g = TriangleGlyph(Feature("snp", 5, 5, link="http://example.org/snp"), [PixelRange(40, 40)],
                              s.context(0, 35, image_map=image_map))
            g.register_area()
        self.assertEqual(len(image_map.areas), 1)
        area = image_map.areas[0]
        self.assertEqual((area.left, area.top, area.right, area.bottom), (35, 35, 45, 45))
        self.assertEqual(area.url, "http://example.org/snp")

    def test_no_map_no_area(self):
        with Surface(10, 10) as s:
            g = GenericGlyph(Feature("a", 1, 2), [PixelRange(1, 2)], s.context())
            g.register_area()


if __name__ == "__main__":
    unittest.main()
