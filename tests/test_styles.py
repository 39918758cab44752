import unittest

from featuremap.errors import ConfigurationError
from featuremap.styles import DEFAULT_LAYOUT, LayoutConfig, load_font, to_rgb


class TestStyles(unittest.TestCase):
    def test_named_colours(self):
        self.assertEqual(to_rgb("blue"), (0, 0, 255))
        self.assertEqual(to_rgb("Red"), (255, 0, 0))

    def test_float_and_int_triples(self):
        self.assertEqual(to_rgb([0.0, 0.0, 1.0]), (0, 0, 255))
        self.assertEqual(to_rgb((10, 20, 30)), (10, 20, 30))

    def test_unit_triples_with_int_components(self):
        self.assertEqual(to_rgb([0, 0, 1]), (0, 0, 255))
        self.assertEqual(to_rgb([0, 0.5, 1]), (0, 128, 255))
        self.assertEqual(to_rgb((1, 1, 1)), (255, 255, 255))

    def test_unit_triple_out_of_range(self):
        with self.assertRaises(ConfigurationError):
            to_rgb((0.5, 2, 0))

    def test_bad_colours(self):
        for colour in ("mauve-ish", (1, 2), (300, 0, 0)):
            with self.assertRaises(ConfigurationError):
                to_rgb(colour)

    def test_layout_defaults(self):
        self.assertEqual(DEFAULT_LAYOUT.default_panel_width, 800)
        self.assertEqual(DEFAULT_LAYOUT.feature_arrow_length, 5)
        self.assertEqual(DEFAULT_LAYOUT.row_pitch, 20)
        self.assertEqual(DEFAULT_LAYOUT.track_header_band, 10)
        self.assertEqual(LayoutConfig(feature_height=20).row_pitch, 30)

    def test_layout_is_immutable(self):
        with self.assertRaises(AttributeError):
            DEFAULT_LAYOUT.feature_height = 3

    def test_load_font_falls_back(self):
        self.assertIsNotNone(load_font(10, ("no-such-font.ttf",)))


if __name__ == "__main__":
    unittest.main()
