import unittest

from featuremap.panel import Panel
from featuremap.ruler import Ruler
from featuremap.surface import Surface


class TestRuler(unittest.TestCase):
    def test_height(self):
        self.assertEqual(Ruler(Panel(1000)).height, 25)

    def test_tick_distance(self):
        self.assertEqual(Ruler(Panel(1000, 800)).minor_ticks_distance, 10)
        self.assertEqual(Ruler(Panel(1000, 800)).major_ticks_distance, 100)
        self.assertEqual(Ruler(Panel(100, 800)).minor_ticks_distance, 1)
        self.assertEqual(Ruler(Panel(3000000, 800)).minor_ticks_distance, 100000)

    def test_ticks_within_window(self):
        ruler = Ruler(Panel(1000, 800, display_start=150, display_stop=420))
        major = ruler.major_ticks()
        self.assertEqual(ruler.minor_ticks_distance, 10)
        self.assertEqual(major, [200, 300, 400])
        minor = Ruler(Panel(1000, 800, display_start=155, display_stop=1000)).minor_ticks()
        self.assertEqual(minor[0], 160)
        self.assertEqual(minor[-1], 1000)

    def test_draw(self):
        panel = Panel(1000, 200)
        with Surface(200, 50) as s:
            Ruler(panel).draw(s, 10)
            px = s.image.load()
            # axis line at offset + tick height
            self.assertEqual(px[100, 15], (0, 0, 0))
            self.assertEqual(px[100, 45], (255, 255, 255))


if __name__ == "__main__":
    unittest.main()
