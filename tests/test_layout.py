import unittest

from featuremap.layout import assign_rows, row_count


class TestLayout(unittest.TestCase):
    def test_non_overlapping_share_a_row(self):
        self.assertEqual(assign_rows([(0, 10), (20, 30), (40, 50)]), [0, 0, 0])

    def test_overlapping_open_new_rows(self):
        rows = assign_rows([(0, 100), (50, 150), (60, 70), (120, 130)])
        self.assertEqual(rows, [0, 1, 2, 0])
        self.assertEqual(row_count(rows), 3)

    def test_input_order_preserved(self):
        rows = assign_rows([(50, 60), (0, 55)])
        self.assertEqual(rows, [1, 0])

    def test_min_distance(self):
        self.assertEqual(assign_rows([(0, 10), (10, 20)]), [0, 0])
        self.assertEqual(assign_rows([(0, 10), (10, 20)], min_distance=1), [0, 1])

    def test_empty(self):
        self.assertEqual(assign_rows([]), [])
        self.assertEqual(row_count([]), 0)


if __name__ == "__main__":
    unittest.main()
