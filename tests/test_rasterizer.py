from __future__ import annotations

import unittest

from emergent_core.render.rasterizer import digital_line, rasterize_line


class DigitalLineTests(unittest.TestCase):
    def test_horizontal_line_has_no_gaps(self) -> None:
        points = list(digital_line(0, 0, 5, 0))
        self.assertEqual(points, [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (5, 0)])

    def test_identical_endpoints_give_one_point(self) -> None:
        self.assertEqual(list(digital_line(4, 7, 4, 7)), [(4, 7)])

    def test_diagonal_and_reverse_direction(self) -> None:
        self.assertEqual(list(digital_line(0, 0, 3, 3)), [(0, 0), (1, 1), (2, 2), (3, 3)])
        self.assertEqual([x for x, _ in digital_line(5, 2, 0, 2)], [5, 4, 3, 2, 1, 0])

    def test_steep_line_steps_one_row_at_a_time(self) -> None:
        points = list(digital_line(0, 0, 2, 6))
        self.assertEqual(len(points), 7)
        self.assertEqual([y for _, y in points], list(range(7)))
        self.assertEqual(points[0], (0, 0))
        self.assertEqual(points[-1], (2, 6))
        for (xa, _), (xb, _) in zip(points, points[1:]):
            self.assertIn(xb - xa, (0, 1))

    def test_negative_coordinates_round_down(self) -> None:
        self.assertEqual(list(digital_line(-2, 0, 0, 0)), [(-2, 0), (-1, 0), (0, 0)])

    def test_rasterize_line_forwards_value(self) -> None:
        calls: list[tuple[int, int, int]] = []
        rasterize_line(lambda x, y, v: calls.append((x, y, v)), 1, 1, 1, 3, 9)
        self.assertEqual(calls, [(1, 1, 9), (1, 2, 9), (1, 3, 9)])


if __name__ == "__main__":
    unittest.main()
