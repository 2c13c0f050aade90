from __future__ import annotations

import unittest

from emergent_core.core.coordinates import CoordinateMapper, LogicalRange


class CoordinateMapperTests(unittest.TestCase):
    def test_identity_range_puts_row_zero_on_top(self) -> None:
        mapper = CoordinateMapper(width=10, height=10)
        self.assertEqual(mapper.range, LogicalRange(xmin=0.0, xmax=9.0, ymin=9.0, ymax=0.0))
        self.assertEqual(mapper.map_point(0.0, 0.0), (0, 0))
        self.assertEqual(mapper.map_point(9.0, 9.0), (9, 9))
        self.assertEqual(mapper.map_point(3.0, 7.0), (3, 7))

    def test_corners_of_cartesian_range_hit_pixel_corners(self) -> None:
        mapper = CoordinateMapper(width=200, height=100)
        mapper.set_range(-2.0, 1.0, -1.5, 1.5)
        self.assertEqual(mapper.map_point(-2.0, 1.5), (0, 0))
        self.assertEqual(mapper.map_point(1.0, 1.5), (199, 0))
        self.assertEqual(mapper.map_point(-2.0, -1.5), (0, 99))
        self.assertEqual(mapper.map_point(1.0, -1.5), (199, 99))

    def test_corners_of_flipped_range(self) -> None:
        mapper = CoordinateMapper(width=64, height=48)
        mapper.set_range(10.0, -10.0, 5.0, 25.0)
        for (x, y), (ex, ey) in {
            (10.0, 25.0): (0, 0),
            (-10.0, 25.0): (63, 0),
            (10.0, 5.0): (0, 47),
            (-10.0, 5.0): (63, 47),
        }.items():
            px, py = mapper.map_point(x, y)
            self.assertLessEqual(abs(px - ex), 1)
            self.assertLessEqual(abs(py - ey), 1)

    def test_set_range_is_idempotent(self) -> None:
        mapper = CoordinateMapper(width=50, height=40)
        probes = [(0.1, 0.2), (0.5, 0.5), (0.99, 0.01), (0.33, 0.77)]
        mapper.set_range(0.0, 1.0, 0.0, 1.0)
        first = [mapper.map_point(x, y) for x, y in probes]
        mapper.set_range(0.0, 1.0, 0.0, 1.0)
        second = [mapper.map_point(x, y) for x, y in probes]
        self.assertEqual(first, second)

    def test_degenerate_x_range_maps_to_first_column(self) -> None:
        mapper = CoordinateMapper(width=10, height=10)
        mapper.set_range(5.0, 5.0, 0.0, 10.0)
        px, _ = mapper.map_point(5.0, 3.0)
        self.assertEqual(px, 0)
        self.assertEqual(mapper.map_x(123.0), 0)
        self.assertEqual(mapper.map_y(5.0), 5)

    def test_degenerate_y_range_maps_to_bottom_row(self) -> None:
        mapper = CoordinateMapper(width=10, height=10)
        mapper.set_range(0.0, 10.0, 2.0, 2.0)
        self.assertEqual(mapper.map_y(2.0), 9)
        self.assertEqual(mapper.map_y(-50.0), 9)

    def test_upper_edge_is_pulled_back_but_lower_edge_is_not(self) -> None:
        mapper = CoordinateMapper(width=10, height=10)
        mapper.set_range(0.0, 1.0, 0.0, 1.0)
        self.assertEqual(mapper.map_x(1.0), 9)
        self.assertEqual(mapper.map_y(0.0), 9)
        self.assertEqual(mapper.map_x(-0.5), -5)
        self.assertFalse(mapper.contains(*mapper.map_point(-0.5, 0.5)))
        # Beyond the upper edge by more than rounding is left alone.
        self.assertEqual(mapper.map_x(1.5), 15)

    def test_truncates_toward_zero(self) -> None:
        mapper = CoordinateMapper(width=10, height=10)
        mapper.set_range(0.0, 1.0, 0.0, 1.0)
        self.assertEqual(mapper.map_x(0.05), 0)
        self.assertEqual(mapper.map_x(-0.05), 0)
        self.assertEqual(mapper.map_x(0.19), 1)

    def test_reset_restores_identity(self) -> None:
        mapper = CoordinateMapper(width=4, height=3)
        mapper.set_range(-1.0, 1.0, -1.0, 1.0)
        mapper.reset()
        self.assertEqual(mapper.range, LogicalRange.identity(4, 3))

    def test_rejects_empty_surface(self) -> None:
        with self.assertRaises(ValueError):
            CoordinateMapper(width=0, height=10)


if __name__ == "__main__":
    unittest.main()
