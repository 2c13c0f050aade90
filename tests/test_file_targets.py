from __future__ import annotations

import io
from pathlib import Path
import tempfile
import unittest

from PIL import Image

from emergent_core.core.registry import build_default_registry
from emergent_core.core.surface import PlotSurface
from emergent_core.errors import PlotInitError
from emergent_core.targets.base import BackendConfig
from emergent_core.targets.none_target import NoneBackend
from emergent_core.targets.pgm_target import PGMBackend
from emergent_core.targets.png_target import PNGBackend
from emergent_core.targets.raw_target import RawBackend


def _open(width: int, height: int, levels: int, term: str, out: io.BytesIO, mag: int = 1) -> PlotSurface:
    return PlotSurface(
        width,
        height,
        levels,
        term,
        mag=mag,
        backend_config=BackendConfig(output=out, mag=mag),
        registry=build_default_registry(),
    )


class PGMTargetTests(unittest.TestCase):
    def test_end_to_end_single_lit_pixel(self) -> None:
        out = io.BytesIO()
        surface = _open(10, 10, 2, "raster-file", out)
        self.assertEqual(surface.backend_name, "pgm")
        surface.set_all(0)
        surface.point(0, 0, 1)
        surface.finish()
        data = out.getvalue()
        header = b"P5\n10 10\n1\n"
        self.assertTrue(data.startswith(header))
        body = data[len(header):]
        self.assertEqual(len(body), 100)
        self.assertEqual(body[0], 1)
        self.assertEqual(body[1:], bytes(99))

    def test_body_is_row_major(self) -> None:
        out = io.BytesIO()
        surface = _open(4, 3, 8, "pgm", out)
        surface.point(2, 1, 5)
        surface.finish()
        body = out.getvalue()[len(b"P5\n4 3\n7\n"):]
        self.assertEqual(body[1 * 4 + 2], 5)
        self.assertEqual(sum(body), 5)

    def test_lines_are_rasterized(self) -> None:
        out = io.BytesIO()
        surface = _open(6, 2, 4, "pgm", out)
        surface.line(0, 1, 5, 1, 3)
        surface.finish()
        body = out.getvalue()[len(b"P5\n6 2\n3\n"):]
        self.assertEqual(list(body), [0] * 6 + [3] * 6)

    def test_magnification_replicates_pixels(self) -> None:
        out = io.BytesIO()
        surface = _open(2, 2, 2, "pgm", out, mag=2)
        surface.point(1, 0, 1)
        surface.finish()
        data = out.getvalue()
        header = b"P5\n4 4\n1\n"
        self.assertTrue(data.startswith(header))
        rows = [list(data[len(header) + r * 4 : len(header) + (r + 1) * 4]) for r in range(4)]
        self.assertEqual(rows, [[0, 0, 1, 1], [0, 0, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]])

    def test_levels_are_capped_at_256(self) -> None:
        out = io.BytesIO()
        backend = PGMBackend(BackendConfig(output=out))
        backend.init(1, 1, 1000)
        backend.point(0, 0, 255)
        backend.finish()
        self.assertEqual(out.getvalue(), b"P5\n1 1\n255\n\xff")

    def test_out_of_range_pixels_are_ignored(self) -> None:
        out = io.BytesIO()
        backend = PGMBackend(BackendConfig(output=out))
        backend.init(3, 3, 2)
        backend.point(3, 0, 1)
        backend.point(0, 3, 1)
        backend.point(-1, -1, 1)
        backend.finish()
        self.assertEqual(out.getvalue()[-9:], bytes(9))

    def test_writes_to_path_and_closes_it(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "out.pgm"
            backend = PGMBackend(BackendConfig(output=path))
            backend.init(2, 1, 2)
            backend.point(1, 0, 1)
            backend.finish()
            self.assertEqual(path.read_bytes(), b"P5\n2 1\n1\n\x00\x01")

    def test_unwritable_path_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing" / "out.pgm"
            with self.assertRaises(PlotInitError):
                PGMBackend(BackendConfig(output=path)).init(2, 2, 2)


class RawTargetTests(unittest.TestCase):
    def test_emits_row_major_triplets(self) -> None:
        out = io.BytesIO()
        backend = RawBackend(BackendConfig(output=out))
        backend.init(2, 2, 4)
        backend.point(1, 0, 3)
        backend.line(0, 1, 1, 1, 2)
        backend.finish()
        self.assertEqual(out.getvalue().decode("ascii"), "0 0 0\n1 0 3\n0 1 2\n1 1 2\n")


class PNGTargetTests(unittest.TestCase):
    def test_png_stretches_levels_to_full_gray_range(self) -> None:
        out = io.BytesIO()
        surface = _open(3, 2, 3, "png", out)
        surface.point(0, 0, 2)
        surface.point(1, 0, 1)
        surface.finish()
        out.seek(0)
        with Image.open(out) as image:
            self.assertEqual(image.size, (3, 2))
            self.assertEqual(image.mode, "L")
            self.assertEqual(image.getpixel((0, 0)), 255)
            self.assertEqual(image.getpixel((1, 0)), 128)
            self.assertEqual(image.getpixel((2, 1)), 0)

    def test_png_backend_has_no_native_lines(self) -> None:
        self.assertFalse(PNGBackend.native_lines)


class NoneTargetTests(unittest.TestCase):
    def test_none_backend_accepts_everything(self) -> None:
        with PlotSurface(5, 5, 2, "none", registry=build_default_registry()) as surface:
            self.assertIsInstance(surface.backend, NoneBackend)
            surface.set_all(1)
            surface.box(1, 1, 3, 3, 2)
            surface.line(0, 0, 4, 4, 1)
            surface.point(2, 2, 1)


if __name__ == "__main__":
    unittest.main()
