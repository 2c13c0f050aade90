from __future__ import annotations

from .base import BackendConfig, StreamBackend


PS_PROLOGUE = """%!PS-Adobe-2.0 EPSF-2.0
%%Creator: psplot
%%DocumentFonts: 
%%BoundingBox: 0 0 {width} {height}
%%EndComments
/gnudict 40 dict def
gnudict begin
/gnulinewidth 1.000 def
/M {{moveto}} bind def
/L {{lineto}} bind def
/V {{rlineto}} bind def
/P {{ stroke [] 0 setdash
  currentlinewidth 2 div sub M
  0 currentlinewidth V stroke }} def
/dl {{10 mul}} def
/AL {{ stroke gnulinewidth 2 div setlinewidth }} def
end
%%EndProlog
gnudict begin
gsave
newpath
"""

PS_EPILOGUE = """stroke
grestore
end
showpage
%%Trailer
"""


class PostScriptBackend(StreamBackend):
    """Streams encapsulated PostScript; values are ignored (single ink)."""

    native_lines = True

    def __init__(self, config: BackendConfig | None = None) -> None:
        super().__init__(config)
        self._pen: tuple[int, int] | None = None

    def init(self, width: int, height: int, levels: int) -> None:
        self._store_geometry(width, height, levels)
        self._open_stream()
        self._pen = None
        self._write_text(PS_PROLOGUE.format(width=width, height=height))

    def point(self, x: int, y: int, value: int) -> None:
        self._write_text(f"{x} {self.height - y} P\n")
        self._pen = None

    def line(self, x1: int, y1: int, x2: int, y2: int, value: int) -> None:
        if self._pen != (x1, y1):
            self._write_text(f"{x1} {self.height - y1} M\n")
        self._write_text(f"{x2} {self.height - y2} L\n")
        self._pen = (x2, y2)

    def finish(self) -> None:
        if self._stream is None:
            return
        self._write_text(PS_EPILOGUE)
        self._close_stream()
