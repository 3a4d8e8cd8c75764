"""Deterministic stand-ins for the text measurer and drawing surface."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from models_styles import FontSpec
from reporting.errors import SinkError


class FixedWidthMeasurer:
    """Every character is half the font size wide; lines wrap at max_width."""

    def __init__(self) -> None:
        self.calls = 0

    def lines(self, text: str, font: FontSpec, max_width: float) -> int:
        if not text:
            return 0
        chars_per_line = max(1, int(max_width // (font.size * 0.5)))
        return sum(max(1, math.ceil(len(part) / chars_per_line)) for part in text.split("\n"))

    def measure(self, text: str, font: FontSpec, max_width: float) -> float:
        self.calls += 1
        return self.lines(text, font, max_width) * font.line_height


@dataclass
class Op:
    kind: str
    page: int
    args: dict[str, Any] = field(default_factory=dict)


class RecordingSink:
    """Keeps every drawing call, tagged with the page it landed on."""

    def __init__(self, *, fail_image: bool = False, fail_finalize: bool = False):
        self.ops: list[Op] = []
        self._pages = 1
        self._current = 0
        self.fail_image = fail_image
        self.fail_finalize = fail_finalize
        self.finalized = False

    def _record(self, kind: str, **args: Any) -> None:
        self.ops.append(Op(kind, self._current, args))

    def add_page(self) -> None:
        self._pages += 1
        self._current = self._pages - 1
        self._record("add_page")

    def draw_rect(self, x, y, w, h, fill_color=None, stroke_color=None, line_width=None) -> None:
        self._record("rect", x=x, y=y, w=w, h=h, fill_color=fill_color, stroke_color=stroke_color)

    def draw_text(self, text, x, y, *, width, font, color, align="left") -> None:
        self._record("text", text=text, x=x, y=y, width=width, font=font, color=color, align=align)

    def draw_line(self, x1, y1, x2, y2, *, color, line_width) -> None:
        self._record("line", x1=x1, y1=y1, x2=x2, y2=y2)

    def draw_image(self, path, x, y, *, width) -> None:
        if self.fail_image:
            raise SinkError(f"draw_image {path} failed: file not found")
        self._record("image", path=path, x=x, y=y, width=width)

    def switch_to_page(self, index: int) -> None:
        if not 0 <= index < self._pages:
            raise SinkError(f"page index {index} out of range")
        self._current = index

    def page_count(self) -> int:
        return self._pages

    def finalize(self) -> bytes:
        if self.fail_finalize:
            raise RuntimeError("stream closed")
        self.finalized = True
        return "\n".join(f"{op.kind}:{op.page}:{sorted(op.args.items(), key=lambda kv: kv[0])}" for op in self.ops).encode()

    # -- helpers for assertions ---------------------------------------------

    def drawing_ops(self) -> list[Op]:
        return [op for op in self.ops if op.kind != "add_page"]

    def texts(self, page: int | None = None) -> list[Op]:
        return [op for op in self.ops if op.kind == "text" and (page is None or op.page == page)]

    def text_values(self, page: int | None = None) -> list[str]:
        return [op.args["text"] for op in self.texts(page)]

    def fills(self, color: str, height: float | None = None) -> list[Op]:
        return [
            op
            for op in self.ops
            if op.kind == "rect"
            and op.args["fill_color"] == color
            and (height is None or op.args["h"] == height)
        ]
