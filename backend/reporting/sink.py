"""
Page-oriented drawing surface for protocol documents.

Coordinates are in points with the origin at the top-left corner of the page.
Pages are addressed by 0-based index, and a new sink already holds its first page.
"""
from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Literal, Protocol

from fpdf import FPDF

from models_styles import FontSpec, StyleSheet

from .errors import FinalizeError, ProtocolRenderError, SinkError
from .measure import FpdfTextMeasurer, pdf_safe_text

Align = Literal["left", "center", "right"]

PDF_COMPRESS = os.environ.get("PROTOCOL_PDF_COMPRESS", "1").strip().lower() not in ("0", "false", "no")

_FPDF_ALIGN = {"left": "L", "center": "C", "right": "R"}


class DocumentSink(Protocol):
    def add_page(self) -> None: ...

    def draw_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        fill_color: str | None = None,
        stroke_color: str | None = None,
        line_width: float | None = None,
    ) -> None: ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        width: float,
        font: FontSpec,
        color: str,
        align: Align = "left",
    ) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, *, color: str, line_width: float) -> None: ...

    def draw_image(self, path: str, x: float, y: float, *, width: float) -> None: ...

    def switch_to_page(self, index: int) -> None: ...

    def page_count(self) -> int: ...

    def finalize(self) -> bytes: ...


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    text = color.strip().lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) != 6:
        raise ValueError(f"not a hex color: {color!r}")
    return int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16)


@contextmanager
def _guard(operation: str) -> Iterator[None]:
    try:
        yield
    except ProtocolRenderError:
        raise
    except Exception as exc:
        raise SinkError(f"{operation} failed: {exc}") from exc


class FpdfDocumentSink:
    """DocumentSink backed by an fpdf2 document with automatic page breaks disabled."""

    def __init__(self, style: StyleSheet, compress: bool | None = None):
        pdf = FPDF(orientation="P", unit="pt", format=(style.page.width, style.page.height))
        pdf.set_auto_page_break(False)
        pdf.set_margins(style.page.margin, style.page.margin, style.page.margin)
        pdf.c_margin = 0
        pdf.set_compression(PDF_COMPRESS if compress is None else compress)
        pdf.set_creator("inspection-protocol")
        self._pdf = pdf
        self._measurer = FpdfTextMeasurer(pdf)
        pdf.add_page()

    @property
    def measurer(self) -> FpdfTextMeasurer:
        """Measurer sharing this document's font metrics."""
        return self._measurer

    def add_page(self) -> None:
        with _guard("add_page"):
            self._pdf.page = self._pdf.pages_count
            self._pdf.add_page()

    def draw_rect(self, x, y, w, h, fill_color=None, stroke_color=None, line_width=None) -> None:
        if fill_color is None and stroke_color is None:
            return
        with _guard("draw_rect"):
            if fill_color is not None:
                self._pdf.set_fill_color(*hex_to_rgb(fill_color))
            if stroke_color is not None:
                self._pdf.set_draw_color(*hex_to_rgb(stroke_color))
            if line_width is not None:
                self._pdf.set_line_width(line_width)
            if fill_color is not None and stroke_color is not None:
                style = "DF"
            elif fill_color is not None:
                style = "F"
            else:
                style = "D"
            self._pdf.rect(x, y, w, h, style=style)

    def draw_text(self, text, x, y, *, width, font, color, align="left") -> None:
        if not text:
            return
        with _guard("draw_text"):
            self._pdf.set_text_color(*hex_to_rgb(color))
            line_h = font.line_height
            for offset, line in enumerate(self._measurer.lines(text, font, width)):
                self._pdf.set_xy(x, y + offset * line_h)
                self._pdf.cell(width, line_h, pdf_safe_text(line), align=_FPDF_ALIGN[align])

    def draw_line(self, x1, y1, x2, y2, *, color, line_width) -> None:
        with _guard("draw_line"):
            self._pdf.set_draw_color(*hex_to_rgb(color))
            self._pdf.set_line_width(line_width)
            self._pdf.line(x1, y1, x2, y2)

    def draw_image(self, path, x, y, *, width) -> None:
        with _guard(f"draw_image {path}"):
            self._pdf.image(path, x=x, y=y, w=width)

    def switch_to_page(self, index: int) -> None:
        if not 0 <= index < self._pdf.pages_count:
            raise SinkError(f"page index {index} out of range (pages={self._pdf.pages_count})")
        self._pdf.page = index + 1
        # set_font skips an unchanged font; clear it so the next one is written to this page
        self._pdf.font_family = ""

    def page_count(self) -> int:
        return self._pdf.pages_count

    def finalize(self) -> bytes:
        self._pdf.page = self._pdf.pages_count
        try:
            return bytes(self._pdf.output())
        except Exception as exc:
            raise FinalizeError(f"PDF generation failed: {exc}") from exc
