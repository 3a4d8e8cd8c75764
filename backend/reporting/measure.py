"""
Text measurement for the protocol layout.

Heights are computed by greedy word wrapping against the font's string widths,
so the measured height of a text always matches the lines the sink draws.
"""
from __future__ import annotations

from typing import Protocol

from fpdf import FPDF

from models_styles import FontSpec

from .errors import MeasurementError

# Substitutions for characters outside the PDF core fonts (latin-1)
_CORE_FONT_REPLACEMENTS = str.maketrans({
    "•": "·",
    "–": "-",
    "—": "-",
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "…": "...",
})


class TextMeasurer(Protocol):
    def measure(self, text: str, font: FontSpec, max_width: float) -> float:
        """Height of ``text`` wrapped at ``max_width`` in layout units."""
        ...


def pdf_safe_text(text: str | None) -> str:
    if text is None:
        return ""
    return str(text).translate(_CORE_FONT_REPLACEMENTS).encode("latin-1", "replace").decode("latin-1")


def wrap_text(pdf: FPDF, text: str, max_w: float) -> list[str]:
    """Split ``text`` into lines no wider than ``max_w`` with the pdf's current font."""
    lines: list[str] = []
    for paragraph in pdf_safe_text(text).split("\n"):
        lines.extend(_wrap_paragraph(pdf, paragraph, max_w))
    return lines


def _wrap_paragraph(pdf: FPDF, text: str, max_w: float) -> list[str]:
    if max_w <= 0:
        return [text]
    lines = []
    current = ""
    for word in text.split(" "):
        if word == "":
            continue
        candidate = word if not current else f"{current} {word}"
        if pdf.get_string_width(candidate) <= max_w:
            current = candidate
            continue
        if current:
            lines.append(current)
            current = ""
        if pdf.get_string_width(word) <= max_w:
            current = word
            continue
        chunk = ""
        for ch in word:
            if not chunk or pdf.get_string_width(chunk + ch) <= max_w:
                chunk += ch
            else:
                lines.append(chunk)
                chunk = ch
        current = chunk
    if current:
        lines.append(current)
    return lines if lines else [""]


class FpdfTextMeasurer:
    """Measures with the core-font metrics of an fpdf2 document."""

    def __init__(self, pdf: FPDF | None = None):
        self._pdf = pdf or FPDF(unit="pt", format="A4")

    def use_font(self, font: FontSpec) -> None:
        self._pdf.set_font(font.family, font.style, font.size)

    def lines(self, text: str, font: FontSpec, max_width: float) -> list[str]:
        if not text:
            return []
        try:
            self.use_font(font)
            return wrap_text(self._pdf, text, max_width)
        except Exception as exc:
            raise MeasurementError(f"could not measure text with font {font.family} {font.size}") from exc

    def measure(self, text: str, font: FontSpec, max_width: float) -> float:
        return len(self.lines(text, font, max_width)) * font.line_height
