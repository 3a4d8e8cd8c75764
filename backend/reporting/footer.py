"""
Second layout pass: stamp every page with "page i of N" once N is known.
"""
from __future__ import annotations

from datetime import datetime

from models_styles import StyleSheet

from .format_utils import format_swedish_datetime
from .sink import DocumentSink


def footer_text(style: StyleSheet, page_number: int, total_pages: int, timestamp: str) -> str:
    return style.labels.footer_template.format(page=page_number, total=total_pages, timestamp=timestamp)


def stamp_footers(sink: DocumentSink, style: StyleSheet, generated_at: datetime | None = None) -> int:
    """
    Draw the footer on every page of ``sink`` and return the page count.

    Must run after all content is laid out. The timestamp is taken once so
    every footer shows the same value.
    """
    timestamp = format_swedish_datetime(generated_at or datetime.now())
    total_pages = sink.page_count()
    page = style.page
    for index in range(total_pages):
        sink.switch_to_page(index)
        sink.draw_text(
            footer_text(style, index + 1, total_pages, timestamp),
            page.margin,
            page.height - page.footer_margin,
            width=page.content_width,
            font=style.footer_font,
            color=style.palette.muted_text,
            align="center",
        )
    return total_pages
