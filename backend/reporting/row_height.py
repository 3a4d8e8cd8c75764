"""
Row height calculation.

A row is a rigid unit: its height is driven by the tallest column, so a long
description grows every sibling cell in the same row.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from models_styles import FontSpec

from .measure import TextMeasurer


@dataclass(frozen=True)
class CellText:
    text: str
    width: float


@dataclass(frozen=True)
class InfoCell:
    """Label/value pair in the info grid. ``span`` is a fraction of the content width."""
    label: str
    value: str
    span: float


def measure_cells(
    measurer: TextMeasurer,
    cells: Sequence[CellText],
    *,
    font: FontSpec,
    inner_padding: float,
) -> list[float]:
    return [
        measurer.measure(cell.text, font, cell.width - inner_padding) if cell.text else 0.0
        for cell in cells
    ]


def measure_row(
    measurer: TextMeasurer,
    cells: Sequence[CellText],
    *,
    font: FontSpec,
    min_height: float,
    row_padding: float,
    inner_padding: float,
) -> tuple[float, list[float]]:
    """Return the row height together with the text height of each column."""
    heights = measure_cells(measurer, cells, font=font, inner_padding=inner_padding)
    return max(min_height, max(heights, default=0.0) + row_padding), heights


def row_height(
    measurer: TextMeasurer,
    cells: Sequence[CellText],
    *,
    font: FontSpec,
    min_height: float,
    row_padding: float,
    inner_padding: float,
) -> float:
    height, _ = measure_row(
        measurer,
        cells,
        font=font,
        min_height=min_height,
        row_padding=row_padding,
        inner_padding=inner_padding,
    )
    return height


def stacked_cell_height(
    measurer: TextMeasurer,
    label: str,
    value: str,
    width: float,
    *,
    label_font: FontSpec,
    value_font: FontSpec,
    inner_padding: float,
    gap: float,
    min_height: float,
) -> float:
    """Height of a cell with a bold label stacked above its value."""
    text_width = width - inner_padding
    label_height = measurer.measure(label, label_font, text_width) if label else 0.0
    value_height = measurer.measure(value, value_font, text_width) if value else 0.0
    return max(min_height, label_height + value_height + inner_padding + gap)


def info_row_height(
    measurer: TextMeasurer,
    cells: Sequence[InfoCell],
    content_width: float,
    *,
    label_font: FontSpec,
    value_font: FontSpec,
    inner_padding: float,
    gap: float,
    min_height: float,
) -> float:
    return max(
        stacked_cell_height(
            measurer,
            cell.label,
            cell.value,
            content_width * cell.span,
            label_font=label_font,
            value_font=value_font,
            inner_padding=inner_padding,
            gap=gap,
            min_height=min_height,
        )
        for cell in cells
    )
