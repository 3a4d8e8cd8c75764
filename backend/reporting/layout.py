"""
Paginated layout of the inspection protocol.

The logo, company lines and title sit at fixed positions on the first page.
Info-grid rows follow the cursor and move to a new page when they do not fit;
the remarks heading and intro stay on the page that holds the table header and
its first row. The remarks table then flows row by row: before
a block is drawn its height is compared against the space left above the
bottom threshold, and a block that does not fit moves to a new page, below a
repeated table header. Blocks are never split.

All mutable state of one run lives in ``LayoutState``; the step functions take
it together with a ``LayoutContext`` holding the collaborators, so pagination
can be exercised with a fake measurer and sink.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Sequence

from models import RenderConfig, ReportModel
from models_styles import StyleSheet

from .errors import SinkError
from .format_utils import format_cost, format_number
from .measure import TextMeasurer
from .protocol_data import InfoRow, TableRow, build_info_rows, build_table_rows
from .row_height import CellText, info_row_height, measure_row, row_height
from .sink import Align, DocumentSink

logger = logging.getLogger(__name__)

BlockKind = Literal["info_row", "table_header", "row", "summary"]


@dataclass
class PageCursor:
    page_index: int
    y: float
    page_width: float
    page_height: float
    margin: float

    @property
    def content_width(self) -> float:
        return self.page_width - self.margin * 2

    def advance(self, height: float) -> None:
        self.y += height

    def next_page(self) -> None:
        self.page_index += 1
        self.y = self.margin


@dataclass
class RunningTotal:
    total: float = 0.0

    def add(self, amount: float) -> None:
        self.total += amount or 0.0


@dataclass(frozen=True)
class Column:
    key: str
    title: str
    width: float
    align: Align = "left"


@dataclass(frozen=True)
class ColumnSet:
    columns: tuple[Column, ...]

    @classmethod
    def for_config(cls, config: RenderConfig, style: StyleSheet) -> "ColumnSet":
        widths = style.columns
        labels = style.labels
        columns = [
            Column("room", labels.room_column, widths.room),
            Column("component", labels.component_column, widths.component),
            Column("description", labels.description_column, widths.description),
            Column("status", labels.status_column, widths.status),
        ]
        if config.include_costs:
            columns.append(Column("cost", labels.cost_column, widths.cost, align="right"))
        return cls(tuple(columns))

    @property
    def total_width(self) -> float:
        return sum(c.width for c in self.columns)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(c.key for c in self.columns)

    def x_positions(self, origin: float) -> list[float]:
        xs = []
        x = origin
        for column in self.columns:
            xs.append(x)
            x += column.width
        return xs

    def x_of(self, key: str, origin: float) -> float:
        for column, x in zip(self.columns, self.x_positions(origin)):
            if column.key == key:
                return x
        raise KeyError(key)

    def width_of(self, key: str) -> float:
        for column in self.columns:
            if column.key == key:
                return column.width
        raise KeyError(key)


@dataclass(frozen=True)
class RowPlacement:
    kind: BlockKind
    page_index: int
    y: float
    height: float


@dataclass
class LayoutState:
    cursor: PageCursor
    total: RunningTotal = field(default_factory=RunningTotal)
    placements: list[RowPlacement] = field(default_factory=list)

    @classmethod
    def start(cls, style: StyleSheet) -> "LayoutState":
        page = style.page
        return cls(
            cursor=PageCursor(
                page_index=0,
                y=page.margin,
                page_width=page.width,
                page_height=page.height,
                margin=page.margin,
            )
        )

    @property
    def page_count(self) -> int:
        return self.cursor.page_index + 1

    def place(self, kind: BlockKind, height: float) -> RowPlacement:
        placement = RowPlacement(kind, self.cursor.page_index, self.cursor.y, height)
        self.placements.append(placement)
        self.cursor.advance(height)
        return placement

    def placed(self, kind: BlockKind) -> list[RowPlacement]:
        return [p for p in self.placements if p.kind == kind]


@dataclass(frozen=True)
class LayoutContext:
    sink: DocumentSink
    measurer: TextMeasurer
    style: StyleSheet
    columns: ColumnSet

    @property
    def origin_x(self) -> float:
        return self.style.page.margin


def fits_on_page(cursor: PageCursor, height: float, bottom_threshold: float) -> bool:
    return cursor.y + height <= cursor.page_height - bottom_threshold


def start_new_page(state: LayoutState, ctx: LayoutContext, *, with_table_header: bool) -> LayoutState:
    ctx.sink.add_page()
    state.cursor.next_page()
    if with_table_header:
        draw_table_header(state, ctx)
    return state


def ensure_fits(state: LayoutState, ctx: LayoutContext, height: float) -> LayoutState:
    """
    Move to a new page (without a table header) unless ``height`` fits below the
    cursor. A block taller than a whole page still starts at the top of a page.
    """
    if state.cursor.y > ctx.style.page.margin and not fits_on_page(
        state.cursor, height, ctx.style.page.page_bottom_threshold
    ):
        start_new_page(state, ctx, with_table_header=False)
    return state


def draw_table_header(state: LayoutState, ctx: LayoutContext) -> LayoutState:
    style = ctx.style
    y = state.cursor.y
    font = style.table_header_font
    ctx.sink.draw_rect(
        ctx.origin_x, y, ctx.columns.total_width, style.table.header_height, fill_color=style.palette.table_header
    )
    for column, x in zip(ctx.columns.columns, ctx.columns.x_positions(ctx.origin_x)):
        ctx.sink.draw_text(
            column.title,
            x + style.spacing.cell_padding_small,
            y + style.table.header_text_offset,
            width=column.width - style.spacing.cell_padding_medium,
            font=font,
            color=style.palette.inverse_text,
            align=column.align,
        )
    state.place("table_header", style.table.header_height)
    return state


def _row_texts(row: TableRow, columns: ColumnSet) -> list[str]:
    values = {
        "room": row.room,
        "component": row.component,
        "description": row.description,
        "status": row.status,
        "cost": format_cost(row.cost),
    }
    return [values[key] for key in columns.keys]


def _row_cells(texts: Sequence[str], columns: ColumnSet) -> list[CellText]:
    return [CellText(text, column.width) for text, column in zip(texts, columns.columns)]


def table_row_height(row: TableRow, ctx: LayoutContext) -> float:
    """Height ``row`` will take in the table, without drawing it."""
    style = ctx.style
    return row_height(
        ctx.measurer,
        _row_cells(_row_texts(row, ctx.columns), ctx.columns),
        font=style.body_font,
        min_height=style.table.min_row_height,
        row_padding=style.spacing.row_padding,
        inner_padding=style.spacing.cell_padding_medium,
    )


def layout_row(state: LayoutState, row: TableRow, ctx: LayoutContext) -> LayoutState:
    """Place one table row, moving it to a new page when it does not fit."""
    style = ctx.style
    spacing = style.spacing
    font = style.body_font
    texts = _row_texts(row, ctx.columns)
    cells = _row_cells(texts, ctx.columns)
    height, text_heights = measure_row(
        ctx.measurer,
        cells,
        font=font,
        min_height=style.table.min_row_height,
        row_padding=spacing.row_padding,
        inner_padding=spacing.cell_padding_medium,
    )

    if not fits_on_page(state.cursor, height, style.page.page_bottom_threshold):
        start_new_page(state, ctx, with_table_header=True)

    y = state.cursor.y
    if row.shaded:
        ctx.sink.draw_rect(ctx.origin_x, y, ctx.columns.total_width, height, fill_color=style.palette.row_shade)

    xs = ctx.columns.x_positions(ctx.origin_x)
    for column, x in zip(ctx.columns.columns, xs):
        ctx.sink.draw_rect(
            x, y, column.width, height, stroke_color=style.palette.border, line_width=style.table.border_width
        )
    for column, x, text, text_height in zip(ctx.columns.columns, xs, texts, text_heights):
        ctx.sink.draw_text(
            text,
            x + spacing.cell_padding_small,
            y + (height - text_height) / 2,
            width=column.width - spacing.cell_padding_medium,
            font=font,
            color=style.palette.text,
            align=column.align,
        )

    state.total.add(row.cost)
    state.place("row", height)
    return state


def layout_summary(state: LayoutState, ctx: LayoutContext) -> LayoutState:
    """Place the cost summary; it may sit closer to the bottom edge than ordinary rows."""
    style = ctx.style
    spacing = style.spacing
    height = style.table.summary_height
    if not fits_on_page(state.cursor, height, style.page.page_bottom_threshold_summary):
        start_new_page(state, ctx, with_table_header=False)

    y = state.cursor.y
    font = style.typography.font(style.typography.medium, "B")
    ctx.sink.draw_rect(ctx.origin_x, y, ctx.columns.total_width, height, fill_color=style.palette.table_header)
    ctx.sink.draw_text(
        style.labels.summary,
        ctx.origin_x + spacing.cell_padding_small,
        y + style.table.header_text_offset,
        width=ctx.columns.total_width / 2,
        font=font,
        color=style.palette.inverse_text,
    )
    ctx.sink.draw_text(
        format_number(state.total.total),
        ctx.columns.x_of("cost", ctx.origin_x) + spacing.cell_padding_small,
        y + style.table.header_text_offset,
        width=ctx.columns.width_of("cost") - spacing.cell_padding_medium,
        font=font,
        color=style.palette.inverse_text,
        align="right",
    )
    state.place("summary", height)
    return state


def layout_table(state: LayoutState, rows: Sequence[TableRow], ctx: LayoutContext) -> LayoutState:
    draw_table_header(state, ctx)
    for row in rows:
        state = layout_row(state, row, ctx)
    return state


class ProtocolLayoutEngine:
    """Lays out one protocol onto a sink. Use a fresh engine and sink per document."""

    def __init__(self, sink: DocumentSink, measurer: TextMeasurer, style: StyleSheet):
        self.sink = sink
        self.measurer = measurer
        self.style = style

    def render(self, model: ReportModel, config: RenderConfig) -> LayoutState:
        ctx = LayoutContext(
            sink=self.sink,
            measurer=self.measurer,
            style=self.style,
            columns=ColumnSet.for_config(config, self.style),
        )
        state = LayoutState.start(self.style)
        self._draw_logo()
        self._draw_company_info()
        self._draw_titles(state)
        self._draw_info_grid(state, ctx, build_info_rows(model, self.style.labels))

        rows = build_table_rows(model, self.style.labels)
        if not model.rooms:
            logger.warning("[protocol] no rooms found id=%s", model.id)
        self._draw_remarks_intro(state, ctx, rows[0] if rows else None)
        state = layout_table(state, rows, ctx)
        if config.include_costs:
            state = layout_summary(state, ctx)
        return state

    # -- header block -------------------------------------------------------

    def _draw_logo(self) -> None:
        page = self.style.page
        if not self.style.logo_path:
            return
        try:
            self.sink.draw_image(self.style.logo_path, page.margin, page.logo_top, width=page.logo_width)
        except SinkError as exc:
            logger.warning("[protocol] could not load logo path=%s error=%s", self.style.logo_path, exc)

    def _text_block(self, text: str, y: float, font, color: str, width: float | None = None) -> float:
        """Draw text at the left margin and return its measured height."""
        width = width if width is not None else self.style.page.content_width
        self.sink.draw_text(text, self.style.page.margin, y, width=width, font=font, color=color)
        return self.measurer.measure(text, font, width)

    def _draw_company_info(self) -> None:
        style = self.style
        company = style.company
        regular = style.typography.font(style.typography.tiny)
        y = style.page.company_info_top
        y += self._text_block(company.name, y, regular.bold(), style.palette.text)
        for line in (company.postal_address, company.visiting_address, company.phone):
            y += self._text_block(line, y, regular, style.palette.text)
        self._text_block(company.website, y, regular, style.palette.link)

    def _draw_titles(self, state: LayoutState) -> None:
        style = self.style
        typo = style.typography
        self._text_block(style.labels.title, style.page.title_top, typo.font(typo.title, "B"), style.palette.brand)
        heading_height = self._text_block(
            style.labels.about_heading, style.page.about_section_top, typo.font(typo.large, "B"), style.palette.text
        )
        state.cursor.y = style.page.about_section_top + heading_height + style.spacing.heading_gap

    def _draw_info_grid(self, state: LayoutState, ctx: LayoutContext, rows: Sequence[InfoRow]) -> None:
        style = self.style
        content_width = style.page.content_width
        for info_row in rows:
            height = info_row_height(
                self.measurer,
                info_row.cells,
                content_width,
                label_font=style.label_font,
                value_font=style.body_font,
                inner_padding=style.spacing.cell_padding_large,
                gap=style.spacing.label_value_gap,
                min_height=style.table.min_cell_height,
            )
            ensure_fits(state, ctx, height)
            x = style.page.margin
            for cell in info_row.cells:
                width = content_width * cell.span
                self._draw_info_cell(x, state.cursor.y, width, height, cell.label, cell.value, info_row.bottom_border)
                x += width
            state.place("info_row", height)
        state.cursor.advance(style.spacing.section_gap)

    def _draw_info_cell(
        self, x: float, y: float, width: float, height: float, label: str, value: str, bottom_border: bool
    ) -> None:
        style = self.style
        pad = style.spacing.cell_padding
        text_width = width - pad * 2
        border = style.palette.grid_border
        self.sink.draw_rect(x, y, width, height, stroke_color=border, line_width=style.table.border_width)
        self.sink.draw_text(label, x + pad, y + pad, width=text_width, font=style.label_font, color=style.palette.text)
        label_height = self.measurer.measure(label, style.label_font, text_width) if label else 0.0
        self.sink.draw_text(
            value,
            x + pad,
            y + pad + label_height + style.spacing.label_value_gap,
            width=text_width,
            font=style.body_font,
            color=style.palette.text,
        )
        if bottom_border:
            self.sink.draw_line(x, y + height, x + width, y + height, color=border, line_width=style.table.border_width)

    def _draw_remarks_intro(self, state: LayoutState, ctx: LayoutContext, first_row: TableRow | None) -> None:
        """Heading and intro paragraph, kept on one page with the table header and first row."""
        style = self.style
        typo = style.typography
        width = style.page.content_width
        heading_font = typo.font(typo.x_large, "B")
        intro_font = typo.font(typo.small)
        heading_height = self.measurer.measure(style.labels.remarks_heading, heading_font, width)
        intro_height = self.measurer.measure(style.labels.remarks_intro, intro_font, width)

        needed = (
            heading_height
            + style.spacing.heading_gap
            + intro_height
            + style.spacing.paragraph_gap
            + style.table.header_height
        )
        if first_row is not None:
            needed += table_row_height(first_row, ctx)
        ensure_fits(state, ctx, needed)

        x = style.page.margin
        self.sink.draw_text(
            style.labels.remarks_heading, x, state.cursor.y, width=width, font=heading_font, color=style.palette.text
        )
        state.cursor.advance(heading_height + style.spacing.heading_gap)
        self.sink.draw_text(
            style.labels.remarks_intro, x, state.cursor.y, width=width, font=intro_font, color=style.palette.text
        )
        state.cursor.advance(intro_height + style.spacing.paragraph_gap)
