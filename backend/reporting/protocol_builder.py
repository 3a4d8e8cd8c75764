"""
Render an inspection protocol to PDF bytes.

validate -> lay out header block and remarks table -> stamp footers -> finalize.
Each call builds its own sink, measurer and layout state, so concurrent
renders share nothing.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from models import RenderConfig, ReportModel
from models_styles import StyleSheet
from stylesheets import get_stylesheet

from .errors import FinalizeError, ProtocolValidationError
from .footer import stamp_footers
from .layout import LayoutState, ProtocolLayoutEngine
from .measure import FpdfTextMeasurer, TextMeasurer
from .sink import DocumentSink, FpdfDocumentSink
from .validation import validate_protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProtocolRender:
    pdf_bytes: bytes
    layout: LayoutState
    page_count: int


def _coerce_model(model: ReportModel | dict[str, Any] | None) -> ReportModel | None:
    if model is None or isinstance(model, ReportModel):
        return model
    try:
        return ReportModel.model_validate(model)
    except ValidationError as exc:
        raise ProtocolValidationError("inspection", f"Invalid inspection: {exc}") from exc


def _coerce_config(config: RenderConfig | dict[str, Any] | None) -> RenderConfig:
    if config is None:
        return RenderConfig()
    if isinstance(config, RenderConfig):
        return config
    try:
        return RenderConfig.model_validate(config)
    except ValidationError as exc:
        raise ProtocolValidationError("config", f"Invalid render config: {exc}") from exc


def render_protocol(
    model: ReportModel | dict[str, Any] | None,
    config: RenderConfig | dict[str, Any] | None = None,
    *,
    stylesheet: StyleSheet | None = None,
    sink: DocumentSink | None = None,
    measurer: TextMeasurer | None = None,
    generated_at: datetime | None = None,
) -> ProtocolRender:
    """Lay out, stamp and finalize one protocol. Returns bytes plus the layout record."""
    report = _coerce_model(model)
    validate_protocol(report)
    render_config = _coerce_config(config)
    style = stylesheet or get_stylesheet()

    if sink is None:
        sink = FpdfDocumentSink(style)
    if measurer is None:
        measurer = getattr(sink, "measurer", None) or FpdfTextMeasurer()

    start = time.perf_counter()
    layout = ProtocolLayoutEngine(sink, measurer, style).render(report, render_config)
    page_count = stamp_footers(sink, style, generated_at)
    try:
        pdf_bytes = sink.finalize()
    except FinalizeError:
        logger.exception("[protocol] finalize failed id=%s", report.id)
        raise
    except Exception as exc:
        logger.exception("[protocol] finalize failed id=%s", report.id)
        raise FinalizeError(f"Failed to generate inspection protocol: {exc}") from exc

    elapsed = time.perf_counter() - start
    logger.info(
        "[protocol] rendered id=%s pages=%d rows=%d remarks=%d include_costs=%s duration=%.2fs",
        report.id,
        page_count,
        len(layout.placed("row")),
        report.remark_count,
        render_config.include_costs,
        elapsed,
    )
    return ProtocolRender(pdf_bytes=pdf_bytes, layout=layout, page_count=page_count)


def build_protocol_pdf(
    model: ReportModel | dict[str, Any] | None,
    config: RenderConfig | dict[str, Any] | None = None,
    *,
    stylesheet: StyleSheet | None = None,
    sink: DocumentSink | None = None,
    measurer: TextMeasurer | None = None,
    generated_at: datetime | None = None,
) -> bytes:
    """Build the inspection protocol PDF. Returns PDF bytes."""
    return render_protocol(
        model,
        config,
        stylesheet=stylesheet,
        sink=sink,
        measurer=measurer,
        generated_at=generated_at,
    ).pdf_bytes
