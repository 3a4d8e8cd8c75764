"""In-repo stylesheet registry for inspection protocol documents."""
from __future__ import annotations

import os
from pathlib import Path

from models_styles import Palette, StyleSheet

_DEFAULT_LOGO_PATH = Path(__file__).resolve().parent / "assets" / "images" / "protocol-logo.png"

DEFAULT_STYLESHEET_ID = os.environ.get("PROTOCOL_STYLESHEET", "default")
LOGO_PATH = os.environ.get("PROTOCOL_LOGO_PATH", str(_DEFAULT_LOGO_PATH))

STYLESHEETS: dict[str, StyleSheet] = {
    "default": StyleSheet(
        stylesheet_id="default",
        logo_path=LOGO_PATH,
    ),
    "print": StyleSheet(
        stylesheet_id="print",
        palette=Palette(
            brand="#000000",
            table_header="#333333",
            row_shade="#EEEEEE",
            text="#000000",
            inverse_text="#FFFFFF",
            border="#999999",
            grid_border="#000000",
            muted_text="#555555",
            link="#000000",
        ),
        logo_path=LOGO_PATH,
    ),
}


def get_stylesheet(stylesheet_id: str | None = None) -> StyleSheet:
    """Return the named stylesheet, falling back to the configured default."""
    key = stylesheet_id or DEFAULT_STYLESHEET_ID
    return STYLESHEETS.get(key) or STYLESHEETS["default"]


def list_stylesheets() -> list[StyleSheet]:
    return list(STYLESHEETS.values())
