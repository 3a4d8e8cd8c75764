"""Stylesheet configuration for inspection protocol documents."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# A4 in points
A4_WIDTH_PT = 595.28
A4_HEIGHT_PT = 841.89


class FontSpec(BaseModel):
    """Font used for measuring and drawing a piece of text."""
    model_config = ConfigDict(frozen=True)

    family: str = "Helvetica"
    style: Literal["", "B", "I", "BI"] = ""
    size: float = 8.0
    line_height_factor: float = 1.2

    @property
    def line_height(self) -> float:
        return self.size * self.line_height_factor

    def bold(self) -> "FontSpec":
        return self.model_copy(update={"style": "B"})


class Palette(BaseModel):
    model_config = ConfigDict(frozen=True)

    brand: str = "#0077BE"
    table_header: str = "#0088CC"
    row_shade: str = "#F5F5F5"
    text: str = "#000000"
    inverse_text: str = "#FFFFFF"
    border: str = "#CCCCCC"
    grid_border: str = "#000000"
    muted_text: str = "#666666"
    link: str = "#0077BE"


class Typography(BaseModel):
    model_config = ConfigDict(frozen=True)

    family: str = "Helvetica"
    tiny: float = 8
    small: float = 9
    medium: float = 10
    large: float = 12
    x_large: float = 14
    title: float = 28

    def font(self, size: float, style: str = "") -> FontSpec:
        return FontSpec(family=self.family, style=style, size=size)


class PageLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = A4_WIDTH_PT
    height: float = A4_HEIGHT_PT
    margin: float = 40
    logo_width: float = 180
    logo_top: float = 30
    company_info_top: float = 75
    title_top: float = 160
    about_section_top: float = 210
    footer_margin: float = 30
    page_bottom_threshold: float = 80
    page_bottom_threshold_summary: float = 60

    @property
    def content_width(self) -> float:
        return self.width - self.margin * 2


class Spacing(BaseModel):
    model_config = ConfigDict(frozen=True)

    cell_padding_small: float = 2
    cell_padding: float = 3
    cell_padding_medium: float = 4
    cell_padding_large: float = 6
    row_padding: float = 12
    section_gap: float = 20
    heading_gap: float = 4
    paragraph_gap: float = 10
    label_value_gap: float = 2


class TableMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    header_height: float = 20
    header_text_offset: float = 6
    min_cell_height: float = 25
    min_row_height: float = 20
    border_width: float = 0.5
    summary_height: float = 25


class RemarkColumnWidths(BaseModel):
    model_config = ConfigDict(frozen=True)

    room: float = 60
    component: float = 90
    description: float = 180
    status: float = 110
    cost: float = 70


class CompanyInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Bostads AB Mimer"
    postal_address: str = "Box 1170, 721 29 Västerås"
    visiting_address: str = "Besöksadress: Gåsverksgatan 7"
    phone: str = "Tel: 021-39 70 00"
    website: str = "Webb: www.mimer.nu"


class ProtocolLabels(BaseModel):
    """Display strings. Defaults are the Swedish texts used on printed protocols."""
    model_config = ConfigDict(frozen=True)

    title: str = "BESIKTNINGSPROTOKOLL"
    about_heading: str = "Om bostaden"
    inspection_id: str = "Besiktningsnummer:"
    residence_id: str = "Objektsnummer:"
    inspection_date: str = "Besiktningsdatum och tid:"
    address: str = "Adress:"
    lease_start_date: str = "Inflyttningsdatum:"
    area_size: str = "Lägenhetsstorlek:"
    residence_type: str = "Lägenhetstyp:"
    furnished: str = "Möblerad under besiktning:"
    tenant_present: str = "Hyresgäst närvarande:"
    yes: str = "Ja"
    no: str = "Nej"
    remarks_heading: str = "Anmärkningar"
    remarks_intro: str = (
        "Här beskriver vi vilka besiktningsanmärkningar som finns registrerade i vilket rum. "
        "Du ser även om du behöver åtgärda något samt vad det kommer kosta."
    )
    room_column: str = "Rum"
    component_column: str = "Byggnadsdel"
    description_column: str = "Beskrivning"
    status_column: str = "Åtgärd"
    cost_column: str = "Kostnad (Kr)"
    no_remark: str = "Utan anmärkning"
    default_status: str = "OK"
    summary: str = "SUMMA"
    footer_template: str = "Sida {page} av {total} • Genererad {timestamp}"


class StyleSheet(BaseModel):
    """Immutable look-and-feel for one protocol document."""
    model_config = ConfigDict(frozen=True)

    stylesheet_id: str
    palette: Palette = Field(default_factory=Palette)
    typography: Typography = Field(default_factory=Typography)
    page: PageLayout = Field(default_factory=PageLayout)
    spacing: Spacing = Field(default_factory=Spacing)
    table: TableMetrics = Field(default_factory=TableMetrics)
    columns: RemarkColumnWidths = Field(default_factory=RemarkColumnWidths)
    company: CompanyInfo = Field(default_factory=CompanyInfo)
    labels: ProtocolLabels = Field(default_factory=ProtocolLabels)
    logo_path: str | None = None

    @property
    def body_font(self) -> FontSpec:
        return self.typography.font(self.typography.tiny)

    @property
    def label_font(self) -> FontSpec:
        return self.typography.font(self.typography.tiny, "B")

    @property
    def table_header_font(self) -> FontSpec:
        return self.typography.font(self.typography.small, "B")

    @property
    def footer_font(self) -> FontSpec:
        return self.typography.font(self.typography.tiny)
