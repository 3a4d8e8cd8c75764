"""
Build display data for the inspection protocol from a ReportModel:
the three info-grid rows and the flattened remarks-table rows.
"""
from __future__ import annotations

from dataclasses import dataclass

from models import ReportModel
from models_styles import ProtocolLabels

from .format_utils import format_number, format_swedish_date, safe_string, yes_no
from .row_height import InfoCell

THIRD = 1.0 / 3.0
SIXTH = 1.0 / 6.0


@dataclass(frozen=True)
class InfoRow:
    cells: tuple[InfoCell, ...]
    bottom_border: bool


@dataclass(frozen=True)
class TableRow:
    """One physical row of the remarks table."""
    room: str
    component: str
    description: str
    status: str
    cost: float
    group_index: int
    remark_index: int

    @property
    def shaded(self) -> bool:
        # Parity restarts with every room, so two adjacent rows can share a shade.
        return (self.group_index + self.remark_index) % 2 == 0


def tenant_present_text(model: ReportModel, labels: ProtocolLabels) -> str:
    return yes_no(model.tenant_present_flags.anyone_present, labels.yes, labels.no)


def build_info_rows(model: ReportModel, labels: ProtocolLabels) -> list[InfoRow]:
    return [
        InfoRow(
            cells=(
                InfoCell(labels.inspection_id, safe_string(model.id), THIRD),
                InfoCell(labels.residence_id, safe_string(model.residence_id), THIRD),
                InfoCell(labels.inspection_date, format_swedish_date(model.date), THIRD),
            ),
            bottom_border=True,
        ),
        InfoRow(
            cells=(
                InfoCell(labels.address, safe_string(model.address), 2 * THIRD),
                InfoCell(labels.lease_start_date, format_swedish_date(model.lease_start_date), THIRD),
            ),
            bottom_border=True,
        ),
        InfoRow(
            cells=(
                InfoCell(labels.area_size, format_number(model.area_size), THIRD),
                InfoCell(labels.residence_type, safe_string(model.residence_type), THIRD),
                InfoCell(labels.furnished, yes_no(model.is_furnished, labels.yes, labels.no), SIXTH),
                InfoCell(labels.tenant_present, tenant_present_text(model, labels), SIXTH),
            ),
            bottom_border=False,
        ),
    ]


def build_table_rows(model: ReportModel, labels: ProtocolLabels) -> list[TableRow]:
    """
    Flatten rooms into table rows. A room without remarks yields one
    placeholder row; otherwise the room name is shown on its first remark only.
    """
    rows: list[TableRow] = []
    for group_index, room in enumerate(model.rooms):
        if not room.remarks:
            rows.append(
                TableRow(
                    room=room.room_name,
                    component=labels.no_remark,
                    description="",
                    status=labels.default_status,
                    cost=0.0,
                    group_index=group_index,
                    remark_index=0,
                )
            )
            continue
        for remark_index, remark in enumerate(room.remarks):
            rows.append(
                TableRow(
                    room=room.room_name if remark_index == 0 else "",
                    component=remark.building_component,
                    description=remark.description,
                    status=remark.status or labels.default_status,
                    cost=remark.cost,
                    group_index=group_index,
                    remark_index=remark_index,
                )
            )
    return rows
