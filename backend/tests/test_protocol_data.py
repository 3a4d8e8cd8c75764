"""Display data: info grid values, row grouping and shading parity."""
from datetime import date, datetime

import pytest

from models import Remark, ReportModel, RoomGroup, TenantPresentFlags
from models_styles import ProtocolLabels
from reporting.protocol_data import build_info_rows, build_table_rows

LABELS = ProtocolLabels()


def _model(rooms, **overrides) -> ReportModel:
    fields = {"id": "INS-7", "date": datetime(2026, 3, 14, 9, 30), "address": "Storgatan 1", "rooms": rooms}
    fields.update(overrides)
    return ReportModel(**fields)


def test_room_without_remarks_yields_one_placeholder_row():
    rows = build_table_rows(_model([RoomGroup(room_name="Hall")]), LABELS)
    assert len(rows) == 1
    row = rows[0]
    assert (row.room, row.component, row.description, row.status, row.cost) == ("Hall", "Utan anmärkning", "", "OK", 0.0)


def test_room_name_only_on_first_remark_of_group():
    rooms = [
        RoomGroup(
            room_name="Kök",
            remarks=[
                Remark(building_component="Golv", description="Repa", cost=100),
                Remark(building_component="Vägg", description="Hål", cost=50),
                Remark(building_component="Tak", description="Fläck"),
            ],
        )
    ]
    rows = build_table_rows(_model(rooms), LABELS)
    assert [r.room for r in rows] == ["Kök", "", ""]
    assert [r.component for r in rows] == ["Golv", "Vägg", "Tak"]
    assert [r.status for r in rows] == ["OK", "OK", "OK"]
    assert [r.remark_index for r in rows] == [0, 1, 2]


def test_shading_parity_restarts_per_room():
    rooms = [
        RoomGroup(room_name="Kök", remarks=[Remark(), Remark(), Remark()]),
        RoomGroup(room_name="Hall", remarks=[Remark(), Remark()]),
        RoomGroup(room_name="Bad"),
    ]
    rows = build_table_rows(_model(rooms), LABELS)
    # parity restarts with every room, so the last two rows are both shaded
    assert [r.shaded for r in rows] == [True, False, True, False, True, True]


def test_info_rows_layout_and_values():
    model = _model(
        [],
        residence_id="705-01",
        lease_start_date=date(2026, 4, 1),
        area_size=62.0,
        residence_type="2 rum och kök",
        is_furnished=False,
        tenant_present_flags=TenantPresentFlags(is_new_tenant_present=True),
    )
    rows = build_info_rows(model, LABELS)
    assert [len(r.cells) for r in rows] == [3, 2, 4]
    assert [r.bottom_border for r in rows] == [True, True, False]
    for row in rows:
        assert sum(c.span for c in row.cells) == pytest.approx(1.0)

    values = {c.label: c.value for r in rows for c in r.cells}
    assert values["Besiktningsnummer:"] == "INS-7"
    assert values["Objektsnummer:"] == "705-01"
    assert values["Besiktningsdatum och tid:"] == "2026-03-14"
    assert values["Adress:"] == "Storgatan 1"
    assert values["Inflyttningsdatum:"] == "2026-04-01"
    assert values["Lägenhetsstorlek:"] == "62"
    assert values["Lägenhetstyp:"] == "2 rum och kök"
    assert values["Möblerad under besiktning:"] == "Nej"
    assert values["Hyresgäst närvarande:"] == "Ja"


def test_tenant_absent_and_missing_optional_fields():
    rows = build_info_rows(_model([]), LABELS)
    values = {c.label: c.value for r in rows for c in r.cells}
    assert values["Hyresgäst närvarande:"] == "Nej"
    assert values["Objektsnummer:"] == ""
    assert values["Inflyttningsdatum:"] == ""
    assert values["Lägenhetsstorlek:"] == ""

