"""Pre-flight validation: failures happen before anything is drawn."""
from datetime import date

import pytest

from fakes import FixedWidthMeasurer, RecordingSink
from models import ReportModel, RoomGroup
from reporting.errors import MissingFieldError, ProtocolRenderError, ProtocolValidationError
from reporting.protocol_builder import build_protocol_pdf
from reporting.validation import validate_protocol


def _model(**overrides) -> ReportModel:
    fields = {
        "id": "INS-1001",
        "date": date(2026, 3, 14),
        "address": "Gåsverksgatan 7",
        "rooms": [RoomGroup(room_name="Kök")],
    }
    fields.update(overrides)
    return ReportModel(**fields)


def test_valid_model_passes():
    validate_protocol(_model())


def test_missing_model_is_rejected():
    with pytest.raises(MissingFieldError) as exc_info:
        validate_protocol(None)
    assert exc_info.value.field == "inspection"


@pytest.mark.parametrize("field", ["id", "date", "address"])
@pytest.mark.parametrize("blank", [None, "", "   "])
def test_blank_required_field_is_rejected(field, blank):
    with pytest.raises(MissingFieldError) as exc_info:
        validate_protocol(_model(**{field: blank}))
    assert exc_info.value.field == field
    assert field in str(exc_info.value)


def test_first_failing_field_is_reported():
    with pytest.raises(MissingFieldError) as exc_info:
        validate_protocol(_model(id="", date=None, address=""))
    assert exc_info.value.field == "id"

    with pytest.raises(MissingFieldError) as exc_info:
        validate_protocol(_model(date=None, address=""))
    assert exc_info.value.field == "date"


def test_validation_errors_belong_to_the_render_taxonomy():
    err = MissingFieldError("address")
    assert isinstance(err, ProtocolValidationError)
    assert isinstance(err, ProtocolRenderError)
    assert isinstance(err, ValueError)


@pytest.mark.parametrize("field", ["id", "date", "address"])
def test_render_fails_fast_without_drawing(field):
    sink = RecordingSink()
    measurer = FixedWidthMeasurer()
    with pytest.raises(MissingFieldError):
        build_protocol_pdf(_model(**{field: ""}), sink=sink, measurer=measurer)
    assert sink.ops == []
    assert sink.page_count() == 1
    assert sink.finalized is False
    assert measurer.calls == 0


def test_render_rejects_missing_payload():
    sink = RecordingSink()
    with pytest.raises(MissingFieldError):
        build_protocol_pdf(None, sink=sink, measurer=FixedWidthMeasurer())
    assert sink.ops == []


def test_payload_dict_is_validated_before_drawing():
    sink = RecordingSink()
    with pytest.raises(MissingFieldError) as exc_info:
        build_protocol_pdf({"id": "X1", "date": "2026-03-14"}, sink=sink, measurer=FixedWidthMeasurer())
    assert exc_info.value.field == "address"
    assert sink.ops == []


def test_malformed_payload_raises_validation_error():
    with pytest.raises(ProtocolValidationError):
        build_protocol_pdf(
            {"id": "X1", "date": "2026-03-14", "address": "A", "rooms": [{"room": "Kök", "remarks": [{"cost": "abc"}]}]},
            sink=RecordingSink(),
            measurer=FixedWidthMeasurer(),
        )
