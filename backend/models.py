import datetime as dt
from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Remark(BaseModel):
    """A single inspection remark registered against a room."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    building_component: str = Field(
        default="", validation_alias=AliasChoices("building_component", "buildingComponent")
    )
    description: str = Field(default="", validation_alias=AliasChoices("description", "notes"))
    status: str = Field(default="OK", validation_alias=AliasChoices("status", "remarkStatus", "remark_status"))
    cost: float = 0.0

    @field_validator("building_component", "description", mode="before")
    @classmethod
    def _text_or_blank(cls, value):
        if value is None:
            return ""
        return str(value)

    @field_validator("status", mode="before")
    @classmethod
    def _status_defaults_to_ok(cls, value):
        if value is None:
            return "OK"
        text = str(value).strip()
        return text or "OK"

    @field_validator("cost", mode="before")
    @classmethod
    def _cost_defaults_to_zero(cls, value):
        if value in (None, ""):
            return 0.0
        return value


class RoomGroup(BaseModel):
    """
    A room and the remarks registered in it.

    An empty remarks list means the room was inspected without remarks.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    room_name: str = Field(default="", validation_alias=AliasChoices("room_name", "roomName", "room"))
    remarks: List[Remark] = Field(default_factory=list)

    @field_validator("room_name", mode="before")
    @classmethod
    def _room_text(cls, value):
        if value is None:
            return ""
        return str(value)

    @field_validator("remarks", mode="before")
    @classmethod
    def _remarks_or_empty(cls, value):
        return value or []


class TenantPresentFlags(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    is_tenant_present: bool = Field(
        default=False, validation_alias=AliasChoices("is_tenant_present", "isTenantPresent")
    )
    is_new_tenant_present: bool = Field(
        default=False, validation_alias=AliasChoices("is_new_tenant_present", "isNewTenantPresent")
    )

    @property
    def anyone_present(self) -> bool:
        return self.is_tenant_present or self.is_new_tenant_present


class ReportModel(BaseModel):
    """
    Inspection protocol input: residence and lease metadata plus the rooms
    with their remarks, in display order.

    Required fields (id, date, address) may be blank here; the validation
    guard rejects such models before any layout starts.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    date: Optional[Union[dt.datetime, dt.date, str]] = None
    address: Optional[str] = None
    apartment_code: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("apartment_code", "apartmentCode")
    )
    residence_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("residence_id", "residenceId")
    )
    lease_start_date: Optional[Union[dt.datetime, dt.date, str]] = Field(
        default=None, validation_alias=AliasChoices("lease_start_date", "leaseStartDate")
    )
    area_size: Optional[Union[float, str]] = Field(
        default=None, validation_alias=AliasChoices("area_size", "areaSize")
    )
    residence_type: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("residence_type", "residenceType")
    )
    is_furnished: bool = Field(default=False, validation_alias=AliasChoices("is_furnished", "isFurnished"))
    tenant_present_flags: TenantPresentFlags = Field(
        default_factory=TenantPresentFlags,
        validation_alias=AliasChoices("tenant_present_flags", "tenantPresentFlags"),
    )
    rooms: List[RoomGroup] = Field(default_factory=list)

    @field_validator("id", "residence_id", "apartment_code", mode="before")
    @classmethod
    def _identifier_text(cls, value):
        if value is None:
            return None
        return str(value)

    @field_validator("date", "lease_start_date", mode="before")
    @classmethod
    def _blank_date_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("rooms", mode="before")
    @classmethod
    def _rooms_or_empty(cls, value):
        return value or []

    @property
    def remark_count(self) -> int:
        return sum(len(room.remarks) for room in self.rooms)


class RenderConfig(BaseModel):
    """Rendering options supplied by the caller."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    include_costs: bool = Field(default=True, validation_alias=AliasChoices("include_costs", "includeCosts"))
