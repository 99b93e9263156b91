"""Pydantic models describing vehicle records and filter criteria."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class VehicleStatus(str, Enum):
    """Sales status; values are the localized labels shown to users."""

    AVAILABLE = "Verfügbar"
    RESERVED = "Reserviert"
    SOLD = "Verkauft"


class VehicleRecord(BaseModel):
    """A vehicle as delivered by the vehicle service.

    Field declaration order is the export order. Unknown keys from the
    service payload are kept as extras so the JSON export reproduces them.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: int
    customer_id: int = Field(alias="customerId")
    make: str
    model: str
    initial_registration: str | None = Field(default=None, alias="initialRegistration")
    color: str | None = None
    status: VehicleStatus
    equipment_features: list[str] | None = Field(
        default_factory=list,
        validation_alias=AliasChoices("equipmentFeatures", "ausstattung", "equipment_features"),
        serialization_alias="equipmentFeatures",
    )

    @field_validator("initial_registration", mode="before")
    @classmethod
    def _coerce_registration(cls, value: Any) -> Any:
        # YAML loads unquoted dates as date objects
        if isinstance(value, date):
            return value.isoformat()
        return value

    def to_wire(self) -> dict[str, Any]:
        """Return the record keyed by its service field names.

        Only keys present in the source payload are emitted, so a missing
        field stays missing while an explicit null or empty list is kept.
        """

        return self.model_dump(by_alias=True, mode="json", exclude_unset=True)


class FilterCriteria(BaseModel):
    """Optional per-field matchers; an unset matcher matches every record."""

    model_config = ConfigDict(frozen=True)

    id: int | str | None = None
    make: str | None = None
    model: str | None = None
    color: str | None = None
    status: VehicleStatus | str | None = None

    def is_empty(self) -> bool:
        if self.id is not None and str(self.id).strip():
            return False
        if self.status is not None and status_label(self.status).strip():
            return False
        return not (self.make or self.model or self.color)


def status_label(value: VehicleStatus | str) -> str:
    if isinstance(value, VehicleStatus):
        return value.value
    return value


FilteredView = tuple[VehicleRecord, ...]


__all__ = ["FilterCriteria", "FilteredView", "VehicleRecord", "VehicleStatus", "status_label"]
