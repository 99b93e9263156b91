from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from vehicle_desk.models import FilterCriteria, VehicleRecord, VehicleStatus


def test_record_accepts_service_payload() -> None:
    record = VehicleRecord.model_validate(
        {
            "id": 7,
            "customerId": 3,
            "make": "Audi",
            "model": "A4",
            "initialRegistration": "2020-05-01",
            "status": "Reserviert",
            "equipmentFeatures": ["Navi"],
        }
    )
    assert record.customer_id == 3
    assert record.status is VehicleStatus.RESERVED
    assert record.color is None
    assert record.equipment_features == ["Navi"]


def test_record_accepts_legacy_feature_key() -> None:
    record = VehicleRecord.model_validate(
        {"id": 1, "customerId": 1, "make": "VW", "model": "Polo", "status": "Verfügbar", "ausstattung": ["ABS"]}
    )
    assert record.equipment_features == ["ABS"]
    assert record.to_wire()["equipmentFeatures"] == ["ABS"]
    assert "ausstattung" not in record.to_wire()


def test_record_defaults_and_coercions() -> None:
    record = VehicleRecord.model_validate(
        {
            "id": 1,
            "customerId": 1,
            "make": "VW",
            "model": "Polo",
            "status": "Verkauft",
            "initialRegistration": date(2018, 1, 2),
            "equipmentFeatures": None,
        }
    )
    assert record.initial_registration == "2018-01-02"
    assert record.equipment_features is None
    assert record.to_wire()["equipmentFeatures"] is None


def test_record_rejects_unknown_status() -> None:
    with pytest.raises(ValidationError):
        VehicleRecord.model_validate({"id": 1, "customerId": 1, "make": "VW", "model": "Polo", "status": "Sold"})


def test_record_is_frozen(make_vehicle) -> None:
    vehicle = make_vehicle()
    with pytest.raises(ValidationError):
        vehicle.make = "Seat"


def test_criteria_is_empty() -> None:
    assert FilterCriteria().is_empty()
    assert not FilterCriteria(id="x").is_empty()
    assert not FilterCriteria(make="v").is_empty()
    assert not FilterCriteria(status=VehicleStatus.SOLD).is_empty()
