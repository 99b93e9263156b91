"""Shared fixtures: sample vehicles, isolated project home, quiet logging."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterable

import pytest

from vehicle_desk.config import ConfigLocator, ConfigRepository
from vehicle_desk.logging_conf import configure_logging
from vehicle_desk.models import VehicleRecord, VehicleStatus


@pytest.fixture(scope="session", autouse=True)
def _session_logging(tmp_path_factory: pytest.TempPathFactory) -> Iterable[None]:
    home = tmp_path_factory.mktemp("desk-home")
    with pytest.MonkeyPatch.context() as patcher:
        patcher.setenv("VEHICLE_DESK_HOME", str(home))
        configure_logging()
        yield


@pytest.fixture
def desk_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("VEHICLE_DESK_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def temp_config_repository(desk_home: Path) -> ConfigRepository:
    return ConfigRepository(ConfigLocator(project_root=desk_home))


@pytest.fixture
def make_vehicle() -> Callable[..., VehicleRecord]:
    def _builder(**overrides: Any) -> VehicleRecord:
        base: dict[str, Any] = {
            "id": 1,
            "customerId": 10,
            "make": "VW",
            "model": "Golf",
            "status": VehicleStatus.AVAILABLE,
        }
        base.update(overrides)
        return VehicleRecord.model_validate(base)

    return _builder


@pytest.fixture
def scenario_vehicles() -> list[VehicleRecord]:
    return [
        VehicleRecord.model_validate(
            {
                "id": 1,
                "customerId": 10,
                "make": "VW",
                "model": "Golf",
                "initialRegistration": "2019-03-01",
                "color": "Blau",
                "status": "Verfügbar",
                "equipmentFeatures": ["ABS", "Klima"],
            }
        ),
        VehicleRecord.model_validate(
            {
                "id": 2,
                "customerId": 20,
                "make": "BMW",
                "model": "X5",
                "status": "Verkauft",
                "equipmentFeatures": [],
            }
        ),
    ]


@pytest.fixture
def fleet(make_vehicle) -> list[VehicleRecord]:
    return [
        make_vehicle(id=1, customerId=10, make="VW", model="Golf", color="Blau"),
        make_vehicle(id=2, customerId=20, make="BMW", model="X5", status="Verkauft"),
        make_vehicle(id=3, customerId=10, make="bmw", model="320d", color="Schwarz", status="Reserviert"),
        make_vehicle(id=4, customerId=30, make="Opel", model="Astra", color="blau metallic"),
    ]


@pytest.fixture
def vehicles_file(tmp_path: Path, fleet: list[VehicleRecord]) -> Path:
    path = tmp_path / "vehicles.json"
    path.write_text(
        json.dumps([vehicle.to_wire() for vehicle in fleet], ensure_ascii=False),
        encoding="utf-8",
    )
    return path
