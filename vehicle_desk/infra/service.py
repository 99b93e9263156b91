"""Retrieval collaborators: the vehicle REST service and local record files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Protocol

import httpx
import structlog
import yaml
from pydantic import ValidationError

from ..exceptions import VehicleServiceError
from ..models import VehicleRecord


class VehicleSource(Protocol):
    """Anything able to return the full vehicle collection."""

    def fetch_all(self) -> list[VehicleRecord]:
        ...


def _parse_records(payload: Any, origin: str) -> list[VehicleRecord]:
    if isinstance(payload, dict) and "vehicles" in payload:
        payload = payload["vehicles"]
    if not isinstance(payload, list):
        raise VehicleServiceError(f"Expected a list of vehicles from {origin}")
    try:
        return [VehicleRecord.model_validate(item) for item in payload]
    except ValidationError as exc:
        raise VehicleServiceError(f"Malformed vehicle record from {origin}: {exc}") from exc


class VehicleService:
    """Synchronous client for the ``/vehicles`` REST resource."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)
        self.logger = logger or structlog.get_logger("vehicle_desk.service")

    def __enter__(self) -> "VehicleService":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _url(self, vehicle_id: int | None = None) -> str:
        if vehicle_id is None:
            return f"{self.base_url}/vehicles"
        return f"{self.base_url}/vehicles/{vehicle_id}"

    def fetch_all(self) -> list[VehicleRecord]:
        url = self._url()
        try:
            response = self._client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            self.logger.error("vehicles_fetch_failed", url=url, status=exc.response.status_code)
            raise VehicleServiceError(
                f"Vehicle service answered {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            self.logger.error("vehicles_fetch_failed", url=url, error=str(exc))
            raise VehicleServiceError(f"Vehicle service unreachable: {exc}") from exc
        except ValueError as exc:
            self.logger.error("vehicles_fetch_failed", url=url, error="invalid json")
            raise VehicleServiceError("Vehicle service returned invalid JSON") from exc
        records = _parse_records(payload, url)
        self.logger.info("vehicles_fetched", url=url, count=len(records))
        return records

    def delete(self, vehicle_id: int) -> bool:
        return self._send("DELETE", vehicle_id)

    def update(self, record: VehicleRecord) -> bool:
        return self._send("PUT", record.id, payload=record.to_wire())

    def _send(self, method: str, vehicle_id: int, payload: dict | None = None) -> bool:
        url = self._url(vehicle_id)
        try:
            response = self._client.request(method, url, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            self.logger.error(
                "vehicle_request_failed", method=method, url=url, vehicle_id=vehicle_id, error=str(exc)
            )
            return False
        self.logger.info("vehicle_request_succeeded", method=method, vehicle_id=vehicle_id)
        return True


class FileVehicleSource:
    """Read the vehicle collection from a JSON or YAML file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def fetch_all(self) -> list[VehicleRecord]:
        if not self.path.exists():
            raise VehicleServiceError(f"Vehicle file not found: {self.path}")
        text = self.path.read_text(encoding="utf-8")
        try:
            if self.path.suffix in (".yaml", ".yml"):
                payload = yaml.safe_load(text)
            else:
                payload = json.loads(text)
        except (yaml.YAMLError, ValueError) as exc:
            raise VehicleServiceError(f"Cannot parse vehicle file {self.path}: {exc}") from exc
        return _parse_records(payload, str(self.path))


__all__ = ["FileVehicleSource", "VehicleService", "VehicleSource"]
