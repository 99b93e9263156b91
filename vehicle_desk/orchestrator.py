"""Vehicle list controller wiring retrieval, filtering, encoding and delivery."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .engine import FilterEngine, get_encoder
from .infra import Delivery, VehicleService, VehicleSource
from .logging_conf import configure_logging
from .models import FilterCriteria, FilteredView


@dataclass(slots=True)
class OperationResult:
    """Outcome of a collaborator call, phrased for the user."""

    ok: bool
    message: str


@dataclass(slots=True)
class ExportResult:
    format_name: str
    filename: str
    media_type: str
    count: int
    location: Path | None


class VehicleListOrchestrator:
    """Keep the vehicle list state and run its user actions."""

    def __init__(
        self,
        source: VehicleSource,
        delivery: Delivery,
        service: VehicleService | None = None,
        engine: FilterEngine | None = None,
    ) -> None:
        self.source = source
        self.delivery = delivery
        self.service = service
        self.logger = configure_logging().bind(component="vehicle_list")
        self.engine = engine or FilterEngine(logger=self.logger)
        self.criteria = FilterCriteria()

    @property
    def view(self) -> FilteredView:
        return self.engine.view

    # ------------------------------------------------------------------
    def load_vehicles(self) -> FilteredView:
        """Fetch the full collection; the view shows every vehicle afterwards."""

        records = self.source.fetch_all()
        view = self.engine.load(records)
        self.logger.info("vehicles_loaded", count=len(view))
        return view

    def apply_filter(self, criteria: FilterCriteria) -> FilteredView:
        self.criteria = criteria
        return self.engine.filter(criteria)

    def reset_filter(self) -> FilteredView:
        self.criteria = FilterCriteria()
        return self.engine.reset()

    def export(self, format_name: str) -> ExportResult:
        """Encode the current view and hand it to the delivery collaborator."""

        encoder = get_encoder(format_name)
        view = self.engine.view
        payload = encoder.encode(view)
        location = self.delivery.deliver(payload, encoder.filename, encoder.media_type)
        self.logger.info(
            "vehicles_exported", format=encoder.format_name, count=len(view), size=len(payload)
        )
        return ExportResult(
            format_name=encoder.format_name,
            filename=encoder.filename,
            media_type=encoder.media_type,
            count=len(view),
            location=location,
        )

    def close(self) -> None:
        if self.service is not None:
            self.service.close()

    def delete_vehicle(self, vehicle_id: int) -> OperationResult:
        """Delete through the service, then reload the collection on success."""

        if self.service is None:
            self.logger.warning("vehicle_delete_unsupported", vehicle_id=vehicle_id)
            return OperationResult(False, "Löschen ist nur mit dem Fahrzeug-Service möglich")
        if not self.service.delete(vehicle_id):
            self.logger.error("vehicle_delete_failed", vehicle_id=vehicle_id)
            return OperationResult(False, "Fehler beim Löschen")
        self.logger.info("vehicle_deleted", vehicle_id=vehicle_id)
        self.load_vehicles()
        return OperationResult(True, "Fahrzeug gelöscht")


__all__ = ["ExportResult", "OperationResult", "VehicleListOrchestrator"]
