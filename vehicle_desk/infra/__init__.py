"""Infra layer: retrieval and delivery collaborators."""

from .delivery import Delivery, FileDelivery
from .service import FileVehicleSource, VehicleService, VehicleSource

__all__ = ["Delivery", "FileDelivery", "FileVehicleSource", "VehicleService", "VehicleSource"]
