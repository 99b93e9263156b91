"""Indented JSON export preserving the service field names."""

from __future__ import annotations

import json
from typing import Sequence

from ...models import VehicleRecord
from .base import BaseEncoder


class JsonEncoder(BaseEncoder):
    """Dump the records as a JSON array in the shape they were received."""

    format_name = "json"
    filename = "vehicles-export.json"
    media_type = "application/json"
    indent = 2

    def encode(self, view: Sequence[VehicleRecord]) -> bytes:
        payload = [record.to_wire() for record in view]
        return json.dumps(payload, indent=self.indent, ensure_ascii=False).encode("utf-8")


__all__ = ["JsonEncoder"]
