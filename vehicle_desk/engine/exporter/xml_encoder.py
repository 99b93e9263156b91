"""XML export with one ``<vehicle>`` element per record."""

from __future__ import annotations

from typing import Sequence

from ...models import VehicleRecord
from .base import BaseEncoder

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


class XmlEncoder(BaseEncoder):
    """Build the document line by line.

    Text content is inserted as-is; ``&``, ``<`` and ``>`` in free-text fields
    are not escaped.
    """

    format_name = "xml"
    filename = "vehicles-export.xml"
    media_type = "application/xml"

    def encode(self, view: Sequence[VehicleRecord]) -> bytes:
        lines = [XML_DECLARATION, "<vehicles>"]
        for record in view:
            lines.extend(self._vehicle_lines(record))
        lines.append("</vehicles>")
        return "\n".join(lines).encode("utf-8")

    def _vehicle_lines(self, record: VehicleRecord) -> list[str]:
        scalars = (
            ("id", record.id),
            ("customerId", record.customer_id),
            ("make", record.make),
            ("model", record.model),
            ("initialRegistration", record.initial_registration or ""),
            ("color", record.color or ""),
            ("status", record.status.value),
        )
        lines = ["  <vehicle>"]
        lines.extend(f"    <{name}>{value}</{name}>" for name, value in scalars)
        lines.append("    <equipmentFeatures>")
        lines.extend(f"      <feature>{feature}</feature>" for feature in record.equipment_features or ())
        lines.append("    </equipmentFeatures>")
        lines.append("  </vehicle>")
        return lines


__all__ = ["XML_DECLARATION", "XmlEncoder"]
