"""Semicolon separated export."""

from __future__ import annotations

from typing import Sequence

from ...models import VehicleRecord
from .base import EXPORT_FIELDS, BaseEncoder


def _quoted(value: str) -> str:
    # Wrapped verbatim: embedded quotes and semicolons are not escaped.
    return f'"{value}"'


class CsvEncoder(BaseEncoder):
    """Render one header line plus one line per vehicle."""

    format_name = "csv"
    filename = "vehicles-export.csv"
    media_type = "text/csv;charset=utf-8"
    delimiter = ";"

    def encode(self, view: Sequence[VehicleRecord]) -> bytes:
        rows = [self.delimiter.join(EXPORT_FIELDS)]
        rows.extend(self._format_row(record) for record in view)
        return "\n".join(rows).encode("utf-8")

    def _format_row(self, record: VehicleRecord) -> str:
        cells = [
            str(record.id),
            str(record.customer_id),
            _quoted(record.make),
            _quoted(record.model),
            record.initial_registration or "",
            _quoted(record.color or ""),
            _quoted(record.status.value),
            _quoted(", ".join(record.equipment_features or ())),
        ]
        return self.delimiter.join(cells)


__all__ = ["CsvEncoder"]
