"""In-memory vehicle collection with multi-field filtering."""

from __future__ import annotations

import re
from typing import Iterable

import structlog

from ..models import FilterCriteria, FilteredView, VehicleRecord, status_label


_ID_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _blank(value: object) -> bool:
    return value is None or not str(value).strip()


def _id_matcher(criterion: int | str | None):
    if isinstance(criterion, int):
        return lambda record: record.id == criterion
    if _blank(criterion):
        return lambda record: True
    text = str(criterion).strip()
    if not _ID_PATTERN.fullmatch(text):
        # unparseable id filter matches nothing
        return lambda record: False
    wanted = int(text)
    return lambda record: record.id == wanted


def _substring_matcher(criterion: str | None, attribute: str):
    if not criterion:
        return lambda record: True
    needle = criterion.lower()
    return lambda record: needle in (getattr(record, attribute) or "").lower()


def _status_matcher(criterion):
    if criterion is None:
        return lambda record: True
    label = status_label(criterion)
    if not label.strip():
        return lambda record: True
    return lambda record: record.status.value == label


def filter_records(records: Iterable[VehicleRecord], criteria: FilterCriteria) -> FilteredView:
    """Return the records satisfying every active matcher, in source order."""

    matchers = (
        _id_matcher(criteria.id),
        _substring_matcher(criteria.make, "make"),
        _substring_matcher(criteria.model, "model"),
        _substring_matcher(criteria.color, "color"),
        _status_matcher(criteria.status),
    )
    return tuple(record for record in records if all(match(record) for match in matchers))


class FilterEngine:
    """Hold the authoritative vehicle collection and derive filtered views."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._records: FilteredView = ()
        self._view: FilteredView = ()
        self.logger = logger or structlog.get_logger("vehicle_desk.filter")

    @property
    def records(self) -> FilteredView:
        return self._records

    @property
    def view(self) -> FilteredView:
        return self._view

    def load(self, records: Iterable[VehicleRecord]) -> FilteredView:
        """Replace the collection; the active view resets to all records."""

        self._records = tuple(records)
        self._view = self._records
        self.logger.debug("vehicles_loaded", count=len(self._records))
        return self._view

    def filter(self, criteria: FilterCriteria) -> FilteredView:
        self._view = filter_records(self._records, criteria)
        self.logger.debug(
            "filter_applied",
            criteria=criteria.model_dump(exclude_none=True, mode="json"),
            total=len(self._records),
            matched=len(self._view),
        )
        return self._view

    def reset(self) -> FilteredView:
        return self.filter(FilterCriteria())


__all__ = ["FilterEngine", "filter_records"]
