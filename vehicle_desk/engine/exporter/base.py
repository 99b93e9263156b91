"""Encoder Service Provider Interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Sequence

from ...models import VehicleRecord

EXPORT_FIELDS = (
    "id",
    "customerId",
    "make",
    "model",
    "initialRegistration",
    "color",
    "status",
    "equipmentFeatures",
)


class BaseEncoder(ABC):
    """Uniform encoder contract: a view in, a byte payload out."""

    format_name: ClassVar[str]
    filename: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def encode(self, view: Sequence[VehicleRecord]) -> bytes:
        """Serialize the records in order."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(format={self.format_name!r})"


__all__ = ["BaseEncoder", "EXPORT_FIELDS"]
