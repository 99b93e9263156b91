"""Export encoders and the format registry."""

from __future__ import annotations

from ...exceptions import UnknownFormatError
from .base import EXPORT_FIELDS, BaseEncoder
from .csv_encoder import CsvEncoder
from .json_encoder import JsonEncoder
from .xml_encoder import XmlEncoder

ENCODERS: dict[str, BaseEncoder] = {
    encoder.format_name: encoder for encoder in (CsvEncoder(), JsonEncoder(), XmlEncoder())
}


def available_formats() -> list[str]:
    return list(ENCODERS)


def get_encoder(name: str) -> BaseEncoder:
    """Return the encoder registered for ``name`` (case-insensitive)."""

    try:
        return ENCODERS[name.strip().lower()]
    except KeyError:
        raise UnknownFormatError(name, available_formats()) from None


__all__ = [
    "BaseEncoder",
    "CsvEncoder",
    "ENCODERS",
    "EXPORT_FIELDS",
    "JsonEncoder",
    "XmlEncoder",
    "available_formats",
    "get_encoder",
]
