"""Engine components: filter the collection, encode the view."""

from .exporter import BaseEncoder, CsvEncoder, JsonEncoder, XmlEncoder, get_encoder
from .filtering import FilterEngine, filter_records

__all__ = [
    "BaseEncoder",
    "CsvEncoder",
    "FilterEngine",
    "JsonEncoder",
    "XmlEncoder",
    "filter_records",
    "get_encoder",
]
