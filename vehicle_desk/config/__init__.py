"""Configuration package exports."""

from .loader import ConfigLocator, ConfigRepository
from .models import ApiConfig, ExportConfig, GlobalConfig

__all__ = [
    "ApiConfig",
    "ConfigLocator",
    "ConfigRepository",
    "ExportConfig",
    "GlobalConfig",
]
