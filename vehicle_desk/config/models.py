"""Pydantic models for Vehicle Desk configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class ApiConfig(BaseModel):
    """Connection settings for the vehicle REST service."""

    base_url: str = "http://localhost:8080/api"
    timeout: float = 10.0

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url cannot be empty")
        return value

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be > 0")
        return value


class ExportConfig(BaseModel):
    """Where exports are written and which format is used by default."""

    output_dir: Path = Field(default=Path("data/exports"))
    default_format: Literal["csv", "json", "xml"] = "csv"

    @field_validator("output_dir", mode="before")
    @classmethod
    def _coerce_path(cls, value: Any) -> Path:
        return Path(value)


class GlobalConfig(BaseModel):
    """Top-level settings shared by all commands."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    source: Literal["api", "file"] = "api"
    records_file: Path | None = None

    @field_validator("records_file", mode="before")
    @classmethod
    def _coerce_records_file(cls, value: Any) -> Path | None:
        if value in (None, ""):
            return None
        return Path(value)

    @model_validator(mode="after")
    def _validate_source(self) -> "GlobalConfig":
        if self.source == "file" and self.records_file is None:
            raise ValueError("records_file is required when source is 'file'")
        return self


__all__ = ["ApiConfig", "ExportConfig", "GlobalConfig"]
