"""Delivery collaborators handing export payloads to the user."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import structlog


class Delivery(Protocol):
    def deliver(self, payload: bytes, filename: str, media_type: str) -> Path | None:
        ...


class FileDelivery:
    """Save payloads into a directory, replacing earlier exports of the same name."""

    def __init__(self, output_dir: Path, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self.output_dir = output_dir
        self.logger = logger or structlog.get_logger("vehicle_desk.delivery")

    def deliver(self, payload: bytes, filename: str, media_type: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / Path(filename).name
        path.write_bytes(payload)
        self.logger.info(
            "export_delivered", path=str(path), media_type=media_type, size=len(payload)
        )
        return path


__all__ = ["Delivery", "FileDelivery"]
