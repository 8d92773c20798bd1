from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import anyio
from pydantic import TypeAdapter, ValidationError

from app.models.schemas import HotelRecord

logger = logging.getLogger(__name__)

HOTELS_FILE_NAME = "Hotels.json"

_hotel_list = TypeAdapter(List[HotelRecord])


class HotelDataError(Exception):
    """Raised when the hotel data file exists but cannot be parsed."""


class JsonHotelRepository:
    """Reads every hotel from ``<base_path>/Hotels.json`` on each call."""

    def __init__(self, base_path: Optional[str], file_name: str = HOTELS_FILE_NAME) -> None:
        if base_path is None or not str(base_path).strip():
            raise ValueError("Hotel data path is not configured properly.")
        self.path = Path(base_path) / file_name

    async def load(self) -> List[HotelRecord]:
        content = await anyio.Path(self.path).read_text(
            encoding="utf-8-sig", errors="replace"
        )
        if not content.strip():
            logger.debug("Hotel data file %s is empty", self.path)
            return []
        try:
            hotels = _hotel_list.validate_json(content)
        except ValidationError as exc:
            raise HotelDataError(f"Invalid hotel data in {self.path}: {exc}") from exc
        logger.debug("Loaded %d hotels from %s", len(hotels), self.path)
        return hotels
