"""JSON-file-backed implementation of OfferRepository.

Dates are stored as ISO-8601 strings; values without an offset are
read as UTC so they compare cleanly with an aware ``now``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from sweetshop.domain.exceptions import OfferSourceError, ValidationError
from sweetshop.domain.model.offer import (
    DEFAULT_BANNER_COLOR,
    DEFAULT_TEXT_COLOR,
    Offer,
    as_utc,
)
from sweetshop.domain.model.value_objects import DiscountPercentage
from sweetshop.domain.repository.offer_repository import OfferRepository

logger = logging.getLogger(__name__)


class JsonOfferRepository(OfferRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- OfferRepository interface --------------------------------------------

    def list_all(self) -> list[Offer]:
        if not self._file_path.exists():
            logger.warning("Offer file %s not found; no offers available", self._file_path)
            return []
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return [self._from_record(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError, ValidationError) as exc:
            raise OfferSourceError(
                f"Could not read offers from {self._file_path}: {exc}"
            ) from exc

    # --- Serialization helpers ------------------------------------------------

    @classmethod
    def _from_record(cls, item: dict[str, Any]) -> Offer:
        return Offer(
            id=str(item["id"]),
            title=item["title"],
            description=item.get("description", ""),
            discount=DiscountPercentage(int(item["discount"])),
            code=item["code"],
            start_date=cls._parse_date(item["start_date"]),
            end_date=cls._parse_date(item["end_date"]),
            is_active=bool(item.get("is_active", True)),
            applies_to=frozenset(str(pid) for pid in item.get("applies_to", [])),
            banner_color=item.get("banner_color") or DEFAULT_BANNER_COLOR,
            text_color=item.get("text_color") or DEFAULT_TEXT_COLOR,
        )

    @staticmethod
    def _parse_date(value: str) -> datetime:
        return as_utc(datetime.fromisoformat(value))
