"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from sweetshop.domain.exceptions import ProductSourceError, ValidationError
from sweetshop.domain.model.product import Product, SizeVariant
from sweetshop.domain.model.value_objects import Money
from sweetshop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        if not self._file_path.exists():
            logger.warning("Product file %s not found; catalog is empty", self._file_path)
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            products = [self._from_record(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError, ValidationError) as exc:
            raise ProductSourceError(
                f"Could not read products from {self._file_path}: {exc}"
            ) from exc
        return {p.id: p for p in products}

    @staticmethod
    def _from_record(item: dict[str, Any]) -> Product:
        return Product.create(
            id=str(item["id"]),
            name=item["name"],
            sizes=[
                SizeVariant(label=s["size"], price=Money.of(s["price"]))
                for s in item["sizes"]
            ],
            description=item.get("description", ""),
            image=item.get("image", ""),
            tags=list(item.get("tags", [])),
            featured=bool(item.get("featured", False)),
        )
