"""Abstract source of Product records.

Defined in the domain layer so the domain never depends on
infrastructure.  Whether the catalog lives in Postgres, MySQL or a
JSON file is decided by the composition root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sweetshop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    def list_featured(self) -> list[Product]:
        return [p for p in self.list_all() if p.featured]
