"""Application service: List Products use case (query)."""

from __future__ import annotations

from sweetshop.application.dto import ProductDTO
from sweetshop.domain.model.product import Product
from sweetshop.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, featured_only: bool = False) -> list[ProductDTO]:
        if featured_only:
            products = self._product_repo.list_featured()
        else:
            products = self._product_repo.list_all()
        return [self._to_dto(p) for p in products]

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            sizes=[(s.label, str(s.price)) for s in product.sizes],
            tags=list(product.tags),
            featured=product.featured,
        )
