"""Application service: Add To Cart use case.

Resolves the catalog selection against the product source and
snapshots name, image and unit price into a new cart line.
"""

from __future__ import annotations

import logging

from sweetshop.application.dto import CartItemSpec, CheckoutSummaryDTO
from sweetshop.application.show_checkout import checkout_summary
from sweetshop.domain.exceptions import EntityNotFoundError
from sweetshop.domain.model.cart import CartLineItem
from sweetshop.domain.model.checkout import CheckoutSession
from sweetshop.domain.model.value_objects import Quantity
from sweetshop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, session: CheckoutSession, spec: CartItemSpec) -> CheckoutSummaryDTO:
        # Validate quantity before touching the product source
        quantity = Quantity(spec.quantity)

        product = self._product_repo.get_by_id(spec.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{spec.product_id}'")

        session.cart.add_item(
            CartLineItem(
                product_id=product.id,
                size=spec.size,
                quantity=quantity,
                unit_price=product.price_for(spec.size),  # <-- price snapshot
                product_name=product.name,
                image=product.image,
            )
        )
        logger.debug(
            "Added %s x %s (%s); cart now holds %d units",
            quantity, product.name, spec.size, session.cart.item_count,
        )
        return checkout_summary(session)
