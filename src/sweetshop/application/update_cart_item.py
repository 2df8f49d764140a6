"""Application service: Update Cart Item use case."""

from __future__ import annotations

from sweetshop.application.dto import CheckoutSummaryDTO
from sweetshop.application.show_checkout import checkout_summary
from sweetshop.domain.model.checkout import CheckoutSession


class UpdateCartItemHandler:

    def handle(
        self,
        session: CheckoutSession,
        product_id: str,
        size: str,
        quantity: int,
    ) -> CheckoutSummaryDTO:
        """Set the quantity of a line; lines not in the cart are ignored."""
        session.cart.update_quantity(product_id, size, quantity)
        return checkout_summary(session)
