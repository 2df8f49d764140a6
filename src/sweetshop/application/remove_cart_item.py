"""Application service: Remove Cart Item use case."""

from __future__ import annotations

from sweetshop.application.dto import CheckoutSummaryDTO
from sweetshop.application.show_checkout import checkout_summary
from sweetshop.domain.model.checkout import CheckoutSession


class RemoveCartItemHandler:

    def handle(self, session: CheckoutSession, product_id: str, size: str) -> CheckoutSummaryDTO:
        session.cart.remove_item(product_id, size)
        return checkout_summary(session)
