"""Application service: Clear Cart use case.

Clearing the cart also drops any applied promo code.
"""

from __future__ import annotations

from sweetshop.application.dto import CheckoutSummaryDTO
from sweetshop.application.show_checkout import checkout_summary
from sweetshop.domain.model.checkout import CheckoutSession


class ClearCartHandler:

    def handle(self, session: CheckoutSession) -> CheckoutSummaryDTO:
        session.clear()
        return checkout_summary(session)
