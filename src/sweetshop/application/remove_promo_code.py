"""Application service: Remove Promo Code use case (idempotent)."""

from __future__ import annotations

from sweetshop.application.dto import CheckoutSummaryDTO
from sweetshop.application.show_checkout import checkout_summary
from sweetshop.domain.model.checkout import CheckoutSession


class RemovePromoCodeHandler:

    def handle(self, session: CheckoutSession) -> CheckoutSummaryDTO:
        session.remove_promo()
        return checkout_summary(session)
