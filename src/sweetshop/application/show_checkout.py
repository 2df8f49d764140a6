"""Application service: Show Checkout use case (query)."""

from __future__ import annotations

from sweetshop.application.dto import CartLineDTO, CheckoutSummaryDTO
from sweetshop.domain.model.checkout import CheckoutSession
from sweetshop.domain.service.pricing import price_session


class ShowCheckoutHandler:

    def handle(self, session: CheckoutSession) -> CheckoutSummaryDTO:
        return checkout_summary(session)


def checkout_summary(session: CheckoutSession) -> CheckoutSummaryDTO:
    """Map a session and its derived totals onto a display DTO."""
    totals = price_session(session)
    promo = session.applied_promo
    return CheckoutSummaryDTO(
        items=[
            CartLineDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                size=item.size,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in session.cart.items
        ],
        item_count=session.cart.item_count,
        subtotal=str(totals.subtotal),
        delivery_fee=str(totals.delivery_fee),
        discount=str(totals.discount),
        total=str(totals.total),
        promo_code=promo.code if promo else None,
        promo_discount=str(promo.discount) if promo else None,
    )
