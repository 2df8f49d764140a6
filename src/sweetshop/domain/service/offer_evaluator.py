"""Domain service: Offer Evaluator.

Decides whether a submitted promo code can be applied to a cart and
how much it takes off.  Pure computation over offers that were already
fetched — no I/O, no retries, no session mutation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from sweetshop.domain.exceptions import (
    EmptyCodeError,
    InvalidOrExpiredCodeError,
    NotApplicableToCartError,
)
from sweetshop.domain.model.cart import Cart
from sweetshop.domain.model.offer import AppliedPromo, Offer, normalize_code
from sweetshop.domain.model.value_objects import Money


class OfferEvaluator:

    def apply_promo_code(
        self,
        code: str,
        offers: Iterable[Offer],
        cart: Cart,
        now: datetime,
    ) -> AppliedPromo:
        """Validate *code* against *offers* and *cart*.

        Checks run in a fixed order so the shopper gets the most useful
        message:
          1. blank code                     -> EmptyCodeError
          2. no live offer with that code   -> InvalidOrExpiredCodeError
          3. no qualifying product in cart  -> NotApplicableToCartError

        Codes are compared trimmed and uppercased on both sides.
        """
        if not code or not code.strip():
            raise EmptyCodeError("Please enter a promo code")

        offer = self.find_live_offer(code, offers, now)
        if offer is None:
            raise InvalidOrExpiredCodeError(
                f"Promo code '{normalize_code(code)}' is invalid or expired"
            )

        if not offer.applies_to_any(cart.product_ids):
            raise NotApplicableToCartError(
                f"Promo code '{offer.code}' doesn't apply to items in your cart"
            )

        return AppliedPromo.from_offer(offer)

    @staticmethod
    def find_live_offer(
        code: str, offers: Iterable[Offer], now: datetime
    ) -> Offer | None:
        """First offer whose code matches and which is live at *now*."""
        for offer in offers:
            if offer.matches_code(code) and offer.is_live_at(now):
                return offer
        return None

    @staticmethod
    def compute_discount_amount(
        subtotal: Money, applied_promo: AppliedPromo | None
    ) -> Money:
        """Percentage of *subtotal*, rounded half-up, never above *subtotal*."""
        if applied_promo is None:
            return Money.zero()
        discount = subtotal.percentage(applied_promo.discount.value)
        return min(discount, subtotal)
