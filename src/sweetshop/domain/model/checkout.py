"""Checkout session — the cart plus the promo applied to it.

One session belongs to one shopper.  Nothing here is shared or
persisted, so no locking is needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from sweetshop.domain.model.cart import Cart
from sweetshop.domain.model.offer import AppliedPromo
from sweetshop.domain.model.value_objects import Money


class PromoState(Enum):
    NO_PROMO = "NO_PROMO"
    PROMO_APPLIED = "PROMO_APPLIED"


@dataclass(frozen=True)
class CheckoutTotals:
    """Price breakdown handed to order submission."""

    subtotal: Money
    delivery_fee: Money
    discount: Money
    total: Money


@dataclass
class CheckoutSession:
    """Owns the cart and at most one applied promo."""

    cart: Cart = field(default_factory=Cart)
    applied_promo: AppliedPromo | None = None

    @property
    def state(self) -> PromoState:
        if self.applied_promo is None:
            return PromoState.NO_PROMO
        return PromoState.PROMO_APPLIED

    def apply_promo(self, promo: AppliedPromo) -> None:
        """Record *promo*, replacing any promo already applied."""
        self.applied_promo = promo

    def remove_promo(self) -> None:
        self.applied_promo = None

    def clear(self) -> None:
        """Empty the cart and drop the promo (after checkout or on request)."""
        self.cart.clear()
        self.applied_promo = None
