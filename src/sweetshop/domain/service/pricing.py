"""Domain service: checkout total derivation."""

from __future__ import annotations

from sweetshop.domain.model.cart import Cart
from sweetshop.domain.model.checkout import CheckoutSession, CheckoutTotals
from sweetshop.domain.model.offer import AppliedPromo
from sweetshop.domain.model.value_objects import Money
from sweetshop.domain.service.offer_evaluator import OfferEvaluator

# Flat fee for any non-empty order; there is no free-delivery threshold.
DELIVERY_FEE = Money.of(50)


def delivery_fee_for(subtotal: Money) -> Money:
    return DELIVERY_FEE if subtotal > Money.zero() else Money.zero()


def compute_total(cart: Cart, applied_promo: AppliedPromo | None) -> CheckoutTotals:
    """subtotal + delivery fee - discount.

    The discount is capped at the subtotal, so the total is never
    negative and an empty cart always totals zero.
    """
    subtotal = cart.subtotal
    delivery_fee = delivery_fee_for(subtotal)
    discount = OfferEvaluator.compute_discount_amount(subtotal, applied_promo)
    return CheckoutTotals(
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        discount=discount,
        total=subtotal + delivery_fee - discount,
    )


def price_session(session: CheckoutSession) -> CheckoutTotals:
    return compute_total(session.cart, session.applied_promo)
