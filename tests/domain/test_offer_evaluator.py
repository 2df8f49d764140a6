"""Unit tests for the OfferEvaluator domain service."""

from datetime import timedelta

import pytest

from sweetshop.domain.exceptions import (
    EmptyCodeError,
    InvalidOrExpiredCodeError,
    NotApplicableToCartError,
    PromoCodeError,
)
from sweetshop.domain.model.cart import Cart
from sweetshop.domain.model.offer import AppliedPromo
from sweetshop.domain.model.value_objects import DiscountPercentage, Money
from sweetshop.domain.service.offer_evaluator import OfferEvaluator
from tests.builders import NOW, make_line, make_offer


def _cart(*product_ids: str) -> Cart:
    cart = Cart()
    for pid in product_ids:
        cart.add_item(make_line(product_id=pid))
    return cart


# ── apply_promo_code ─────────────────────────────────────────────────────────


class TestApplyPromoCodeHappyPath:

    def test_all_products_offer_applies(self):
        promo = OfferEvaluator().apply_promo_code(
            "FESTIVAL15", [make_offer()], _cart("gulab-jamun"), NOW
        )
        assert promo == AppliedPromo("FESTIVAL15", DiscountPercentage(15))

    def test_targeted_offer_applies_when_one_product_matches(self):
        offer = make_offer(applies_to={"kaju-katli"})
        promo = OfferEvaluator().apply_promo_code(
            "FESTIVAL15", [offer], _cart("gulab-jamun", "kaju-katli"), NOW
        )
        assert promo.code == "FESTIVAL15"

    def test_lowercase_input_matches_uppercase_code(self):
        promo = OfferEvaluator().apply_promo_code(
            "  festival15 ", [make_offer()], _cart("gulab-jamun"), NOW
        )
        assert promo.code == "FESTIVAL15"

    def test_skips_expired_duplicate_and_finds_live_one(self):
        expired = make_offer(offer_id="1", discount=50, end=NOW - timedelta(days=1))
        live = make_offer(offer_id="2", discount=10)
        promo = OfferEvaluator().apply_promo_code(
            "FESTIVAL15", [expired, live], _cart("gulab-jamun"), NOW
        )
        assert promo.discount.value == 10

    def test_valid_on_start_and_end_instants(self):
        offer = make_offer(start=NOW, end=NOW)
        promo = OfferEvaluator().apply_promo_code("FESTIVAL15", [offer], _cart("x"), NOW)
        assert promo.code == "FESTIVAL15"


class TestApplyPromoCodeRejections:

    @pytest.mark.parametrize("code", ["", "   ", "\t\n"])
    def test_empty_code(self, code):
        with pytest.raises(EmptyCodeError, match="enter a promo code"):
            OfferEvaluator().apply_promo_code(code, [make_offer()], _cart("a"), NOW)

    def test_empty_code_checked_before_offers(self):
        with pytest.raises(EmptyCodeError):
            OfferEvaluator().apply_promo_code("", [], Cart(), NOW)

    def test_unknown_code(self):
        with pytest.raises(InvalidOrExpiredCodeError, match="invalid or expired"):
            OfferEvaluator().apply_promo_code("NOPE", [make_offer()], _cart("a"), NOW)

    def test_inactive_offer(self):
        with pytest.raises(InvalidOrExpiredCodeError):
            OfferEvaluator().apply_promo_code(
                "FESTIVAL15", [make_offer(is_active=False)], _cart("a"), NOW
            )

    def test_before_start_even_if_active(self):
        offer = make_offer(start=NOW + timedelta(hours=1))
        with pytest.raises(InvalidOrExpiredCodeError):
            OfferEvaluator().apply_promo_code("FESTIVAL15", [offer], _cart("a"), NOW)

    def test_ended_yesterday(self):
        offer = make_offer(
            start=NOW - timedelta(days=30), end=NOW - timedelta(days=1)
        )
        with pytest.raises(InvalidOrExpiredCodeError):
            OfferEvaluator().apply_promo_code("FESTIVAL15", [offer], _cart("a"), NOW)

    def test_disjoint_products(self):
        offer = make_offer(applies_to={"kaju-katli"})
        with pytest.raises(NotApplicableToCartError, match="doesn't apply"):
            OfferEvaluator().apply_promo_code(
                "FESTIVAL15", [offer], _cart("gulab-jamun"), NOW
            )

    def test_empty_cart_not_applicable_even_for_all_products(self):
        with pytest.raises(NotApplicableToCartError):
            OfferEvaluator().apply_promo_code("FESTIVAL15", [make_offer()], Cart(), NOW)

    def test_all_rejections_share_a_base_class(self):
        for exc in (EmptyCodeError, InvalidOrExpiredCodeError, NotApplicableToCartError):
            assert issubclass(exc, PromoCodeError)


# ── compute_discount_amount ──────────────────────────────────────────────────


class TestComputeDiscountAmount:

    def test_no_promo_is_zero(self):
        assert OfferEvaluator.compute_discount_amount(Money.of(560), None) == Money.zero()

    def test_percentage_of_subtotal(self):
        promo = AppliedPromo("FESTIVAL15", DiscountPercentage(15))
        assert OfferEvaluator.compute_discount_amount(Money.of(560), promo) == Money.of(84)

    def test_half_rounds_up(self):
        promo = AppliedPromo("X", DiscountPercentage(15))
        assert OfferEvaluator.compute_discount_amount(Money.of(150), promo) == Money.of(23)

    def test_full_discount_capped_at_subtotal(self):
        promo = AppliedPromo("FREE", DiscountPercentage(100))
        assert OfferEvaluator.compute_discount_amount(Money.of(560), promo) == Money.of(560)

    def test_zero_subtotal(self):
        promo = AppliedPromo("X", DiscountPercentage(15))
        assert OfferEvaluator.compute_discount_amount(Money.zero(), promo) == Money.zero()
