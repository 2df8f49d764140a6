"""Integration tests for the PlaceOrder use case."""

import pytest

from sweetshop.application.add_to_cart import AddToCartHandler
from sweetshop.application.apply_promo_code import ApplyPromoCodeHandler
from sweetshop.application.dto import CartItemSpec, CustomerDetailsSpec
from sweetshop.application.place_order import PlaceOrderHandler
from sweetshop.domain.exceptions import OrderSubmissionError, ValidationError
from sweetshop.domain.model.checkout import CheckoutSession
from sweetshop.domain.model.value_objects import Money
from tests.builders import NOW, make_offer, sweets_catalog
from tests.fakes import FakeOfferRepository, FakeOrderSubmitter, FakeProductRepository

DETAILS = CustomerDetailsSpec(
    name="Asha",
    phone="9876543210",
    address="12 MG Road, Pune",
    pincode="411001",
    payment_method="cod",
)


def _session(with_promo: bool = False) -> CheckoutSession:
    session = CheckoutSession()
    AddToCartHandler(FakeProductRepository(sweets_catalog())).handle(
        session, CartItemSpec("gulab-jamun", "500g", 2)
    )
    if with_promo:
        ApplyPromoCodeHandler(
            FakeOfferRepository([make_offer()]), clock=lambda: NOW
        ).handle(session, "FESTIVAL15")
    return session


class TestPlaceOrderHappyPath:

    def test_submits_priced_order(self):
        submitter = FakeOrderSubmitter()
        confirmation = PlaceOrderHandler(submitter).handle(_session(with_promo=True), DETAILS)

        assert confirmation.reference == "ORD-0001"
        assert confirmation.customer_name == "Asha"
        assert confirmation.summary.total == "₹526"

        customer, items, totals, promo_code = submitter.submitted[0]
        assert customer.payment_method.value == "cod"
        assert len(items) == 1
        assert totals.total == Money.of(526)
        assert promo_code == "FESTIVAL15"

    def test_session_cleared_after_success(self):
        session = _session(with_promo=True)
        PlaceOrderHandler(FakeOrderSubmitter()).handle(session, DETAILS)
        assert session.cart.is_empty
        assert session.applied_promo is None

    def test_without_promo(self):
        submitter = FakeOrderSubmitter()
        confirmation = PlaceOrderHandler(submitter).handle(_session(), DETAILS)
        assert confirmation.summary.total == "₹610"
        assert submitter.submitted[0][3] is None


class TestPlaceOrderValidation:

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="Cart is empty"):
            PlaceOrderHandler(FakeOrderSubmitter()).handle(CheckoutSession(), DETAILS)

    def test_invalid_details_rejected_before_submission(self):
        submitter = FakeOrderSubmitter()
        bad = CustomerDetailsSpec(name="Asha", phone="123", address="x", pincode="411001")
        session = _session()

        with pytest.raises(ValidationError, match="10 digits"):
            PlaceOrderHandler(submitter).handle(session, bad)

        assert submitter.submitted == []
        assert not session.cart.is_empty

    def test_submission_failure_keeps_session(self):
        submitter = FakeOrderSubmitter()
        submitter.fail = True
        session = _session(with_promo=True)

        with pytest.raises(OrderSubmissionError):
            PlaceOrderHandler(submitter).handle(session, DETAILS)

        assert session.cart.item_count == 2
        assert session.applied_promo.code == "FESTIVAL15"
