"""Application service: Place Order use case.

Validates the checkout form, prices the session, and hands the order
to the submitter.  The session is cleared only after a successful
hand-off; on any failure the cart and promo are left as they were.
"""

from __future__ import annotations

import logging

from sweetshop.application.dto import CustomerDetailsSpec, OrderConfirmationDTO
from sweetshop.application.show_checkout import checkout_summary
from sweetshop.domain.exceptions import OrderSubmissionError, ValidationError
from sweetshop.domain.model.checkout import CheckoutSession
from sweetshop.domain.model.customer import CustomerDetails
from sweetshop.domain.repository.order_submitter import OrderSubmitter
from sweetshop.domain.service.pricing import price_session

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, submitter: OrderSubmitter) -> None:
        self._submitter = submitter

    def handle(
        self, session: CheckoutSession, details: CustomerDetailsSpec
    ) -> OrderConfirmationDTO:
        customer = CustomerDetails.create(
            name=details.name,
            phone=details.phone,
            address=details.address,
            pincode=details.pincode,
            payment_method=details.payment_method,
            email=details.email,
            instructions=details.instructions,
        )

        if session.cart.is_empty:
            raise ValidationError("Cart is empty")

        # Snapshot before clearing the session
        summary = checkout_summary(session)
        totals = price_session(session)
        promo_code = session.applied_promo.code if session.applied_promo else None

        try:
            reference = self._submitter.submit(
                customer, list(session.cart.items), totals, promo_code
            )
        except OrderSubmissionError:
            logger.error("Order submission failed for %s", customer.name, exc_info=True)
            raise

        session.clear()
        logger.info("Order %s placed for %s (total %s)", reference, customer.name, totals.total)
        return OrderConfirmationDTO(
            reference=reference,
            customer_name=customer.name,
            summary=summary,
        )
