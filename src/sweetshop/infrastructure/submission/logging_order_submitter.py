"""OrderSubmitter that only records the order in the log.

There is no payment or order store behind the shop; the hand-off is
simulated and the generated reference is what the shopper sees.
"""

from __future__ import annotations

import logging
import uuid

from sweetshop.domain.model.cart import CartLineItem
from sweetshop.domain.model.checkout import CheckoutTotals
from sweetshop.domain.model.customer import CustomerDetails
from sweetshop.domain.repository.order_submitter import OrderSubmitter

logger = logging.getLogger(__name__)


class LoggingOrderSubmitter(OrderSubmitter):

    def submit(
        self,
        customer: CustomerDetails,
        items: list[CartLineItem],
        totals: CheckoutTotals,
        promo_code: str | None,
    ) -> str:
        reference = f"ORD-{uuid.uuid4().hex[:8].upper()}"
        logger.info(
            "Order %s: %s, %d line(s), subtotal %s, delivery %s, discount %s%s, total %s, pay by %s",
            reference,
            customer.name,
            len(items),
            totals.subtotal,
            totals.delivery_fee,
            totals.discount,
            f" ({promo_code})" if promo_code else "",
            totals.total,
            customer.payment_method.value,
        )
        return reference
