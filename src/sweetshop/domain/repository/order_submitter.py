"""Abstract hand-off point for priced orders."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sweetshop.domain.model.cart import CartLineItem
from sweetshop.domain.model.checkout import CheckoutTotals
from sweetshop.domain.model.customer import CustomerDetails


class OrderSubmitter(ABC):

    @abstractmethod
    def submit(
        self,
        customer: CustomerDetails,
        items: list[CartLineItem],
        totals: CheckoutTotals,
        promo_code: str | None,
    ) -> str:
        """Hand the order over and return its reference.

        Raises OrderSubmissionError if the hand-off fails.
        """
