"""Application service: Apply Promo Code use case.

Fetches the offer collection, lets the Offer Evaluator decide, and
only then records the promo on the session.  Any failure (fetch error
or rejected code) leaves the cart and the current promo untouched.
"""

from __future__ import annotations

import logging

from sweetshop.application.clock import Clock, utc_now
from sweetshop.application.dto import CheckoutSummaryDTO
from sweetshop.application.show_checkout import checkout_summary
from sweetshop.domain.exceptions import OfferSourceError, PromoCodeError
from sweetshop.domain.model.checkout import CheckoutSession
from sweetshop.domain.repository.offer_repository import OfferRepository
from sweetshop.domain.service.offer_evaluator import OfferEvaluator

logger = logging.getLogger(__name__)


class ApplyPromoCodeHandler:

    def __init__(
        self,
        offer_repo: OfferRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._offer_repo = offer_repo
        self._clock = clock
        self._evaluator = OfferEvaluator()

    def handle(self, session: CheckoutSession, code: str) -> CheckoutSummaryDTO:
        try:
            offers = self._offer_repo.list_all()
        except OfferSourceError:
            logger.error("Could not fetch offers while applying %r", code, exc_info=True)
            raise

        try:
            promo = self._evaluator.apply_promo_code(
                code, offers, session.cart, self._clock()
            )
        except PromoCodeError as exc:
            logger.info("Promo code %r rejected: %s", code, exc)
            raise

        session.apply_promo(promo)
        logger.info("Promo code %s applied (%s off)", promo.code, promo.discount)
        return checkout_summary(session)
