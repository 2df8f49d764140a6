"""Application service: List Offers use case (query).

Feeds the offers banner; ``active_only`` keeps the offers a shopper
could redeem right now.
"""

from __future__ import annotations

from sweetshop.application.clock import Clock, utc_now
from sweetshop.application.dto import OfferDTO
from sweetshop.domain.model.offer import Offer
from sweetshop.domain.repository.offer_repository import OfferRepository


class ListOffersHandler:

    def __init__(
        self,
        offer_repo: OfferRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._offer_repo = offer_repo
        self._clock = clock

    def handle(self, active_only: bool = False) -> list[OfferDTO]:
        if active_only:
            offers = self._offer_repo.list_active(self._clock())
        else:
            offers = self._offer_repo.list_all()
        return [self._to_dto(o) for o in offers]

    @staticmethod
    def _to_dto(offer: Offer) -> OfferDTO:
        return OfferDTO(
            id=offer.id,
            title=offer.title,
            description=offer.description,
            code=offer.code,
            discount=str(offer.discount),
            start_date=offer.start_date.strftime("%Y-%m-%d"),
            end_date=offer.end_date.strftime("%Y-%m-%d"),
            is_active=offer.is_active,
            applies_to=sorted(offer.applies_to),
        )
