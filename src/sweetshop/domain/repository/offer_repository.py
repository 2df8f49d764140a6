"""Abstract source of Offer records (read-only for the pricing engine)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from sweetshop.domain.model.offer import Offer


class OfferRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Offer]:
        """Return every offer, live or not.

        Raises OfferSourceError if the store cannot be read.
        """

    def list_active(self, now: datetime) -> list[Offer]:
        """Offers that are flagged active and inside their window at *now*."""
        return [o for o in self.list_all() if o.is_live_at(now)]
