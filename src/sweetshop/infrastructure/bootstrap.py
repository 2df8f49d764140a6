"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from sweetshop.infrastructure.config import Settings
from sweetshop.infrastructure.persistence.json_offer_repository import (
    JsonOfferRepository,
)
from sweetshop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from sweetshop.infrastructure.submission.logging_order_submitter import (
    LoggingOrderSubmitter,
)


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or Settings.from_env()
    return JsonProductRepository(settings.products_file)


def offer_repository(settings: Settings | None = None) -> JsonOfferRepository:
    settings = settings or Settings.from_env()
    return JsonOfferRepository(settings.offers_file)


def order_submitter() -> LoggingOrderSubmitter:
    return LoggingOrderSubmitter()
