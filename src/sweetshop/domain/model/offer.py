"""Offer aggregate — a promo code with a discount and a validity window."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from sweetshop.domain.exceptions import ValidationError
from sweetshop.domain.model.value_objects import DiscountPercentage

DEFAULT_BANNER_COLOR = "#f97316"
DEFAULT_TEXT_COLOR = "#ffffff"


def normalize_code(code: str) -> str:
    """Canonical form used when comparing promo codes."""
    return code.strip().upper()


def as_utc(value: datetime) -> datetime:
    """Read a datetime without an offset as UTC; leave aware values alone."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass
class Offer:
    """Aggregate root for promotional offers.

    ``applies_to`` holds product ids; an empty set means every product
    qualifies.  Colours are presentation-only and never affect pricing.

    Use ``Offer.create()`` for offers entered through the admin form.
    Stored offers are reconstituted through ``__init__`` as-is, so an
    inverted date window can exist; it simply never goes live.
    """

    id: str
    title: str
    description: str
    discount: DiscountPercentage
    code: str
    start_date: datetime
    end_date: datetime
    is_active: bool = True
    applies_to: frozenset[str] = field(default_factory=frozenset)
    banner_color: str = DEFAULT_BANNER_COLOR
    text_color: str = DEFAULT_TEXT_COLOR

    @staticmethod
    def create(
        id: str,
        title: str,
        description: str,
        discount: int,
        code: str,
        start_date: datetime,
        end_date: datetime,
        is_active: bool = True,
        applies_to: set[str] | frozenset[str] | None = None,
        banner_color: str = DEFAULT_BANNER_COLOR,
        text_color: str = DEFAULT_TEXT_COLOR,
    ) -> Offer:
        if not title.strip() or not description.strip() or not code.strip():
            raise ValidationError("Title, description, and code are required")
        start_date = as_utc(start_date)
        end_date = as_utc(end_date)
        if end_date < start_date:
            raise ValidationError(
                f"Offer end date {end_date:%Y-%m-%d} is before start date "
                f"{start_date:%Y-%m-%d}"
            )

        return Offer(
            id=id,
            title=title.strip(),
            description=description.strip(),
            discount=DiscountPercentage(discount),
            code=normalize_code(code),
            start_date=start_date,
            end_date=end_date,
            is_active=is_active,
            applies_to=frozenset(applies_to or ()),
            banner_color=banner_color,
            text_color=text_color,
        )

    # --- Queries --------------------------------------------------------------

    def matches_code(self, code: str) -> bool:
        return normalize_code(self.code) == normalize_code(code)

    def is_live_at(self, now: datetime) -> bool:
        """Active flag set and *now* inside ``[start_date, end_date]``."""
        if not self.is_active:
            return False
        return as_utc(self.start_date) <= as_utc(now) <= as_utc(self.end_date)

    @property
    def applies_to_all(self) -> bool:
        return not self.applies_to

    def applies_to_any(self, product_ids: set[str]) -> bool:
        """True when at least one of *product_ids* qualifies.

        An empty *product_ids* never qualifies, even for all-product offers.
        """
        if not product_ids:
            return False
        return self.applies_to_all or not self.applies_to.isdisjoint(product_ids)


@dataclass(frozen=True)
class AppliedPromo:
    """The single promo accepted for the current checkout."""

    code: str
    discount: DiscountPercentage

    @staticmethod
    def from_offer(offer: Offer) -> AppliedPromo:
        return AppliedPromo(code=offer.code, discount=offer.discount)
