"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: a catalog selection (product id + size + quantity)."""

    product_id: str
    size: str
    quantity: int


@dataclass(frozen=True)
class CustomerDetailsSpec:
    """Input: the checkout form as typed by the shopper."""

    name: str
    phone: str
    address: str
    pincode: str
    payment_method: str = "card"
    email: str = ""
    instructions: str = ""


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    product_name: str
    size: str
    quantity: int
    unit_price: str  # formatted, e.g. "₹280"
    line_total: str


@dataclass(frozen=True)
class CheckoutSummaryDTO:
    """Output: the cart with its price breakdown."""

    items: list[CartLineDTO]
    item_count: int
    subtotal: str
    delivery_fee: str
    discount: str
    total: str
    promo_code: str | None
    promo_discount: str | None  # e.g. "15%"


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    sizes: list[tuple[str, str]]  # (label, formatted price)
    tags: list[str]
    featured: bool


@dataclass(frozen=True)
class OfferDTO:
    id: str
    title: str
    description: str
    code: str
    discount: str
    start_date: str
    end_date: str
    is_active: bool
    applies_to: list[str]  # empty = all products


@dataclass(frozen=True)
class OrderConfirmationDTO:
    reference: str
    customer_name: str
    summary: CheckoutSummaryDTO
