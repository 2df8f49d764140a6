"""CLI commands for pricing a cart.

Each invocation builds a fresh checkout session from ``--items``; the
cart never outlives the command.
"""

from __future__ import annotations

import click

from sweetshop.application.add_to_cart import AddToCartHandler
from sweetshop.application.apply_promo_code import ApplyPromoCodeHandler
from sweetshop.application.dto import CartItemSpec, CheckoutSummaryDTO
from sweetshop.application.show_checkout import ShowCheckoutHandler
from sweetshop.domain.exceptions import DomainException, PromoCodeError
from sweetshop.domain.model.checkout import CheckoutSession
from sweetshop.infrastructure.bootstrap import offer_repository, product_repository


def parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '1:500g:2,4:250g:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.split(":")
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'ProductId:Size:Quantity'."
            )
        product_id, size, qty_str = (p.strip() for p in parts)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(CartItemSpec(product_id=product_id, size=size, quantity=qty))
    return specs


def build_session(specs: list[CartItemSpec]) -> CheckoutSession:
    """Fill a new session with *specs*.  Raises DomainException on bad input."""
    session = CheckoutSession()
    handler = AddToCartHandler(product_repo=product_repository())
    for spec in specs:
        handler.handle(session, spec)
    return session


def display_summary(dto: CheckoutSummaryDTO) -> None:
    """Shared formatting for displaying a priced cart."""
    click.echo(f"  {'Product':<20} {'Size':<6} {'Qty':>5} {'Price':>8} {'Total':>8}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.size:<6} {item.quantity:>5} "
            f"{item.unit_price:>8} {item.line_total:>8}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Items':<35} {dto.item_count:>16}")
    click.echo(f"  {'Subtotal':<35} {dto.subtotal:>16}")
    click.echo(f"  {'Delivery':<35} {dto.delivery_fee:>16}")
    if dto.promo_code:
        label = f"Discount ({dto.promo_code}, {dto.promo_discount})"
        click.echo(f"  {label:<35} {'-' + dto.discount:>16}")
    click.echo(f"  {'Total':<35} {dto.total:>16}")


@click.command("quote")
@click.option("--items", required=True, help="Items as 'ProductId:Size:Qty,...'.")
@click.option("--promo", default=None, help="Promo code to apply.")
def cart_quote(items: str, promo: str | None) -> None:
    """Price a cart, optionally with a promo code."""
    specs = parse_items(items)

    try:
        session = build_session(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    dto = ShowCheckoutHandler().handle(session)
    if promo is not None:
        handler = ApplyPromoCodeHandler(offer_repo=offer_repository())
        try:
            dto = handler.handle(session, promo)
        except PromoCodeError as exc:
            click.echo(f"Promo code not applied: {exc}", err=True)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    display_summary(dto)
