"""CLI commands for placing an order."""

from __future__ import annotations

import click

from sweetshop.application.apply_promo_code import ApplyPromoCodeHandler
from sweetshop.application.dto import CustomerDetailsSpec
from sweetshop.application.place_order import PlaceOrderHandler
from sweetshop.domain.exceptions import DomainException
from sweetshop.infrastructure.bootstrap import offer_repository, order_submitter
from sweetshop.infrastructure.cli.cart_commands import (
    build_session,
    display_summary,
    parse_items,
)


@click.command("place")
@click.option("--items", required=True, help="Items as 'ProductId:Size:Qty,...'.")
@click.option("--promo", default=None, help="Promo code to apply.")
@click.option("--name", required=True, help="Customer name.")
@click.option("--phone", required=True, help="10-digit phone number.")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--pincode", required=True, help="6-digit pincode.")
@click.option(
    "--payment",
    type=click.Choice(["card", "upi", "cod"]),
    default="card",
    show_default=True,
    help="Payment method.",
)
@click.option("--email", default="", help="Email for the receipt.")
@click.option("--instructions", default="", help="Delivery instructions.")
def order_place(
    items: str,
    promo: str | None,
    name: str,
    phone: str,
    address: str,
    pincode: str,
    payment: str,
    email: str,
    instructions: str,
) -> None:
    """Price the cart and place the order.

    A rejected promo code aborts the order.
    """
    specs = parse_items(items)
    details = CustomerDetailsSpec(
        name=name,
        phone=phone,
        address=address,
        pincode=pincode,
        payment_method=payment,
        email=email,
        instructions=instructions,
    )

    try:
        session = build_session(specs)
        if promo is not None:
            ApplyPromoCodeHandler(offer_repo=offer_repository()).handle(session, promo)
        confirmation = PlaceOrderHandler(submitter=order_submitter()).handle(
            session, details
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {confirmation.reference} placed for {confirmation.customer_name}")
    click.echo()
    display_summary(confirmation.summary)
