import logging

import click

from sweetshop.infrastructure.cli.cart_commands import cart_quote
from sweetshop.infrastructure.cli.offer_commands import offer_list
from sweetshop.infrastructure.cli.order_commands import order_place
from sweetshop.infrastructure.cli.product_commands import product_list
from sweetshop.infrastructure.config import Settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """Sweet shop — catalog, cart pricing and promo codes"""
    level = "DEBUG" if verbose else Settings.from_env().log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def offer() -> None:
    """Browse offers."""


@cli.group()
def cart() -> None:
    """Price a cart."""


@cli.group()
def order() -> None:
    """Place orders."""


# Register subcommands
product.add_command(product_list)
offer.add_command(offer_list)
cart.add_command(cart_quote)
order.add_command(order_place)
