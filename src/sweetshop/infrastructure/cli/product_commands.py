"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from sweetshop.application.list_products import ListProductsHandler
from sweetshop.domain.exceptions import DomainException
from sweetshop.infrastructure.bootstrap import product_repository


@click.command("list")
@click.option("--featured", is_flag=True, default=False, help="Only featured sweets.")
def product_list(featured: bool) -> None:
    """List the sweets in the catalog with their sizes."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        products = handler.handle(featured_only=featured)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Sizes'}")
    click.echo("-" * 60)
    for p in products:
        sizes = ", ".join(f"{label} {price}" for label, price in p.sizes)
        marker = " *" if p.featured else ""
        click.echo(f"{p.id:<6} {p.name + marker:<20} {sizes}")
