"""CLI commands for offers."""

from __future__ import annotations

import click

from sweetshop.application.list_offers import ListOffersHandler
from sweetshop.domain.exceptions import DomainException
from sweetshop.infrastructure.bootstrap import offer_repository


@click.command("list")
@click.option("--active", is_flag=True, default=False, help="Only offers redeemable now.")
def offer_list(active: bool) -> None:
    """List promotional offers."""
    handler = ListOffersHandler(offer_repo=offer_repository())

    try:
        offers = handler.handle(active_only=active)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not offers:
        click.echo("No offers found.")
        return

    click.echo(f"{'Code':<14} {'Off':>5}  {'Valid':<23} {'Products':<12} Title")
    click.echo("-" * 72)
    for o in offers:
        window = f"{o.start_date}..{o.end_date}"
        products = ",".join(o.applies_to) if o.applies_to else "all"
        status = "" if o.is_active else " (inactive)"
        click.echo(
            f"{o.code:<14} {o.discount:>5}  {window:<23} {products:<12} {o.title}{status}"
        )
