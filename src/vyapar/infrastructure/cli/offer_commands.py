"""CLI commands for wholesaler offers and price quotes."""

from __future__ import annotations

import click

from vyapar.application.create_offer import CreateOfferHandler
from vyapar.application.dto import TierSpec
from vyapar.application.quote_product import QuoteProductHandler
from vyapar.application.set_offer_availability import SetOfferAvailabilityHandler
from vyapar.domain.model.actor import Actor
from vyapar.infrastructure.cli.context import ACTOR, TIER, CliContext, pass_cli, reported_errors


@click.command("create")
@click.option("--wholesaler", "wholesaler_id", required=True, help="Wholesaler ID.")
@click.option("--wholesaler-name", default="", help="Trade name shown to retailers.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--tier", "tiers", type=TIER, multiple=True, help="Price tier 'MIN-MAX:PRICE' or 'MIN+:PRICE'; repeatable.")
@click.option("--base-price", default=None, help="Flat price when no tier applies.")
@click.option("--area", "areas", multiple=True, help="Delivery area; repeatable. Omit to deliver anywhere.")
@pass_cli
def offer_create(
    cli: CliContext,
    wholesaler_id: str,
    wholesaler_name: str,
    product_id: str,
    tiers: tuple[TierSpec, ...],
    base_price: str | None,
    areas: tuple[str, ...],
) -> None:
    """List a catalog product for a wholesaler."""
    handler = CreateOfferHandler(cli.uow)

    with reported_errors():
        offer = handler.handle(
            wholesaler_id=wholesaler_id,
            wholesaler_name=wholesaler_name,
            product_id=product_id,
            tiers=list(tiers),
            base_price=base_price,
            delivery_area=list(areas),
        )

    click.echo(f"Offer {offer.id} created for '{offer.product_id}' by {offer.wholesaler_name}")
    for tier in offer.price_tiers:
        click.echo(f"  {tier}")


@click.command("list")
@click.option("--product", "product_id", required=True, help="Product ID.")
@pass_cli
def offer_list(cli: CliContext, product_id: str) -> None:
    """List every offer for a product, available or not."""
    with reported_errors():
        offers = cli.uow.offers.list_for_product(product_id)

    if not offers:
        click.echo("No offers found.")
        return

    click.echo(f"{'ID':<22} {'Wholesaler':<20} {'Available':<10} {'Tiers'}")
    click.echo("-" * 70)
    for o in offers:
        tiers = ", ".join(str(t) for t in o.price_tiers) or f"flat {o.base_price}"
        click.echo(f"{o.id:<22} {o.wholesaler_name:<20} {'yes' if o.available else 'no':<10} {tiers}")


@click.command("availability")
@click.option("--id", "offer_id", required=True, help="Offer ID.")
@click.option("--on/--off", "available", required=True, help="Make the offer available or not.")
@click.option("--as", "actor", type=ACTOR, required=True, help="Acting user as 'role:user_id'.")
@pass_cli
def offer_availability(cli: CliContext, offer_id: str, available: bool, actor: Actor) -> None:
    """Toggle whether an offer can be added to carts."""
    handler = SetOfferAvailabilityHandler(cli.uow)

    with reported_errors():
        handler.handle(offer_id, available, actor)

    click.echo(f"Offer {offer_id} is now {'available' if available else 'unavailable'}.")


@click.command("quote")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="Quantity to price.")
@click.option("--area", default=None, help="Only wholesalers delivering to this area.")
@pass_cli
def offer_quote(cli: CliContext, product_id: str, quantity: int, area: str | None) -> None:
    """Show every wholesaler's price for a quantity, cheapest first."""
    handler = QuoteProductHandler(cli.uow)

    with reported_errors():
        dto = handler.handle(product_id, quantity, area)

    click.echo(f"{dto.product_name} x {dto.quantity}")
    if not dto.offers:
        click.echo("No wholesaler currently offers this product.")
        return

    click.echo(f"  {'Offer':<22} {'Wholesaler':<20} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*67}")
    for q in dto.offers:
        marker = "  <- best" if q.is_best else ""
        click.echo(
            f"  {q.offer_id:<22} {q.wholesaler_name:<20} {q.unit_price:>10} {q.line_total:>12}{marker}"
        )
