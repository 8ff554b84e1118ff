"""CLI commands for a retailer's cart."""

from __future__ import annotations

import click

from vyapar.application.add_to_cart import AddToCartHandler
from vyapar.application.confirm_cart import ConfirmCartHandler
from vyapar.application.remove_cart_line import RemoveCartLineHandler
from vyapar.application.show_cart import ShowCartHandler
from vyapar.application.update_cart_line import UpdateCartLineHandler
from vyapar.infrastructure.cli.context import CliContext, pass_cli, reported_errors

_retailer_option = click.option("--retailer", "retailer_id", required=True, help="Retailer ID.")


@click.command("add")
@_retailer_option
@click.option("--offer", "offer_id", required=True, help="Offer ID to buy from.")
@click.option("--qty", "quantity", required=True, type=int, help="Quantity.")
@pass_cli
def cart_add(cli: CliContext, retailer_id: str, offer_id: str, quantity: int) -> None:
    """Add an offer to the cart at today's tier price."""
    handler = AddToCartHandler(cli.uow)

    with reported_errors():
        line = handler.handle(retailer_id, offer_id, quantity)

    click.echo(
        f"Added {line.quantity} {line.unit} of {line.product_name} "
        f"at {line.unit_price} each (line {line.id})"
    )


@click.command("show")
@_retailer_option
@pass_cli
def cart_show(cli: CliContext, retailer_id: str) -> None:
    """Show the retailer's cart."""
    handler = ShowCartHandler(cli.uow)

    with reported_errors():
        cart = handler.handle(retailer_id)

    if not cart.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Line':<22} {'Product':<20} {'Wholesaler':<18} {'Qty':>5} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*92}")
    for line in cart.lines:
        click.echo(
            f"  {line.id:<22} {line.product_name:<20} {line.wholesaler_name:<18} "
            f"{line.quantity:>5} {line.unit_price:>10} {line.line_total:>12}"
        )
    click.echo(f"  {'-'*92}")
    click.echo(f"  {'Cart Total':<30} {cart.total:>63}")


@click.command("update")
@_retailer_option
@click.option("--line", "line_id", required=True, help="Cart line ID.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity.")
@pass_cli
def cart_update(cli: CliContext, retailer_id: str, line_id: str, quantity: int) -> None:
    """Change a line's quantity (the locked price is kept)."""
    handler = UpdateCartLineHandler(cli.uow)

    with reported_errors():
        line = handler.handle(retailer_id, line_id, quantity)

    click.echo(f"Line {line.id}: {line.quantity} x {line.unit_price} = {line.line_total}")


@click.command("remove")
@_retailer_option
@click.option("--line", "line_id", required=True, help="Cart line ID.")
@pass_cli
def cart_remove(cli: CliContext, retailer_id: str, line_id: str) -> None:
    """Remove a line from the cart."""
    handler = RemoveCartLineHandler(cli.uow)

    with reported_errors():
        handler.handle(retailer_id, line_id)

    click.echo(f"Line {line_id} removed.")


@click.command("confirm")
@_retailer_option
@pass_cli
def cart_confirm(cli: CliContext, retailer_id: str) -> None:
    """Turn every cart line into an order request."""
    handler = ConfirmCartHandler(cli.uow)

    with reported_errors():
        orders = handler.handle(retailer_id)

    click.echo(f"{len(orders)} order(s) requested:")
    for order in orders:
        click.echo(
            f"  #{order.id}  {order.product_name} x {order.quantity} "
            f"from {order.wholesaler_name} @ {order.unit_price}  (status={order.status})"
        )
