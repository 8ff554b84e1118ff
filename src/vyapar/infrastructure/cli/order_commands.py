"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from vyapar.application.dto import OrderDTO
from vyapar.application.list_orders import ListOrdersHandler
from vyapar.application.show_order import ShowOrderHandler
from vyapar.application.update_order_status import UpdateOrderStatusHandler
from vyapar.domain.model.actor import Actor
from vyapar.domain.model.order import OrderStatus
from vyapar.infrastructure.cli.context import ACTOR, CliContext, pass_cli, reported_errors

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Retailer:   {dto.retailer_id}")
    click.echo(f"Wholesaler: {dto.wholesaler_name}")
    click.echo(f"Created:    {dto.created_at}")
    click.echo(f"Updated:    {dto.updated_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Unit':<6} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*57}")
    click.echo(
        f"  {dto.product_name:<20} {dto.quantity:>5} {dto.unit:<6} {dto.unit_price:>10} {dto.total:>12}"
    )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@pass_cli
def order_show(cli: CliContext, order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(cli.uow)

    with reported_errors():
        dto = handler.handle(order_id)

    _display_order(dto)


@click.command("list")
@click.option("--retailer", "retailer_id", default=None, help="Only this retailer's orders.")
@click.option("--wholesaler", "wholesaler_id", default=None, help="Only orders to this wholesaler.")
@click.option("--status", type=_STATUS_CHOICE, default=None, help="Only orders in this status.")
@pass_cli
def order_list(
    cli: CliContext,
    retailer_id: str | None,
    wholesaler_id: str | None,
    status: str | None,
) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(cli.uow)

    with reported_errors():
        orders = handler.handle(retailer_id=retailer_id, wholesaler_id=wholesaler_id, status=status)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<22} {'Product':<20} {'Qty':>5} {'Total':>12} {'Status':<10} {'Created'}")
    click.echo("-" * 92)
    for o in orders:
        click.echo(
            f"{o.id:<22} {o.product_name:<20} {o.quantity:>5} {o.total:>12} {o.status:<10} {o.created_at}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option("--to", "new_status", type=_STATUS_CHOICE, required=True, help="Target status.")
@click.option("--as", "actor", type=ACTOR, required=True, help="Acting user as 'role:user_id'.")
@pass_cli
def order_status(cli: CliContext, order_id: str, new_status: str, actor: Actor) -> None:
    """Move an order to its next status and notify the retailer."""
    handler = UpdateOrderStatusHandler(cli.uow)

    with reported_errors():
        dto = handler.handle(order_id, new_status, actor)

    click.echo(f"Order #{dto.id} is now {dto.status}; retailer {dto.retailer_id} notified.")
