import click

from vyapar.infrastructure.bootstrap import DATA_DIR_ENV, configure_logging
from vyapar.infrastructure.cli.cart_commands import (
    cart_add,
    cart_confirm,
    cart_remove,
    cart_show,
    cart_update,
)
from vyapar.infrastructure.cli.context import CliContext
from vyapar.infrastructure.cli.notification_commands import notification_list, notification_read
from vyapar.infrastructure.cli.offer_commands import (
    offer_availability,
    offer_create,
    offer_list,
    offer_quote,
)
from vyapar.infrastructure.cli.order_commands import order_list, order_show, order_status
from vyapar.infrastructure.cli.product_commands import product_add, product_list


@click.group()
@click.option(
    "--data-dir",
    envvar=DATA_DIR_ENV,
    type=click.Path(file_okay=False),
    default=None,
    help=f"Directory holding the store file (env: {DATA_DIR_ENV}).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, data_dir: str | None, verbose: bool) -> None:
    """Vyapar B2B marketplace."""
    configure_logging(verbose)
    ctx.obj = CliContext(data_dir=data_dir)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def offer() -> None:
    """Manage wholesaler offers and quotes."""


@cli.group()
def cart() -> None:
    """Manage a retailer's cart."""


@cli.group()
def order() -> None:
    """Track and update orders."""


@cli.group()
def notification() -> None:
    """Read order notifications."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
offer.add_command(offer_create)
offer.add_command(offer_list)
offer.add_command(offer_availability)
offer.add_command(offer_quote)
cart.add_command(cart_add)
cart.add_command(cart_show)
cart.add_command(cart_update)
cart.add_command(cart_remove)
cart.add_command(cart_confirm)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_status)
notification.add_command(notification_list)
notification.add_command(notification_read)
