"""CLI commands for the Product catalog."""

from __future__ import annotations

import click

from vyapar.application.add_product import AddProductHandler
from vyapar.application.search_products import SearchProductsHandler
from vyapar.infrastructure.cli.context import CliContext, pass_cli, reported_errors


@click.command("add")
@click.option("--name", required=True, help="Product name (letters, digits, spaces).")
@click.option("--category", required=True, help="Category, e.g. GRAINS.")
@click.option("--unit", required=True, help="Unit of sale, e.g. 1KG or BOX.")
@click.option("--description", default="", help="Free-text description.")
@pass_cli
def product_add(cli: CliContext, name: str, category: str, unit: str, description: str) -> None:
    """Add a product to the catalog (no-op if it already exists)."""
    handler = AddProductHandler(cli.uow)

    with reported_errors():
        product = handler.handle(name=name, category=category, unit=unit, description=description)

    click.echo(f"Product '{product.id}' ({product.name}, {product.unit}) is in the catalog")


@click.command("list")
@click.option("--search", "query", default=None, help="Only names starting with this text.")
@click.option("--category", default=None, help="Only products in this category.")
@pass_cli
def product_list(cli: CliContext, query: str | None, category: str | None) -> None:
    """List catalog products, optionally filtered by name prefix and category."""
    handler = SearchProductsHandler(cli.uow)

    with reported_errors():
        products = handler.handle(query=query, category=category)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<24} {'Name':<24} {'Category':<12} {'Unit':<8}")
    click.echo("-" * 71)
    for p in products:
        click.echo(f"{p.id:<24} {p.name:<24} {p.category:<12} {p.unit:<8}")
