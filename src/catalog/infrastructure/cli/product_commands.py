"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.edit_product import EditProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.new_product_form import NewProductFormHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.infrastructure import bootstrap
from catalog.infrastructure.cli.helpers import image_option, read_image, require_actor
from catalog.infrastructure.config.settings import Settings


def _product_row(p: Product) -> str:
    category = p.category.title if p.category else "-"
    owner = p.owner.name if p.owner else "-"
    return f"{p.id:<6} {p.title[:28]:<28} {str(p.price):>12} {category[:16]:<16} {owner[:16]:<16}"


@click.command("list")
@click.option("--page", default=1, type=int, show_default=True, help="Page number.")
@click.pass_obj
def product_list(settings: Settings, page: int) -> None:
    """List products, newest first."""
    with bootstrap.container(settings) as c:
        result = ListProductsHandler(c.product_repository()).handle(page)

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<28} {'Price':>12} {'Category':<16} {'Owner':<16}")
    click.echo("-" * 82)
    for p in result.items:
        click.echo(_product_row(p))
    click.echo()
    click.echo(f"Page {result.page} of {result.last_page} ({result.total} products)")


@click.command("create")
@click.option("--title", required=True, help="Product title.")
@click.option("--price", required=True, help="Price (e.g. 9.99).")
@click.option("--category", "category_id", required=True, type=int, help="Category ID.")
@click.option("--description", default=None, help="Optional description.")
@image_option("Image file (jpeg, png, gif or webp, at most 2 MB).")
@click.option(
    "--actor", required=True, type=int, envvar="CATALOG_ACTOR",
    help="ID of the user creating the product.",
)
@click.pass_obj
def product_create(
    settings: Settings,
    title: str,
    price: str,
    category_id: int,
    description: str | None,
    image_path: Path | None,
    actor: int,
) -> None:
    """Add a new product to the catalog."""
    try:
        with bootstrap.container(settings) as c:
            form = NewProductFormHandler(c.category_repository()).handle()
            if form.needs_category:
                click.echo(
                    "There are no categories yet. "
                    "Create one first with 'catalog category create'."
                )
                return

            require_actor(c.user_repository(), actor)
            handler = CreateProductHandler(
                product_repo=c.product_repository(),
                category_repo=c.category_repository(),
                file_store=c.file_store(),
            )
            product = handler.handle(
                {
                    "title": title,
                    "description": description,
                    "price": price,
                    "category_id": category_id,
                },
                actor_id=actor,
                image=read_image(image_path),
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product created successfully! (#{product.id})")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: int) -> None:
    """Show a product and others from its category."""
    try:
        with bootstrap.container(settings) as c:
            detail = ShowProductHandler(c.product_repository()).handle(product_id)
            image_url = c.file_store().url(detail.product.image) if detail.product.image else None
    except DomainException as exc:
        raise click.ClickException(str(exc))

    p = detail.product
    click.echo(f"Product #{p.id}: {p.title}")
    click.echo(f"Price:       {p.price}")
    click.echo(f"Category:    {p.category.title if p.category else p.category_id}")
    click.echo(f"Owner:       {p.owner.name if p.owner else '-'}")
    click.echo(f"Image:       {image_url or '-'}")
    click.echo(f"Created:     {p.created_at:%Y-%m-%d %H:%M}")
    if p.description:
        click.echo()
        click.echo(p.description)

    if detail.related:
        click.echo()
        click.echo("Related products:")
        for r in detail.related:
            click.echo(f"  #{r.id:<5} {r.title:<28} {str(r.price):>12}")


@click.command("edit")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_edit(settings: Settings, product_id: int) -> None:
    """Show a product's current values and the categories to choose from."""
    try:
        with bootstrap.container(settings) as c:
            form = EditProductHandler(
                c.product_repository(), c.category_repository()
            ).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    p = form.product
    click.echo(f"Editing product #{p.id}")
    click.echo(f"  title:       {p.title}")
    click.echo(f"  description: {p.description or ''}")
    click.echo(f"  price:       {p.price.amount}")
    click.echo(f"  category:    {p.category_id}")
    click.echo(f"  image:       {p.image or '-'}")
    click.echo()
    click.echo("Categories:")
    for category in form.categories:
        marker = "*" if category.id == p.category_id else " "
        click.echo(f" {marker} {category.id:<5} {category.title}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--title", default=None, help="New title.")
@click.option("--price", default=None, help="New price.")
@click.option("--category", "category_id", default=None, type=int, help="New category ID.")
@click.option("--description", default=None, help="New description ('' clears it).")
@image_option("Replacement image; the old file is removed.")
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: int,
    title: str | None,
    price: str | None,
    category_id: int | None,
    description: str | None,
    image_path: Path | None,
) -> None:
    """Update a product. Options left out keep their current value."""
    try:
        with bootstrap.container(settings) as c:
            current = EditProductHandler(
                c.product_repository(), c.category_repository()
            ).handle(product_id).product
            handler = UpdateProductHandler(
                product_repo=c.product_repository(),
                category_repo=c.category_repository(),
                file_store=c.file_store(),
            )
            handler.handle(
                product_id,
                {
                    "title": current.title if title is None else title,
                    "description": current.description if description is None else description,
                    "price": str(current.price.amount) if price is None else price,
                    "category_id": current.category_id if category_id is None else category_id,
                },
                image=read_image(image_path),
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Product updated successfully!")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: int) -> None:
    """Delete a product and its image."""
    try:
        with bootstrap.container(settings) as c:
            DeleteProductHandler(c.product_repository(), c.file_store()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Product deleted successfully!")
