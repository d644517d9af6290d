"""CLI commands for categories."""

from __future__ import annotations

import click

from catalog.application.create_category import CreateCategoryHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure import bootstrap
from catalog.infrastructure.config.settings import Settings


@click.command("create")
@click.option("--title", required=True, help="Category title.")
@click.pass_obj
def category_create(settings: Settings, title: str) -> None:
    """Create a category."""
    try:
        with bootstrap.container(settings) as c:
            category = CreateCategoryHandler(c.category_repository()).handle(
                {"title": title}
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category created successfully! (#{category.id})")


@click.command("list")
@click.pass_obj
def category_list(settings: Settings) -> None:
    """List categories by title."""
    with bootstrap.container(settings) as c:
        categories = c.category_repository().list_by_title()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Title':<30}")
    click.echo("-" * 37)
    for category in categories:
        click.echo(f"{category.id:<6} {category.title:<30}")
