"""CLI commands for users."""

from __future__ import annotations

import click

from catalog.application.add_user import AddUserHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure import bootstrap
from catalog.infrastructure.config.settings import Settings


@click.command("add")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Unique email address.")
@click.pass_obj
def user_add(settings: Settings, name: str, email: str) -> None:
    """Add a user."""
    try:
        with bootstrap.container(settings) as c:
            user = AddUserHandler(c.user_repository()).handle(
                {"name": name, "email": email}
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user.id} '{user.name}' added")


@click.command("list")
@click.pass_obj
def user_list(settings: Settings) -> None:
    """List users."""
    with bootstrap.container(settings) as c:
        users = c.user_repository().list_all()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Email':<30}")
    click.echo("-" * 58)
    for user in users:
        click.echo(f"{user.id:<6} {user.name:<20} {user.email:<30}")
