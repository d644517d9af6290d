"""CLI commands for the Role aggregate."""

from __future__ import annotations

import click

from catalog.application.assign_role import AssignRoleHandler, RevokeRoleHandler
from catalog.application.create_role import CreateRoleHandler
from catalog.application.delete_role import DeleteRoleHandler
from catalog.application.list_roles import ListRolesHandler
from catalog.application.show_role import ShowRoleHandler
from catalog.application.update_role import UpdateRoleHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure import bootstrap
from catalog.infrastructure.config.settings import Settings


@click.command("list")
@click.pass_obj
def role_list(settings: Settings) -> None:
    """List roles with the number of users holding each."""
    with bootstrap.container(settings) as c:
        roles = ListRolesHandler(c.role_repository()).handle()

    if not roles:
        click.echo("No roles found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Users':>6}  Description")
    click.echo("-" * 60)
    for r in roles:
        click.echo(f"{r.id:<6} {r.name:<20} {r.users_count:>6}  {r.description or ''}")


@click.command("create")
@click.option("--name", required=True, help="Unique role name.")
@click.option("--description", default=None, help="Optional description.")
@click.pass_obj
def role_create(settings: Settings, name: str, description: str | None) -> None:
    """Create a role."""
    try:
        with bootstrap.container(settings) as c:
            role = CreateRoleHandler(c.role_repository()).handle(
                {"name": name, "description": description}
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Role created successfully! (#{role.id})")


@click.command("show")
@click.option("--id", "role_id", required=True, type=int, help="Role ID.")
@click.pass_obj
def role_show(settings: Settings, role_id: int) -> None:
    """Show a role and its users."""
    try:
        with bootstrap.container(settings) as c:
            role = ShowRoleHandler(c.role_repository()).handle(role_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Role #{role.id}: {role.name}")
    if role.description:
        click.echo(role.description)
    click.echo()
    if not role.users:
        click.echo("No users hold this role.")
        return
    click.echo("Users:")
    for user in role.users:
        click.echo(f"  #{user.id:<5} {user.name:<20} {user.email}")


@click.command("update")
@click.option("--id", "role_id", required=True, type=int, help="Role ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description ('' clears it).")
@click.pass_obj
def role_update(
    settings: Settings, role_id: int, name: str | None, description: str | None
) -> None:
    """Rename a role or change its description."""
    try:
        with bootstrap.container(settings) as c:
            current = ShowRoleHandler(c.role_repository()).handle(role_id)
            UpdateRoleHandler(c.role_repository()).handle(
                role_id,
                {
                    "name": current.name if name is None else name,
                    "description": current.description if description is None else description,
                },
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Role updated successfully!")


@click.command("delete")
@click.option("--id", "role_id", required=True, type=int, help="Role ID.")
@click.pass_obj
def role_delete(settings: Settings, role_id: int) -> None:
    """Delete a role (never admin, never one with users)."""
    try:
        with bootstrap.container(settings) as c:
            DeleteRoleHandler(c.role_repository()).handle(role_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Role deleted successfully!")


@click.command("assign")
@click.option("--role", "role_id", required=True, type=int, help="Role ID.")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
@click.pass_obj
def role_assign(settings: Settings, role_id: int, user_id: int) -> None:
    """Grant a role to a user."""
    try:
        with bootstrap.container(settings) as c:
            AssignRoleHandler(c.role_repository(), c.user_repository()).handle(
                role_id, user_id
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Role #{role_id} granted to user #{user_id}.")


@click.command("revoke")
@click.option("--role", "role_id", required=True, type=int, help="Role ID.")
@click.option("--user", "user_id", required=True, type=int, help="User ID.")
@click.pass_obj
def role_revoke(settings: Settings, role_id: int, user_id: int) -> None:
    """Take a role away from a user."""
    try:
        with bootstrap.container(settings) as c:
            RevokeRoleHandler(c.role_repository(), c.user_repository()).handle(
                role_id, user_id
            )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Role #{role_id} revoked from user #{user_id}.")
