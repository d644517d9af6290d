import click

from catalog.infrastructure import bootstrap
from catalog.infrastructure.cli.category_commands import category_create, category_list
from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_edit,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.role_commands import (
    role_assign,
    role_create,
    role_delete,
    role_list,
    role_revoke,
    role_show,
    role_update,
)
from catalog.infrastructure.cli.user_commands import user_add, user_list


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Catalog admin: products, categories and roles"""
    ctx.obj = bootstrap.prepare()


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def role() -> None:
    """Manage roles."""


@cli.group()
def user() -> None:
    """Manage users."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_create)
product.add_command(product_show)
product.add_command(product_edit)
product.add_command(product_update)
product.add_command(product_delete)
category.add_command(category_list)
category.add_command(category_create)
role.add_command(role_list)
role.add_command(role_create)
role.add_command(role_show)
role.add_command(role_update)
role.add_command(role_delete)
role.add_command(role_assign)
role.add_command(role_revoke)
user.add_command(user_list)
user.add_command(user_add)
