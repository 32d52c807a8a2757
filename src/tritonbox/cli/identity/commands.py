"""Identity CLI commands."""

from __future__ import annotations

import click

from tritonbox.cli.helpers import echo_json, get_triton, run_operation
from tritonbox.schemas.identity import GetRoleInput


@click.group("roles")
def roles_group() -> None:
    """Role commands."""


@roles_group.command("list")
@click.pass_context
def list_roles_command(ctx: click.Context) -> None:
    """List roles."""
    roles = get_triton(ctx).identity.roles()
    echo_json(run_operation(roles.list))


@roles_group.command("get")
@click.argument("role_id")
@click.pass_context
def get_role_command(ctx: click.Context, role_id: str) -> None:
    """Show one role."""
    roles = get_triton(ctx).identity.roles()
    echo_json(run_operation(lambda: roles.get(GetRoleInput(role_id=role_id))))
