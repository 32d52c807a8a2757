"""tritonbox command line entrypoint."""

from __future__ import annotations

import click

from tritonbox.cli.compute.commands import images_group, volumes_group
from tritonbox.cli.identity.commands import roles_group


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Config file path (toml/json) with a [triton] table",
)
@click.option("--url", "url", type=str, default=None, help="CloudAPI base URL")
@click.option("--account", "account", type=str, default=None, help="Account login name")
def main(config_path: str | None, url: str | None, account: str | None) -> None:
    """Triton CloudAPI commands."""


main.add_command(images_group)
main.add_command(volumes_group)
main.add_command(roles_group)
