"""Compute CLI commands."""

from __future__ import annotations

from typing import Tuple

import click

from tritonbox.cli.helpers import echo_json, get_triton, run_operation
from tritonbox.schemas.compute import (
    CreateVolumeInput,
    DeleteImageInput,
    DeleteVolumeInput,
    ExportImageInput,
    GetImageInput,
    GetVolumeInput,
    ImageState,
    ListImagesInput,
    ListVolumesInput,
    UpdateVolumeInput,
)


@click.group("images")
def images_group() -> None:
    """Image commands."""


@images_group.command("list")
@click.option("--name", type=str, default=None)
@click.option("--os", "os_name", type=str, default=None)
@click.option("--version", type=str, default=None)
@click.option("--state", type=click.Choice([s.value for s in ImageState] + ["all"]), default=None)
@click.option("--owner", type=str, default=None)
@click.option("--type", "image_type", type=str, default=None)
@click.option("--public/--private", "public", default=None)
@click.pass_context
def list_images_command(
    ctx: click.Context,
    name: str | None,
    os_name: str | None,
    version: str | None,
    state: str | None,
    owner: str | None,
    image_type: str | None,
    public: bool | None,
) -> None:
    """List images."""
    params = ListImagesInput(
        name=name,
        os=os_name,
        version=version,
        state=state,
        owner=owner,
        type=image_type,
        public=public,
    )
    images = get_triton(ctx).compute.images
    echo_json(run_operation(lambda: images.list(params)))


@images_group.command("get")
@click.argument("image_id")
@click.pass_context
def get_image_command(ctx: click.Context, image_id: str) -> None:
    """Show one image."""
    images = get_triton(ctx).compute.images
    echo_json(run_operation(lambda: images.get(GetImageInput(image_id=image_id))))


@images_group.command("export")
@click.argument("image_id")
@click.argument("manta_path")
@click.pass_context
def export_image_command(ctx: click.Context, image_id: str, manta_path: str) -> None:
    """Export an image to the object store."""
    images = get_triton(ctx).compute.images
    params = ExportImageInput(image_id=image_id, manta_path=manta_path)
    echo_json(run_operation(lambda: images.export(params)))


@images_group.command("delete")
@click.argument("image_id")
@click.pass_context
def delete_image_command(ctx: click.Context, image_id: str) -> None:
    """Delete an image."""
    images = get_triton(ctx).compute.images
    run_operation(lambda: images.delete(DeleteImageInput(image_id=image_id)))
    click.echo(f"Deleted image {image_id}")


@click.group("volumes")
def volumes_group() -> None:
    """Volume commands."""


@volumes_group.command("list")
@click.option("--name", type=str, default=None)
@click.option("--size", type=int, default=None)
@click.option("--state", type=str, default=None)
@click.option("--type", "volume_type", type=str, default=None)
@click.pass_context
def list_volumes_command(
    ctx: click.Context,
    name: str | None,
    size: int | None,
    state: str | None,
    volume_type: str | None,
) -> None:
    """List volumes."""
    params = ListVolumesInput(name=name, size=size, state=state, type=volume_type)
    volumes = get_triton(ctx).compute.volumes
    echo_json(run_operation(lambda: volumes.list(params)))


@volumes_group.command("get")
@click.argument("volume_id")
@click.pass_context
def get_volume_command(ctx: click.Context, volume_id: str) -> None:
    """Show one volume."""
    volumes = get_triton(ctx).compute.volumes
    echo_json(run_operation(lambda: volumes.get(GetVolumeInput(id=volume_id))))


@volumes_group.command("create")
@click.option("--name", type=str, default=None)
@click.option("--size", type=int, default=None)
@click.option("--type", "volume_type", type=str, default=None)
@click.option("--network", "networks", multiple=True, help="Network id, repeatable")
@click.pass_context
def create_volume_command(
    ctx: click.Context,
    name: str | None,
    size: int | None,
    volume_type: str | None,
    networks: Tuple[str, ...],
) -> None:
    """Create a volume."""
    params = CreateVolumeInput(
        name=name,
        size=size,
        type=volume_type,
        networks=list(networks) or None,
    )
    volumes = get_triton(ctx).compute.volumes
    echo_json(run_operation(lambda: volumes.create(params)))


@volumes_group.command("rename")
@click.argument("volume_id")
@click.argument("name")
@click.pass_context
def rename_volume_command(ctx: click.Context, volume_id: str, name: str) -> None:
    """Rename a volume."""
    volumes = get_triton(ctx).compute.volumes
    run_operation(lambda: volumes.update(UpdateVolumeInput(id=volume_id, name=name)))
    click.echo(f"Renamed volume {volume_id} to {name}")


@volumes_group.command("delete")
@click.argument("volume_id")
@click.pass_context
def delete_volume_command(ctx: click.Context, volume_id: str) -> None:
    """Delete a volume."""
    volumes = get_triton(ctx).compute.volumes
    run_operation(lambda: volumes.delete(DeleteVolumeInput(id=volume_id)))
    click.echo(f"Deleted volume {volume_id}")
