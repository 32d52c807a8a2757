"""Shared helpers for tritonbox CLI commands."""

from __future__ import annotations

from dataclasses import replace
import json
from typing import Any, Callable

import click

from tritonbox.client import TritonConfig
from tritonbox.errors import TritonboxError
from tritonbox.triton import Triton
from tritonbox.utils.load_config import load_triton_config


def _resolve_config(config_path: str | None, url: str | None, account: str | None) -> TritonConfig:
    """Resolve config from file, flags and environment.

    Flags override file values; environment is used when neither is given.

    Args:
        config_path: Optional config file path.
        url: ``--url`` flag.
        account: ``--account`` flag.

    Returns:
        TritonConfig: Resolved config.
    """
    if url and account and not config_path:
        return TritonConfig(url=url, account=account)
    try:
        cfg = load_triton_config(config_path) if config_path else TritonConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(f"{exc} (or pass --config / --url --account)") from exc
    return replace(cfg, url=url or cfg.url, account=account or cfg.account)


def get_triton(ctx: click.Context) -> Triton:
    """Build the facade lazily from the root command options.

    Args:
        ctx: Click context.

    Returns:
        Triton: Facade instance cached on the root context.
    """
    root = ctx.find_root()
    triton = root.meta.get("tritonbox.triton")
    if triton is None:
        params = root.params
        cfg = _resolve_config(params.get("config_path"), params.get("url"), params.get("account"))
        triton = Triton.from_config(cfg)
        root.meta["tritonbox.triton"] = triton
        root.call_on_close(triton.close)
    return triton


def echo_json(value: Any) -> None:
    """Print models or lists of models as JSON.

    Args:
        value: ``TritonModel``, list of models or ``None``.
    """
    if value is None:
        return
    if isinstance(value, list):
        payload: Any = [item.to_wire() for item in value]
    else:
        payload = value.to_wire()
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def run_operation(caller: Callable[[], Any]) -> Any:
    """Run an SDK call and turn tritonbox errors into CLI errors.

    Args:
        caller: Deferred SDK call.

    Returns:
        Any: SDK result.
    """
    try:
        return caller()
    except TritonboxError as exc:
        raise click.ClickException(str(exc)) from exc
