#!/usr/bin/env python3

import os
import json
from typing import Any, Dict, Mapping, Optional

try:
    # Python 3.11+
    import tomllib as toml  # type: ignore
except ModuleNotFoundError:
    import tomli as toml  # type: ignore

from ..client import TritonConfig


def _replace_values(data: Any, environ: Mapping[str, str]) -> Any:
    """Recursively resolve ``env,NAME`` placeholders in config values.

    Args:
        data: Config value to resolve.
        environ: Environment mapping used for lookups.

    Returns:
        Any: Resolved value. Unknown variables keep the raw placeholder.
    """
    if isinstance(data, dict):
        return {k: _replace_values(v, environ) for k, v in data.items()}
    elif isinstance(data, list):
        return [_replace_values(item, environ) for item in data]
    elif isinstance(data, str) and data.startswith("env,"):
        key = data.split(",", 1)[1]
        value = environ.get(key)
        return value if value is not None else data
    return data


def _as_bool(value: Any) -> bool:
    """Read a config flag. Strings from ``env,`` placeholders are parsed, not truth-tested."""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)


def load_config_by_file(path: str, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Load config from TOML/JSON and resolve ``env,`` placeholders.

    Args:
        path: Config file path.
        environ: Environment mapping, defaults to ``os.environ``.

    Returns:
        Dict[str, Any]: Loaded and resolved config.
    """
    if path.endswith('.toml'):
        # tomllib/tomli 需要以二进制模式读取
        with open(path, 'rb') as f:
            config = toml.load(f)
    else:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)

    return _replace_values(config, os.environ if environ is None else environ)


def load_triton_config(path: str, environ: Optional[Mapping[str, str]] = None) -> TritonConfig:
    """Load the ``[triton]`` table of a config file into ``TritonConfig``.

    Args:
        path: Config file path.
        environ: Environment mapping, defaults to ``os.environ``.

    Returns:
        TritonConfig: Parsed config.

    Raises:
        ValueError: ``url`` or ``account`` is missing, or ``timeout_s`` is not a number.
    """
    section = load_config_by_file(path, environ).get("triton") or {}
    if not section.get("url") or not section.get("account"):
        raise ValueError(f"{path}: [triton] url and account are required")
    try:
        timeout_s = float(section.get("timeout_s") or 8.0)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{path}: [triton] timeout_s must be a number, got {section['timeout_s']!r}") from exc
    return TritonConfig(
        url=str(section["url"]),
        account=str(section["account"]),
        timeout_s=timeout_s,
        user_agent=str(section.get("user_agent", "tritonbox")),
        insecure_skip_tls_verify=_as_bool(section.get("insecure_skip_tls_verify", False)),
    )
