#!/usr/bin/env python3

"""Tests for tritonbox CLI commands."""

from __future__ import annotations

import json
from typing import Any, Callable, List

import httpx
from click.testing import CliRunner

from tritonbox.cli.main import main
from tritonbox.triton import Triton

BASE_ARGS = ["--url", "https://cloudapi.example.com", "--account", "testing"]


def _patch_transport(monkeypatch: Any, handler: Callable[[httpx.Request], httpx.Response]) -> None:
    """Route every CLI-built facade through ``httpx.MockTransport``."""

    def fake_from_config(cfg: Any, **_kwargs: Any) -> Triton:
        return Triton(
            url=cfg.url,
            account=cfg.account,
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )

    monkeypatch.setattr("tritonbox.cli.helpers.Triton.from_config", staticmethod(fake_from_config))


def test_volumes_list_prints_json(monkeypatch: Any) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=[{"id": "v1", "name": "data", "owner_uuid": "o1", "state": "ready"}],
        )

    _patch_transport(monkeypatch, handler)

    result = CliRunner().invoke(main, [*BASE_ARGS, "volumes", "list", "--state", "ready", "--size", "10240"])

    assert result.exit_code == 0, result.output
    assert seen[0].url.path == "/testing/volumes"
    assert dict(seen[0].url.params) == {"state": "ready", "size": "10240"}
    payload = json.loads(result.output)
    assert payload[0]["owner_uuid"] == "o1"
    assert payload[0]["state"] == "ready"


def test_images_export(monkeypatch: Any) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["action"] == "export"
        assert request.url.params["manta_path"] == "/foo/bar"
        return httpx.Response(
            200,
            json={"manta_url": "https://manta", "image_path": "/foo/bar/i.zfs.gz", "manifest_path": "/foo/bar/i.json"},
        )

    _patch_transport(monkeypatch, handler)

    result = CliRunner().invoke(main, [*BASE_ARGS, "images", "export", "img-1", "/foo/bar"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["manifest_path"] == "/foo/bar/i.json"


def test_volumes_rename(monkeypatch: Any) -> None:
    bodies: List[Any] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(204)

    _patch_transport(monkeypatch, handler)

    result = CliRunner().invoke(main, [*BASE_ARGS, "volumes", "rename", "v1", "new-name"])

    assert result.exit_code == 0, result.output
    assert bodies == [{"name": "new-name"}]
    assert "Renamed volume v1 to new-name" in result.output


def test_roles_get_error_exits_nonzero(monkeypatch: Any) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"code": "ResourceNotFound", "message": "role not found"})

    _patch_transport(monkeypatch, handler)

    result = CliRunner().invoke(main, [*BASE_ARGS, "roles", "get", "r1"])

    assert result.exit_code == 1
    assert "Error executing GetRole request:" in result.output
    assert "role not found" in result.output


def test_missing_config_is_usage_error(monkeypatch: Any) -> None:
    monkeypatch.delenv("TRITON_URL", raising=False)
    monkeypatch.delenv("TRITON_ACCOUNT", raising=False)

    result = CliRunner().invoke(main, ["roles", "list"])

    assert result.exit_code == 2
    assert "TRITON_URL" in result.output


def test_images_list_state_filter(monkeypatch: Any) -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": "img-1", "state": "active", "public": True}])

    _patch_transport(monkeypatch, handler)

    result = CliRunner().invoke(main, [*BASE_ARGS, "images", "list", "--state", "active", "--public"])

    assert result.exit_code == 0, result.output
    assert dict(seen[0].url.params) == {"state": "active", "public": "true"}
    assert json.loads(result.output)[0]["state"] == "active"


def test_images_list_rejects_unknown_state(monkeypatch: Any) -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    _patch_transport(monkeypatch, handler)

    result = CliRunner().invoke(main, [*BASE_ARGS, "images", "list", "--state", "bogus"])

    assert result.exit_code == 2
    assert "bogus" in result.output
