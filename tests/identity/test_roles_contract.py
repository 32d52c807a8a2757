#!/usr/bin/env python3

"""Contract tests for the identity service and roles client."""

from __future__ import annotations

import pytest

from tritonbox.errors import AuthError, RequestError
from tritonbox.identity.identity import IdentityService
from tritonbox.identity.roles import RolesClient
from tritonbox.schemas.identity import (
    CreateRoleInput,
    DeleteRoleInput,
    GetRoleInput,
    UpdateRoleInput,
)

ROLE_ID = "4025de02-b4b6-4041-ae72-0749e99a5ac4"
ROLE_BODY = """{
  "id": "4025de02-b4b6-4041-ae72-0749e99a5ac4",
  "name": "readable",
  "members": ["alice"],
  "default_members": ["alice"],
  "policies": ["readinstance"]
}"""


@pytest.fixture
def roles(executor) -> RolesClient:
    return IdentityService(executor).roles()


def test_roles_accessor_shares_executor(executor) -> None:
    service = IdentityService(executor)

    roles = service.roles()

    assert isinstance(roles, RolesClient)
    assert roles.account == "testing"


def test_list_roles(roles, executor) -> None:
    executor.respond(f"[{ROLE_BODY}]")

    result = roles.list()

    assert executor.last_call["method"] == "GET"
    assert executor.last_call["path"] == "/testing/roles"
    assert executor.last_call["query"] == {}
    assert result[0].policies == ["readinstance"]


def test_get_role(roles, executor) -> None:
    executor.respond(ROLE_BODY)

    role = roles.get(GetRoleInput(role_id=ROLE_ID))

    assert executor.last_call["path"] == f"/testing/roles/{ROLE_ID}"
    assert role.name == "readable"
    assert role.default_members == ["alice"]


def test_create_role_body(roles, executor) -> None:
    executor.respond(ROLE_BODY)

    roles.create(CreateRoleInput(name="readable", policies=["readinstance"], members=[]))

    assert executor.last_call["method"] == "POST"
    assert executor.last_call["path"] == "/testing/roles"
    assert executor.last_call["body"] == {"name": "readable", "policies": ["readinstance"]}


def test_update_role_sends_only_set_fields(roles, executor) -> None:
    executor.respond(ROLE_BODY)

    roles.update(UpdateRoleInput(role_id=ROLE_ID, members=["alice", "bob"]))

    assert executor.last_call["method"] == "POST"
    assert executor.last_call["path"] == f"/testing/roles/{ROLE_ID}"
    assert executor.last_call["body"] == {"members": ["alice", "bob"]}


def test_delete_role(roles, executor) -> None:
    stream = executor.respond(b"")

    roles.delete(DeleteRoleInput(role_id=ROLE_ID))

    assert executor.last_call["method"] == "DELETE"
    assert stream.read_calls == 0
    assert stream.close_calls == 1


def test_role_request_error(roles, executor) -> None:
    executor.fail(AuthError("GET failed with status 401", status_code=401))

    with pytest.raises(RequestError, match="Error executing ListRoles request:") as excinfo:
        roles.list()

    assert isinstance(excinfo.value.__cause__, AuthError)
