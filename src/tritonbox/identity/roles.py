"""Triton identity role operations."""

from __future__ import annotations

from typing import List, Optional

from tritonbox.resource import Resource
from tritonbox.schemas.identity import (
    CreateRoleInput,
    DeleteRoleInput,
    GetRoleInput,
    ListRolesInput,
    Role,
    UpdateRoleInput,
)


class RolesClient(Resource):
    """Role operations under ``/{account}/roles``."""

    def list(self, params: Optional[ListRolesInput] = None) -> List[Role]:
        """List roles.

        Args:
            params: Optional filters, none are defined today.

        Returns:
            List[Role]: Decoded roles.
        """
        query = (params or ListRolesInput()).to_query()
        return self._execute(
            "ListRoles",
            "GET",
            self._path("roles"),
            query=query,
            result_type=List[Role],
        )

    def get(self, params: GetRoleInput) -> Role:
        """Get one role.

        Args:
            params: Role id or name.

        Returns:
            Role: Decoded role.
        """
        return self._execute(
            "GetRole",
            "GET",
            self._path("roles", params.role_id),
            result_type=Role,
        )

    def create(self, params: CreateRoleInput) -> Role:
        """Create a role.

        Args:
            params: Role name with optional policies and members.

        Returns:
            Role: The created role.
        """
        return self._execute(
            "CreateRole",
            "POST",
            self._path("roles"),
            body=params,
            result_type=Role,
        )

    def update(self, params: UpdateRoleInput) -> Role:
        """Update a role. Only set fields are sent.

        Args:
            params: Role id and fields to change.

        Returns:
            Role: Updated role.
        """
        return self._execute(
            "UpdateRole",
            "POST",
            self._path("roles", params.role_id),
            body=params,
            result_type=Role,
        )

    def delete(self, params: DeleteRoleInput) -> None:
        """Delete a role. The response body is never read.

        Args:
            params: Role id or name.
        """
        self._execute("DeleteRole", "DELETE", self._path("roles", params.role_id))
