"""Triton identity service entrypoint."""

from __future__ import annotations

from typing import Any

from tritonbox.identity.roles import RolesClient


class IdentityService:
    """Identity service bound to a shared executor."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def roles(self) -> RolesClient:
        """Get a client for role operations.

        Returns:
            RolesClient: Handle sharing this service's executor.
        """
        return RolesClient(self._client)
