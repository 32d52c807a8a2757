"""Triton compute volume operations."""

from __future__ import annotations

from typing import List, Optional

from tritonbox.resource import Resource
from tritonbox.schemas.compute import (
    CreateVolumeInput,
    DeleteVolumeInput,
    GetVolumeInput,
    ListVolumesInput,
    UpdateVolumeInput,
    Volume,
)


class VolumesClient(Resource):
    """Volume operations under ``/{account}/volumes``."""

    def list(self, params: Optional[ListVolumesInput] = None) -> List[Volume]:
        """List volumes.

        Args:
            params: Optional ``name``/``size``/``state``/``type`` filters.

        Returns:
            List[Volume]: Decoded volumes.
        """
        query = (params or ListVolumesInput()).to_query()
        return self._execute(
            "List",
            "GET",
            self._path("volumes"),
            query=query,
            result_type=List[Volume],
        )

    def get(self, params: GetVolumeInput) -> Volume:
        """Get one volume.

        Args:
            params: Volume id.

        Returns:
            Volume: Decoded volume.
        """
        return self._execute(
            "Get",
            "GET",
            self._path("volumes", params.id),
            result_type=Volume,
        )

    def create(self, params: CreateVolumeInput) -> Volume:
        """Create a volume.

        Args:
            params: Volume spec. ``name`` and ``size`` are omitted when empty.

        Returns:
            Volume: The created volume.
        """
        return self._execute(
            "Create",
            "POST",
            self._path("volumes"),
            body=params,
            result_type=Volume,
        )

    def delete(self, params: DeleteVolumeInput) -> None:
        """Delete a volume. The response body is never read.

        Args:
            params: Volume id.
        """
        self._execute("Delete", "DELETE", self._path("volumes", params.id))

    def update(self, params: UpdateVolumeInput) -> None:
        """Rename a volume. CloudAPI answers 204 so nothing is decoded.

        Args:
            params: Volume id and new name.
        """
        self._execute(
            "Update",
            "POST",
            self._path("volumes", params.id),
            body=params,
        )
