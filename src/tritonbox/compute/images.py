"""Triton compute image operations."""

from __future__ import annotations

from typing import List, Optional

from tritonbox.resource import Resource
from tritonbox.schemas.compute import (
    CreateImageFromMachineInput,
    DeleteImageInput,
    ExportImageInput,
    GetImageInput,
    Image,
    ListImagesInput,
    MantaLocation,
    UpdateImageInput,
)


class ImagesClient(Resource):
    """Image operations under ``/{account}/images``."""

    def list(self, params: Optional[ListImagesInput] = None) -> List[Image]:
        """List images visible to the account.

        Args:
            params: Optional filters. Unset filters are not sent.

        Returns:
            List[Image]: Decoded images.
        """
        query = (params or ListImagesInput()).to_query()
        return self._execute(
            "ListImages",
            "GET",
            self._path("images"),
            query=query,
            result_type=List[Image],
        )

    def get(self, params: GetImageInput) -> Image:
        """Get one image.

        Args:
            params: Image id.

        Returns:
            Image: Decoded image.
        """
        return self._execute(
            "GetImage",
            "GET",
            self._path("images", params.image_id),
            result_type=Image,
        )

    def delete(self, params: DeleteImageInput) -> None:
        """Delete an image. The response body is not decoded.

        Args:
            params: Image id.
        """
        self._execute("DeleteImage", "DELETE", self._path("images", params.image_id))

    def export(self, params: ExportImageInput) -> MantaLocation:
        """Export an image to the object store.

        Args:
            params: Image id and target object store path.

        Returns:
            MantaLocation: Where the image and manifest were written.
        """
        return self._execute(
            "ExportImage",
            "GET",
            self._path("images", params.image_id),
            query={"action": "export", "manta_path": params.manta_path},
            result_type=MantaLocation,
        )

    def create_from_machine(self, params: CreateImageFromMachineInput) -> Image:
        """Snapshot a machine into a new image.

        Args:
            params: Machine id, image name and optional metadata.

        Returns:
            Image: The new image record, usually in ``creating`` state.
        """
        return self._execute(
            "CreateImageFromMachine",
            "POST",
            self._path("images"),
            body=params,
            result_type=Image,
        )

    def update(self, params: UpdateImageInput) -> Image:
        """Update image metadata via ``action=update``.

        Args:
            params: Image id and fields to change.

        Returns:
            Image: Updated image record.
        """
        return self._execute(
            "UpdateImage",
            "POST",
            self._path("images", params.image_id),
            body=params,
            query={"action": "update"},
            result_type=Image,
        )
