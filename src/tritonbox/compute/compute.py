"""Triton compute service entrypoint."""

from __future__ import annotations

from typing import Any

from tritonbox.compute.images import ImagesClient
from tritonbox.compute.volumes import VolumesClient


class Compute:
    """Compute resource aggregator.

    Example:
        compute = Compute(client)
        compute.volumes.list(ListVolumesInput(state="ready"))
    """

    def __init__(self, client: Any) -> None:
        """Initialize compute facade.

        Args:
            client: Shared ``TritonClient``.
        """
        self._client = client
        self.images = ImagesClient(client)
        self.volumes = VolumesClient(client)
