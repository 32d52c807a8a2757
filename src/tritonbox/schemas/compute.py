from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import Field

from .base import QueryInput, RequestInput, TritonModel


class ImageState(str, Enum):
    """
    Server-side image lifecycle states.

    unactivated -> activating -> active, with ``failed`` on error and
    ``disabled`` as terminal. Reported verbatim, never enforced.
    """
    UNACTIVATED = "unactivated"
    ACTIVATING = "activating"
    ACTIVE = "active"
    FAILED = "failed"
    DISABLED = "disabled"
    CREATING = "creating"


class TritonError(TritonModel):
    """Error descriptor embedded in an image record."""
    code: Optional[str] = None
    message: Optional[str] = None


class ImageFile(TritonModel):
    compression: Optional[str] = None
    sha1: Optional[str] = None
    size: Optional[int] = None


class Image(TritonModel):
    """
    Image record as returned by CloudAPI.

    ``state`` is kept as the raw string, compare it against ``ImageState``
    values. Unknown states from newer servers still decode.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    os: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    type: Optional[str] = None
    requirements: Dict[str, Any] = Field(default_factory=dict)
    homepage: Optional[str] = None
    files: List[ImageFile] = Field(default_factory=list)
    published_at: Optional[datetime] = None
    owner: Optional[str] = None
    public: Optional[bool] = None
    state: Optional[str] = None
    tags: Dict[str, str] = Field(default_factory=dict)
    eula: Optional[str] = None
    acl: List[str] = Field(default_factory=list)
    error: Optional[TritonError] = None


class MantaLocation(TritonModel):
    """Object store location of an exported image."""
    manta_url: Optional[str] = None
    image_path: Optional[str] = None
    manifest_path: Optional[str] = None


class Volume(TritonModel):
    """
    Volume record as returned by CloudAPI.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    owner_id: Optional[str] = Field(default=None, alias="owner_uuid")
    type: Optional[str] = None
    state: Optional[str] = None
    networks: List[str] = Field(default_factory=list)
    refs: List[str] = Field(default_factory=list)
    size: Optional[int] = None
    filesystem_path: Optional[str] = None
    created: Optional[datetime] = Field(default=None, alias="create_timestamp")


class ListImagesInput(QueryInput):
    name: Optional[str] = None
    os: Optional[str] = None
    version: Optional[str] = None
    public: Optional[bool] = None
    state: Optional[str] = None
    owner: Optional[str] = None
    type: Optional[str] = None


class GetImageInput(RequestInput):
    image_id: str = Field(min_length=1)


class DeleteImageInput(RequestInput):
    image_id: str = Field(min_length=1)


class ExportImageInput(RequestInput):
    image_id: str = Field(min_length=1)
    manta_path: str = Field(min_length=1)


class CreateImageFromMachineInput(RequestInput):
    """
    Snapshot a running machine into a new image.
    """
    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"version", "description", "homepage", "eula", "acl", "tags"})

    machine_id: str = Field(min_length=1, alias="machine")
    name: str
    version: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None
    eula: Optional[str] = None
    acl: Optional[List[str]] = None
    tags: Optional[Dict[str, str]] = None


class UpdateImageInput(RequestInput):
    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"version", "description", "homepage", "eula", "acl", "tags"})

    image_id: str = Field(min_length=1, exclude=True)
    name: str
    version: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None
    eula: Optional[str] = None
    acl: Optional[List[str]] = None
    tags: Optional[Dict[str, str]] = None


class ListVolumesInput(QueryInput):
    name: Optional[str] = None
    size: Optional[int] = None
    state: Optional[str] = None
    type: Optional[str] = None


class GetVolumeInput(RequestInput):
    id: str = Field(min_length=1)


class CreateVolumeInput(RequestInput):
    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"name", "size"})

    name: Optional[str] = None
    size: Optional[int] = None
    type: Optional[str] = None
    networks: Optional[List[str]] = None


class DeleteVolumeInput(RequestInput):
    id: str = Field(min_length=1)


class UpdateVolumeInput(RequestInput):
    """
    Rename a volume. Only ``name`` is mutable.
    """
    id: str = Field(min_length=1, exclude=True)
    name: str
