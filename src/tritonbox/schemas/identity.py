from typing import ClassVar, FrozenSet, List, Optional

from pydantic import Field

from .base import QueryInput, RequestInput, TritonModel


class Role(TritonModel):
    id: Optional[str] = None
    name: Optional[str] = None
    policies: List[str] = Field(default_factory=list)
    members: List[str] = Field(default_factory=list)
    default_members: List[str] = Field(default_factory=list)


class ListRolesInput(QueryInput):
    pass


class GetRoleInput(RequestInput):
    role_id: str = Field(min_length=1)


class DeleteRoleInput(RequestInput):
    role_id: str = Field(min_length=1)


class CreateRoleInput(RequestInput):
    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"policies", "members", "default_members"})

    name: str = Field(min_length=1)
    policies: Optional[List[str]] = None
    members: Optional[List[str]] = None
    default_members: Optional[List[str]] = None


class UpdateRoleInput(RequestInput):
    """
    Partial role update, unset fields are left untouched on the server.
    """
    omit_empty: ClassVar[FrozenSet[str]] = frozenset({"name", "policies", "members", "default_members"})

    role_id: str = Field(min_length=1, exclude=True)
    name: Optional[str] = None
    policies: Optional[List[str]] = None
    members: Optional[List[str]] = None
    default_members: Optional[List[str]] = None
