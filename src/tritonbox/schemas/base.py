from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict


class TritonModel(BaseModel):
    """
    Response snapshot of one CloudAPI resource.

    Unknown keys are ignored, fields populate by wire alias or by name.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        """
        Dump the model with wire keys.

        Returns:
            Dict[str, Any]: JSON-ready dict.
        """
        return self.model_dump(mode="json", by_alias=True)


class RequestInput(BaseModel):
    """
    Caller-owned parameters for a single operation.

    ``omit_empty`` lists wire keys dropped from the body when falsy.
    Fields marked ``exclude=True`` only feed the request path.
    """
    model_config = ConfigDict(populate_by_name=True)

    omit_empty: ClassVar[FrozenSet[str]] = frozenset()

    def to_body(self) -> Dict[str, Any]:
        """
        Serialize to a request body.

        Returns:
            Dict[str, Any]: Body with ``None`` and empty optional values removed.
        """
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {
            key: value
            for key, value in payload.items()
            if not (key in self.omit_empty and not value)
        }


class QueryInput(BaseModel):
    """
    Filter parameters rendered as a query string.
    """
    model_config = ConfigDict(populate_by_name=True)

    def to_query(self) -> Dict[str, str]:
        """
        Render non-empty filters as query parameters.

        Strings are sent verbatim, ints as base-10 text (``0`` is skipped),
        bools as ``true``/``false``.

        Returns:
            Dict[str, str]: Query parameters, empty when no filter is set.
        """
        query: Dict[str, str] = {}
        for key, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if isinstance(value, bool):
                query[key] = "true" if value else "false"
            elif isinstance(value, int):
                if value != 0:
                    query[key] = str(value)
            elif value != "":
                query[key] = str(value)
        return query
