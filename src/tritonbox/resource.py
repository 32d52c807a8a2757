"""Request/response mapping shared by every resource client."""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from tritonbox.errors import DecodeError, RequestError, TritonboxError

T = TypeVar("T")


class Resource:
    """Base for resource clients bound to a shared executor."""

    def __init__(self, client: Any) -> None:
        """Initialize resource.

        Args:
            client: ``TritonClient`` instance, borrowed not owned.
        """
        self._c = client

    @property
    def account(self) -> str:
        """Account login name shared with the executor.

        Returns:
            str: First path segment of every request.
        """
        return self._c.account

    def _path(self, *segments: str) -> str:
        """Build ``/{account}/...`` path.

        Args:
            *segments: Path segments after the account. Each one is
                percent-encoded, so ids containing ``/``, ``?`` or ``#`` stay
                inside their segment.

        Returns:
            str: Absolute API path.
        """
        return "/".join(["", self.account, *(quote(segment, safe="") for segment in segments)])

    @staticmethod
    def _decode(action: str, stream: Any, result_type: Type[T]) -> T:
        """Read the whole stream and validate it as ``result_type``.

        Validation is strict, a string where a number or boolean belongs is a
        wrong-shape body rather than something to coerce.

        Args:
            action: Operation name used in the error message.
            stream: Response stream exposing ``read()``.
            result_type: Target type, e.g. ``Volume`` or ``list[Volume]``.

        Returns:
            T: Decoded value.

        Raises:
            DecodeError: Body is empty, truncated, malformed JSON or the wrong shape.
        """
        try:
            raw = stream.read()
        except httpx.RequestError as exc:
            raise DecodeError(action, exc) from exc
        try:
            return TypeAdapter(result_type).validate_json(raw, strict=True)
        except ValidationError as exc:
            raise DecodeError(action, exc) from exc

    def _execute(
        self,
        action: str,
        method: str,
        path: str,
        *,
        body: Any = None,
        query: Optional[Dict[str, str]] = None,
        result_type: Optional[Type[T]] = None,
    ) -> Optional[T]:
        """Run one round trip and map the response.

        The response stream is closed exactly once on every exit path.

        Args:
            action: Operation name, e.g. ``Get``.
            method: HTTP method.
            path: Absolute API path.
            body: Optional body value handed to the executor.
            query: Optional query parameters.
            result_type: Decode target. ``None`` skips decoding entirely.

        Returns:
            Optional[T]: Decoded result, ``None`` when ``result_type`` is ``None``.

        Raises:
            RequestError: The executor failed.
            DecodeError: The body could not be decoded.
        """
        stream = None
        try:
            try:
                stream = self._c.execute_request(method, path, body=body, query=query)
            except TritonboxError as exc:
                stream = getattr(exc, "stream", None)
                raise RequestError(action, exc) from exc

            if result_type is None:
                return None
            return self._decode(action, stream, result_type)
        finally:
            if stream is not None:
                stream.close()
