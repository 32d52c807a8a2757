"""Triton error types and HTTP error mapping."""

from __future__ import annotations

import json
from typing import Any


class TritonboxError(Exception):
    """Base error for tritonbox."""


class TransportError(TritonboxError):
    """HTTP exchange could not complete (connection failure, timeout)."""

    def __init__(self, message: str, *, stream: Any = None) -> None:
        """Initialize transport error.

        Args:
            message: Error message.
            stream: Response stream opened before the failure, if any.
        """
        super().__init__(message)
        self.stream = stream


class ApiError(TransportError):
    """Non-success HTTP status returned by CloudAPI."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        code: str | None = None,
        api_message: str | None = None,
        stream: Any = None,
    ) -> None:
        """Initialize API error.

        Args:
            message: Error message.
            status_code: HTTP status code.
            code: Triton error code from the response body.
            api_message: Triton error message from the response body.
            stream: Already drained response stream.
        """
        super().__init__(message, stream=stream)
        self.status_code = status_code
        self.code = code
        self.api_message = api_message


class AuthError(ApiError):
    """Authentication failure."""


class PermissionError(ApiError):
    """Permission denied."""


class NotFoundError(ApiError):
    """Resource not found."""


class InvalidRequest(ApiError):
    """Bad request from client input."""


class RequestError(TritonboxError):
    """Resource operation failed while executing the HTTP request."""

    def __init__(self, action: str, cause: Exception) -> None:
        super().__init__(f"Error executing {action} request: {cause}")
        self.action = action


class DecodeError(TritonboxError):
    """Resource operation got a response body it could not decode."""

    def __init__(self, action: str, cause: Exception) -> None:
        super().__init__(f"Error decoding {action} response: {cause}")
        self.action = action


def _parse_error_body(raw: bytes) -> tuple[str | None, str | None]:
    """Extract Triton ``code`` and ``message`` from an error body.

    Args:
        raw: Raw response body.

    Returns:
        tuple[str | None, str | None]: Error code and message, ``None`` when absent.
    """
    if not raw:
        return None, None
    try:
        payload = json.loads(raw)
    except ValueError:
        return None, None
    if not isinstance(payload, dict):
        return None, None
    code = payload.get("code")
    message = payload.get("message")
    return (str(code) if code else None), (str(message) if message else None)


def map_api_error(target: str, status_code: int, raw: bytes, *, stream: Any = None) -> ApiError:
    """Map a non-success HTTP response to a tritonbox error.

    Args:
        target: Request target used in the message, e.g. ``GET /acct/images``.
        status_code: HTTP status code.
        raw: Response body bytes.
        stream: Drained response stream handed over to the caller for release.

    Returns:
        ApiError: Mapped error instance.
    """
    code, api_message = _parse_error_body(raw)
    detail = f"{code}: {api_message}" if code and api_message else (api_message or code or "")
    message = f"{target} failed with status {status_code}"
    if detail:
        message = f"{message} ({detail})"

    code_lower = (code or "").lower()
    if status_code == 401 or code_lower in {"invalidcredentials", "unauthorized"}:
        error_cls: type[ApiError] = AuthError
    elif status_code == 403 or code_lower == "notauthorized":
        error_cls = PermissionError
    elif status_code == 404 or code_lower == "resourcenotfound":
        error_cls = NotFoundError
    elif status_code in {400, 409, 422} or code_lower in {"invalidargument", "missingparameter"}:
        error_cls = InvalidRequest
    else:
        error_cls = ApiError

    return error_cls(
        message,
        status_code=status_code,
        code=code,
        api_message=api_message,
        stream=stream,
    )
