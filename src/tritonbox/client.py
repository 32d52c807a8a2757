"""Triton CloudAPI transport executor."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
import time
from types import TracebackType
from typing import Any, Dict, Mapping, Optional, Type
import uuid

import httpx

from tritonbox.errors import TransportError, map_api_error

API_VERSION = "~8"


@dataclass(frozen=True)
class TritonConfig:
    """Triton client config.

    Attributes:
        url: CloudAPI base URL, e.g. ``https://us-east-1.api.joyent.com``.
        account: Account login name used as the first path segment.
        timeout_s: Timeout in seconds for each HTTP call.
        user_agent: User-Agent header value.
        insecure_skip_tls_verify: Disable TLS certificate verification.
    """

    url: str
    account: str
    timeout_s: float = 8.0
    user_agent: str = "tritonbox"
    insecure_skip_tls_verify: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TritonConfig":
        """Build config from ``TRITON_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            TritonConfig: Loaded config.

        Raises:
            ValueError: ``TRITON_URL`` or ``TRITON_ACCOUNT`` is missing.
        """
        env = os.environ if environ is None else environ
        url = env.get("TRITON_URL", "")
        account = env.get("TRITON_ACCOUNT", "")
        if not url or not account:
            raise ValueError("TRITON_URL and TRITON_ACCOUNT must be set")
        return cls(
            url=url,
            account=account,
            timeout_s=float(env.get("TRITON_TIMEOUT") or 8.0),
            insecure_skip_tls_verify=env.get("TRITON_SKIP_TLS_VERIFY", "").lower() in {"1", "true", "yes"},
        )


class TritonClient:
    """Shared HTTP executor for all resource clients.

    The executor owns the ``httpx.Client``; resource clients only borrow it.
    Responses are opened in streaming mode and handed back unread, the caller
    is responsible for closing them.
    """

    def __init__(
        self,
        cfg: TritonConfig,
        *,
        client: Optional[httpx.Client] = None,
        auth: Optional[httpx.Auth] = None,
        headers: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize executor.

        An injected ``client`` is handed over, not borrowed: its ``base_url``,
        ``timeout`` and (when given) ``auth`` are overwritten from ``cfg``, and
        ``close()`` closes it. ``cfg.insecure_skip_tls_verify`` only applies to
        a client built here, since httpx fixes ``verify`` at construction.

        Args:
            cfg: Client configuration.
            client: Optional preconfigured ``httpx.Client``, owned from here on.
            auth: Optional auth flow applied to every request.
            headers: Extra headers sent with every request.
            logger: Optional logger instance.
        """
        self.cfg = cfg
        self.account = cfg.account
        self.logger = logger or logging.getLogger(__name__)
        self._extra_headers = dict(headers or {})
        if client is None:
            client = httpx.Client(verify=not cfg.insecure_skip_tls_verify)
        client.base_url = httpx.URL(cfg.url.rstrip("/") + "/")
        client.timeout = httpx.Timeout(timeout=cfg.timeout_s)
        if auth is not None:
            client.auth = auth
        self.client = client

    def __enter__(self) -> "TritonClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying ``httpx.Client``, injected or not."""
        self.client.close()

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Accept-Version": API_VERSION,
            "User-Agent": self.cfg.user_agent,
        }
        headers.update(self._extra_headers)
        return headers

    @staticmethod
    def _serialize_body(body: Any) -> Any:
        """Turn an input model into a JSON-ready value.

        Args:
            body: Input model, plain JSON value or ``None``.

        Returns:
            Any: JSON-ready value.
        """
        if hasattr(body, "to_body"):
            return body.to_body()
        return body

    def _build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: Optional[Dict[str, str]] = None,
    ) -> httpx.Request:
        kwargs: Dict[str, Any] = {
            "method": method.upper(),
            "url": path.lstrip("/"),
            "params": query or None,
            "headers": self._headers(),
        }
        if body is not None:
            kwargs["json"] = self._serialize_body(body)
        return self.client.build_request(**kwargs)

    def _log_step(self, task_id: str, target: str, result: str, start: float) -> None:
        duration_ms = int((time.monotonic() - start) * 1000)
        level = logging.INFO if result == "ok" else logging.WARNING
        self.logger.log(
            level,
            "task_id=%s target=%s result=%s duration_ms=%s",
            task_id,
            target,
            result,
            duration_ms,
        )

    def execute_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Send one request and return the unread response stream.

        Args:
            method: HTTP method.
            path: Absolute API path, e.g. ``/acct/images``.
            body: Optional body; input models are serialized via ``to_body``.
            query: Optional query parameters.

        Returns:
            httpx.Response: Open streaming response with a 2xx status.

        Raises:
            TransportError: The HTTP exchange could not complete.
            ApiError: The server answered with a non-success status. The
                drained response is attached as ``stream``.
        """
        task_id = uuid.uuid4().hex[:8]
        target = f"{method.upper()} {path}"
        request = self._build_request(method, path, body=body, query=query)

        start = time.monotonic()
        try:
            response = self.client.send(request, stream=True)
        except httpx.TimeoutException as exc:
            self._log_step(task_id, target, "timeout", start)
            raise TransportError(f"{target} timed out") from exc
        except httpx.RequestError as exc:
            self._log_step(task_id, target, "fail", start)
            raise TransportError(f"{target} failed: {exc.__class__.__name__}: {exc}") from exc

        if response.is_success:
            self._log_step(task_id, target, "ok", start)
            return response

        try:
            raw = response.read()
        except httpx.RequestError:
            raw = b""
        self._log_step(task_id, target, f"status_{response.status_code}", start)
        raise map_api_error(target, response.status_code, raw, stream=response)
