"""Triton module entrypoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from tritonbox.client import TritonClient, TritonConfig
from tritonbox.compute.compute import Compute
from tritonbox.identity.identity import IdentityService


@dataclass(frozen=True)
class TritonOptions:
    """Triton runtime options.

    Attributes:
        timeout_s: Timeout in seconds for each HTTP call.
        user_agent: User-Agent header value.
        insecure_skip_tls_verify: Disable TLS certificate verification.
    """

    timeout_s: float = 8.0
    user_agent: str = "tritonbox"
    insecure_skip_tls_verify: bool = False


class Triton:
    """Triton service aggregator.

    Example:
        triton = Triton(url="https://us-east-1.api.joyent.com", account="acct")
        triton.compute.images.list()
        triton.identity.roles().list()
    """

    def __init__(
        self,
        *,
        url: str,
        account: str,
        options: Optional[TritonOptions] = None,
        auth: Optional[httpx.Auth] = None,
        headers: Optional[Dict[str, str]] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize Triton facade.

        Args:
            url: CloudAPI base URL.
            account: Account login name.
            options: Runtime options.
            auth: Optional auth flow, e.g. an HTTP signature implementation.
            headers: Extra headers sent with every request.
            http_client: Optional preconfigured ``httpx.Client``, closed by ``close()``.
        """
        opt = options or TritonOptions()
        self._client = TritonClient(
            TritonConfig(
                url=url,
                account=account,
                timeout_s=opt.timeout_s,
                user_agent=opt.user_agent,
                insecure_skip_tls_verify=opt.insecure_skip_tls_verify,
            ),
            client=http_client,
            auth=auth,
            headers=headers,
        )
        self.compute = Compute(self._client)
        self.identity = IdentityService(self._client)

    @classmethod
    def from_config(cls, cfg: TritonConfig, **kwargs) -> "Triton":
        """Build facade from a loaded ``TritonConfig``.

        Args:
            cfg: Loaded config.
            **kwargs: Passed through to ``__init__`` (auth, headers, http_client).

        Returns:
            Triton: Facade instance.
        """
        return cls(
            url=cfg.url,
            account=cfg.account,
            options=TritonOptions(
                timeout_s=cfg.timeout_s,
                user_agent=cfg.user_agent,
                insecure_skip_tls_verify=cfg.insecure_skip_tls_verify,
            ),
            **kwargs,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Triton":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
