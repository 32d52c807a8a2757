#!/usr/bin/env python3
"""
pytest 配置文件，定义测试用的 fixtures
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest


class FakeStream:
    """Response stream that records close calls."""

    def __init__(self, raw: bytes = b"") -> None:
        self.raw = raw
        self.read_calls = 0
        self.close_calls = 0

    def read(self) -> bytes:
        self.read_calls += 1
        return self.raw

    def close(self) -> None:
        self.close_calls += 1


class FakeExecutor:
    """Stand-in for ``TritonClient.execute_request``."""

    def __init__(self, account: str = "testing") -> None:
        self.account = account
        self.calls: List[Dict[str, Any]] = []
        self.stream: Optional[FakeStream] = FakeStream()
        self.error: Optional[Exception] = None

    def respond(self, raw: bytes | str) -> FakeStream:
        """Answer the next call with ``raw`` as body."""
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        self.stream = FakeStream(raw)
        self.error = None
        return self.stream

    def fail(self, error: Exception) -> None:
        """Raise ``error`` from the next call."""
        self.error = error

    def execute_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: Optional[Dict[str, str]] = None,
    ) -> FakeStream:
        self.calls.append(
            {
                "method": method,
                "path": path,
                "body": body.to_body() if hasattr(body, "to_body") else body,
                "query": query,
            }
        )
        if self.error is not None:
            raise self.error
        return self.stream

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def executor() -> FakeExecutor:
    """提供测试用的 fake executor, account 为 ``testing``"""
    return FakeExecutor()
