from __future__ import annotations

from pathlib import Path
from typing import Iterable

import httpx
import pytest
from dotenv import load_dotenv

# Test overrides win over the repository defaults but never over the shell
TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)

# Hosts served by httpx.MockTransport or ASGITransport in the test suite
OFFLINE_ALLOWED_PREFIXES: Iterable[str] = (
    "http://mock",
    "https://mock",
    "http://localhost",
    "http://127.0.0.1",
    "/",
)


def _is_allowed(url: str) -> bool:
    return any(url.startswith(prefix) for prefix in OFFLINE_ALLOWED_PREFIXES)


@pytest.fixture(autouse=True)
def _offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    """Fail any test that would reach GitHub, npm or an LLM provider."""
    orig_sync = httpx.Client.request
    orig_async = httpx.AsyncClient.request

    def offline_sync(self, method, url, *args, **kwargs):
        if not _is_allowed(str(url)):
            raise RuntimeError(f"External HTTP blocked in tests: {method} {url}")
        return orig_sync(self, method, url, *args, **kwargs)

    async def offline_async(self, method, url, *args, **kwargs):
        if not _is_allowed(str(url)):
            raise RuntimeError(f"External HTTP blocked in tests: {method} {url}")
        return await orig_async(self, method, url, *args, **kwargs)

    monkeypatch.setattr(httpx.Client, "request", offline_sync)
    monkeypatch.setattr(httpx.AsyncClient, "request", offline_async)
