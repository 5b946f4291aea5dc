"""
Pytest fixtures and configuration for the test suite.

Mocking strategy:
- HTTP goes through `httpx.MockTransport`, so the real client, headers and
  envelope parsing are exercised without touching the network.
- Async code is driven with `asyncio.run` (no pytest plugin needed).
"""

import os
import sys
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

# Add src/ to path so tests can import cli/core/adapters without installing
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from adapters.http_client import build_api_client  # noqa: E402
from core.config import AppSettings  # noqa: E402
from core.domain.models import Credentials  # noqa: E402

API_BASE = "https://api.cloudflare.com/client/v4/"


@pytest.fixture(autouse=True)
def clean_cloudflare_env(monkeypatch):
    """Real CLOUDFLARE_* variables must never leak into the tests."""
    for key in list(os.environ):
        if key.upper().startswith("CLOUDFLARE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key="c2547eb745079dac9320b638f5e225cf483cc5cfdda41", email="ops@example.com")


@pytest.fixture
def make_http(credentials) -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build the real API client on top of a request handler."""

    def _make(handler):
        return build_api_client(credentials, AppSettings(), transport=httpx.MockTransport(handler))

    return _make


def zones_page(domains, *, page=1, total_pages=1, total_count=None):
    """Cloudflare-shaped `GET /zones` envelope."""
    return {
        "success": True,
        "errors": [],
        "messages": [],
        "result": [
            {"id": zone_id, "name": name, "status": "active", "paused": False}
            for zone_id, name in domains
        ],
        "result_info": {
            "page": page,
            "per_page": 20,
            "total_pages": total_pages,
            "count": len(domains),
            "total_count": total_count if total_count is not None else len(domains),
        },
    }


def error_envelope(*messages, code=9103):
    return {
        "success": False,
        "errors": [{"code": code, "message": message} for message in messages],
        "messages": [],
        "result": None,
    }
