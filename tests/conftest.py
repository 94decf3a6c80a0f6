"""
Shared pytest fixtures for wztools tests.

This module provides:
- A valid `WorkZoneConfig` and its on-disk JSON shape
- An isolated config directory (via WZTOOLS_CONFIG_DIR) for CLI tests
- A small router on top of `httpx.MockTransport` to fake XSUAA / Work Zone
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Tuple

import httpx
import pytest

# Add src/ to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from core.config import AppSettings  # noqa: E402
from core.domain.models import WorkZoneConfig  # noqa: E402

XSUAA_URL = "https://acme.authentication.eu10.hana.ondemand.com"
WORKZONE_HOST = "acme.dt.launchpad.cfapps.eu10.hana.ondemand.com"


@pytest.fixture
def config_values() -> Dict[str, str]:
    return {
        "client_id": "sb-client",
        "client_secret": "s3cr3t",
        "user_id": "tech.user@acme.com",
        "password": "p4ssw0rd",
        "xsuaa_url": XSUAA_URL,
        "workzone_host": WORKZONE_HOST,
        "subdomain": "acme",
        "subaccount_id": "1234-abcd",
    }


@pytest.fixture
def sample_config(config_values) -> WorkZoneConfig:
    return WorkZoneConfig(**config_values)


@pytest.fixture
def config_dir(tmp_path) -> Path:
    return tmp_path / ".wztools"


@pytest.fixture
def isolated_env(monkeypatch, config_dir) -> Path:
    """Point the CLI at a temp config dir; returns the config file path."""
    monkeypatch.setenv("WZTOOLS_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("WZTOOLS_LOG_LEVEL", raising=False)
    return config_dir / "config.json"


@pytest.fixture
def settings(config_dir) -> AppSettings:
    return AppSettings(config_dir=config_dir, http_timeout_seconds=5.0)


Handler = Callable[[httpx.Request], httpx.Response]


@dataclass
class FakeServer:
    """
    Route requests by (method, path) to canned handlers.

    Usage:
        def test_token(fake_server):
            fake_server.add("POST", "/oauth/token", lambda r: httpx.Response(200, json={...}))
            transport = fake_server.transport()
    """

    routes: Dict[Tuple[str, str], Handler] = field(default_factory=dict)
    requests: List[httpx.Request] = field(default_factory=list)

    def add(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method.upper(), path)] = handler

    def reply(self, method: str, path: str, status_code: int, **kwargs) -> None:
        self.add(method, path, lambda request: httpx.Response(status_code, **kwargs))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"error": "route not mocked"})
        return handler(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def fake_server() -> FakeServer:
    return FakeServer()
