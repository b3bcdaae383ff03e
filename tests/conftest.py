"""Shared pytest fixtures for the dashboard test suite.

Fixture overview
----------------
sample_payload   — collector JSON with installed, recently-opened and
                   deleted applications
empty_payload    — same envelope with no applications at all
mock_client      — factory building an httpx.Client over MockTransport
test_settings    — Settings pointing at a fake collector URL
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from core.config import Settings

FAKE_BASE_URL = "http://collector.test:7070"


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return {
        "os_version": {"name": "macOS", "version": "14.4.1", "platform": "darwin"},
        "osquery_version": "5.12.1",
        "last_updated": "2024-04-02T10:15:00Z",
        "installed_apps": [
            {
                "name": "Safari.app",
                "path": "/Applications/Safari.app",
                "bundle_identifier": "com.apple.Safari",
                "bundle_name": "Safari",
                "bundle_short_version": "17.4",
                "display_name": "Safari",
                "last_opened_time": 1711990000,
            },
            {
                "name": "Slack.app",
                "path": "/Applications/Slack.app",
                "bundle_identifier": "com.tinyspeck.slackmacgap",
                "bundle_name": "Slack",
                "bundle_short_version": "4.37.94",
                "last_opened_time": 1712000000,
            },
            {
                "name": "Zoom.app",
                "path": "/Applications/zoom.us.app",
                "bundle_identifier": "us.zoom.xos",
                "last_opened_time": 1700000000,
                "end_time": 1712050000,
            },
            {
                "name": "Old Tool.app",
                "path": "/Applications/Old Tool.app",
                "bundle_identifier": "com.example.oldtool",
                "end_time": 1705000000,
            },
        ],
    }


@pytest.fixture
def empty_payload(sample_payload: dict[str, Any]) -> dict[str, Any]:
    return {**sample_payload, "installed_apps": []}


@pytest.fixture
def test_settings() -> Settings:
    return Settings(INVENTORY_API_URL=FAKE_BASE_URL, INVENTORY_API_TIMEOUT_S=1)


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]:
    """Build an httpx.Client whose requests are answered by `handler`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler))

    return _make
