"""Shared fixtures: a fake GitHub served through httpx.MockTransport."""

import json

import httpx
import pytest

from github_rest_manager.config import reset_stored_config
from github_rest_manager.settings import Settings


class FakeGitHub:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self):
        self.routes = {}
        self.requests: list[httpx.Request] = []

    def add(self, method, path, status=200, json_body=None, text=None, headers=None):
        self.routes[(method, path)] = (status, json_body, text, headers or {})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(
                404,
                json={"message": "Not Found", "documentation_url": "https://docs.github.com/rest"},
            )
        status, json_body, text, headers = route
        if json_body is not None:
            return httpx.Response(status, json=json_body, headers=headers)
        if text is not None:
            return httpx.Response(status, text=text, headers=headers)
        return httpx.Response(status, headers=headers)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """No stored credentials and no GITHUB_TOKEN leaking in from the environment."""
    for name in ("GITHUB_TOKEN", "GITHUB_API_URL", "GITHUB_REQUEST_TIMEOUT", "GITHUB_DEFAULT_ERROR_MESSAGE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    monkeypatch.setattr("github_rest_manager.config.get_settings", lambda: settings)
    monkeypatch.setattr("github_rest_manager.manager.get_settings", lambda: settings)
    reset_stored_config()
    yield
    reset_stored_config()


@pytest.fixture
def github():
    return FakeGitHub()


@pytest.fixture
def make_manager(github):
    """Build a manager of the given class wired to the fake GitHub."""
    managers = []

    def _make(cls, access_token="test-token", **kwargs):
        manager = cls(access_token, transport=github.transport, **kwargs)
        managers.append(manager)
        return manager

    yield _make
    for manager in managers:
        manager.close()
