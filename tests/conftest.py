"""Shared pytest fixtures and test helpers for pulsarctl tests."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import httpx
import pytest
from click.testing import CliRunner

from pulsarctl.infrastructure.admin import PulsarAdmin


class FakeBroker:
    """In-memory admin REST API served through :class:`httpx.MockTransport`.

    Knows the ``public`` tenant and the ``public/default`` namespace.
    Policies are stored as the decoded JSON bodies they were posted with.
    Every request is recorded in :attr:`requests`.
    """

    def __init__(self) -> None:
        self.tenants: set[str] = {"public"}
        self.namespaces: set[str] = {"public/default"}
        self.policies: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []
        self.backlog_quota_mb: int | None = None
        self.missing_namespace_reason = "Namespace does not exist"

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.split("/")
        if len(parts) != 7 or parts[1:4] != ["admin", "v2", "namespaces"]:
            return httpx.Response(404, json={"reason": "Not Found"})
        tenant, namespace, policy = parts[4:]
        if tenant not in self.tenants:
            return httpx.Response(404, json={"reason": "Tenant does not exist"})
        name = f"{tenant}/{namespace}"
        if name not in self.namespaces:
            reason = self.missing_namespace_reason.format(name=name)
            return httpx.Response(404, json={"reason": reason})

        key = (name, policy)
        if request.method == "GET":
            if key not in self.policies:
                return httpx.Response(204)
            return httpx.Response(200, json=self.policies[key])
        if request.method == "POST":
            body = json.loads(request.content)
            if policy == "retention" and self._below_backlog_quota(body):
                return httpx.Response(
                    412, json={"reason": "Retention Quota must exceed backlog quota"}
                )
            self.policies[key] = body
            return httpx.Response(204)
        if request.method == "DELETE":
            self.policies.pop(key, None)
            return httpx.Response(204)
        return httpx.Response(405, json={"reason": "Method Not Allowed"})

    def _below_backlog_quota(self, body: dict[str, Any]) -> bool:
        if self.backlog_quota_mb is None:
            return False
        size = body["retentionSizeInMB"]
        return size != -1 and size < self.backlog_quota_mb


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no PULSARCTL_* variables."""
    for key in list(os.environ):
        if key.startswith("PULSARCTL_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_broker() -> FakeBroker:
    return FakeBroker()


@pytest.fixture
def admin(fake_broker: FakeBroker) -> PulsarAdmin:
    """Admin client wired to the fake broker."""
    client = PulsarAdmin("http://broker.test:8080", transport=fake_broker.transport())
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def broker(fake_broker: FakeBroker, monkeypatch: pytest.MonkeyPatch) -> FakeBroker:
    """Route every CLI-created admin client to the fake broker."""
    build = PulsarAdmin.from_config.__func__

    def from_config(cls: type[PulsarAdmin], cluster: Any, *, transport: Any = None) -> PulsarAdmin:
        return build(cls, cluster, transport=fake_broker.transport())

    monkeypatch.setattr(PulsarAdmin, "from_config", classmethod(from_config))
    return fake_broker
