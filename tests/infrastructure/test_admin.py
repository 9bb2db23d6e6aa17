"""Tests for the admin REST client."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click
import httpx
import pytest

from pulsarctl.config.models import ClusterConfig
from pulsarctl.domain.names import NamespaceName
from pulsarctl.domain.policies import RetentionPolicy
from pulsarctl.errors import (
    NamespaceNotFoundError,
    RemoteError,
    TenantNotFoundError,
)
from pulsarctl.infrastructure.admin import PulsarAdmin, error_from_response

if TYPE_CHECKING:
    from conftest import FakeBroker

NS = NamespaceName.parse("public/default")


class TestRetention:
    def test_set_retention_posts_wire_format(
        self, admin: PulsarAdmin, fake_broker: FakeBroker
    ) -> None:
        policy = RetentionPolicy(retention_time_in_minutes=100, retention_size_in_mb=1024)
        admin.namespaces.set_retention(NS, policy)

        request = fake_broker.requests[-1]
        assert request.method == "POST"
        assert request.url.path == "/admin/v2/namespaces/public/default/retention"
        assert json.loads(request.content) == {
            "retentionTimeInMinutes": 100,
            "retentionSizeInMB": 1024,
        }

    def test_get_retention_round_trips(self, admin: PulsarAdmin) -> None:
        policy = RetentionPolicy(retention_time_in_minutes=-1, retention_size_in_mb=0)
        admin.namespaces.set_retention(NS, policy)
        assert admin.namespaces.get_retention(NS) == policy

    def test_get_retention_unset(self, admin: PulsarAdmin) -> None:
        assert admin.namespaces.get_retention(NS) is None


class TestIntegerPolicies:
    def test_message_ttl_lifecycle(self, admin: PulsarAdmin, fake_broker: FakeBroker) -> None:
        admin.namespaces.set_namespace_message_ttl(NS, 3600)
        assert admin.namespaces.get_namespace_message_ttl(NS) == 3600
        admin.namespaces.remove_namespace_message_ttl(NS)
        assert admin.namespaces.get_namespace_message_ttl(NS) is None
        assert [r.method for r in fake_broker.requests] == ["POST", "GET", "DELETE", "GET"]
        assert fake_broker.requests[2].url.path.endswith("/public/default/messageTTL")

    def test_max_consumers_lifecycle(self, admin: PulsarAdmin, fake_broker: FakeBroker) -> None:
        admin.namespaces.set_max_consumers_per_topic(NS, 10)
        assert admin.namespaces.get_max_consumers_per_topic(NS) == 10
        admin.namespaces.remove_max_consumers_per_topic(NS)
        assert admin.namespaces.get_max_consumers_per_topic(NS) is None
        assert fake_broker.requests[2].method == "DELETE"
        assert fake_broker.requests[2].url.path.endswith("/public/default/maxConsumersPerTopic")


class TestErrors:
    def test_unknown_namespace(self, admin: PulsarAdmin) -> None:
        with pytest.raises(NamespaceNotFoundError) as info:
            admin.namespaces.remove_namespace_message_ttl(NamespaceName.parse("public/missing"))
        assert info.value.status_code == 404
        assert info.value.message == "code: 404 reason: Namespace does not exist"

    def test_unknown_tenant(self, admin: PulsarAdmin) -> None:
        with pytest.raises(TenantNotFoundError):
            admin.namespaces.get_retention(NamespaceName.parse("ghost/default"))

    def test_policy_conflict(self, admin: PulsarAdmin, fake_broker: FakeBroker) -> None:
        fake_broker.backlog_quota_mb = 2048
        policy = RetentionPolicy(retention_time_in_minutes=10, retention_size_in_mb=1024)
        with pytest.raises(RemoteError) as info:
            admin.namespaces.set_retention(NS, policy)
        assert type(info.value) is RemoteError
        assert info.value.status_code == 412
        assert "Retention Quota must exceed backlog quota" in info.value.message

    def test_transport_failure(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        with PulsarAdmin("http://down:8080", transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(RemoteError) as info:
                client.namespaces.get_retention(NS)
        assert info.value.status_code is None
        assert "http://down:8080" in info.value.message


class TestErrorFromResponse:
    def _response(self, status: int, **kwargs: object) -> httpx.Response:
        request = httpx.Request("GET", "http://broker/admin/v2/namespaces/t/n/retention")
        return httpx.Response(status, request=request, **kwargs)  # type: ignore[arg-type]

    def test_reason_from_json(self) -> None:
        error = error_from_response(self._response(403, json={"reason": "Unauthorized"}))
        assert error.message == "code: 403 reason: Unauthorized"

    def test_reason_from_text(self) -> None:
        error = error_from_response(self._response(500, text="boom"))
        assert error.reason == "boom"

    def test_reason_from_status_phrase(self) -> None:
        error = error_from_response(self._response(503))
        assert error.reason == "Service Unavailable"

    def test_tenant_404(self) -> None:
        error = error_from_response(self._response(404, json={"reason": "Tenant does not exist"}))
        assert isinstance(error, TenantNotFoundError)

    @pytest.mark.parametrize(
        "reason",
        [
            "Namespace (tenant/namespace) does not exist",
            "Namespace my-tenant/orders does not exist",
            "Namespace does not exist",
        ],
    )
    def test_namespace_404_naming_a_tenant(self, reason: str) -> None:
        error = error_from_response(self._response(404, json={"reason": reason}))
        assert type(error) is NamespaceNotFoundError
        assert error.reason == reason


class TestConstruction:
    def test_bearer_token_header(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        cluster = ClusterConfig(web_service_url="http://broker:8080/", token="abc")
        with PulsarAdmin.from_config(cluster, transport=httpx.MockTransport(handler)) as client:
            client.namespaces.remove_namespace_message_ttl(NS)

        assert seen[0].headers["Authorization"] == "Bearer abc"
        expected = "http://broker:8080/admin/v2/namespaces/public/default/messageTTL"
        assert str(seen[0].url) == expected

    def test_token_from_file(self, tmp_path: Path) -> None:
        token_file = tmp_path / "token"
        token_file.write_text("file-token")
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        cluster = ClusterConfig(token_file=token_file)
        with PulsarAdmin.from_config(cluster, transport=httpx.MockTransport(handler)) as client:
            client.namespaces.remove_max_consumers_per_topic(NS)
        assert seen[0].headers["Authorization"] == "Bearer file-token"

    def test_no_auth_header_without_token(
        self, admin: PulsarAdmin, fake_broker: FakeBroker
    ) -> None:
        admin.namespaces.get_retention(NS)
        assert "Authorization" not in fake_broker.requests[0].headers


class TestTlsTrustCertificates:
    def test_missing_trust_file(self, tmp_path: Path) -> None:
        cluster = ClusterConfig(tls_trust_certs_file_path=tmp_path / "missing-ca.pem")
        with pytest.raises(click.ClickException, match="Cannot load TLS trust certificates"):
            PulsarAdmin.from_config(cluster)

    def test_unparseable_trust_file(self, tmp_path: Path) -> None:
        ca = tmp_path / "ca.pem"
        ca.write_text("not a certificate\n")
        cluster = ClusterConfig(tls_trust_certs_file_path=ca)
        with pytest.raises(click.ClickException, match="ca.pem"):
            PulsarAdmin.from_config(cluster)

    def test_insecure_skips_trust_file(self, tmp_path: Path) -> None:
        cluster = ClusterConfig(
            tls_allow_insecure=True, tls_trust_certs_file_path=tmp_path / "missing-ca.pem"
        )
        with PulsarAdmin.from_config(cluster, transport=httpx.MockTransport(_no_content)):
            pass


def _no_content(request: httpx.Request) -> httpx.Response:
    return httpx.Response(204)
