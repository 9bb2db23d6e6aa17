"""PulsarAdmin — synchronous client for the broker's v2 admin REST API.

One :class:`httpx.Client` per process.  Every call is a single blocking
request; there are no retries.  Non-2xx responses and transport
failures are raised as :class:`~pulsarctl.errors.RemoteError` subclasses
so callers never see raw httpx exceptions.
"""

from __future__ import annotations

import logging
import ssl
from types import TracebackType
from typing import TYPE_CHECKING, Any

import httpx

from pulsarctl.domain.policies import RetentionPolicy
from pulsarctl.errors import NamespaceNotFoundError, RemoteError, TenantNotFoundError

if TYPE_CHECKING:
    from pulsarctl.config.models import ClusterConfig
    from pulsarctl.domain.names import NamespaceName

logger = logging.getLogger(__name__)

API_BASE = "/admin/v2"


def _reason(response: httpx.Response) -> str:
    """Extract the broker's error reason, falling back to the raw body."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("reason"):
        return str(payload["reason"])
    text = response.text.strip()
    return text or response.reason_phrase


def error_from_response(response: httpx.Response) -> RemoteError:
    """Map an error response onto the exception taxonomy.

    404s name either the tenant or the namespace; the broker's reason
    text is the only thing that tells them apart.  The subject is the
    reason's first word, since a namespace reason quotes the full
    ``tenant/namespace`` name.
    """
    reason = _reason(response)
    status = response.status_code
    if status == 404:
        if reason.lower().startswith("tenant"):
            return TenantNotFoundError(reason, status_code=status)
        return NamespaceNotFoundError(reason, status_code=status)
    return RemoteError(reason, status_code=status)


def _verify_from_config(cluster: ClusterConfig) -> ssl.SSLContext | bool:
    if cluster.tls_allow_insecure:
        return False
    cafile = cluster.tls_trust_certs_file_path
    if cafile is None:
        return True
    try:
        return ssl.create_default_context(cafile=str(cafile))
    except OSError as exc:
        import click

        msg = f"Cannot load TLS trust certificates from {cafile}: {exc}"
        raise click.ClickException(msg) from exc


class PulsarAdmin:
    """Admin API client.  Use as a context manager or call :meth:`close`."""

    def __init__(
        self,
        web_service_url: str,
        *,
        token: str | None = None,
        verify: ssl.SSLContext | bool = True,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.web_service_url = web_service_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.web_service_url,
            headers=headers,
            timeout=timeout,
            verify=verify,
            transport=transport,
        )
        self._namespaces: Namespaces | None = None

    @classmethod
    def from_config(
        cls,
        cluster: ClusterConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> PulsarAdmin:
        """Build a client from the ``[cluster]`` settings section."""
        return cls(
            cluster.web_service_url,
            token=cluster.resolve_token(),
            verify=_verify_from_config(cluster),
            timeout=cluster.request_timeout,
            transport=transport,
        )

    @property
    def namespaces(self) -> Namespaces:
        """Namespace policy operations."""
        if self._namespaces is None:
            self._namespaces = Namespaces(self)
        return self._namespaces

    def request(self, method: str, path: str, *, json: Any = None) -> httpx.Response:
        """Send one request and return the successful response.

        Raises:
            RemoteError: Transport failure or non-2xx status.
        """
        logger.debug("%s %s%s", method, self.web_service_url, path)
        try:
            response = self._client.request(method, path, json=json)
        except httpx.HTTPError as exc:
            logger.debug("Request to %s failed", path, exc_info=True)
            raise RemoteError(f"request to {self.web_service_url} failed: {exc}") from exc

        if response.is_error:
            error = error_from_response(response)
            logger.debug("Admin API returned %s: %s", error.status_code, error.reason)
            raise error
        return response

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> PulsarAdmin:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _json_or_none(response: httpx.Response) -> Any:
    """Decode a JSON body, treating an empty body as "not set"."""
    if not response.content.strip():
        return None
    return response.json()


class Namespaces:
    """Namespace policy endpoints under ``/admin/v2/namespaces``."""

    def __init__(self, admin: PulsarAdmin) -> None:
        self._admin = admin

    @staticmethod
    def _path(namespace: NamespaceName, policy: str) -> str:
        return f"{API_BASE}/namespaces/{namespace.rest_path}/{policy}"

    # --- retention ---

    def get_retention(self, namespace: NamespaceName) -> RetentionPolicy | None:
        response = self._admin.request("GET", self._path(namespace, "retention"))
        payload = _json_or_none(response)
        if payload is None:
            return None
        return RetentionPolicy.model_validate(payload)

    def set_retention(self, namespace: NamespaceName, policy: RetentionPolicy) -> None:
        self._admin.request(
            "POST",
            self._path(namespace, "retention"),
            json=policy.model_dump(by_alias=True),
        )

    # --- message TTL ---

    def get_namespace_message_ttl(self, namespace: NamespaceName) -> int | None:
        response = self._admin.request("GET", self._path(namespace, "messageTTL"))
        return _json_or_none(response)

    def set_namespace_message_ttl(self, namespace: NamespaceName, ttl_seconds: int) -> None:
        self._admin.request("POST", self._path(namespace, "messageTTL"), json=ttl_seconds)

    def remove_namespace_message_ttl(self, namespace: NamespaceName) -> None:
        self._admin.request("DELETE", self._path(namespace, "messageTTL"))

    # --- max consumers per topic ---

    def get_max_consumers_per_topic(self, namespace: NamespaceName) -> int | None:
        response = self._admin.request("GET", self._path(namespace, "maxConsumersPerTopic"))
        return _json_or_none(response)

    def set_max_consumers_per_topic(self, namespace: NamespaceName, max_consumers: int) -> None:
        self._admin.request(
            "POST", self._path(namespace, "maxConsumersPerTopic"), json=max_consumers
        )

    def remove_max_consumers_per_topic(self, namespace: NamespaceName) -> None:
        self._admin.request("DELETE", self._path(namespace, "maxConsumersPerTopic"))
