"""NamespaceService — namespace policy commands.

Each operation follows the same single-shot flow:
VALIDATE (name argument, option values) → CALL (one admin request) → RESPOND.
Validation failures return before the admin client is touched.
"""

from __future__ import annotations

from collections.abc import Sequence

from pulsarctl.domain.policies import normalize_retention
from pulsarctl.domain.units import parse_relative_time, parse_size
from pulsarctl.errors import ArgumentError, PulsarctlError
from pulsarctl.services.base import BaseService
from pulsarctl.services.result import ServiceResult


class NamespaceService(BaseService):
    """Reads and writes retention, message TTL, and consumer limits."""

    # ------------------------------------------------------------------
    # Retention
    # ------------------------------------------------------------------

    def set_retention(
        self, name_args: Sequence[str], *, time_str: str, size_str: str
    ) -> ServiceResult:
        """Parse ``--time``/``--size`` and store the retention policy."""
        op = "set_retention"
        try:
            ns = self._single_namespace(name_args)
            size_bytes = parse_size(size_str)
            time_seconds = parse_relative_time(time_str)
            policy = normalize_retention(size_bytes, time_seconds)
            self._admin.namespaces.set_retention(ns, policy)
        except PulsarctlError as exc:
            return self._failure(op, exc)

        minutes = policy.retention_time_in_minutes
        megabytes = policy.retention_size_in_mb
        warnings: list[str] = []
        if size_bytes > 0 and megabytes == 0:
            warnings.append(f"--size {size_str} rounds down to 0 MB (no retention)")
        if time_seconds > 0 and minutes == 0:
            warnings.append(f"--time {time_str} rounds down to 0 minutes (no retention)")
        return ServiceResult(
            ok=True,
            op=op,
            warnings=warnings,
            message=(
                f"Set retention successfully for [{ns}]."
                f" The retention policy is: time = {minutes} min, size = {megabytes} MB"
            ),
            data={
                "namespace": str(ns),
                "retention_time_in_minutes": minutes,
                "retention_size_in_mb": megabytes,
            },
        )

    def get_retention(self, name_args: Sequence[str]) -> ServiceResult:
        op = "get_retention"
        try:
            ns = self._single_namespace(name_args)
            policy = self._admin.namespaces.get_retention(ns)
        except PulsarctlError as exc:
            return self._failure(op, exc)

        data: dict[str, object] = {"namespace": str(ns)}
        if policy is None:
            return ServiceResult(
                ok=True,
                op=op,
                message=f"Retention is not set for namespace {ns}",
                data=data,
            )
        data.update(policy.model_dump(by_alias=True))
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Message TTL
    # ------------------------------------------------------------------

    def set_message_ttl(self, name_args: Sequence[str], *, ttl_str: str) -> ServiceResult:
        """Store the message TTL; *ttl_str* uses the relative time format."""
        op = "set_message_ttl"
        try:
            ns = self._single_namespace(name_args)
            ttl_seconds = parse_relative_time(ttl_str)
            self._admin.namespaces.set_namespace_message_ttl(ns, ttl_seconds)
        except PulsarctlError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            message=f"Set message TTL successfully for [{ns}]",
            data={"namespace": str(ns), "message_ttl_seconds": ttl_seconds},
        )

    def get_message_ttl(self, name_args: Sequence[str]) -> ServiceResult:
        op = "get_message_ttl"
        try:
            ns = self._single_namespace(name_args)
            ttl = self._admin.namespaces.get_namespace_message_ttl(ns)
        except PulsarctlError as exc:
            return self._failure(op, exc)

        if ttl is None:
            message = f"Message TTL is not set for namespace {ns}"
        else:
            message = f"The message TTL of namespace {ns} is {ttl} seconds"
        return ServiceResult(
            ok=True,
            op=op,
            message=message,
            data={"namespace": str(ns), "message_ttl_seconds": ttl},
        )

    def remove_message_ttl(self, name_args: Sequence[str]) -> ServiceResult:
        op = "remove_message_ttl"
        try:
            ns = self._single_namespace(name_args)
            self._admin.namespaces.remove_namespace_message_ttl(ns)
        except PulsarctlError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            message=f"Successfully removed Message TTL setting for namespace {ns}",
            data={"namespace": str(ns)},
        )

    # ------------------------------------------------------------------
    # Max consumers per topic
    # ------------------------------------------------------------------

    def set_max_consumers_per_topic(
        self, name_args: Sequence[str], *, max_consumers: int
    ) -> ServiceResult:
        op = "set_max_consumers_per_topic"
        try:
            ns = self._single_namespace(name_args)
            if max_consumers < 0:
                raise ArgumentError("the specified consumers value must bigger than 0")
            self._admin.namespaces.set_max_consumers_per_topic(ns, max_consumers)
        except PulsarctlError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            message=f"Set max consumers per topic to {max_consumers} for namespace {ns}",
            data={"namespace": str(ns), "max_consumers_per_topic": max_consumers},
        )

    def get_max_consumers_per_topic(self, name_args: Sequence[str]) -> ServiceResult:
        op = "get_max_consumers_per_topic"
        try:
            ns = self._single_namespace(name_args)
            value = self._admin.namespaces.get_max_consumers_per_topic(ns)
        except PulsarctlError as exc:
            return self._failure(op, exc)

        if value is None:
            message = f"Max consumers per topic is not set for namespace {ns}"
        else:
            message = f"The max consumers per topic of namespace {ns} is {value}"
        return ServiceResult(
            ok=True,
            op=op,
            message=message,
            data={"namespace": str(ns), "max_consumers_per_topic": value},
        )

    def remove_max_consumers_per_topic(self, name_args: Sequence[str]) -> ServiceResult:
        op = "remove_max_consumers_per_topic"
        try:
            ns = self._single_namespace(name_args)
            self._admin.namespaces.remove_max_consumers_per_topic(ns)
        except PulsarctlError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            message=(
                f"Successfully removed the max consumers per topic setting for namespace {ns}"
            ),
            data={"namespace": str(ns)},
        )
