"""BaseService — shared plumbing for service classes.

Every service receives a :class:`PulsarAdmin` at construction time and
converts raised :class:`~pulsarctl.errors.PulsarctlError` into a failed
:class:`ServiceResult`.  Nothing is retried and nothing else is caught.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pulsarctl.domain.descriptors import NAME_ARG_ERROR_MESSAGE
from pulsarctl.domain.names import NamespaceName
from pulsarctl.errors import ArgumentError, PulsarctlError
from pulsarctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pulsarctl.infrastructure.admin import PulsarAdmin

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class NamespaceService(BaseService):
            def remove_message_ttl(self, name_args) -> ServiceResult:
                op = "remove_message_ttl"
                try:
                    ns = self._single_namespace(name_args)
                    self._admin.namespaces.remove_namespace_message_ttl(ns)
                except PulsarctlError as exc:
                    return self._failure(op, exc)
                ...
    """

    def __init__(self, admin: PulsarAdmin) -> None:
        self._admin = admin

    @staticmethod
    def _single_namespace(name_args: Sequence[str]) -> NamespaceName:
        """Validate that exactly one namespace name was given and parse it."""
        if len(name_args) != 1:
            raise ArgumentError(NAME_ARG_ERROR_MESSAGE)
        return NamespaceName.parse(name_args[0])

    @staticmethod
    def _failure(op: str, exc: PulsarctlError) -> ServiceResult:
        logger.debug("%s failed: %s [%s]", op, exc.message, exc.code)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))
