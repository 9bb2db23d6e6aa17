"""Exception hierarchy for pulsarctl.

Everything raised by the domain parsers and the admin client inherits
from :class:`PulsarctlError`.  The service layer converts these into a
failed ``ServiceResult`` using :attr:`PulsarctlError.code`, so the CLI
never shows a raw traceback for an expected failure.

Hierarchy
---------
PulsarctlError
├── ArgumentError
├── InvalidFormatError
└── RemoteError
    ├── NamespaceNotFoundError
    └── TenantNotFoundError
"""

from __future__ import annotations

from typing import Any


class PulsarctlError(Exception):
    """Base exception for all pulsarctl errors."""

    code: str = "ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def detail(self) -> dict[str, Any]:
        """Structured detail carried into ``ServiceError.detail``."""
        return {}


# --- Local validation ------------------------------------------------------


class ArgumentError(PulsarctlError):
    """Raised when positional arguments or option values are unusable."""

    code = "ARGUMENT_ERROR"


class InvalidFormatError(PulsarctlError):
    """Raised when a size or relative time string cannot be parsed."""

    code = "INVALID_FORMAT"


# --- Remote admin API ------------------------------------------------------


class RemoteError(PulsarctlError):
    """Raised when the admin API rejects a request or cannot be reached.

    ``status_code`` is None for transport failures (connection refused,
    timeout) where no HTTP response was received.
    """

    code = "REMOTE_ERROR"

    def __init__(self, reason: str, *, status_code: int | None = None) -> None:
        if status_code is None:
            message = reason
        else:
            message = f"code: {status_code} reason: {reason}"
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code

    def detail(self) -> dict[str, Any]:
        return {"status_code": self.status_code, "reason": self.reason}


class NamespaceNotFoundError(RemoteError):
    """The admin API answered 404 for the namespace."""

    code = "NAMESPACE_NOT_FOUND"


class TenantNotFoundError(RemoteError):
    """The admin API answered 404 because the tenant does not exist."""

    code = "TENANT_NOT_FOUND"
