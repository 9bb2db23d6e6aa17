"""Tenant-qualified namespace names.

A namespace is addressed as ``tenant/namespace``.  Each part may
contain word characters and ``- = : .``, matching what the broker
accepts in its REST paths.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from pulsarctl.errors import ArgumentError

NAME_PATTERN = re.compile(r"^[-=:.\w]+$")


class NamespaceName(BaseModel):
    """A parsed ``tenant/namespace`` pair."""

    model_config = {"frozen": True}

    tenant: str
    namespace: str

    @classmethod
    def parse(cls, complete_name: str) -> NamespaceName:
        """Parse and validate *complete_name*.

        Raises:
            ArgumentError: The name is not ``tenant/namespace`` or a part
                contains characters the broker rejects.
        """
        parts = complete_name.split("/")
        if len(parts) != 2:
            raise ArgumentError(
                f"The complete name of namespace is invalid. complete name : [{complete_name}]"
            )
        tenant, namespace = parts
        for label, value in (("tenant", tenant), ("namespace", namespace)):
            if not NAME_PATTERN.match(value):
                raise ArgumentError(f"Invalid {label} name '{value}' in [{complete_name}]")
        return cls(tenant=tenant, namespace=namespace)

    @property
    def rest_path(self) -> str:
        """Path segment used by the v2 admin API."""
        return f"{self.tenant}/{self.namespace}"

    def __str__(self) -> str:
        return f"{self.tenant}/{self.namespace}"
