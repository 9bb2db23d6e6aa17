"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pulsarctl.toml only contains
overrides.  A local standalone broker needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_WEB_SERVICE_URL = "http://localhost:8080"


class ClusterConfig(BaseModel):
    """[cluster] section — where and how to reach the admin API."""

    model_config = {"frozen": True}

    web_service_url: str = DEFAULT_WEB_SERVICE_URL
    token: str | None = None
    token_file: Path | None = None
    tls_allow_insecure: bool = False
    tls_trust_certs_file_path: Path | None = None
    request_timeout: float = Field(default=30.0, gt=0)

    def resolve_token(self) -> str | None:
        """Return the bearer token, reading ``token_file`` when no inline token is set."""
        if self.token:
            return self.token
        if self.token_file is None:
            return None
        try:
            token = self.token_file.read_text(encoding="utf-8").strip()
        except OSError as exc:
            import click

            msg = f"Cannot read token file {self.token_file}: {exc}"
            raise click.ClickException(msg) from exc
        return token or None
