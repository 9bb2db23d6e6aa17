"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PULSARCTL_*`` prefix (``PULSARCTL_CLUSTER__TOKEN``)
  3. TOML file    — ``pulsarctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`pulsarctl.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any, ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from pulsarctl.config.discovery import find_config
from pulsarctl.config.models import ClusterConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``pulsarctl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class PulsarctlSettings(BaseSettings):
    """Unified settings for the pulsarctl CLI.

    Merges CLI flags, environment variables, the TOML ``[cluster]``
    section, and code-baked defaults into a single frozen object.
    Stored on the :class:`~pulsarctl.commands._context.AppContext`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PULSARCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    cluster: ClusterConfig = Field(default_factory=ClusterConfig)

    # Retained for type-checker visibility; not used at runtime.
    _toml_path: ClassVar[Path | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        cluster_overrides: dict[str, Any] | None = None,
        **cli_flags: Any,
    ) -> PulsarctlSettings:
        """Construct settings from a CLI invocation.

        Discovers ``pulsarctl.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides.  *cluster_overrides* replaces individual ``[cluster]``
        fields; ``None`` values are ignored so unset flags never mask
        the config file.
        """
        toml_path = find_config(start, explicit=config_path)

        _tls.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

        overrides = {k: v for k, v in (cluster_overrides or {}).items() if v is not None}
        if not overrides:
            return settings
        cluster = ClusterConfig.model_validate({**settings.cluster.model_dump(), **overrides})
        return settings.model_copy(update={"cluster": cluster})
