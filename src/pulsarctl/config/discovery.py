"""Config file discovery.

Lookup order for ``pulsarctl.toml``:

1. ``--config PATH`` on the command line
2. the ``PULSARCTL_CONFIG`` environment variable
3. the nearest ``pulsarctl.toml`` in the working directory or a parent

A file named explicitly (1 or 2) must exist.  A walk-up miss just means
the code defaults apply.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "pulsarctl.toml"
CONFIG_ENV_VAR = "PULSARCTL_CONFIG"


def find_config(start: Path | None = None, *, explicit: str | None = None) -> Path | None:
    """Return the config file for this invocation, or None when there is none.

    Raises :class:`click.ClickException` when *explicit* or
    ``PULSARCTL_CONFIG`` names a file that does not exist.
    """
    if explicit:
        return _named_file(explicit, origin="--config")
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _named_file(env_path, origin=CONFIG_ENV_VAR)
    return _walk_up((start or Path.cwd()).resolve())


def _named_file(raw: str, *, origin: str) -> Path:
    path = Path(raw).expanduser()
    if not path.is_file():
        import click

        raise click.ClickException(f"Config file {path} (from {origin}) does not exist")
    return path


def _walk_up(directory: Path) -> Path | None:
    for parent in (directory, *directory.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
