"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Owns the lazily created admin client and the
result emission rules (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pulsarctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pulsarctl.config.settings import PulsarctlSettings
    from pulsarctl.infrastructure.admin import PulsarAdmin
    from pulsarctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The admin client is created on first use so ``--help``,
    ``--examples`` and ``--version`` never touch the network or the
    token file.
    """

    def __init__(self, settings: PulsarctlSettings) -> None:
        self.settings = settings
        self._admin: PulsarAdmin | None = None

        from pulsarctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def admin(self) -> PulsarAdmin:
        """The admin client (created lazily on first access)."""
        if self._admin is None:
            from pulsarctl.infrastructure.admin import PulsarAdmin

            self._admin = PulsarAdmin.from_config(self.settings.cluster)
        return self._admin

    def close(self) -> None:
        if self._admin is not None:
            self._admin.close()
            self._admin = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr only, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
