"""Root CLI group for pulsarctl with global flags and command registration."""

from __future__ import annotations

import click

from pulsarctl import __version__
from pulsarctl.commands import register_commands
from pulsarctl.commands._context import AppContext
from pulsarctl.config.settings import PulsarctlSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pulsarctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-s",
    "--admin-service-url",
    default=None,
    help="The admin web service url that pulsarctl connects to.",
)
@click.option("--token", default=None, help="Bearer token for the admin API.")
@click.option(
    "--token-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="File containing the bearer token.",
)
@click.option(
    "--tls-allow-insecure",
    is_flag=True,
    help="Accept untrusted TLS certificates from the broker.",
)
@click.option(
    "--tls-trust-cert-path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="CA bundle used to verify the broker's TLS certificate.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    admin_service_url: str | None,
    token: str | None,
    token_file: str | None,
    tls_allow_insecure: bool,
    tls_trust_cert_path: str | None,
) -> None:
    """pulsarctl — a CLI for administering Pulsar namespaces."""
    settings = PulsarctlSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        cluster_overrides={
            "web_service_url": admin_service_url,
            "token": token,
            "token_file": token_file,
            "tls_allow_insecure": tls_allow_insecure or None,
            "tls_trust_certs_file_path": tls_trust_cert_path,
        },
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
