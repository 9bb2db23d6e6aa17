"""Allow ``python -m pulsarctl``."""

from pulsarctl.cli import cli

cli()
