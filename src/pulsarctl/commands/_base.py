"""Custom Click base classes driven by command descriptors.

:class:`PulsarctlCommand` takes a :class:`CommandDescriptor` and uses it
for the one-line summary, the long ``--help`` body, and an eager
``--examples`` flag that prints usage examples and exits.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from pulsarctl.domain.descriptors import CommandDescriptor


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class PulsarctlCommand(click.Command):
    """Click Command whose help and examples come from a descriptor."""

    def __init__(
        self,
        *args: Any,
        descriptor: CommandDescriptor | None = None,
        examples: str | None = None,
        **kwargs: Any,
    ) -> None:
        if descriptor is not None:
            kwargs["short_help"] = descriptor.short
            examples = examples or descriptor.examples_text()
        super().__init__(*args, **kwargs)
        self.descriptor = descriptor
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def format_help_text(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        if self.descriptor is None:
            super().format_help_text(ctx, formatter)
            return
        # Descriptor text is pre-laid-out; click would re-wrap it.
        formatter.write_paragraph()
        with formatter.indentation():
            formatter.write_text(self.descriptor.short)
            formatter.write_paragraph()
            indent = " " * formatter.current_indent
            formatter.write(textwrap.indent(self.descriptor.long_text(), indent))
            formatter.write("\n")


class PulsarctlGroup(click.Group):
    """Click Group whose subcommands default to :class:`PulsarctlCommand`."""

    command_class = PulsarctlCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
