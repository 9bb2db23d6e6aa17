"""Command descriptors — usage, permission, examples, and documented outputs.

A :class:`CommandDescriptor` is attached to a click command when it is
registered and is never mutated afterwards.  It renders two texts:

* the long ``--help`` body (``USED FOR`` / ``REQUIRED PERMISSION`` /
  ``OUTPUT`` blocks), and
* the ``--examples`` listing.
"""

from __future__ import annotations

from pydantic import BaseModel


class Example(BaseModel):
    """One usage example: what it does and the command line."""

    model_config = {"frozen": True}

    desc: str
    command: str


class Output(BaseModel):
    """One documented outcome of a command."""

    model_config = {"frozen": True}

    desc: str
    out: str


class CommandDescriptor(BaseModel):
    """Static metadata for a single subcommand."""

    model_config = {"frozen": True}

    name: str
    short: str
    used_for: str
    permission: str
    examples: tuple[Example, ...] = ()
    outputs: tuple[Output, ...] = ()

    def long_text(self) -> str:
        """Render the long description shown by ``--help``."""
        lines = [
            "USED FOR:",
            f"    {self.used_for}",
            "",
            "REQUIRED PERMISSION:",
            f"    {self.permission}",
        ]
        if self.outputs:
            lines.extend(["", "OUTPUT:"])
            for output in self.outputs:
                lines.append(f"    #{output.desc}")
                lines.extend(f"    {line}" for line in output.out.splitlines())
                lines.append("")
            lines.pop()
        return "\n".join(lines)

    def examples_text(self) -> str:
        """Render the ``--examples`` listing."""
        blocks = [f"  #{ex.desc}\n  {ex.command}" for ex in self.examples]
        return "\n\n".join(blocks)


# --- Outputs shared by every namespace command ---------------------------

NAME_ARG_ERROR_MESSAGE = (
    "the namespace name is not specified or the namespace name is specified more than one"
)

ARG_ERROR = Output(
    desc=(
        "you must specify a tenant/namespace name,"
        " please check if the tenant/namespace name is provided"
    ),
    out=f"[✖]  {NAME_ARG_ERROR_MESSAGE}",
)

TENANT_NOT_EXIST_ERROR = Output(
    desc="the tenant does not exist",
    out="[✖]  code: 404 reason: Tenant does not exist",
)

NS_NOT_EXIST_ERROR = Output(
    desc="the namespace does not exist",
    out="[✖]  code: 404 reason: Namespace (tenant/namespace) does not exist",
)

NS_ERRORS: tuple[Output, ...] = (ARG_ERROR, TENANT_NOT_EXIST_ERROR, NS_NOT_EXIST_ERROR)
