"""Rich renderers for ServiceResult.

Successful mutations print their confirmation line verbatim.  Results
without a confirmation line (policy reads) are rendered as key-value
fields.  Failures render as ``[✖]  <message>``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from pulsarctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from pulsarctl.services.result import ServiceResult

ERROR_MARK = "[✖]"

# Policy values where -1 and 0 carry sentinel meaning.
_SENTINEL_FIELDS = frozenset({"retentionTimeInMinutes", "retentionSizeInMB"})

_READ_PREFIX = "get_"


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a plain or styled string."""
    console = create_console()
    if not result.ok:
        _render_error(console, result)
    elif result.message is not None:
        console.print(Text(result.message))
    else:
        _render_fields(console, result.data)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Policy reads print their bare values, one per line, so they can be
    captured by scripts.  Unset values print nothing.  Mutations print
    ``OK: <op>``.
    """
    if not result.ok:
        return error_line(result)
    if result.op.startswith(_READ_PREFIX):
        return "\n".join(_bare_values(result.data))
    return f"OK: {result.op}"


def error_line(result: ServiceResult) -> str:
    msg = result.error.message if result.error else "Unknown error"
    return f"{ERROR_MARK}  {msg}"


def describe_value(key: str, value: Any) -> str:
    """Annotate sentinel policy values so ``-1`` and ``0`` read unambiguously."""
    if key in _SENTINEL_FIELDS:
        if value == -1:
            return "-1 (infinite)"
        if value == 0:
            return "0 (disabled)"
    return str(value)


def _render_error(console: Console, result: ServiceResult) -> None:
    console.print(Text(error_line(result), style="pulsarctl.error"))


def _render_fields(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        k = Text(f"{key}: ", style="pulsarctl.key")
        if key == "namespace":
            v = Text(str(value), style="pulsarctl.namespace")
        elif value is None:
            v = Text("not set", style="pulsarctl.unset")
        else:
            v = Text(describe_value(key, value), style="pulsarctl.value")
        console.print(k, v, sep="")


def _bare_values(data: dict[str, Any]) -> list[str]:
    """Policy values of a read result, without the namespace echo."""
    return [str(v) for k, v in data.items() if k != "namespace" and v is not None]
