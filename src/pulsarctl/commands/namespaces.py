"""Command group: namespace policy administration.

Every subcommand is registered from :data:`NAMESPACE_DESCRIPTORS`, a
read-only table built at import time.  The descriptor supplies the
command name, its summary, the ``--help`` body and ``--examples``.
"""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import click

from pulsarctl.commands._base import PulsarctlGroup
from pulsarctl.domain.descriptors import (
    ARG_ERROR,
    NS_ERRORS,
    NS_NOT_EXIST_ERROR,
    TENANT_NOT_EXIST_ERROR,
    CommandDescriptor,
    Example,
    Output,
)

if TYPE_CHECKING:
    from pulsarctl.commands._context import AppContext
    from pulsarctl.services.namespaces import NamespaceService

SUPER_USER_PERMISSION = (
    "This command requires super-user permissions and broker has write policies permission."
)
TENANT_ADMIN_PERMISSION = "This command requires tenant admin permissions."

_DESCRIPTORS: tuple[CommandDescriptor, ...] = (
    CommandDescriptor(
        name="set-retention",
        short="Set the retention policy for a namespace",
        used_for="Set the retention policy for a namespace",
        permission=TENANT_ADMIN_PERMISSION,
        examples=(
            Example(
                desc="Set the retention policy for a namespace",
                command="pulsarctl namespaces set-retention tenant/namespace --time 100m --size 1G",
            ),
            Example(
                desc="Set the infinite time retention policy for a namespace",
                command="pulsarctl namespaces set-retention tenant/namespace --time -1 --size 10G",
            ),
        ),
        outputs=(
            Output(
                desc="normal output",
                out=(
                    "Set retention successfully for [tenant/namespace]."
                    " The retention policy is: time = 100 min, size = 1024 MB"
                ),
            ),
            ARG_ERROR,
            TENANT_NOT_EXIST_ERROR,
            NS_NOT_EXIST_ERROR,
            Output(
                desc="Retention Quota must exceed configured backlog quota for namespace",
                out="[✖]  code: 412 reason: Retention Quota must exceed backlog quota",
            ),
            Output(
                desc="the --time or --size value is malformed",
                out="[✖]  invalid size unit 'X' in '1X'",
            ),
        ),
    ),
    CommandDescriptor(
        name="get-retention",
        short="Get the retention policy of a namespace",
        used_for="Get the retention policy of a namespace",
        permission=TENANT_ADMIN_PERMISSION,
        examples=(
            Example(
                desc="Get the retention policy of a namespace",
                command="pulsarctl namespaces get-retention tenant/namespace",
            ),
        ),
        outputs=(
            Output(
                desc="normal output",
                out=(
                    "namespace: tenant/namespace\n"
                    "retentionTimeInMinutes: 100\n"
                    "retentionSizeInMB: 1024"
                ),
            ),
            *NS_ERRORS,
        ),
    ),
    CommandDescriptor(
        name="set-message-ttl",
        short="Set Message TTL for a namespace",
        used_for="Set Message TTL for a namespace",
        permission=TENANT_ADMIN_PERMISSION,
        examples=(
            Example(
                desc="Set Message TTL for a namespace",
                command="pulsarctl namespaces set-message-ttl tenant/namespace --ttl 2h",
            ),
        ),
        outputs=(
            Output(desc="normal output", out="Set message TTL successfully for [tenant/namespace]"),
            *NS_ERRORS,
        ),
    ),
    CommandDescriptor(
        name="get-message-ttl",
        short="Get Message TTL for a namespace",
        used_for="Get Message TTL for a namespace",
        permission=TENANT_ADMIN_PERMISSION,
        examples=(
            Example(
                desc="Get Message TTL for a namespace",
                command="pulsarctl namespaces get-message-ttl tenant/namespace",
            ),
        ),
        outputs=(
            Output(
                desc="normal output",
                out="The message TTL of namespace tenant/namespace is 7200 seconds",
            ),
            *NS_ERRORS,
        ),
    ),
    CommandDescriptor(
        name="remove-message-ttl",
        short="Removes Message TTL for a namespace",
        used_for="Remove Message TTL setting for a namespace",
        permission=TENANT_ADMIN_PERMISSION,
        examples=(
            Example(
                desc="Remove Message TTL setting for a namespace",
                command="pulsarctl namespaces remove-message-ttl tenant/namespace",
            ),
        ),
        outputs=(
            Output(
                desc="normal output",
                out="Successfully removed Message TTL setting for namespace tenant/namespace",
            ),
            *NS_ERRORS,
        ),
    ),
    CommandDescriptor(
        name="set-max-consumers-per-topic",
        short="Set max consumers per topic for a namespace",
        used_for="This command is used to set the max consumers per topic for a namespace.",
        permission=SUPER_USER_PERMISSION,
        examples=(
            Example(
                desc="Set the max consumers per topic for namespace (namespace-name) to 10",
                command=(
                    "pulsarctl namespaces set-max-consumers-per-topic (namespace-name) --size 10"
                ),
            ),
        ),
        outputs=(
            Output(
                desc="normal output",
                out="Set max consumers per topic to 10 for namespace (namespace-name)",
            ),
            *NS_ERRORS,
        ),
    ),
    CommandDescriptor(
        name="get-max-consumers-per-topic",
        short="Get max consumers per topic for a namespace",
        used_for="This command is used to get the max consumers per topic of a namespace.",
        permission=SUPER_USER_PERMISSION,
        examples=(
            Example(
                desc="Get the max consumers per topic of namespace (namespace-name)",
                command="pulsarctl namespaces get-max-consumers-per-topic (namespace-name)",
            ),
        ),
        outputs=(
            Output(
                desc="normal output",
                out="The max consumers per topic of namespace (namespace-name) is 10",
            ),
            *NS_ERRORS,
        ),
    ),
    CommandDescriptor(
        name="remove-max-consumers-per-topic",
        short="Remove the max consumers per topic setting for a namespace",
        used_for=(
            "This command is used to remove the max consumers per topic setting for a namespace."
        ),
        permission=SUPER_USER_PERMISSION,
        examples=(
            Example(
                desc="Remove the max consumers per topic setting for namespace (namespace-name)",
                command="pulsarctl namespaces remove-max-consumers-per-topic (namespace-name)",
            ),
        ),
        outputs=(
            Output(
                desc="normal output",
                out=(
                    "Successfully removed the max consumers per topic setting"
                    " for namespace (namespace-name)"
                ),
            ),
            *NS_ERRORS,
        ),
    ),
)

NAMESPACE_DESCRIPTORS: MappingProxyType[str, CommandDescriptor] = MappingProxyType(
    {d.name: d for d in _DESCRIPTORS}
)

_NAMESPACES_EXAMPLES = """\
  pulsarctl namespaces set-retention public/default --time 100m --size 1G
  pulsarctl namespaces get-retention public/default
  pulsarctl namespaces set-message-ttl public/default --ttl 2h
  pulsarctl namespaces remove-message-ttl public/default
  pulsarctl --json namespaces get-max-consumers-per-topic public/default"""


@click.group(cls=PulsarctlGroup, examples=_NAMESPACES_EXAMPLES)
@click.pass_obj
def namespaces(app: AppContext) -> None:
    """Operations about namespaces."""


def _namespace_command(name: str) -> Callable[[Callable[..., Any]], click.Command]:
    """Register a subcommand of ``namespaces`` from its descriptor."""
    descriptor = NAMESPACE_DESCRIPTORS[name]

    def decorator(f: Callable[..., Any]) -> click.Command:
        f = click.argument("name_args", metavar="TENANT/NAMESPACE", nargs=-1)(f)
        f = click.pass_obj(f)
        return namespaces.command(name, descriptor=descriptor)(f)

    return decorator


def _service(app: AppContext) -> NamespaceService:
    from pulsarctl.services.namespaces import NamespaceService

    return NamespaceService(app.admin)


# --- retention ---


@_namespace_command("set-retention")
@click.option(
    "--time",
    "time_str",
    required=True,
    help=(
        "Retention time (eg: 100m, 3h, 2d, 5w). "
        "0 means no retention and -1 means infinite time retention."
    ),
)
@click.option(
    "--size",
    "size_str",
    required=True,
    help=(
        "Retention size limit (eg: 10M, 16G, 3T). "
        "0 or less than 1MB means no retention and -1 means infinite size retention."
    ),
)
def set_retention(
    app: AppContext, name_args: tuple[str, ...], time_str: str, size_str: str
) -> None:
    app.emit(_service(app).set_retention(name_args, time_str=time_str, size_str=size_str))


@_namespace_command("get-retention")
def get_retention(app: AppContext, name_args: tuple[str, ...]) -> None:
    app.emit(_service(app).get_retention(name_args))


# --- message TTL ---


@_namespace_command("set-message-ttl")
@click.option(
    "--ttl",
    "ttl_str",
    required=True,
    help="Message TTL (eg: 30s, 10m, 2h, 1d). 0 disables expiry.",
)
def set_message_ttl(app: AppContext, name_args: tuple[str, ...], ttl_str: str) -> None:
    app.emit(_service(app).set_message_ttl(name_args, ttl_str=ttl_str))


@_namespace_command("get-message-ttl")
def get_message_ttl(app: AppContext, name_args: tuple[str, ...]) -> None:
    app.emit(_service(app).get_message_ttl(name_args))


@_namespace_command("remove-message-ttl")
def remove_message_ttl(app: AppContext, name_args: tuple[str, ...]) -> None:
    app.emit(_service(app).remove_message_ttl(name_args))


# --- max consumers per topic ---


@_namespace_command("set-max-consumers-per-topic")
@click.option(
    "--size",
    "max_consumers",
    type=int,
    required=True,
    help="Max consumers per topic. 0 means unlimited.",
)
def set_max_consumers_per_topic(
    app: AppContext, name_args: tuple[str, ...], max_consumers: int
) -> None:
    app.emit(_service(app).set_max_consumers_per_topic(name_args, max_consumers=max_consumers))


@_namespace_command("get-max-consumers-per-topic")
def get_max_consumers_per_topic(app: AppContext, name_args: tuple[str, ...]) -> None:
    app.emit(_service(app).get_max_consumers_per_topic(name_args))


@_namespace_command("remove-max-consumers-per-topic")
def remove_max_consumers_per_topic(app: AppContext, name_args: tuple[str, ...]) -> None:
    app.emit(_service(app).remove_max_consumers_per_topic(name_args))
