"""start, stop, restart and shutdown commands."""

from typing import Optional

import rich_click as click

from ..core.controller import ServiceController
from ..core.exceptions import ServiceDefinitionError, ServiceLoadError
from ..ui.display_utils import DisplayUtils
from .constants import EXIT_FAILURE, EXIT_USAGE
from .context import CliState

TARGET_HELP = "Service to control, as [bold]package.module:ClassName[/bold]."


def _controller(ctx: click.Context, target: str) -> ServiceController:
    state: CliState = ctx.obj
    try:
        return state.controller_for(target)
    except (ServiceLoadError, ServiceDefinitionError) as e:
        DisplayUtils(state.console).error(str(e), title="Cannot load service")
        ctx.exit(EXIT_USAGE)


@click.command()
@click.argument("target", metavar="TARGET")
@click.pass_context
def start(ctx: click.Context, target: str):
    """Run a service in the foreground until it is stopped.

    Does nothing if the service is already running. A pid file left behind
    by a dead process is cleaned up first.

    [bold]EXAMPLE:[/bold]
        pidkeeper start myapp.jobs:Indexer
    """
    controller = _controller(ctx, target)
    if not controller.start():
        ctx.exit(EXIT_FAILURE)


@click.command()
@click.argument("target", metavar="TARGET")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0),
    default=None,
    help="Give up after this many seconds (default: wait forever)",
)
@click.pass_context
def stop(ctx: click.Context, target: str, timeout: Optional[float]):
    """Stop a running service and wait for it to exit.

    The service finishes its current work chunk, removes its pid file and
    exits. No signals are sent.
    """
    controller = _controller(ctx, target)
    if not controller.stop(timeout=timeout):
        ctx.exit(EXIT_FAILURE)


@click.command()
@click.argument("target", metavar="TARGET")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0),
    default=None,
    help="Max seconds to wait for the old instance to stop",
)
@click.pass_context
def restart(ctx: click.Context, target: str, timeout: Optional[float]):
    """Stop the running instance, then run the service in this process."""
    controller = _controller(ctx, target)
    if not controller.restart(timeout=timeout):
        ctx.exit(EXIT_FAILURE)


@click.command()
@click.argument("target", metavar="TARGET")
@click.pass_context
def shutdown(ctx: click.Context, target: str):
    """Request a shutdown and return immediately.

    Like [bold]stop[/bold], but does not wait for the service to exit.
    """
    state: CliState = ctx.obj
    controller = _controller(ctx, target)
    try:
        requested = controller.shutdown()
    except Exception as e:
        DisplayUtils(state.console).error(
            str(e), title=f"before_stop failed for {controller.name}"
        )
        ctx.exit(EXIT_FAILURE)

    if not requested:
        DisplayUtils(state.console).info(f"{controller.name} is not running")
