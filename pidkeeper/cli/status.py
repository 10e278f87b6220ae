"""Status command for inspecting services."""

import rich_click as click
from rich.table import Table

from ..core.exceptions import ServiceDefinitionError, ServiceLoadError
from ..ui.display_utils import DisplayUtils
from .constants import EXIT_NOT_RUNNING, EXIT_USAGE, NORD_BLUE, NORD_DARK
from .context import CliState


@click.command()
@click.argument("targets", nargs=-1, required=True, metavar="TARGET...")
@click.pass_context
def status(ctx: click.Context, targets):
    """Show the status of one or more services.

    Exits with status 3 if any of them is not running.

    [bold]EXAMPLE:[/bold]
        pidkeeper status myapp.jobs:Indexer myapp.jobs:Mailer
    """
    state: CliState = ctx.obj
    display = DisplayUtils(state.console)

    table = Table(title="Services", title_style=f"bold {NORD_BLUE}")
    table.add_column("Service", style="bold")
    table.add_column("Status", no_wrap=True, min_width=14)
    table.add_column("PID", justify="right")
    table.add_column("Pid file", style=NORD_DARK, overflow="fold")

    all_running = True
    for target in targets:
        try:
            controller = state.controller_for(target)
        except (ServiceLoadError, ServiceDefinitionError) as e:
            display.error(str(e), title="Cannot load service")
            ctx.exit(EXIT_USAGE)

        current = controller.status()
        all_running = all_running and current.is_alive
        pid = controller.current_pid
        table.add_row(
            controller.name,
            display.status_label(current),
            str(pid) if pid is not None else "-",
            str(controller.identity.pid_file),
        )

    state.console.print(table)

    if not all_running:
        ctx.exit(EXIT_NOT_RUNNING)
