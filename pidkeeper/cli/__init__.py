# pidkeeper/cli/__init__.py
"""Main CLI entry point."""

from pathlib import Path
from typing import Optional

# Configure rich-click BEFORE importing it as click, otherwise the settings
# don't take effect.
import rich_click.rich_click as rc
from rich.console import Console

rc.USE_RICH_MARKUP = True
rc.SHOW_ARGUMENTS = True
rc.GROUP_ARGUMENTS_OPTIONS = True
rc.MAX_WIDTH = 100

# Nord color scheme
rc.STYLE_OPTION = "bold #8fbcbb"
rc.STYLE_ARGUMENT = "bold #88c0d0"
rc.STYLE_COMMAND = "bold #5e81ac"
rc.STYLE_SWITCH = "#a3be8c"
rc.STYLE_USAGE = "bold #8fbcbb"
rc.STYLE_HELPTEXT = "#d8dee9"

import rich_click as click

from ..config import Config
from ..core.exceptions import ConfigurationError
from ..io.logger import setup_logging
from ..ui.display_utils import DisplayUtils
from ..ui.lifecycle_reporter import LifecycleReporter
from .constants import EXIT_USAGE
from .context import CliState
from .lifecycle import restart, shutdown, start, stop
from .status import status


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="pidkeeper")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: ~/.config/pidkeeper/pidkeeper.yaml)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override the configured log level",
)
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also log here")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[Path],
    log_level: Optional[str],
    log_file: Optional[str],
) -> None:
    """Run any unit of work as a singleton daemon.

    A service is a class with a [bold]perform_work_chunk()[/bold] method. pidkeeper
    keeps one instance per host, tracked by a pid file, and stops it between
    work chunks instead of killing it.

    [bold]EXAMPLES:[/bold]
    Start in the foreground:  pidkeeper start myapp.jobs:Indexer
    Stop from anywhere:       pidkeeper stop myapp.jobs:Indexer
    Check status:             pidkeeper status myapp.jobs:Indexer
    """
    console = Console()

    try:
        config = Config(config_path)
    except ConfigurationError as e:
        DisplayUtils(console).error(str(e), title="Configuration Error")
        ctx.exit(EXIT_USAGE)

    setup_logging(
        level=log_level or config.get("logging.level", "INFO"),
        log_file=log_file or config.get("logging.file"),
    )

    state = CliState(config=config, console=console)
    LifecycleReporter(console).attach(state.event_bus)
    ctx.obj = state


cli.add_command(start)
cli.add_command(stop)
cli.add_command(restart)
cli.add_command(shutdown)
cli.add_command(status)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
