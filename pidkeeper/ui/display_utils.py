"""Console rendering helpers shared by the CLI and the lifecycle reporter."""

from typing import Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from ..core.status import ServiceStatus

# Nord color palette
NORD_COLORS = {
    "nord3": "#4c566a",  # Muted gray (dim text)
    "nord4": "#d8dee9",  # Light gray
    "nord7": "#8fbcbb",  # Teal - Info
    "nord8": "#88c0d0",  # Light blue
    "nord11": "#bf616a",  # Red - Errors
    "nord13": "#ebcb8b",  # Yellow - Warnings
    "nord14": "#a3be8c",  # Green - Success
    "nord15": "#5e81ac",  # Blue
}

STATUS_COLORS = {
    ServiceStatus.RUNNING: "nord14",
    ServiceStatus.OTHER_RUNNING: "nord14",
    ServiceStatus.SHUTTING_DOWN: "nord13",
    ServiceStatus.PID_NO_PROCESS: "nord11",
    ServiceStatus.STOPPED: "nord3",
}

PANEL_MIN_WIDTH = 40
PANEL_MAX_WIDTH = 100
# Border plus horizontal padding on both sides
PANEL_CHROME = 6


class DisplayUtils:
    """Prints prefixed, Nord-colored lines and error panels.

    Messages may contain rich markup; callers escape untrusted text.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _line(self, color_key: str, text: str) -> None:
        color = NORD_COLORS.get(color_key, NORD_COLORS["nord8"])
        self.console.print(f"[{color}]{text}[/{color}]")

    def _calculate_panel_width(
        self,
        content: Union[str, Text],
        title: str = "",
        min_width: int = PANEL_MIN_WIDTH,
        max_width: int = PANEL_MAX_WIDTH,
    ) -> int:
        """Width that fits the longest content line and the title, clamped."""
        plain = content.plain if isinstance(content, Text) else content
        widest = max((len(line) for line in plain.split("\n")), default=0)
        needed = max(widest, len(title) + 4) + PANEL_CHROME
        return max(min_width, min(needed, max_width))

    def error(
        self,
        message: str,
        title: Optional[str] = None,
        context: Optional[str] = None,
        use_panel: bool = True,
    ) -> None:
        """Display an error, boxed by default.

        Args:
            message: What went wrong
            title: Panel title (defaults to "! Error")
            context: Extra detail such as a traceback, shown below the message
            use_panel: Print a single [FAIL] line instead of a panel if False
        """
        if not use_panel:
            self._line("nord11", f"[FAIL] {message}")
            if context:
                self._line("nord3", f"       {context}")
            return

        body = f"{message}\n\n{context}" if context else message
        title = title or "! Error"

        self.console.print()
        self.console.print(
            Panel(
                body,
                title=f" {title}",
                title_align="left",
                border_style=NORD_COLORS["nord11"],
                padding=(1, 2),
                width=self._calculate_panel_width(body, title),
                expand=False,
                highlight=False,
            )
        )
        self.console.print()

    def warning(self, message: str, context: Optional[str] = None) -> None:
        self._line("nord13", f"⚠ {message}")
        if context:
            self._line("nord3", f"  {context}")

    def info(self, message: str) -> None:
        self._line("nord7", f"◆ {message}")

    def success(self, message: str) -> None:
        self._line("nord14", f"[OK] {message}")

    def dim(self, message: str) -> None:
        self._line("nord3", message)

    def status(self, message: str, style: str = "nord8") -> None:
        """Progress line such as "→ Starting Indexer (1234)".

        Unknown style names fall back to nord8.
        """
        self._line(style, f"→ {message}")

    def status_label(self, status: ServiceStatus) -> str:
        """Markup for a status value, colored by how healthy it is."""
        color = NORD_COLORS[STATUS_COLORS[status]]
        return f"[{color}]{escape(status.value)}[/{color}]"
