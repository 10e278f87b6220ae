"""Shared state handed from the CLI group to its commands."""

from dataclasses import dataclass, field

from rich.console import Console

from ..config import Config
from ..core.controller import ServiceController
from ..core.event_bus import EventBus
from .loader import load_service


@dataclass
class CliState:
    """Configuration, console and event bus for one CLI invocation."""

    config: Config
    console: Console
    event_bus: EventBus = field(default_factory=EventBus)

    def controller_for(self, target: str) -> ServiceController:
        """Load ``target`` and bind a controller to it."""
        service = load_service(target)
        return ServiceController.for_service(
            service, self.config, event_bus=self.event_bus
        )
