"""Custom exceptions for pidkeeper.

Lifecycle operations never raise these for runtime failures; they report
through events, logs and return values. These cover definition and
configuration mistakes caught before a service starts.
"""


class PidkeeperError(Exception):
    """Base exception for all pidkeeper errors."""


class ServiceDefinitionError(PidkeeperError):
    """Raised when a service definition is incomplete or inconsistent."""

    def __init__(self, service: str, reason: str):
        self.service = service
        self.reason = reason
        super().__init__(f"Invalid service definition for {service}: {reason}")


class ServiceLoadError(PidkeeperError):
    """Raised when a service target cannot be imported or resolved."""

    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot load service '{target}': {reason}")


class ConfigurationError(PidkeeperError):
    """Raised when a configuration file is missing or invalid."""
