"""Core constants for pidkeeper."""


class MarkerFormat:
    """On-disk marker file contract."""

    # Second line of the marker once a shutdown has been requested
    SHUTDOWN_TOKEN = "shutting down"
    EXTENSION = ".pid"


class ServiceDefaults:
    """Default timing values (seconds)."""

    POLL_INTERVAL = 2.0  # Max sleep between shutdown checks while idle
    STOP_POLL_INTERVAL = 1.0  # How often stop() re-checks for termination
    SLEEP_TIME = None  # No pause between work chunks


DEFAULT_CONFIG_FILE = "pidkeeper.yaml"
