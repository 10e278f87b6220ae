"""Process table lookups."""

import os
from typing import Optional


class ProcessTable:
    """Answers "who am I" and "is PID P alive" for the status oracle.

    The own PID is captured once at construction so a controller keeps a
    stable identity for its lifetime.
    """

    def __init__(self, current_pid: Optional[int] = None):
        self.current_pid = current_pid if current_pid is not None else os.getpid()

    def is_alive(self, pid: int) -> bool:
        """Check whether a process with ``pid`` exists on this host."""
        if pid <= 0:
            return False

        try:
            os.kill(pid, 0)
        except ProcessLookupError:
            return False
        except PermissionError:
            # Exists but belongs to another user
            return True
        except (OSError, OverflowError):
            # OverflowError: larger than the platform pid_t
            return False
        return True
