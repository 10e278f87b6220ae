"""Marker (PID) file primitives.

Format: the first line is the owner's decimal PID; an optional second line
holding exactly ``shutting down`` asks the owner to exit.
"""

import re
from pathlib import Path
from typing import Optional

from ..io.logger import get_logger
from .constants import MarkerFormat

logger = get_logger("marker")

# ASCII digits only; str.isdigit() also accepts "²", which int() rejects
_PID_LINE = re.compile(r"[0-9]+")


def parse_pid(content: Optional[str]) -> Optional[int]:
    """Extract the PID from marker content.

    Returns None for missing, empty or non-numeric content, and for 0.
    """
    if not content:
        return None

    lines = content.splitlines()
    first_line = lines[0].strip() if lines else ""
    if not _PID_LINE.fullmatch(first_line):
        return None

    pid = int(first_line)
    return pid if pid > 0 else None


def has_shutdown_token(content: Optional[str]) -> bool:
    """True if marker content carries a shutdown request anywhere."""
    return content is not None and MarkerFormat.SHUTDOWN_TOKEN in content


class MarkerFile:
    """Reads and mutates a single service's marker file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"MarkerFile({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> Optional[str]:
        """Return the file content, or None if it cannot be read.

        The file may vanish between an existence check and this read; that
        is reported as no content rather than an error. Bytes that are not
        UTF-8 are replaced, so foreign content never yields a PID.
        """
        try:
            return self.path.read_text(encoding="utf-8", errors="replace")
        except (FileNotFoundError, IsADirectoryError):
            return None
        except OSError as e:
            logger.debug(f"Could not read marker {self.path}: {e}")
            return None

    @property
    def pid(self) -> Optional[int]:
        """PID recorded in the marker, if any."""
        return parse_pid(self.read())

    def write_pid(self, pid: int) -> None:
        """Overwrite the marker with ``pid`` as its only line."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(str(pid))

    def append_shutdown_token(self) -> bool:
        """Append the shutdown request, keeping the PID line.

        Returns:
            False if there was no marker to append to
        """
        if not self.exists():
            return False

        with open(self.path, "a", encoding="utf-8") as f:
            f.write(f"\n{MarkerFormat.SHUTDOWN_TOKEN}")
        return True

    def remove(self) -> bool:
        """Delete the marker.

        Returns:
            True if a file was removed, False if it was already gone or
            could not be deleted
        """
        try:
            self.path.unlink()
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Could not remove marker {self.path}: {e}")
            return False
