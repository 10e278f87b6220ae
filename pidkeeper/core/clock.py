"""Time source used by the lifecycle driver."""

import time


class SystemClock:
    """Monotonic clock with real sleeping."""

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)
