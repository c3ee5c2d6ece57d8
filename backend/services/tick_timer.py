"""
Periodic tick timer backed by the `schedule` library.

Each TickTimer owns a private Scheduler so game sessions never share jobs
with the module-level default scheduler. Nothing runs in the background:
the owner calls run_pending() from its loop, which keeps ticks on a single
thread and never lets two ticks overlap.
"""

import logging
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)


class TickTimer:
    """Fires one callback every `interval_ms` milliseconds."""

    def __init__(self, scheduler: Optional[schedule.Scheduler] = None):
        self.scheduler = scheduler or schedule.Scheduler()
        self.interval_ms: Optional[int] = None
        self._job: Optional[schedule.Job] = None

    @property
    def active(self) -> bool:
        return self._job is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        """Schedule callback at a fixed interval, replacing any previous job."""
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}ms.")

        self.cancel()
        self.interval_ms = interval_ms
        self._job = self.scheduler.every(interval_ms / 1000).seconds.do(callback)
        logger.debug("Tick timer scheduled every %sms", interval_ms)

    def cancel(self) -> None:
        """Remove the scheduled job, if any."""
        if self._job is None:
            return
        self.scheduler.cancel_job(self._job)
        self._job = None
        logger.debug("Tick timer cancelled")

    def run_pending(self) -> None:
        """Fire the callback if its interval has elapsed."""
        self.scheduler.run_pending()

    @property
    def idle_seconds(self) -> Optional[float]:
        """Seconds until the next tick is due (None when nothing is scheduled)."""
        if self._job is None:
            return None
        return self.scheduler.idle_seconds
