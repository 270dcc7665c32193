"""Background thread that moves on to the next track when one ends."""

import logging
import threading
from typing import Protocol

from .i18n import t

logger = logging.getLogger(__name__)

# How often to check whether the current track has run out
DEFAULT_PERIOD_MS = 50


class Advanceable(Protocol):
    """Protocol for a player the scheduler can drive."""

    def advance_if_finished(self) -> bool:
        """Advance if the current track has run out.

        Returns:
            True if the player advanced.
        """
        ...


class AutoAdvanceScheduler:
    """Polls a player on a fixed period and advances finished tracks.

    The scheduler holds a reference to the player the foreground uses, not
    a copy of it. A pause or seek made by a caller is seen on the next tick.
    Detection lags the end of a track by at most one period.
    """

    def __init__(self, player: Advanceable, period_ms: int = DEFAULT_PERIOD_MS):
        """Initialize the scheduler. It does not run until start() is called.

        Args:
            player: The shared player to drive.
            period_ms: Milliseconds between checks. Must be positive.

        Raises:
            ValueError: If period_ms is not positive.
        """
        if period_ms <= 0:
            raise ValueError(t("error.invalid_period", period=period_ms))
        self._player = player
        self._period = period_ms / 1000
        # Replaced on every start(); a thread only watches the event it started with.
        self._stopping = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def period_ms(self) -> int:
        """Get the polling period in milliseconds."""
        return round(self._period * 1000)

    @property
    def is_running(self) -> bool:
        """Check if the background thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the background thread. Does nothing if already running."""
        if self.is_running:
            return
        self._stopping = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stopping,), name="auto-advance", daemon=True
        )
        self._thread.start()
        logger.debug(t("log.scheduler_started", period=self.period_ms))

    def stop(self, timeout: float | None = None) -> None:
        """Stop the background thread and wait for it to exit.

        Args:
            timeout: Seconds to wait for the thread, or None to wait indefinitely.
        """
        self._stopping.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.debug(t("log.scheduler_stopped"))

    def tick(self) -> bool:
        """Run one check against the player.

        Returns:
            True if the player advanced.
        """
        return self._player.advance_if_finished()

    def _run(self, stopping: threading.Event) -> None:
        while not stopping.wait(self._period):
            try:
                self.tick()
            except Exception:
                logger.exception(t("log.tick_failed"))
