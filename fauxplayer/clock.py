"""PlaybackClock class - derives the playback position from elapsed time."""

import time
from typing import Callable


class PlaybackClock:
    """Tracks the position within the current track.

    The position is not counted up continuously. It is a baseline offset
    plus the time elapsed since the clock was last anchored, and the
    elapsed part only counts while playing.
    """

    def __init__(self, now: Callable[[], float] = time.monotonic):
        """Initialize a running clock at position 0.

        Args:
            now: Time source returning seconds. Defaults to time.monotonic.
        """
        self._now = now
        self._playing = True
        self._baseline_ms = 0
        self._anchor = now()

    @property
    def playing(self) -> bool:
        """Check if the clock is accruing time."""
        return self._playing

    def _elapsed_ms(self) -> int:
        return int((self._now() - self._anchor) * 1000)

    def start(self) -> None:
        """Resume accruing time. Does nothing if already playing."""
        if self._playing:
            return
        self._anchor = self._now()
        self._playing = True

    def pause(self) -> None:
        """Freeze the position. Does nothing if already paused."""
        if not self._playing:
            return
        self._baseline_ms += self._elapsed_ms()
        self._playing = False

    def position(self) -> int:
        """Get the current position in milliseconds."""
        if not self._playing:
            return self._baseline_ms
        return self._baseline_ms + self._elapsed_ms()

    def seek(self, delta_ms: int) -> None:
        """Move the baseline by a signed offset, stopping at 0.

        The offset applies to the baseline, not the live position; time
        played since the last anchor is dropped when the clock re-anchors.

        Args:
            delta_ms: Milliseconds to move by. Negative values seek backwards.
        """
        self.set_absolute(self._baseline_ms + delta_ms)

    def set_absolute(self, target_ms: int) -> None:
        """Set the position, keeping the current play state.

        Args:
            target_ms: The new position in milliseconds. Negative values become 0.
        """
        self._baseline_ms = max(0, target_ms)
        self._anchor = self._now()
