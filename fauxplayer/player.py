"""PlayerEngine class - the control and query surface of the player."""

import enum
import logging
import threading
import time
from collections.abc import Iterable
from typing import Callable, NamedTuple

from .clock import PlaybackClock
from .i18n import t
from .track import Track
from .track_queue import TrackQueue

logger = logging.getLogger(__name__)


class PlaybackStatus(str, enum.Enum):
    """Whether the clock is accruing time."""

    PLAYING = "Playing"
    PAUSED = "Paused"


class PlayerSnapshot(NamedTuple):
    """A consistent view of the player taken under one lock acquisition."""

    index: int
    track: Track
    position: int
    status: PlaybackStatus


class PlayerEngine:
    """Combines a PlaybackClock and a TrackQueue behind one lock.

    The engine is shared between callers handling remote requests and the
    AutoAdvanceScheduler thread. Every read and write of clock or queue
    state happens while holding the engine lock, so a track switch and the
    position reset that goes with it are never observed separately.
    """

    MINIMUM_RATE = 1.0
    MAXIMUM_RATE = 1.0

    def __init__(
        self,
        tracks: Iterable[Track],
        now: Callable[[], float] = time.monotonic,
        on_track_change: Callable[[Track], None] | None = None,
    ):
        """Initialize the engine, playing the first track from position 0.

        Args:
            tracks: The tracks to queue. Must not be empty.
            now: Time source returning seconds. Defaults to time.monotonic.
            on_track_change: Optional callback invoked with the new track after
                next, previous or an auto-advance.
        """
        self._lock = threading.RLock()
        self._queue = TrackQueue(tracks)
        self._clock = PlaybackClock(now)
        self._on_track_change = on_track_change

        self._shuffle = False
        self._rate = 1.0
        self._volume = 1.0
        self._loop_status = "None"

    @property
    def queue(self) -> TrackQueue:
        """Get the underlying queue. Callers must not navigate it directly."""
        return self._queue

    @property
    def current_index(self) -> int:
        """Get the index of the current track."""
        with self._lock:
            return self._queue.current_index

    # Play state

    def play(self) -> None:
        """Start or resume playback."""
        with self._lock:
            self._clock.start()

    def pause(self) -> None:
        """Pause playback, freezing the position."""
        with self._lock:
            self._clock.pause()

    def play_pause(self) -> None:
        """Toggle between playing and paused."""
        with self._lock:
            if self._clock.playing:
                self._clock.pause()
            else:
                self._clock.start()

    def stop(self) -> None:
        """Accept a stop request. Stopping is not modeled."""
        logger.debug(t("log.stop_ignored"))

    # Navigation

    def next(self) -> Track:
        """Move to the next track and rewind to position 0.

        Returns:
            The new current track.
        """
        with self._lock:
            track = self._switch(self._queue.advance)
        self._notify_track_change(track)
        return track

    def previous(self) -> Track:
        """Move to the previous track and rewind to position 0.

        Returns:
            The new current track.
        """
        with self._lock:
            track = self._switch(self._queue.retreat)
        self._notify_track_change(track)
        return track

    def advance_if_finished(self) -> bool:
        """Move to the next track if the current one has run out.

        Returns:
            True if the player advanced.
        """
        with self._lock:
            if self._clock.position() < self._queue.current().length:
                return False
            track = self._switch(self._queue.advance)
        logger.debug(t("log.auto_advanced", title=track.title))
        self._notify_track_change(track)
        return True

    def _switch(self, navigate: Callable[[], Track]) -> Track:
        # Caller holds the lock
        track = navigate()
        self._clock.set_absolute(0)
        return track

    def _notify_track_change(self, track: Track) -> None:
        logger.info(
            t(
                "log.track_changed",
                title=track.title,
                track_id=track.track_id,
                duration=track.format_duration(),
            )
        )
        if self._on_track_change:
            self._on_track_change(track)

    # Position

    def position(self) -> int:
        """Get the position within the current track in milliseconds."""
        with self._lock:
            return self._clock.position()

    def seek(self, delta_ms: int) -> int:
        """Move the position by a signed offset.

        Args:
            delta_ms: Milliseconds to move by. Negative values seek backwards.

        Returns:
            The new position in milliseconds.
        """
        with self._lock:
            self._clock.seek(delta_ms)
            position = self._clock.position()
        logger.info(t("log.seeked", offset=delta_ms, position=position))
        return position

    def set_position(self, target_ms: int) -> None:
        """Jump to an absolute position in the current track.

        A target at or past the end of the track completes it, which is the
        same as calling next().

        Args:
            target_ms: The position in milliseconds.
        """
        with self._lock:
            if target_ms < self._queue.current().length:
                self._clock.set_absolute(target_ms)
                track = None
            else:
                track = self._switch(self._queue.advance)
        logger.info(t("log.position_set", position=target_ms))
        if track is not None:
            self._notify_track_change(track)

    # Queries

    def playback_status(self) -> PlaybackStatus:
        """Get whether the player is playing or paused."""
        with self._lock:
            return PlaybackStatus.PLAYING if self._clock.playing else PlaybackStatus.PAUSED

    def current_metadata(self) -> Track:
        """Get the current track."""
        with self._lock:
            return self._queue.current()

    def snapshot(self) -> PlayerSnapshot:
        """Read index, track, position and status together."""
        with self._lock:
            return PlayerSnapshot(
                index=self._queue.current_index,
                track=self._queue.current(),
                position=self._clock.position(),
                status=PlaybackStatus.PLAYING if self._clock.playing else PlaybackStatus.PAUSED,
            )

    # Passthrough properties. Stored only; none of them change playback.

    @property
    def shuffle(self) -> bool:
        with self._lock:
            return self._shuffle

    @shuffle.setter
    def shuffle(self, value: bool) -> None:
        with self._lock:
            self._shuffle = value

    @property
    def rate(self) -> float:
        with self._lock:
            return self._rate

    @rate.setter
    def rate(self, value: float) -> None:
        with self._lock:
            self._rate = value

    @property
    def volume(self) -> float:
        with self._lock:
            return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        with self._lock:
            self._volume = value

    @property
    def loop_status(self) -> str:
        with self._lock:
            return self._loop_status

    @loop_status.setter
    def loop_status(self, value: str) -> None:
        with self._lock:
            self._loop_status = value
