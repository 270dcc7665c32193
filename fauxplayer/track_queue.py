"""TrackQueue class - fixed track list with a wrap-around cursor."""

from collections.abc import Iterable

from .i18n import t
from .track import Track


class TrackQueue:
    """Holds the tracks of the player and which one is current.

    The track list is fixed at construction. Navigation wraps around at
    both ends, so the cursor always points at a valid track.
    """

    def __init__(self, tracks: Iterable[Track]):
        """Initialize the queue.

        Args:
            tracks: The tracks to play, in order. Must not be empty.

        Raises:
            ValueError: If no tracks are given.
        """
        self._tracks: tuple[Track, ...] = tuple(tracks)
        if not self._tracks:
            raise ValueError(t("error.empty_queue"))
        self._current_index = 0
        # Not consulted by navigation; SetPosition does not validate track ids.
        self._index: dict[str, int] = {}
        for i, track in enumerate(self._tracks):
            self._index.setdefault(track.track_id, i)

    def __len__(self) -> int:
        return len(self._tracks)

    @property
    def tracks(self) -> tuple[Track, ...]:
        """Get the tracks in queue order."""
        return self._tracks

    @property
    def current_index(self) -> int:
        """Get the index of the current track."""
        return self._current_index

    def current(self) -> Track:
        """Get the current track."""
        return self._tracks[self._current_index]

    def advance(self) -> Track:
        """Move to the next track, wrapping to the first after the last.

        Returns:
            The new current track.
        """
        self._current_index = (self._current_index + 1) % len(self._tracks)
        return self.current()

    def retreat(self) -> Track:
        """Move to the previous track, wrapping to the last before the first.

        Returns:
            The new current track.
        """
        self._current_index = (self._current_index - 1 + len(self._tracks)) % len(self._tracks)
        return self.current()

    def index_of(self, track_id: str) -> int | None:
        """Get the queue index of a track id, or None if it is not queued."""
        return self._index.get(track_id)
