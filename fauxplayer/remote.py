"""Remote-control facade using the media player remote-control vocabulary.

Member names follow the MPRIS ``org.mpris.MediaPlayer2`` and
``org.mpris.MediaPlayer2.Player`` interfaces so a bus binding can forward
property reads/writes and method calls one-to-one. Marshalling and bus
registration are left to that binding.
"""

import logging
from typing import Callable

from .i18n import t
from .player import PlayerEngine

logger = logging.getLogger(__name__)


class RemoteControl:
    """Translates remote-control requests into PlayerEngine operations."""

    # org.mpris.MediaPlayer2
    Identity = "Spotify"
    DesktopEntry = "spotify"
    SupportedUriSchemes = ["spotify"]
    SupportedMimeTypes: list[str] = []
    CanQuit = False
    CanRaise = False
    HasTrackList = False

    # org.mpris.MediaPlayer2.Player capabilities
    CanControl = True
    CanGoNext = True
    CanGoPrevious = True
    CanPause = True
    CanPlay = True
    CanSeek = True

    def __init__(
        self,
        engine: PlayerEngine,
        on_seeked: Callable[[int], None] | None = None,
    ):
        """Initialize the facade.

        Args:
            engine: The shared player engine.
            on_seeked: Optional callback invoked with the new position after
                Seek, for emitting the Seeked signal.
        """
        self.engine = engine
        self._on_seeked = on_seeked

    # org.mpris.MediaPlayer2 methods

    def Quit(self) -> None:
        """Accept a quit request. Quitting is not supported."""

    def Raise(self) -> None:
        """Accept a raise request. There is no window to raise."""

    # Read-only properties

    @property
    def PlaybackStatus(self) -> str:
        return self.engine.playback_status().value

    @property
    def Position(self) -> int:
        return self.engine.position()

    @property
    def Metadata(self) -> dict[str, object]:
        return self.engine.current_metadata().to_metadata()

    @property
    def MinimumRate(self) -> float:
        return PlayerEngine.MINIMUM_RATE

    @property
    def MaximumRate(self) -> float:
        return PlayerEngine.MAXIMUM_RATE

    # Read/write properties

    @property
    def Shuffle(self) -> bool:
        return self.engine.shuffle

    @Shuffle.setter
    def Shuffle(self, value: bool) -> None:
        self.engine.shuffle = value

    @property
    def Rate(self) -> float:
        return self.engine.rate

    @Rate.setter
    def Rate(self, value: float) -> None:
        self.engine.rate = value

    @property
    def Volume(self) -> float:
        return self.engine.volume

    @Volume.setter
    def Volume(self, value: float) -> None:
        self.engine.volume = value

    @property
    def LoopStatus(self) -> str:
        return self.engine.loop_status

    @LoopStatus.setter
    def LoopStatus(self, value: str) -> None:
        self.engine.loop_status = value

    # org.mpris.MediaPlayer2.Player methods

    def Play(self) -> None:
        self.engine.play()

    def Pause(self) -> None:
        self.engine.pause()

    def PlayPause(self) -> None:
        self.engine.play_pause()

    def Stop(self) -> None:
        self.engine.stop()

    def Next(self) -> None:
        self.engine.next()

    def Previous(self) -> None:
        self.engine.previous()

    def Seek(self, offset: int) -> None:
        """Seek by a signed offset and report the new position.

        Args:
            offset: Offset in milliseconds. Negative values seek backwards.
        """
        position = self.engine.seek(offset)
        if self._on_seeked:
            self._on_seeked(position)

    def SetPosition(self, track_id: str, position: int) -> None:
        """Set the absolute position.

        The track id is accepted but not checked against the current track.

        Args:
            track_id: The id of the track the position applies to.
            position: The position in milliseconds.
        """
        self.engine.set_position(position)

    def OpenUri(self, uri: str) -> None:
        """Accept an open request. The queue is fixed, so it is only logged."""
        logger.info(t("log.open_uri", uri=uri))
