"""fauxplayer - A simulated media player behind a remote-control interface."""

from .clock import PlaybackClock
from .player import PlaybackStatus, PlayerEngine
from .remote import RemoteControl
from .scheduler import AutoAdvanceScheduler
from .track import Track
from .track_queue import TrackQueue

__all__ = [
    "AutoAdvanceScheduler",
    "PlaybackClock",
    "PlaybackStatus",
    "PlayerEngine",
    "RemoteControl",
    "Track",
    "TrackQueue",
]
