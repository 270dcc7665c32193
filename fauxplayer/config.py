"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

from .i18n import t
from .scheduler import DEFAULT_PERIOD_MS


@dataclass(frozen=True)
class Settings:
    """Settings for a player process."""

    tracks_path: Path | None = None  # None means the bundled track list
    tick_ms: int = DEFAULT_PERIOD_MS
    log_level: str = "INFO"
    locale: str = "en"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from FAUXPLAYER_* environment variables.

        Returns:
            The settings, with defaults for unset variables.

        Raises:
            ValueError: If FAUXPLAYER_TICK_MS is not an integer.
        """
        tracks = os.getenv("FAUXPLAYER_TRACKS")
        raw_tick = os.getenv("FAUXPLAYER_TICK_MS")

        tick_ms = DEFAULT_PERIOD_MS
        if raw_tick:
            try:
                tick_ms = int(raw_tick)
            except ValueError as e:
                raise ValueError(t("error.invalid_tick", value=raw_tick)) from e

        return cls(
            tracks_path=Path(tracks) if tracks else None,
            tick_ms=tick_ms,
            log_level=os.getenv("FAUXPLAYER_LOG_LEVEL", "INFO").upper(),
            locale=os.getenv("FAUXPLAYER_LOCALE", "en"),
        )
