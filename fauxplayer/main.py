"""Main entry point for the simulated media player."""

import logging
import sys
import threading

from dotenv import load_dotenv

from .config import Settings
from .i18n import get_available_locales, is_valid_locale, set_locale, t
from .player import PlayerEngine
from .remote import RemoteControl
from .scheduler import AutoAdvanceScheduler
from .tracklist import load_tracks

logger = logging.getLogger(__name__)


def build_player(settings: Settings) -> tuple[RemoteControl, AutoAdvanceScheduler]:
    """Create the engine, its remote-control facade and its scheduler.

    The facade and the scheduler share one engine instance.

    Args:
        settings: The process settings.

    Returns:
        The remote-control facade and the (not yet started) scheduler.
    """
    tracks = load_tracks(settings.tracks_path)
    engine = PlayerEngine(tracks)
    scheduler = AutoAdvanceScheduler(engine, settings.tick_ms)
    logger.info(t("log.starting", count=len(tracks), tick_ms=settings.tick_ms))
    return RemoteControl(engine), scheduler


def main() -> None:
    """Run the player until interrupted."""
    load_dotenv()

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(t("error.startup", error=e), file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not is_valid_locale(settings.locale):
        print(
            t(
                "error.invalid_locale",
                locale=settings.locale,
                available=", ".join(get_available_locales()),
            ),
            file=sys.stderr,
        )
        sys.exit(1)
    set_locale(settings.locale)

    try:
        remote, scheduler = build_player(settings)
    except (OSError, ValueError) as e:
        print(t("error.startup", error=e), file=sys.stderr)
        sys.exit(1)

    scheduler.start()
    track = remote.engine.current_metadata()
    logger.info(
        t(
            "log.track_changed",
            title=track.title,
            track_id=track.track_id,
            duration=track.format_duration(),
        )
    )

    try:
        # The remote-control binding runs on its own; keep the process alive
        threading.Event().wait()
    except KeyboardInterrupt:
        logger.info(t("log.shutting_down"))
    finally:
        scheduler.stop()


if __name__ == "__main__":
    main()
