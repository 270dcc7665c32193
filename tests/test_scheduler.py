"""Unit tests for AutoAdvanceScheduler class."""

import logging
import threading
import time
from unittest.mock import MagicMock

import pytest

from fauxplayer.player import PlayerEngine
from fauxplayer.scheduler import DEFAULT_PERIOD_MS, AutoAdvanceScheduler
from fauxplayer.track import Track


def make_track(title: str = "Test", length: int = 180000) -> Track:
    """Create a test track with sensible defaults."""
    return Track(
        track_id=f"spotify:track:{title.lower().replace(' ', '-')}",
        length=length,
        title=title,
    )


@pytest.fixture
def scheduler_factory():
    """Create schedulers and make sure they are stopped afterwards."""
    created: list[AutoAdvanceScheduler] = []

    def factory(player, period_ms: int = DEFAULT_PERIOD_MS) -> AutoAdvanceScheduler:
        scheduler = AutoAdvanceScheduler(player, period_ms)
        created.append(scheduler)
        return scheduler

    yield factory

    for scheduler in created:
        scheduler.stop(timeout=1.0)


class TestSchedulerLifecycle:
    """Tests for starting and stopping the background thread."""

    def test_default_period(self) -> None:
        """Test that the default period is 50 ms."""
        scheduler = AutoAdvanceScheduler(MagicMock())

        assert scheduler.period_ms == 50

    @pytest.mark.parametrize("period", [0, -50])
    def test_invalid_period(self, period: int) -> None:
        """Test that a non-positive period is rejected."""
        with pytest.raises(ValueError):
            AutoAdvanceScheduler(MagicMock(), period)

    def test_not_running_until_started(self, scheduler_factory) -> None:
        """Test that construction does not start the thread."""
        scheduler = scheduler_factory(MagicMock())

        assert scheduler.is_running is False

    def test_start_and_stop(self, scheduler_factory) -> None:
        """Test that the thread runs between start and stop."""
        scheduler = scheduler_factory(MagicMock())

        scheduler.start()
        assert scheduler.is_running is True

        scheduler.stop(timeout=1.0)
        assert scheduler.is_running is False

    def test_start_twice_keeps_one_thread(self, scheduler_factory) -> None:
        """Test that a second start does not spawn another thread."""
        scheduler = scheduler_factory(MagicMock())

        scheduler.start()
        first = scheduler._thread
        scheduler.start()

        assert scheduler._thread is first

    def test_restart_after_stop(self, scheduler_factory) -> None:
        """Test that a stopped scheduler can be started again."""
        player = MagicMock()
        scheduler = scheduler_factory(player, 10)
        scheduler.start()
        scheduler.stop(timeout=1.0)
        player.advance_if_finished.reset_mock()

        scheduler.start()
        time.sleep(0.1)

        assert player.advance_if_finished.called

    def test_restart_after_timed_out_stop(self, scheduler_factory) -> None:
        """Test that a thread still mid-tick at stop() exits after a restart."""

        def slow_tick() -> bool:
            time.sleep(0.1)
            return False

        player = MagicMock()
        player.advance_if_finished.side_effect = slow_tick
        scheduler = scheduler_factory(player, 10)
        scheduler.start()
        time.sleep(0.03)

        scheduler.stop(timeout=0.01)
        scheduler.start()
        time.sleep(0.5)

        alive = [
            thread
            for thread in threading.enumerate()
            if thread.name == "auto-advance" and thread.is_alive()
        ]
        assert len(alive) == 1
        assert scheduler.is_running is True


class TestSchedulerTicks:
    """Tests for what each tick does."""

    def test_tick_calls_player(self) -> None:
        """Test that a tick asks the player to advance if finished."""
        player = MagicMock()
        player.advance_if_finished.return_value = True
        scheduler = AutoAdvanceScheduler(player)

        assert scheduler.tick() is True
        player.advance_if_finished.assert_called_once_with()

    def test_ticks_repeat(self, scheduler_factory) -> None:
        """Test that the player is polled repeatedly."""
        player = MagicMock()
        player.advance_if_finished.return_value = False
        scheduler = scheduler_factory(player, 10)

        scheduler.start()
        time.sleep(0.2)

        assert player.advance_if_finished.call_count >= 3

    def test_failing_tick_is_logged_and_survived(
        self, scheduler_factory, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that an error in one tick does not end the thread."""
        player = MagicMock()
        player.advance_if_finished.side_effect = RuntimeError("boom")
        scheduler = scheduler_factory(player, 10)

        with caplog.at_level(logging.ERROR, logger="fauxplayer.scheduler"):
            scheduler.start()
            time.sleep(0.1)

        assert scheduler.is_running is True
        assert player.advance_if_finished.call_count >= 2
        assert "boom" in caplog.text


class TestSchedulerWithEngine:
    """End-to-end tests against a real engine and real time."""

    def test_auto_advance_after_track_ends(self, scheduler_factory) -> None:
        """Test that a short track is advanced without any caller action."""
        engine = PlayerEngine([make_track("Short", 100), make_track("Long", 600000)])
        scheduler = scheduler_factory(engine)

        scheduler.start()
        time.sleep((scheduler.period_ms + 100) / 1000 + 0.15)

        snapshot = engine.snapshot()
        assert snapshot.index == 1
        assert snapshot.position < 500

    def test_foreground_pause_is_seen_by_scheduler(self, scheduler_factory) -> None:
        """Test that pausing from the caller's side stops the auto-advance."""
        engine = PlayerEngine([make_track("Short", 100), make_track("Long", 600000)])
        engine.pause()
        scheduler = scheduler_factory(engine)

        scheduler.start()
        time.sleep(0.3)

        assert engine.current_index == 0

    def test_foreground_seek_is_seen_by_scheduler(self, scheduler_factory) -> None:
        """Test that a caller seeking past the end triggers the advance."""
        engine = PlayerEngine([make_track("A", 600000), make_track("B", 600000)])
        engine.pause()
        scheduler = scheduler_factory(engine)
        scheduler.start()

        engine.seek(600000)
        time.sleep(0.2)

        assert engine.current_index == 1
        assert engine.position() == 0

    def test_foreground_next_is_seen_by_scheduler(self, scheduler_factory) -> None:
        """Test that the scheduler follows a track chosen by a caller."""
        engine = PlayerEngine(
            [make_track("Long", 600000), make_track("Short", 100), make_track("Last", 600000)]
        )
        scheduler = scheduler_factory(engine)
        scheduler.start()

        engine.next()
        time.sleep(0.35)

        assert engine.current_index == 2

    def test_auto_advance_notifies(self, scheduler_factory) -> None:
        """Test that auto-advance goes through the track change callback."""
        changes: list[Track] = []
        engine = PlayerEngine(
            [make_track("Short", 100), make_track("Long", 600000)],
            on_track_change=changes.append,
        )
        scheduler = scheduler_factory(engine)

        scheduler.start()
        time.sleep(0.35)

        assert [track.title for track in changes] == ["Long"]
