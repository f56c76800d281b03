"""Tests for the preview animation player."""

import pytest
from PyQt6.QtGui import QColor

from sprite_core import AnimationPlayer, FrameStore


@pytest.fixture
def store():
    store = FrameStore(2)
    for shade in (10, 20):
        index = store.create_frame()
        store.frame(index).fill(QColor(shade, 0, 0, 255))
    return store


@pytest.fixture
def player(store):
    return AnimationPlayer(store)


class TestToggle:
    def test_cannot_start_without_speed(self, player, recorder):
        started = recorder(player.started)
        assert player.toggle() is False
        assert not player.playing
        assert started == []

    def test_start_and_stop(self, player, recorder):
        started = recorder(player.started)
        stopped = recorder(player.stopped)
        frames = recorder(player.frame_ready)
        player.set_speed(10)
        assert player.toggle() is True
        assert player.playing
        assert player.timer_active
        assert started == [()]

        player.tick()
        player.tick()
        assert player.toggle() is False
        assert not player.timer_active
        assert stopped == [()]
        assert player.preview_index == 0
        # Stopping shows frame 0 again rather than the next frame
        assert frames[-1][0] == 0


class TestSpeed:
    def test_interval_is_rounded(self, player):
        player.set_speed(3)
        assert player.interval_ms == 333
        player.set_speed(24)
        assert player.interval_ms == 42

    def test_zero_fps_while_running_stops(self, player, recorder):
        stopped = recorder(player.stopped)
        player.set_speed(12)
        player.toggle()
        player.set_speed(0)
        assert not player.playing
        assert not player.timer_active
        assert player.interval_ms == 0
        assert stopped == [()]
        assert player.toggle() is False
        player.set_speed(5)
        assert player.toggle() is True

    def test_negative_fps_disables(self, player):
        player.set_speed(-4)
        assert player.interval_ms == 0
        assert player.toggle() is False

    def test_speed_change_while_running_keeps_playing(self, player):
        player.set_speed(10)
        player.toggle()
        player.set_speed(20)
        assert player.playing
        assert player.timer_active
        assert player.interval_ms == 50

    def test_very_high_rate_keeps_a_positive_interval(self, player):
        player.set_speed(10)
        player.toggle()
        player.set_speed(5000)
        assert player.playing
        assert player.interval_ms == 1


class TestTick:
    def test_cycles_and_wraps(self, player, recorder):
        frames = recorder(player.frame_ready)
        for _ in range(4):
            player.tick()
        assert [index for index, _ in frames] == [0, 1, 2, 0]
        assert player.preview_index == 1

    def test_emits_frame_images(self, player, recorder):
        frames = recorder(player.frame_ready)
        player.tick()
        player.tick()
        _, image = frames[1]
        assert image.getpixel((0, 0)) == (10, 0, 0, 255)

    def test_edits_show_up_on_next_tick(self, player, store, recorder):
        frames = recorder(player.frame_ready)
        player.tick()
        store.frame(1).set_pixel(1, 1, QColor(0, 0, 255, 255))
        player.tick()
        assert frames[1][1].getpixel((1, 1)) == (0, 0, 255, 255)


class TestReset:
    def test_reset_stops_and_clears_speed(self, player, recorder):
        resets = recorder(player.preview_reset)
        frames = recorder(player.frame_ready)
        player.set_speed(10)
        player.toggle()
        player.tick()
        player.reset()
        assert not player.playing
        assert not player.timer_active
        assert player.interval_ms == 0
        assert player.preview_index == 0
        assert resets == [()]
        assert frames[-1][0] == 0
