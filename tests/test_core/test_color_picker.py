"""Tests for the color picker geometry and input handling."""

import pytest
from PyQt6.QtGui import QColor

from sprite_core import ColorPicker


def hsv(color):
    return color.hue(), color.saturation(), color.value()


@pytest.fixture
def picker():
    return ColorPicker(200)


class TestColorMapping:
    def test_corners(self, picker):
        assert hsv(picker.color_at((0, 0), 0)) == (359, 0, 255)
        assert hsv(picker.color_at((200, 200), 359)) == (0, 255, 0)

    def test_interior_point(self, picker):
        assert hsv(picker.color_at((100, 50), 100)) == (259, 127, 192)

    def test_out_of_square_values_are_clamped(self, picker):
        assert hsv(picker.color_at((-20, 400), 0)) == (359, 0, 0)
        assert hsv(picker.color_at((500, -5), 0)) == (359, 255, 255)

    def test_inverse(self, picker):
        point, hue = picker.point_and_hue_for(QColor.fromHsv(259, 127, 192))
        assert point == (100, 50)
        assert hue == 100

    @pytest.mark.parametrize("hue", [0, 1, 180, 358, 359])
    def test_round_trip_of_every_gradient_color(self, picker, hue):
        for x in range(0, 201, 7):
            for y in range(0, 201, 9):
                color = picker.color_at((x, y), hue)
                point, back_hue = picker.point_and_hue_for(color)
                assert hsv(picker.color_at(point, back_hue)) == hsv(color)

    @pytest.mark.parametrize("size", [200, 255, 300])
    def test_round_trip_of_arbitrary_colors_within_one_unit(self, size):
        picker = ColorPicker(size)
        for s in range(0, 256, 5):
            for v in range(0, 256, 17):
                color = QColor.fromHsv(42, s, v)
                back = picker.color_at(*picker.point_and_hue_for(color))
                assert back.hue() == 42
                assert abs(back.saturation() - s) <= 1
                assert abs(back.value() - v) <= 1

    def test_achromatic_rgb_color_maps_to_hue_zero(self, picker):
        gray = QColor(128, 128, 128)
        assert gray.hue() == -1
        point, hue = picker.point_and_hue_for(gray)
        assert hue == 359
        assert picker.color_at(point, hue).hue() == 0

    def test_bounds_are_exclusive(self, picker):
        assert picker.is_in_gradient_bounds((1, 1))
        assert picker.is_in_gradient_bounds((199, 199))
        assert not picker.is_in_gradient_bounds((0, 10))
        assert not picker.is_in_gradient_bounds((10, 200))
        assert not picker.is_in_gradient_bounds((-1, 50))


class TestPickerInput:
    def test_press_emits_color(self, picker, recorder):
        colors = recorder(picker.color_changed)
        picker.press((100, 50))
        assert picker.current_point == (100, 50)
        assert [hsv(c) for (c,) in colors] == [(359, 127, 192)]

    def test_press_on_current_point_or_outside_is_ignored(self, picker, recorder):
        colors = recorder(picker.color_changed)
        picker.press(picker.current_point)
        picker.press((250, 10))
        assert colors == []

    def test_drag_outside_keeps_last_valid_point(self, picker, recorder):
        colors = recorder(picker.color_changed)
        picker.drag((40, 40))
        picker.drag((-5, 300))
        assert picker.current_point == (40, 40)
        assert colors == []
        picker.release()
        assert [hsv(c) for (c,) in colors] == [hsv(picker.color_at((40, 40), 0))]

    def test_set_hue_clamps_and_updates_gradient(self, picker, recorder):
        hues = recorder(picker.gradient_hue_changed)
        colors = recorder(picker.color_changed)
        picker.set_hue(400)
        assert picker.hue == 359
        picker.set_hue(-3)
        assert picker.hue == 0
        assert hues == [(0,), (359,)]
        assert colors == []
        picker.set_hue(100)
        assert hsv(picker.gradient_color()) == (259, 255, 255)
        picker.release_hue()
        assert colors[-1][0].hue() == 259

    def test_select_recent_moves_state_and_emits(self, picker, recorder):
        colors = recorder(picker.color_changed)
        swatch = QColor.fromHsv(259, 127, 192)
        picker.select_recent(swatch)
        assert picker.hue == 100
        assert picker.current_point == (100, 50)
        assert [hsv(c) for (c,) in colors] == [(259, 127, 192)]

    def test_reset(self, picker, recorder):
        picker.press((100, 100))
        picker.set_hue(50)
        colors = recorder(picker.color_changed)
        picker.reset()
        assert picker.hue == 0
        assert picker.current_point == (2, 197)
        assert [hsv(c) for (c,) in colors] == [(359, 2, 4)]


class TestRecentSwatches:
    def test_newest_first_and_padded(self):
        colors = [QColor(1, 0, 0), QColor(2, 0, 0)]
        swatches = ColorPicker.recent_colors(colors)
        assert len(swatches) == 5
        assert [c.red() for c in swatches[:2]] == [2, 1]
        assert swatches[2:] == [None, None, None]

    def test_truncated_to_capacity(self):
        colors = [QColor(i, 0, 0) for i in range(8)]
        swatches = ColorPicker.recent_colors(colors, capacity=3)
        assert [c.red() for c in swatches] == [7, 6, 5]
