"""Tests for colors, the Cairo surface and exporters."""

import numpy as np
import pytest

from config import SurfaceConfig
from rendering import CairoSurface, format_rgba, parse_color, random_color, save_animation, save_frame


class TestColors:
    """Test color parsing and formatting."""

    @pytest.mark.parametrize('color, expected', [
        ('#ffffff', (1.0, 1.0, 1.0, 1.0)),
        ('#fff', (1.0, 1.0, 1.0, 1.0)),
        ('#FF0000', (1.0, 0.0, 0.0, 1.0)),
        ('rgba(255,0,0,0.4)', (1.0, 0.0, 0.0, 0.4)),
        ('rgb(0, 255, 0)', (0.0, 1.0, 0.0, 1.0)),
        ((0, 0, 255), (0.0, 0.0, 1.0, 1.0)),
    ])
    def test_parse(self, color, expected):
        assert parse_color(color) == pytest.approx(expected)

    @pytest.mark.parametrize('color', ['#ff', 'red', 'rgba(1,2)', (1, 2)])
    def test_parse_invalid(self, color):
        with pytest.raises(ValueError):
            parse_color(color)

    def test_random_color_is_zero_padded(self):
        assert random_color(lambda: 0.0) == '#000000'
        assert random_color(lambda: 1 / 0xffffff) == '#000001'
        assert random_color(lambda: 0.999999999) == '#ffffff'

    def test_format_rgba(self):
        assert format_rgba((0, 10, 20), 0.05) == 'rgba(0,10,20,0.05)'
        assert parse_color(format_rgba((255, 0, 0), 0.5)) == pytest.approx((1.0, 0.0, 0.0, 0.5))


class TestCairoSurface:
    """Test drawing on a real Cairo image."""

    def make(self):
        return CairoSurface(SurfaceConfig(output_width=40, output_height=30))

    def test_starts_with_background(self):
        pixels = self.make().to_numpy()

        assert pixels.shape == (30, 40, 4)
        assert np.all(pixels[:, :, :3] == 0)
        assert np.all(pixels[:, :, 3] == 255)

    def test_stroke_draws(self):
        surface = self.make()
        surface.move_to(0, 15)
        surface.line_to(40, 15)
        surface.stroke(4, '#ffffff')

        pixels = surface.to_numpy()
        assert pixels[15, 20, 0] == 255
        assert pixels[0, 20, 0] == 0

    def test_negative_width_is_harmless(self):
        surface = self.make()
        surface.move_to(0, 15)
        surface.line_to(40, 15)
        surface.stroke(-3, '#ffffff')
        surface.stroke_circle(20, 15, -5, 'rgba(255,0,0,0.4)')

        assert surface.to_numpy().shape == (30, 40, 4)

    def test_circle(self):
        surface = self.make()
        surface.stroke_circle(20, 15, 10, '#ff0000', line_width=2)

        pixels = surface.to_numpy()
        assert pixels[15, 30, 0] > 100
        assert pixels[15, 20, 0] == 0

    def test_fade_darkens(self):
        surface = self.make()
        surface.move_to(0, 15)
        surface.line_to(40, 15)
        surface.stroke(4, '#ffffff')
        before = surface.to_numpy()[15, 20, 0]

        surface.fill_translucent_rect((0, 0, 0), 0.5)

        after = surface.to_numpy()[15, 20, 0]
        assert after < before
        assert after > 0

    def test_clear(self):
        surface = self.make()
        surface.move_to(0, 15)
        surface.line_to(40, 15)
        surface.stroke(4, '#ffffff')

        surface.clear()

        assert np.all(surface.to_numpy()[:, :, :3] == 0)

    def test_set_dimensions(self):
        surface = self.make()
        surface.set_dimensions(64, 48)

        assert surface.get_dimensions() == (64, 48)
        assert surface.to_rgb().shape == (48, 64, 3)


class TestExporters:
    """Test writing frames to disk."""

    def test_save_frame(self, tmp_path):
        path = tmp_path / 'out' / 'frame.png'
        save_frame(np.zeros((8, 8, 3), dtype=np.uint8), str(path))

        assert path.exists()

    def test_save_animation(self, tmp_path):
        path = tmp_path / 'anim.gif'
        frames = [np.full((8, 8, 4), i * 40, dtype=np.uint8) for i in range(4)]
        save_animation(frames, str(path), fps=10)

        assert path.exists()

    def test_save_animation_needs_frames(self, tmp_path):
        with pytest.raises(ValueError):
            save_animation([], str(tmp_path / 'anim.gif'))
