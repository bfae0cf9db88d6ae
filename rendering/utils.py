"""
Color helpers shared by surfaces and the growth engine.
"""

import re
from typing import Callable, Sequence, Tuple

RGBA = Tuple[float, float, float, float]

_FUNC_COLOR = re.compile(r'^rgba?\(([^)]*)\)$')


def parse_color(color) -> RGBA:
    """
    Convert a color to cairo RGBA floats in [0, 1].

    Accepts '#rgb', '#rrggbb', 'rgb(r,g,b)', 'rgba(r,g,b,a)' with 0-255
    channels and 0-1 alpha, or a 3/4-sequence in the same units.
    """
    if isinstance(color, str):
        text = color.strip().lower()
        if text.startswith('#'):
            digits = text[1:]
            if len(digits) == 3:
                digits = ''.join(c * 2 for c in digits)
            if len(digits) != 6:
                raise ValueError(f"Invalid hex color: {color!r}")
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
            return r / 255, g / 255, b / 255, 1.0

        match = _FUNC_COLOR.match(text.replace(' ', ''))
        if match is None:
            raise ValueError(f"Unsupported color: {color!r}")
        channels = [float(c) for c in match.group(1).split(',')]
        return _from_channels(channels, color)

    return _from_channels([float(c) for c in color], color)


def _from_channels(channels: Sequence[float], original) -> RGBA:
    if len(channels) == 3:
        channels = list(channels) + [1.0]
    if len(channels) != 4:
        raise ValueError(f"Expected 3 or 4 channels: {original!r}")
    r, g, b, a = channels
    return r / 255, g / 255, b / 255, min(max(a, 0.0), 1.0)


def random_color(random: Callable[[], float]) -> str:
    """Hex color from a single draw of ``random``."""
    return '#%06x' % round(0xffffff * random())


def format_rgba(rgb: Sequence[int], alpha: float) -> str:
    r, g, b = rgb
    return f"rgba({r},{g},{b},{alpha})"
