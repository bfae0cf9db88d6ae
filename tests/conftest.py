"""Shared fixtures: a recording surface, scripted randomness, a simulated clock."""

import itertools

import matplotlib
matplotlib.use('Agg')

import pytest

from rendering.base import DrawSurface
from strands.scheduler import SimulatedScheduler

MUTATING = {'move_to', 'line_to', 'stroke', 'stroke_circle', 'fill_translucent_rect', 'clear', 'set_dimensions'}


class RecordingSurface(DrawSurface):
    """Keeps every draw command instead of rasterizing it."""

    def __init__(self, width=400, height=300):
        self.width = width
        self.height = height
        self.calls = []

    def move_to(self, x, y):
        self.calls.append(('move_to', x, y))

    def line_to(self, x, y):
        self.calls.append(('line_to', x, y))

    def stroke(self, width, color):
        self.calls.append(('stroke', width, color))

    def stroke_circle(self, x, y, radius, color, line_width=1.0):
        self.calls.append(('stroke_circle', x, y, radius, color))

    def fill_translucent_rect(self, rgb, alpha):
        self.calls.append(('fill_translucent_rect', tuple(rgb), alpha))

    def clear(self):
        self.calls.append(('clear',))

    def get_dimensions(self):
        return self.width, self.height

    def set_dimensions(self, width, height):
        self.width, self.height = width, height
        self.calls.append(('set_dimensions', width, height))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]

    @property
    def mutations(self):
        return [c for c in self.calls if c[0] in MUTATING]


class ScriptedRandom:
    """Random source replaying a fixed sequence forever."""

    def __init__(self, values):
        self._values = itertools.cycle(values)
        self.draws = 0

    def __call__(self):
        self.draws += 1
        return next(self._values)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    return SimulatedScheduler()
