"""
Strand growth engine.

A strand draws one segment per step and then reschedules its own next step
after ``growth_rate`` ms. When it is old enough it may fork: the child is
created later through the same scheduler and grows on its own. There is no
registry of strands; a strand ends by not being rescheduled.

Every scheduled callback carries the engine's token. ``cancel()`` drops the
token, so callbacks that still fire afterwards return without drawing.
"""

import math
import random as _random
from typing import Callable, Optional

import structlog

from config.strand_config import StrandConfig
from rendering.base import DrawSurface
from rendering.utils import format_rgba, random_color
from .scheduler import Scheduler
from .stats import GrowthStats
from .strand import Strand
from .vector import Vector2D

logger = structlog.get_logger()

RandomSource = Callable[[], float]

SEED_VELOCITY = (0.0, -3.0)
SEED_GROWTH_RATE = 30.0
SEED_WIDTH_SCALE = 10
CHILD_SPEED = 2.0
MARKER_COLOR = format_rgba((255, 0, 0), 0.4)

# Thin strands near the bottom edge lose width faster
THIN_WIDTH = 6
BOTTOM_BAND = 0.3
BOTTOM_SHRINK = 0.8

# Hosts clamp zero-delay timers; so do we
MIN_STEP_DELAY_MS = 1.0


def spawn_eligible(age: int, width: float, exception_prob: float, random: RandomSource) -> bool:
    """
    Whether a strand forks this step.

    The age threshold grows with the width, so thick strands run longer
    before forking. The second draw only happens if the first test passes.
    """
    return age > 5 * width + random() * 100 and random() > exception_prob


def seed_strand(config: StrandConfig, surface_width: float, surface_height: float) -> Strand:
    """The initial strand: bottom center, heading up."""
    return Strand(
        position=Vector2D(surface_width / 2, surface_height),
        velocity=Vector2D(*SEED_VELOCITY),
        width=config.initial_mass * SEED_WIDTH_SCALE,
        growth_rate=SEED_GROWTH_RATE,
        color=config.string_color,
    )


class GrowthEngine:
    def __init__(self, config: StrandConfig, surface: DrawSurface, scheduler: Scheduler,
                 random: RandomSource = _random.random):
        self.config = config
        self.surface = surface
        self.scheduler = scheduler
        self.random = random
        self.stats = GrowthStats()
        self._token: Optional[object] = object()

    @property
    def cancelled(self) -> bool:
        return self._token is None

    @property
    def idle(self) -> bool:
        """True once no strand is alive and no spawn is pending."""
        return self.stats.live == 0 and self.stats.pending_spawns == 0

    def seed(self, strand: Strand):
        """Start growing ``strand``; its first step runs immediately."""
        if self.cancelled:
            return
        logger.info("Seeding strand", x=strand.position.x, y=strand.position.y, width=strand.width)
        self._begin(strand, self._token)

    def cancel(self):
        self._token = None

    def _begin(self, strand: Strand, token: object):
        self.stats.record_start(strand.depth)
        self._step(strand, token)

    def _step(self, strand: Strand, token: object):
        if token is not self._token:
            return

        config = self.config
        random = self.random
        loss = config.loss_quantity
        age = strand.age

        end = strand.position + strand.velocity
        self.surface.move_to(strand.position.x, strand.position.y)
        self.surface.line_to(end.x, end.y)
        self.surface.stroke(strand.rendered_width(loss), strand.color or config.string_color)
        self.stats.steps += 1

        strand.position = end
        strand.velocity = Vector2D(
            strand.velocity.x + math.sin(random() + age) * config.time,
            strand.velocity.y + math.cos(random() + age) * config.time,
        )

        height = self.surface.get_dimensions()[1]
        if (not config.infinite and strand.width < THIN_WIDTH
                and strand.position.y > height - random() * (BOTTOM_BAND * height)):
            strand.width *= BOTTOM_SHRINK

        if spawn_eligible(age, strand.width, config.exception_prob, random):
            self._schedule_spawn(strand, token)
            strand.width *= config.main_loss

        if config.infinite or strand.rendered_width(loss) >= 1:
            strand.age += 1
            delay = max(strand.growth_rate, MIN_STEP_DELAY_MS)
            self.scheduler.call_later(delay, lambda: self._step(strand, token))
            return

        self.stats.record_termination(age + 1)
        if self.idle:
            logger.info("All strands finished", strands=self.stats.strands_started, steps=self.stats.steps)

    def _schedule_spawn(self, parent: Strand, token: object):
        config = self.config
        rate = parent.growth_rate * 0.5 if config.fast_mode else parent.growth_rate
        delay = 2 * rate * self.random() + config.min_sleep

        origin = parent.position.copy()
        age = parent.age
        marker_radius = max(parent.width, 0.0)
        child_width = parent.rendered_width(config.loss_quantity) * config.loop_loss

        self.stats.spawns_scheduled += 1
        self.scheduler.call_later(
            delay,
            lambda: self._spawn(parent, origin, age, marker_radius, child_width, token)
        )

    def _spawn(self, parent: Strand, origin: Vector2D, age: int,
               marker_radius: float, child_width: float, token: object):
        if token is not self._token:
            return

        random = self.random
        if self.config.indicate_new_loop:
            self.surface.stroke_circle(origin.x, origin.y, marker_radius, MARKER_COLOR)

        velocity = CHILD_SPEED * Vector2D(math.sin(random() + age), math.cos(random() + age))
        growth_rate = parent.growth_rate + random() * 100
        color = random_color(random) if self.config.colorful else parent.color

        child = Strand(origin, velocity, child_width, growth_rate, color, depth=parent.depth + 1)
        self.stats.spawns += 1
        self._begin(child, token)
