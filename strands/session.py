"""
Session controller - owns the configuration, the engine and the fade ticker.
"""

import enum
import random as _random
from typing import Any, Callable, Mapping, Optional, Tuple, Union

import structlog

from config.strand_config import StrandConfig
from rendering.base import DrawSurface, REQUIRED_OPERATIONS
from .engine import GrowthEngine, RandomSource, seed_strand
from .errors import SurfaceUnavailableError
from .scheduler import Scheduler, TimerHandle

logger = structlog.get_logger()

Viewport = Callable[[], Tuple[int, int]]


class SessionState(enum.Enum):
    STOPPED = 'stopped'
    RUNNING = 'running'


class Session:
    """
    Runs the generator on a surface.

    ``viewport`` returns the host's available (width, height); it is read by
    ``resize_surface`` and on start when ``fit_screen`` is set.
    """

    def __init__(self, surface: DrawSurface, scheduler: Scheduler,
                 viewport: Optional[Viewport] = None,
                 random: RandomSource = _random.random):
        self.surface = surface
        self.scheduler = scheduler
        self.viewport = viewport
        self.random = random

        self.config = StrandConfig()
        self.engine: Optional[GrowthEngine] = None
        self.state = SessionState.STOPPED
        self._fade_handle: Optional[TimerHandle] = None
        self._generation = 0

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def _check_surface(self):
        if self.surface is None:
            raise SurfaceUnavailableError("No draw surface available")
        missing = [op for op in REQUIRED_OPERATIONS if not callable(getattr(self.surface, op, None))]
        if missing:
            raise SurfaceUnavailableError(
                f"Draw surface {type(self.surface).__name__} lacks: {', '.join(missing)}"
            )

    def start(self, options: Optional[Union[Mapping[str, Any], StrandConfig]] = None) -> Optional[GrowthEngine]:
        """
        Start a new session, tearing down any running one first.

        ``options`` is merged over the defaults. With ``fit_screen`` set the
        surface is refit to the viewport on every start, not only the first.
        Returns the engine, or None when ``run_spawn`` is off.
        """
        self._check_surface()
        config = StrandConfig.from_options(options)

        self.stop()
        self.config = config
        self._generation += 1
        generation = self._generation

        if config.fit_screen:
            self.resize_surface()

        if config.run_spawn:
            width, height = self.surface.get_dimensions()
            self.engine = GrowthEngine(config, self.surface, self.scheduler, random=self.random)
            self.engine.seed(seed_strand(config, width, height))

        if config.fade_out:
            self._fade_handle = self.scheduler.call_every(
                config.fade_interval, lambda: self._fade(generation)
            )

        self.state = SessionState.RUNNING
        logger.info("Session started", generation=generation,
                    run_spawn=config.run_spawn, fade_out=config.fade_out)
        return self.engine

    def stop(self):
        """Cancel every pending callback and clear the surface. Safe to repeat."""
        if self.state is SessionState.RUNNING:
            self._generation += 1
            if self.engine is not None:
                self.engine.cancel()
            if self._fade_handle is not None:
                self._fade_handle.cancel()
            self.scheduler.cancel_all()
            logger.info("Session stopped", generation=self._generation)

        self.engine = None
        self._fade_handle = None
        self.state = SessionState.STOPPED
        if self.surface is not None:
            self.surface.clear()

    def resize_surface(self) -> Tuple[int, int]:
        """Fit the surface to the viewport. Strands in flight keep their coordinates."""
        self._check_surface()
        if self.viewport is None:
            return self.surface.get_dimensions()

        width, height = self.viewport()
        self.surface.set_dimensions(width, height)
        logger.info("Surface resized", width=width, height=height)
        return width, height

    def _fade(self, generation: int):
        if generation != self._generation or not self.config.fade_out:
            return
        self.surface.fill_translucent_rect(self.config.bg_color, self.config.fade_amount)
