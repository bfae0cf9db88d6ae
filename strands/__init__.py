"""
Self-propagating strand drawing.

A strand grows from a seed point, bends at random, thins with age and forks
into child strands, all driven by deferred timer callbacks.
"""

from .vector import Vector2D
from .strand import Strand
from .stats import GrowthStats
from .scheduler import Scheduler, SimulatedScheduler, AsyncioScheduler, TimerHandle
from .engine import GrowthEngine, spawn_eligible, seed_strand
from .session import Session, SessionState
from .errors import SurfaceUnavailableError
from .visualization import plot_growth_statistics

__all__ = [
    'Vector2D',
    'Strand',
    'GrowthStats',
    'Scheduler',
    'SimulatedScheduler',
    'AsyncioScheduler',
    'TimerHandle',
    'GrowthEngine',
    'spawn_eligible',
    'seed_strand',
    'Session',
    'SessionState',
    'SurfaceUnavailableError',
    'plot_growth_statistics',
]
