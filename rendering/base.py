"""
Base surface class defining the draw commands issued by the growth engine.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple, Union

Color = Union[str, Sequence[float]]


class DrawSurface(ABC):
    """
    A 2D raster the engine draws on.

    The engine only issues these abstract commands; how they map to pixels
    is up to the implementation.
    """

    @abstractmethod
    def move_to(self, x: float, y: float):
        pass

    @abstractmethod
    def line_to(self, x: float, y: float):
        pass

    @abstractmethod
    def stroke(self, width: float, color: Color):
        """Stroke the current path and start a new one."""

    @abstractmethod
    def stroke_circle(self, x: float, y: float, radius: float, color: Color, line_width: float = 1.0):
        pass

    @abstractmethod
    def fill_translucent_rect(self, rgb: Sequence[int], alpha: float):
        """Cover the whole surface with ``rgb`` at opacity ``alpha``."""

    @abstractmethod
    def clear(self):
        pass

    @abstractmethod
    def get_dimensions(self) -> Tuple[int, int]:
        pass

    @abstractmethod
    def set_dimensions(self, width: int, height: int):
        pass


REQUIRED_OPERATIONS = (
    'move_to',
    'line_to',
    'stroke',
    'stroke_circle',
    'fill_translucent_rect',
    'clear',
    'get_dimensions',
    'set_dimensions',
)
