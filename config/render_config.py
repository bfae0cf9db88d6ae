"""
Configuration for the raster surface.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class SurfaceConfig:
    output_width: int = 800
    output_height: int = 600
    background_color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

    antialiasing: bool = True
