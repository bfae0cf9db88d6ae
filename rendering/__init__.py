"""
Draw surfaces for the strand generator.
Uses Cairo for the raster, imageio for file output.
"""

from config.render_config import SurfaceConfig
from .base import DrawSurface, REQUIRED_OPERATIONS
from .cairo_surface import CairoSurface
from .exporters import save_frame, save_animation
from .utils import parse_color, random_color, format_rgba
