"""
Configuration module.
"""

from .strand_config import StrandConfig, OPTION_NAMES, load_config, save_config
from .render_config import SurfaceConfig

__all__ = [
    'StrandConfig',
    'OPTION_NAMES',
    'load_config',
    'save_config',
    'SurfaceConfig',
]
