"""
Errors raised by the strand generator.
"""


class SurfaceUnavailableError(RuntimeError):
    """The draw surface is missing or cannot perform a required operation."""
