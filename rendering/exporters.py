"""
Frame exporters. Keeps the growth engine decoupled from file output.
"""

import numpy as np
import imageio
from pathlib import Path
from typing import List


def save_frame(frame: np.ndarray, output_path: str):
    """Write a single RGB(A) frame to an image file."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    imageio.imwrite(output_path, frame)


def save_animation(frames: List[np.ndarray], output_path: str, fps: int = 20):
    """
    Write captured frames as an animation.

    The format follows the file extension (.gif, .mp4 with the ffmpeg plugin).
    """
    if not frames:
        raise ValueError("No frames to save")

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    frames = [np.ascontiguousarray(f[:, :, :3]) for f in frames]

    if Path(output_path).suffix.lower() == '.gif':
        imageio.mimsave(output_path, frames, duration=1000 / fps, loop=0)
    else:
        imageio.mimsave(output_path, frames, fps=fps)
    print(f"  Saved animation: {output_path}")
