"""
Visualization utilities for growth statistics.
"""

import matplotlib.pyplot as plt
from typing import Optional
from pathlib import Path

from .stats import GrowthStats


def plot_growth_statistics(stats: GrowthStats, save_path: Optional[str] = None, show: bool = False):
    """Plot strand lifetimes and how many strands were born at each depth."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].hist(stats.lifetimes, bins=30, color='saddlebrown', edgecolor='black')
    axes[0].set_xlabel('Lifetime (steps)')
    axes[0].set_ylabel('Count')
    axes[0].set_title('Strand Lifetime Distribution')

    max_depth = max(stats.depths) if stats.depths else 0
    depth_counts = [stats.depths.count(d) for d in range(max_depth + 1)]
    axes[1].bar(range(max_depth + 1), depth_counts, color='forestgreen', edgecolor='black')
    axes[1].set_xlabel('Depth')
    axes[1].set_ylabel('Strand Count')
    axes[1].set_title('Strands per Depth Level')

    fig.suptitle(f"{stats.strands_started} strands, {stats.spawns} spawns, {stats.steps} steps")
    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved statistics to {save_path}")

    if show:
        plt.show()
    return fig, axes
