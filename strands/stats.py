"""
Counters kept by the growth engine for introspection.
"""

from dataclasses import dataclass, field
from typing import List

MAX_SAMPLES = 1000


@dataclass
class GrowthStats:
    strands_started: int = 0
    steps: int = 0
    spawns_scheduled: int = 0
    spawns: int = 0
    terminated: int = 0
    lifetimes: List[int] = field(default_factory=list)  # Steps of finished strands
    depths: List[int] = field(default_factory=list)     # Depth of started strands

    @property
    def live(self) -> int:
        return self.strands_started - self.terminated

    @property
    def pending_spawns(self) -> int:
        return self.spawns_scheduled - self.spawns

    def record_start(self, depth: int):
        self.strands_started += 1
        if len(self.depths) < MAX_SAMPLES:
            self.depths.append(depth)

    def record_termination(self, lifetime: int):
        self.terminated += 1
        if len(self.lifetimes) < MAX_SAMPLES:
            self.lifetimes.append(lifetime)
