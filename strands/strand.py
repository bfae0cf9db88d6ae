"""
Strand class - a single growing line of the drawing.
"""

from .vector import Vector2D


class Strand:
    __slots__ = ('position', 'velocity', 'width', 'growth_rate', 'age', 'color', 'depth')

    def __init__(self, position: Vector2D, velocity: Vector2D, width: float,
                 growth_rate: float, color: str, age: int = 0, depth: int = 0):
        self.position = position
        self.velocity = velocity
        self.width = width              # Base width, before age loss
        self.growth_rate = growth_rate  # ms between steps
        self.age = age
        self.color = color
        self.depth = depth              # Number of ancestors

    def rendered_width(self, loss_quantity: float) -> float:
        return self.width - self.age * loss_quantity

    def __repr__(self) -> str:
        return (f"Strand({self.position}, width={self.width:.2f}, "
                f"age={self.age}, depth={self.depth})")
