"""Sheep moving along the lanes and their bounding boxes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .config import (
    BLACK_HOME_X,
    CONSTANT_SPEED,
    DEFAULT_TEXTURE_SIZE,
    SPRITE_SCALE,
    WHITE_HOME_X,
    SheepConfig,
)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: "Rect") -> bool:
        """True when the two rectangles overlap with a non-empty area."""
        left = max(min(self.x, self.right), min(other.x, other.right))
        right = min(max(self.x, self.right), max(other.x, other.right))
        top = max(min(self.y, self.bottom), min(other.y, other.bottom))
        bottom = min(max(self.y, self.bottom), max(other.y, other.bottom))
        return left < right and top < bottom

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside; right and bottom edges are excluded."""
        min_x, max_x = sorted((self.x, self.right))
        min_y, max_y = sorted((self.y, self.bottom))
        return min_x <= x < max_x and min_y <= y < max_y


class Sheep(ABC):
    """A sheep walking along a lane at a horizontal speed."""

    direction = 1

    def __init__(
        self,
        config: SheepConfig,
        x: float,
        y: float,
        speed: float = CONSTANT_SPEED,
        texture_size: tuple[int, int] = DEFAULT_TEXTURE_SIZE,
    ) -> None:
        self.config = config
        self.x = float(x)
        self.y = float(y)
        self.speed = self.direction * speed
        self.texture_size = texture_size
        self.aligned = False

    @property
    def damage(self) -> int:
        return self.config.damage

    @property
    def strength(self) -> int:
        return self.config.strength

    @property
    def stopped(self) -> bool:
        return self.speed == 0

    @property
    def bounds(self) -> Rect:
        width, height = self.texture_size
        return Rect(self.x, self.y, width * SPRITE_SCALE, height * SPRITE_SCALE)

    def move(self, boundary_x: float) -> bool:
        """Advance one step; True when the sheep has crossed the goal line."""
        self.x += self.speed
        return self.is_out_of_boundary(boundary_x)

    @abstractmethod
    def is_out_of_boundary(self, boundary_x: float) -> bool:
        """True when the sheep is past the opponent's goal line."""

    @abstractmethod
    def is_out_of_self_boundary(self) -> bool:
        """True when the sheep was pushed back past its own start line."""

    def stop(self) -> None:
        self.speed = 0

    def reverse_direction(self) -> None:
        self.speed = -self.speed

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.config.name!r}, x={self.x}, "
            f"y={self.y}, speed={self.speed})"
        )


class WhiteSheep(Sheep):
    """Sheep of the left team, walking to the right."""

    direction = 1

    def is_out_of_boundary(self, boundary_x: float) -> bool:
        return self.x > boundary_x

    def is_out_of_self_boundary(self) -> bool:
        return self.x < WHITE_HOME_X


class BlackSheep(Sheep):
    """Sheep of the right team, walking to the left."""

    direction = -1

    def is_out_of_boundary(self, boundary_x: float) -> bool:
        return self.x < boundary_x

    def is_out_of_self_boundary(self) -> bool:
        return self.x > BLACK_HOME_X