"""Nested structures whose inner fields are reachable from the outer one."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    """A point on the integer grid."""

    x: int = 0
    y: int = 0


@dataclass
class Circle:
    """A circle; the centre's coordinates are reachable directly."""

    point: Point = field(default_factory=Point)
    radius: int = 0

    @property
    def x(self) -> int:
        return self.point.x

    @x.setter
    def x(self, value: int) -> None:
        self.point.x = value

    @property
    def y(self) -> int:
        return self.point.y

    @y.setter
    def y(self, value: int) -> None:
        self.point.y = value


@dataclass
class Wheel:
    """A wheel; the circle's fields are reachable directly."""

    circle: Circle = field(default_factory=Circle)
    spokes: int = 0

    @property
    def point(self) -> Point:
        return self.circle.point

    @point.setter
    def point(self, value: Point) -> None:
        self.circle.point = value

    @property
    def radius(self) -> int:
        return self.circle.radius

    @radius.setter
    def radius(self, value: int) -> None:
        self.circle.radius = value

    @property
    def x(self) -> int:
        return self.circle.x

    @x.setter
    def x(self, value: int) -> None:
        self.circle.x = value

    @property
    def y(self) -> int:
        return self.circle.y

    @y.setter
    def y(self, value: int) -> None:
        self.circle.y = value