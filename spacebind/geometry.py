"""
Geometry Primitives

Rectangles, per-axis extents and tolerance-based comparisons used by the
placement engine and the window manager.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


def loose_equals(a: float, b: float, epsilon: float = 0.01) -> bool:
    """Compare two numbers with a tolerance relative to their magnitude.

    The tolerance is ``epsilon`` times the mean of ``|a|`` and ``|b|``, so
    ``loose_equals(2.0, 2.01)`` is true and ``loose_equals(2.0, 2.1)`` is not.
    With ``epsilon == 0`` only exact equality matches.
    """
    if a == b:
        return True
    average = (abs(a) + abs(b)) / 2.0
    return abs(a - b) <= epsilon * average


def within(a: float, b: float, tolerance: float) -> bool:
    """Compare two numbers with an absolute tolerance (device units)."""
    return abs(a - b) <= tolerance


class Axis(Enum):
    """Placement axis, with the names of its leading and trailing edges."""

    HORIZONTAL = ("x", "width", "left", "right")
    VERTICAL = ("y", "height", "top", "bottom")

    def __init__(self, position: str, size: str, start_edge: str, end_edge: str):
        self.position = position
        self.size = size
        self.start_edge = start_edge
        self.end_edge = end_edge


@dataclass(frozen=True)
class AxisExtent:
    """A span along one axis."""

    start: float
    size: float

    @property
    def end(self) -> float:
        return self.start + self.size


@dataclass
class Area:
    """Rectangle with position and dimensions.

    Depending on context the values are device units or percentages of a
    screen (0-100). Window and screen areas use a top-left origin with y
    growing downward.
    """

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def extent(self, axis: Axis) -> AxisExtent:
        """Get the span of this area along an axis."""
        if axis is Axis.HORIZONTAL:
            return AxisExtent(self.x, self.width)
        return AxisExtent(self.y, self.height)

    @classmethod
    def from_extents(cls, horizontal: AxisExtent, vertical: AxisExtent) -> "Area":
        """Compose an area from its horizontal and vertical spans."""
        return cls(horizontal.start, vertical.start, horizontal.size, vertical.size)

    def loose_equals(self, other: "Area", epsilon: float = 0.01) -> bool:
        """Field-wise approximate equality."""
        return (
            loose_equals(self.x, other.x, epsilon)
            and loose_equals(self.y, other.y, epsilon)
            and loose_equals(self.width, other.width, epsilon)
            and loose_equals(self.height, other.height, epsilon)
        )

    def describe(self) -> str:
        """Edge description used in log output."""
        return (
            f"left: {self.x}, top: {self.y}, "
            f"right: {self.right}, bottom: {self.bottom}"
        )


def scale_percent_frame(frame: Area, screen_frame: Area) -> Area:
    """Scale a percentage frame (0-100) onto a screen's frame."""
    return Area(
        x=screen_frame.x + screen_frame.width * (frame.x / 100),
        y=screen_frame.y + screen_frame.height * (frame.y / 100),
        width=screen_frame.width * (frame.width / 100),
        height=screen_frame.height * (frame.height / 100),
    )


def to_percent_frame(frame: Area, screen_frame: Area) -> Area:
    """Express an absolute frame as percentages of a screen's frame.

    Raises:
        ZeroDivisionError: If the screen frame has no width or height
    """
    return Area(
        x=100 * (frame.x - screen_frame.x) / screen_frame.width,
        y=100 * (frame.y - screen_frame.y) / screen_frame.height,
        width=100 * frame.width / screen_frame.width,
        height=100 * frame.height / screen_frame.height,
    )
