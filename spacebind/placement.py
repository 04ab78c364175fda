"""
Placement Engine

Maps a window's frame on an old screen to a frame on a new screen.

Each axis is handled on its own by reframe_axis(). The rules are tried in
order and the first match wins:

1. OVERSIZED: the window is larger than the new screen. Fill the new screen.
2. MAXIMIZED: the window's size equals the old screen's size within the edge
   threshold. Fill the new screen.
3. INTERIOR: both edges are clear of the old screen's edges by at least the
   threshold. Keep the window's share of the slack (screen size minus window
   size) before its leading edge.
4. FLUSH_START: the leading edge is within the threshold of the screen's
   leading edge, or the window lies off-screen toward the start. Snap to the
   new screen's leading edge.
5. FLUSH_END: same as 4 for the trailing edge.
6. OVERFLOW: the window overflows both edges. Center it on the new screen.
7. UNCLASSIFIED: fall back to the new screen's leading edge.

For finite inputs and a threshold T >= 0, rules 1-6 cover every case, so
rule 7 is only reached with NaN input. Suppose rules 3-6 all fail. If
start_delta < T, rule 4 failing forces start_delta < -T < 0 and then
end_delta >= 0; rule 6 failing forces end_delta == 0, which satisfies
rule 5. Otherwise end_delta > -T, rule 5 failing forces end_delta > T >= 0
and then start_delta <= 0; rule 6 failing forces start_delta == 0, which
satisfies rule 4.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .geometry import Area, Axis, AxisExtent, within
from .logger import IndentLogger

DEFAULT_EDGE_THRESHOLD = 5


class AxisPlacement(Enum):
    """Rule that decided an axis placement."""

    OVERSIZED = "shrink"
    MAXIMIZED = "maximize"
    INTERIOR = "position normally"
    FLUSH_START = "flush start"
    FLUSH_END = "flush end"
    OVERFLOW = "overflow"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class AxisResult:
    """New span along one axis, and the rule that produced it."""

    start: float
    size: float
    placement: AxisPlacement

    @property
    def extent(self) -> AxisExtent:
        return AxisExtent(self.start, self.size)


def reframe_axis(
    window: AxisExtent,
    old_screen: AxisExtent,
    new_screen: AxisExtent,
    edge_threshold: float = DEFAULT_EDGE_THRESHOLD,
) -> AxisResult:
    """Place a window's span on a new screen along one axis.

    Args:
        window: Window span before the change
        old_screen: Usable span of the screen the window was on
        new_screen: Usable span of the destination screen
        edge_threshold: Distance within which an edge counts as flush

    Returns:
        The new span and the rule that was applied
    """
    if edge_threshold < 0:
        raise ValueError(f"edge_threshold must be non-negative, got {edge_threshold}")

    start_delta = window.start - old_screen.start
    end_delta = window.end - old_screen.end

    if window.size > new_screen.size:
        return AxisResult(new_screen.start, new_screen.size, AxisPlacement.OVERSIZED)

    if within(window.size, old_screen.size, edge_threshold):
        return AxisResult(new_screen.start, new_screen.size, AxisPlacement.MAXIMIZED)

    if start_delta >= edge_threshold and end_delta <= -edge_threshold:
        scale = (new_screen.size - window.size) / (old_screen.size - window.size)
        return AxisResult(
            start_delta * scale + new_screen.start,
            window.size,
            AxisPlacement.INTERIOR,
        )

    if (
        abs(start_delta) <= edge_threshold
        or window.end <= old_screen.start
        or (start_delta < 0 and end_delta < 0)
    ):
        return AxisResult(new_screen.start, window.size, AxisPlacement.FLUSH_START)

    if (
        abs(end_delta) <= edge_threshold
        or window.start >= old_screen.end
        or (start_delta > 0 and end_delta > 0)
    ):
        return AxisResult(
            new_screen.end - window.size, window.size, AxisPlacement.FLUSH_END
        )

    if start_delta < 0 and end_delta > 0:
        return AxisResult(
            new_screen.start + (new_screen.size - window.size) / 2.0,
            window.size,
            AxisPlacement.OVERFLOW,
        )

    return AxisResult(new_screen.start, window.size, AxisPlacement.UNCLASSIFIED)


class Reframer:
    """Applies reframe_axis() to both axes of a window frame, with logging."""

    def __init__(
        self,
        edge_threshold: float = DEFAULT_EDGE_THRESHOLD,
        logger: Optional[IndentLogger] = None,
    ):
        if edge_threshold < 0 or math.isnan(edge_threshold):
            raise ValueError(f"edge_threshold must be non-negative, got {edge_threshold}")
        self.edge_threshold = edge_threshold
        self.logger = logger or IndentLogger()

    def reframe_axis(
        self,
        axis: Axis,
        window_frame: Area,
        old_screen_frame: Area,
        new_screen_frame: Area,
    ) -> AxisResult:
        window = window_frame.extent(axis)
        old_screen = old_screen_frame.extent(axis)
        result = reframe_axis(
            window,
            old_screen,
            new_screen_frame.extent(axis),
            self.edge_threshold,
        )
        self.logger.log_indent(
            2,
            f"startDelta: {window.start - old_screen.start}. "
            f"endDelta: {window.end - old_screen.end}",
        )

        if result.placement is AxisPlacement.UNCLASSIFIED:
            self.logger.error(
                f"Could not determine placement of window on {axis.position} axis! "
                f"Defaulting to {axis.start_edge} edge.",
                depth=2,
            )
        elif result.placement is AxisPlacement.FLUSH_START:
            self.logger.log_indent(2, f"{axis.position}: Flush {axis.start_edge}")
        elif result.placement is AxisPlacement.FLUSH_END:
            self.logger.log_indent(2, f"{axis.position}: Flush {axis.end_edge}")
        else:
            self.logger.log_indent(
                2, f"{axis.position}: {result.placement.value.capitalize()}"
            )
        return result

    def reframe(
        self, window_frame: Area, old_screen_frame: Area, new_screen_frame: Area
    ) -> Area:
        """Compute a window's frame on a new screen.

        Args:
            window_frame: Current window frame
            old_screen_frame: Usable frame of the screen the window was on
            new_screen_frame: Usable frame of the destination screen

        Returns:
            The new window frame
        """
        self.logger.log_indent(2, f"Old screen: {old_screen_frame.describe()}")
        self.logger.log_indent(2, f"New screen: {new_screen_frame.describe()}")
        self.logger.log_indent(2, f"Old window: {window_frame.describe()}")

        horizontal = self.reframe_axis(
            Axis.HORIZONTAL, window_frame, old_screen_frame, new_screen_frame
        )
        vertical = self.reframe_axis(
            Axis.VERTICAL, window_frame, old_screen_frame, new_screen_frame
        )
        new_frame = Area.from_extents(horizontal.extent, vertical.extent)

        self.logger.log_indent(2, f"New window: {new_frame.describe()}")
        return new_frame
