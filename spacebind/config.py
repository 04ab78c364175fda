"""
Configuration

Settings for the window manager, plus helpers that turn per-app frame
preferences into arrangements.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .bindings import BindingSet, SpaceBinding, WindowBinding
from .geometry import Area
from .objects import Screen


@dataclass
class Monitor:
    """A known physical display, identified by its screen identifier."""

    name: str
    screen_id: str
    frame: Optional[Area] = None


@dataclass
class AppSettings:
    """Per-app percentage frames, keyed by monitor name.

    Attributes:
        name: Display name, for logs
        app_id: Application identifier
        frames: Monitor name -> percentage frame on that monitor
        preferred: Monitor the app should go to when it is connected
    """

    name: str
    app_id: str
    frames: Dict[str, Area] = field(default_factory=dict)
    preferred: Optional[str] = None


@dataclass
class MoverConfig:
    """Window manager configuration."""

    # Distance (device units) within which a window edge counts as flush
    snap_to_edge_threshold: float = 5

    # Applications whose windows are never touched
    excluded_apps: List[str] = field(default_factory=list)

    # Arrangements; an empty set with only "default" is created if omitted
    binding_set: Optional[BindingSet] = None

    # Logging
    logging_enabled: bool = True
    logging_indent: int = 2

    # Threads used to place windows within one pass
    workers: int = 1

    # Identifier of this application, always excluded
    self_app_id: str = "io.spacebind"

    def __post_init__(self):
        """Validate settings and create the binding set."""
        if math.isnan(self.snap_to_edge_threshold) or self.snap_to_edge_threshold < 0:
            raise ValueError(
                f"snap_to_edge_threshold must be non-negative, "
                f"got {self.snap_to_edge_threshold}"
            )
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.logging_indent < 0:
            raise ValueError(
                f"logging_indent must be non-negative, got {self.logging_indent}"
            )
        if self.binding_set is None:
            self.binding_set = BindingSet()

    def arrangement(
        self,
        name: str,
        screen_spaces: Sequence[int],
        default_binding: Optional[WindowBinding] = None,
    ) -> SpaceBinding:
        """Create an arrangement and add it to the binding set."""
        space_binding = SpaceBinding(name, screen_spaces)
        space_binding.default_binding = default_binding
        self.binding_set.add(space_binding)
        return space_binding


def resolve_monitor_indexes(
    monitors: Sequence[Monitor], screens: Sequence[Screen]
) -> Dict[str, int]:
    """Map monitor names to the index of the connected screen they match.

    Monitors that are not connected are left out.
    """
    indexes = {screen.identifier(): index for index, screen in enumerate(screens)}
    return {
        monitor.name: indexes[monitor.screen_id]
        for monitor in monitors
        if monitor.screen_id in indexes
    }


def bind_apps(
    space_binding: SpaceBinding,
    apps: Sequence[AppSettings],
    monitor: str,
    screen: int = 0,
    space: int = 0,
    monitor_indexes: Optional[Dict[str, int]] = None,
) -> SpaceBinding:
    """Add a binding per app to an arrangement.

    Apps go to ``screen`` with their frame for ``monitor``. When
    ``monitor_indexes`` is given, an app with a preferred monitor goes to
    that monitor's screen with its frame for that monitor instead, and gets
    no binding if the monitor is not connected.

    Args:
        space_binding: Arrangement to fill
        apps: Per-app settings
        monitor: Monitor name whose frames apply to ``screen``
        screen: Target screen index
        space: Target space index
        monitor_indexes: Connected monitors, from resolve_monitor_indexes()
    """
    for app in apps:
        if app.preferred and monitor_indexes is not None:
            if app.preferred in monitor_indexes:
                space_binding.add_new(
                    app.app_id,
                    monitor_indexes[app.preferred],
                    space,
                    app.frames.get(app.preferred),
                )
            continue
        space_binding.add_new(app.app_id, screen, space, app.frames.get(monitor))
    return space_binding
