"""
spacebind

Moves and resizes application windows when screens and spaces change.

This package provides:
- A binding model mapping applications to screens, spaces and frames,
  grouped into arrangements selected by screen/space topology
- A placement engine that carries a window's geometry from one screen to
  another
- A window manager that applies the active arrangement to every window
- Abstract display objects for platform backends, and an in-memory backend

Example usage:
    from spacebind import MoverConfig, WindowBinding, WindowManager

    config = MoverConfig(excluded_apps=['com.apple.finder'])
    laptop = config.arrangement('Laptop only', [1], WindowBinding('*', 0, 0))
    laptop.add_new('org.mozilla.firefox', 0, 0, WindowBinding.maximize())

    wm = WindowManager(display, config)
    wm.move_bound_windows()

Or run with a configuration file:
    python -m spacebind move ~/.config/spacebind/config.py
"""

__version__ = "0.1.0"

from .geometry import (
    Area,
    Axis,
    AxisExtent,
    loose_equals,
    within,
    scale_percent_frame,
    to_percent_frame,
)

from .bindings import (
    WindowBinding,
    SpaceBinding,
    BindingSet,
    DEFAULT_ARRANGEMENT,
    CATCH_ALL,
)

from .placement import (
    AxisPlacement,
    AxisResult,
    Reframer,
    reframe_axis,
)

from .objects import (
    Window,
    Space,
    Screen,
    DisplayProvider,
    StatusSurface,
    StatusMessage,
    WindowInfo,
)

from .config import MoverConfig, Monitor, AppSettings, bind_apps, resolve_monitor_indexes

from .logger import IndentLogger, configure_logging

from .window_manager import (
    WindowManager,
    PassResult,
    WindowReport,
    WindowOutcome,
    BindingMismatchError,
)

from .virtual import (
    VirtualDisplay,
    VirtualScreen,
    VirtualSpace,
    VirtualWindow,
    RecordingStatusSurface,
)

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Area",
    "Axis",
    "AxisExtent",
    "loose_equals",
    "within",
    "scale_percent_frame",
    "to_percent_frame",
    # Bindings
    "WindowBinding",
    "SpaceBinding",
    "BindingSet",
    "DEFAULT_ARRANGEMENT",
    "CATCH_ALL",
    # Placement
    "AxisPlacement",
    "AxisResult",
    "Reframer",
    "reframe_axis",
    # Display objects
    "Window",
    "Space",
    "Screen",
    "DisplayProvider",
    "StatusSurface",
    "StatusMessage",
    "WindowInfo",
    # Configuration
    "MoverConfig",
    "Monitor",
    "AppSettings",
    "bind_apps",
    "resolve_monitor_indexes",
    # Logging
    "IndentLogger",
    "configure_logging",
    # Window manager
    "WindowManager",
    "PassResult",
    "WindowReport",
    "WindowOutcome",
    "BindingMismatchError",
    # Virtual backend
    "VirtualDisplay",
    "VirtualScreen",
    "VirtualSpace",
    "VirtualWindow",
    "RecordingStatusSurface",
    # Event topics
    "topics",
]
