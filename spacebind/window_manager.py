"""
Window Manager

Moves every bound window to the screen, space and frame its binding names
for the current screen/space topology.
"""

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Sequence, Tuple

from pubsub import pub

from . import topics
from .bindings import DEFAULT_ARRANGEMENT, BindingSet, SpaceBinding, WindowBinding
from .config import MoverConfig
from .geometry import Area, scale_percent_frame, to_percent_frame
from .logger import IndentLogger
from .objects import (
    DisplayProvider,
    Screen,
    Space,
    StatusMessage,
    StatusSurface,
    Window,
    WindowInfo,
)
from .placement import Reframer

MOVING_STATUS_DURATION = 10


class BindingMismatchError(RuntimeError):
    """No arrangement matches the current topology."""

    def __init__(self, topology: Sequence[int], message: str):
        super().__init__(message)
        self.topology = list(topology)


class WindowOutcome(Enum):
    """What a pass did with one window."""

    UNTOUCHED = auto()
    MOVED = auto()
    RESIZED = auto()
    UNCHANGED = auto()
    MISSING_TARGET = auto()


@dataclass
class PassResult:
    """Summary of one pass."""

    arrangement: Optional[str]
    topology: List[int]
    moved: int = 0
    skipped: List[str] = field(default_factory=list)
    aborted: bool = False


@dataclass
class WindowReport:
    """A window's location, with its frame as percentages of its screen."""

    screen_index: int
    space_index: int
    app_id: str
    app_name: str
    title: str
    frame: Area
    percent_frame: Optional[Area]


class WindowManager:
    """Applies a BindingSet to the windows of a display.

    This component subscribes to the topology-change notification and the
    manual trigger command; both run move_bound_windows(). It publishes
    PASS_STARTED, PASS_FINISHED, PASS_ABORTED, WINDOW_MOVED and
    WINDOW_SKIPPED events.
    """

    def __init__(
        self,
        display: DisplayProvider,
        config: Optional[MoverConfig] = None,
        status: Optional[StatusSurface] = None,
        logger: Optional[IndentLogger] = None,
        subscribe: bool = True,
    ):
        """Initialize window manager.

        Args:
            display: Provider of screens, spaces and windows
            config: Settings and arrangements
            status: Surface for user-facing status messages (optional)
            logger: Logger (created from the config if omitted)
            subscribe: Whether to subscribe to trigger events
        """
        self.display = display
        self.config = config or MoverConfig()
        self.status = status
        self.logger = logger or IndentLogger(
            self.config.logging_enabled, self.config.logging_indent
        )
        self.reframer = Reframer(self.config.snap_to_edge_threshold, self.logger)

        self._excludes: Dict[str, bool] = {}
        self.exclude(self.config.self_app_id)
        for app_id in self.config.excluded_apps:
            self.exclude(app_id)

        if subscribe:
            self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to the events that trigger a pass."""
        pub.subscribe(self._on_topology_changed, topics.TOPOLOGY_CHANGED)
        pub.subscribe(self._on_move_bound_windows, topics.CMD_MOVE_BOUND_WINDOWS)
        pub.subscribe(self._on_enumerate_windows, topics.CMD_ENUMERATE_WINDOWS)

    def _on_topology_changed(self):
        """Handle TOPOLOGY_CHANGED event."""
        self.move_bound_windows()

    def _on_move_bound_windows(self):
        """Handle CMD_MOVE_BOUND_WINDOWS command."""
        self.move_bound_windows()

    def _on_enumerate_windows(self):
        """Handle CMD_ENUMERATE_WINDOWS command."""
        self.enumerate_app_windows()

    @property
    def binding_set(self) -> BindingSet:
        return self.config.binding_set

    def exclude(self, app_id: str, value: bool = True):
        """Exclude (or re-include) an application's windows."""
        self._excludes[app_id] = value

    def is_excluded(self, app_id: str) -> bool:
        return self._excludes.get(app_id, False)

    def get_screen_space_layout(
        self, screens: Optional[Sequence[Screen]] = None
    ) -> List[int]:
        """Get the current topology: the number of spaces on each screen."""
        if screens is None:
            screens = self.display.screens()
        return [len(screen.spaces()) for screen in screens]

    def get_active_space_binding_name(
        self, topology: Optional[Sequence[int]] = None
    ) -> str:
        """Get the name of the arrangement matching the topology.

        Raises:
            BindingMismatchError: If no arrangement matches
        """
        if topology is None:
            topology = self.get_screen_space_layout()
        name = self.binding_set.match(topology)
        if name == DEFAULT_ARRANGEMENT:
            raise BindingMismatchError(
                topology,
                f"Could not find layout matching "
                f"[{', '.join(str(n) for n in topology)}].\n"
                f"{self.binding_set.describe()}",
            )
        return name

    def get_active_space_binding(
        self, topology: Optional[Sequence[int]] = None
    ) -> SpaceBinding:
        """Get the arrangement matching the topology.

        Raises:
            BindingMismatchError: If no arrangement matches
        """
        if topology is None:
            topology = self.get_screen_space_layout()
        name = self.get_active_space_binding_name(topology)
        space_binding = self.binding_set.binding(name)
        if space_binding is None:
            raise BindingMismatchError(topology, f"Arrangement {name!r} does not exist.")
        return space_binding

    def get_window_binding(
        self, window: Window, space_binding: SpaceBinding
    ) -> Optional[WindowBinding]:
        """Get the binding that applies to a window, if any."""
        app_id = window.app_id()
        if self.is_excluded(app_id):
            return None
        return space_binding.window_binding(app_id) or space_binding.default_binding

    @staticmethod
    def build_window_list(spaces: Sequence[Sequence[Space]]) -> List[WindowInfo]:
        """Flatten screens' spaces into WindowInfo records, in order."""
        return [
            WindowInfo(window, space, screen_index, space_index)
            for screen_index, screen_spaces in enumerate(spaces)
            for space_index, space in enumerate(screen_spaces)
            for window in space.windows()
        ]

    @staticmethod
    def move_window(window: Window, from_space: Space, to_space: Space):
        """Move a window from one space to another."""
        from_space.remove_windows([window])
        to_space.add_windows([window])

    def resize_window(
        self,
        window: Window,
        from_screen: Screen,
        to_screen: Screen,
        frame: Optional[Area] = None,
    ) -> bool:
        """Fit a window to its destination screen.

        Args:
            window: The window to resize
            from_screen: Screen the window was on
            to_screen: Destination screen
            frame: Percentage frame on the destination screen, or None to
                reframe from the window's current geometry

        Returns:
            True if the window's frame was changed
        """
        to_screen_frame = to_screen.flipped_visible_frame()
        old_window_frame = window.frame()
        if frame is not None:
            new_window_frame = scale_percent_frame(frame, to_screen_frame)
        else:
            new_window_frame = self.reframer.reframe(
                old_window_frame, from_screen.flipped_visible_frame(), to_screen_frame
            )

        app_id = window.app_id()
        if new_window_frame.loose_equals(old_window_frame, 0.01):
            self.logger.log_indent(
                2, f"New frame is same as old frame, not changing {app_id}."
            )
            return False

        if frame is not None:
            self.logger.log_indent(
                2,
                f"Resizing {app_id} to user-specified dimensions. "
                f"Old frame: {old_window_frame}. New frame: {new_window_frame}.",
            )
        window.set_frame(new_window_frame)
        return True

    def _place_window(
        self,
        info: WindowInfo,
        space_binding: SpaceBinding,
        screens: Sequence[Screen],
        spaces: Sequence[Sequence[Space]],
    ) -> WindowOutcome:
        """Move and/or resize one window according to its binding."""
        binding = self.get_window_binding(info.window, space_binding)
        if binding is None:
            return WindowOutcome.UNTOUCHED

        old_screen = screens[info.screen_index]
        if binding.screen != info.screen_index or binding.space != info.space_index:
            if binding.screen >= len(screens) or binding.space >= len(
                spaces[binding.screen]
            ):
                self.logger.warning(
                    f"Destination screen {binding.screen}, space {binding.space} "
                    f"does not exist for binding {binding.app_id} "
                    f"(app {info.window.app_id()}).",
                    depth=1,
                )
                return WindowOutcome.MISSING_TARGET

            new_screen = screens[binding.screen]
            new_space = spaces[binding.screen][binding.space]
            self.logger.log_indent(
                1,
                f'Moving app "{info.window.app_name()}" window "{info.window.title()}" '
                f"from screen {info.screen_index}, space {info.space_index} "
                f"to screen {binding.screen}, space {binding.space}",
            )
            self.move_window(info.window, info.space, new_space)
            self.resize_window(info.window, old_screen, new_screen, binding.frame)
            return WindowOutcome.MOVED

        if binding.frame is not None:
            if self.resize_window(info.window, old_screen, old_screen, binding.frame):
                return WindowOutcome.RESIZED
            return WindowOutcome.UNCHANGED

        return WindowOutcome.UNTOUCHED

    def _status_area(self) -> Optional[Area]:
        if not self.display.screens():
            return None
        return self.display.main_screen().flipped_visible_frame()

    def _show_status(self, text: str, duration: float) -> Optional[StatusMessage]:
        """Show a status message on the main screen, if a surface is set."""
        area = self._status_area()
        if self.status is None or area is None:
            return None
        self.logger.log(f"Showing status: {text}")
        return self.status.show(text, duration, area)

    def move_bound_windows(self) -> PassResult:
        """Run one pass over every window.

        Returns:
            Summary of the pass; aborted if no arrangement matches
        """
        self.logger.log("Retrieving screens.")
        screens = self.display.screens()
        topology = self.get_screen_space_layout(screens)

        try:
            space_binding = self.get_active_space_binding(topology)
        except BindingMismatchError as e:
            self.logger.warning(str(e))
            self._show_status(str(e), min(2 + 2 * self.binding_set.count, 8))
            pub.sendMessage(topics.PASS_ABORTED, topology=topology, message=str(e))
            return PassResult(arrangement=None, topology=topology, aborted=True)

        pub.sendMessage(
            topics.PASS_STARTED, arrangement=space_binding.name, topology=topology
        )
        moving_status = self._show_status("Moving windows...", MOVING_STATUS_DURATION)

        spaces = [screen.spaces() for screen in screens]
        self.logger.log(
            f"Screen space layout: [{', '.join(str(n) for n in topology)}]. "
            f"Using binding set {space_binding.name}."
        )
        window_infos = self.build_window_list(spaces)

        def place(info: WindowInfo) -> Tuple[WindowInfo, WindowOutcome]:
            return info, self._place_window(info, space_binding, screens, spaces)

        if self.config.workers > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                outcomes = list(executor.map(place, window_infos))
        else:
            outcomes = [place(info) for info in window_infos]

        result = PassResult(arrangement=space_binding.name, topology=topology)
        for info, outcome in outcomes:
            app_id = info.window.app_id()
            if outcome in (WindowOutcome.MOVED, WindowOutcome.RESIZED):
                result.moved += 1
                binding = self.get_window_binding(info.window, space_binding)
                pub.sendMessage(
                    topics.WINDOW_MOVED,
                    app_id=app_id,
                    screen=binding.screen,
                    space=binding.space,
                )
            elif outcome is WindowOutcome.MISSING_TARGET:
                result.skipped.append(app_id)
                pub.sendMessage(
                    topics.WINDOW_SKIPPED,
                    app_id=app_id,
                    reason="destination screen or space does not exist",
                )

        if moving_status is not None:
            moving_status.close()

        count = result.moved
        self._show_status(
            f"Moved {count} window{'' if count == 1 else 's'}",
            max(2, min(6, count / 2.0)),
        )
        self.logger.log(f"Moved {count} window{'' if count == 1 else 's'}.")
        pub.sendMessage(topics.PASS_FINISHED, result=result)
        return result

    def enumerate_app_windows(self) -> List[WindowReport]:
        """Log every window with its frame as percentages of its screen.

        The percentages are the values to use as a binding's frame.
        """
        self.logger.log("Retrieving screens")
        reports = []
        for screen_index, screen in enumerate(self.display.screens()):
            self.logger.log_indent(
                1, f'screen {screen_index} = screenID "{screen.identifier()}"'
            )
            screen_frame = screen.flipped_visible_frame()
            for space_index, space in enumerate(screen.spaces()):
                for window in space.windows():
                    frame = window.frame()
                    try:
                        percent_frame = to_percent_frame(frame, screen_frame)
                    except ZeroDivisionError:
                        percent_frame = None
                    report = WindowReport(
                        screen_index=screen_index,
                        space_index=space_index,
                        app_id=window.app_id(),
                        app_name=window.app_name(),
                        title=window.title(),
                        frame=frame,
                        percent_frame=percent_frame,
                    )
                    reports.append(report)
                    self._log_report(report)
        return reports

    def _log_report(self, report: WindowReport):
        prefix = (
            f'appId "{report.app_id}" app "{report.app_name}" '
            f"space: {report.space_index}, window: \"{report.title}\""
        )
        if report.percent_frame is None:
            self.logger.log_indent(2, f"{prefix} has an empty screen frame.")
            return
        percent = report.percent_frame
        self.logger.log_indent(
            2,
            f"{prefix} x: {percent.x}, y: {percent.y}, "
            f"width: {percent.width}, height: {percent.height}.",
        )
