"""
Virtual Display

In-memory implementation of the display objects. Used for dry runs from a
configuration file and by the test suite.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .geometry import Area
from .objects import DisplayProvider, Screen, Space, StatusMessage, StatusSurface, Window


class VirtualWindow(Window):
    """Window whose frame is kept in memory."""

    def __init__(
        self,
        app_id: str,
        frame: Area,
        title: str = "",
        app_name: Optional[str] = None,
    ):
        self._app_id = app_id
        self._frame = Area(frame.x, frame.y, frame.width, frame.height)
        self._title = title
        self._app_name = app_name or app_id
        self.set_frame_calls = 0

    def frame(self) -> Area:
        return Area(self._frame.x, self._frame.y, self._frame.width, self._frame.height)

    def set_frame(self, frame: Area):
        self._frame = Area(frame.x, frame.y, frame.width, frame.height)
        self.set_frame_calls += 1

    def app_id(self) -> str:
        return self._app_id

    def app_name(self) -> str:
        return self._app_name

    def title(self) -> str:
        return self._title

    def __repr__(self) -> str:
        return f"VirtualWindow({self._app_id!r}, {self._frame!r})"


class VirtualSpace(Space):
    """Space holding an ordered list of windows."""

    def __init__(self, windows: Optional[Sequence[Window]] = None):
        self._windows: List[Window] = list(windows or [])

    def windows(self) -> List[Window]:
        return list(self._windows)

    def add_windows(self, windows: Sequence[Window]):
        for window in windows:
            if window not in self._windows:
                self._windows.append(window)

    def remove_windows(self, windows: Sequence[Window]):
        for window in windows:
            if window in self._windows:
                self._windows.remove(window)


class VirtualScreen(Screen):
    """Screen with a fixed frame and a list of spaces.

    Args:
        identifier: Display identifier
        frame: Usable frame, top-left origin
        spaces: Number of spaces, or the spaces themselves
        display_height: Height of the whole desktop, used to flip ``frame``
            into a bottom-left origin
    """

    def __init__(
        self,
        identifier: str,
        frame: Area,
        spaces=1,
        display_height: Optional[float] = None,
    ):
        self._identifier = identifier
        self._frame = frame
        if isinstance(spaces, int):
            self._spaces: List[Space] = [VirtualSpace() for _ in range(spaces)]
        else:
            self._spaces = list(spaces)
        self.display_height = display_height

    def identifier(self) -> str:
        return self._identifier

    def visible_frame(self) -> Area:
        height = self.display_height
        if height is None:
            height = self._frame.y + self._frame.height
        return Area(
            self._frame.x,
            height - self._frame.y - self._frame.height,
            self._frame.width,
            self._frame.height,
        )

    def flipped_visible_frame(self) -> Area:
        return Area(self._frame.x, self._frame.y, self._frame.width, self._frame.height)

    def spaces(self) -> List[Space]:
        return list(self._spaces)

    def space(self, index: int) -> VirtualSpace:
        return self._spaces[index]

    def add_window(self, window: Window, space: int = 0) -> Window:
        """Place a window on one of this screen's spaces."""
        self._spaces[space].add_windows([window])
        return window


class VirtualDisplay(DisplayProvider):
    """A set of virtual screens."""

    def __init__(self, screens: Optional[Sequence[VirtualScreen]] = None):
        self._screens: List[VirtualScreen] = list(screens or [])

    def screens(self) -> List[Screen]:
        return list(self._screens)

    def add_screen(self, screen: VirtualScreen) -> VirtualScreen:
        self._screens.append(screen)
        return screen

    def remove_screen(self, screen: VirtualScreen):
        self._screens.remove(screen)

    def screen(self, index: int) -> VirtualScreen:
        return self._screens[index]


@dataclass
class RecordedStatus(StatusMessage):
    """Status message recorded by RecordingStatusSurface."""

    text: str
    duration: float
    area: Area
    closed: bool = False

    def close(self):
        self.closed = True


@dataclass
class RecordingStatusSurface(StatusSurface):
    """Status surface that keeps every message shown."""

    messages: List[RecordedStatus] = field(default_factory=list)

    def show(self, text: str, duration: float, area: Area) -> StatusMessage:
        message = RecordedStatus(text, duration, area)
        self.messages.append(message)
        return message

    @property
    def texts(self) -> List[str]:
        return [message.text for message in self.messages]
