"""
Display Objects

Abstract handles for screens, spaces, windows and the status surface.
A platform backend implements these; spacebind.virtual provides an
in-memory implementation.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from .geometry import Area


class Window(ABC):
    """A top-level application window."""

    @abstractmethod
    def frame(self) -> Area:
        """Current frame, top-left origin."""

    @abstractmethod
    def set_frame(self, frame: Area):
        """Move and resize the window."""

    @abstractmethod
    def app_id(self) -> str:
        """Identifier of the owning application."""

    @abstractmethod
    def app_name(self) -> str:
        """Display name of the owning application."""

    @abstractmethod
    def title(self) -> str:
        pass


class Space(ABC):
    """A virtual desktop on one screen."""

    @abstractmethod
    def windows(self) -> List[Window]:
        """Windows on this space, in stable order."""

    @abstractmethod
    def add_windows(self, windows: Sequence[Window]):
        pass

    @abstractmethod
    def remove_windows(self, windows: Sequence[Window]):
        pass


class Screen(ABC):
    """A physical display."""

    @abstractmethod
    def identifier(self) -> str:
        """Stable identifier of the display."""

    @abstractmethod
    def visible_frame(self) -> Area:
        """Usable frame, bottom-left origin."""

    @abstractmethod
    def flipped_visible_frame(self) -> Area:
        """Usable frame, top-left origin (the convention used for placement)."""

    @abstractmethod
    def spaces(self) -> List[Space]:
        """Spaces on this screen, in order."""


class DisplayProvider(ABC):
    """Enumerates the current screens."""

    @abstractmethod
    def screens(self) -> List[Screen]:
        """All screens, in stable order."""

    def main_screen(self) -> Screen:
        """Screen used for status messages."""
        return self.screens()[0]


class StatusMessage(ABC):
    """A status message currently on screen."""

    @abstractmethod
    def close(self):
        pass


class StatusSurface(ABC):
    """Shows short-lived status messages to the user."""

    @abstractmethod
    def show(self, text: str, duration: float, area: Area) -> StatusMessage:
        """Show a message centered on ``area`` for ``duration`` seconds."""


@dataclass
class WindowInfo:
    """A window together with its location in the current topology."""

    window: Window
    space: Space
    screen_index: int
    space_index: int
