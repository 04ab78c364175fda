"""
Binding Model

Describes which application goes to which screen, space and frame.

- WindowBinding binds one application to a screen and space, with an optional
  percentage frame
- SpaceBinding is a named arrangement of bindings for one screen/space topology
- BindingSet holds every arrangement, including the "default" fallback
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence

from .geometry import Area

DEFAULT_ARRANGEMENT = "default"
CATCH_ALL = "*"


@dataclass(frozen=True)
class WindowBinding:
    """Binds an application to a screen and space.

    Attributes:
        app_id: Application identifier, or "*" for a catch-all binding
        screen: Target screen index
        space: Target space index on the target screen
        frame: Percentage frame on the target screen, or None to reframe the
            window from its current geometry
    """

    app_id: str
    screen: int = 0
    space: int = 0
    frame: Optional[Area] = None

    def __post_init__(self):
        if not isinstance(self.app_id, str) or not self.app_id:
            raise ValueError("app_id must be a non-empty string")
        if self.screen < 0 or self.space < 0:
            raise ValueError(
                f"Invalid binding for {self.app_id}: screen and space must be "
                f"non-negative (got screen={self.screen}, space={self.space})"
            )

    @classmethod
    def maximize(cls) -> Area:
        """Full-screen percentage frame."""
        return Area(0, 0, 100, 100)


class SpaceBinding:
    """An arrangement of bindings for one screen/space topology.

    The topology signature holds, per screen, the number of spaces on it.
    """

    def __init__(self, name: str, screen_spaces: Optional[Sequence[int]] = None):
        self.name = name
        self._window_bindings: Dict[str, WindowBinding] = {}
        self._screen_spaces: List[int] = []
        self.default_binding: Optional[WindowBinding] = None
        if screen_spaces is not None:
            self.set_screen_spaces(screen_spaces)

    def add(self, window_binding: WindowBinding):
        """Add or replace the binding for an application."""
        self._window_bindings[window_binding.app_id] = window_binding

    def add_new(
        self,
        app_id: str,
        screen: int = 0,
        space: int = 0,
        frame: Optional[Area] = None,
    ) -> WindowBinding:
        """Create and add a binding."""
        binding = WindowBinding(app_id, screen, space, frame)
        self.add(binding)
        return binding

    def remove(self, app_id: str):
        """Remove the binding for an application, if any."""
        self._window_bindings.pop(app_id, None)

    def window_binding(self, app_id: str) -> Optional[WindowBinding]:
        """Get the explicit binding for an application."""
        return self._window_bindings.get(app_id)

    def match(self, screen_spaces: Sequence[int]) -> bool:
        """Check whether a topology equals this arrangement's signature."""
        return list(screen_spaces) == self._screen_spaces

    def set_screen_spaces(self, screen_spaces: Sequence[int]):
        self._screen_spaces = list(screen_spaces)

    @property
    def screen_spaces(self) -> List[int]:
        return list(self._screen_spaces)

    @screen_spaces.setter
    def screen_spaces(self, screen_spaces: Sequence[int]):
        self.set_screen_spaces(screen_spaces)

    @property
    def app_ids(self) -> List[str]:
        return list(self._window_bindings)

    def __len__(self) -> int:
        return len(self._window_bindings)

    def __contains__(self, app_id: str) -> bool:
        return app_id in self._window_bindings

    def __repr__(self) -> str:
        return (
            f"SpaceBinding({self.name!r}, {self._screen_spaces!r}, "
            f"bindings={len(self._window_bindings)})"
        )


class BindingSet:
    """All arrangements, keyed by name, in insertion order.

    A "default" arrangement is created empty. Matching falls back to the
    name "default" even if that arrangement was removed.
    """

    def __init__(self):
        self._space_bindings: Dict[str, SpaceBinding] = {}
        self.add(SpaceBinding(DEFAULT_ARRANGEMENT))

    def add(self, space_binding: SpaceBinding):
        """Add or replace an arrangement by name."""
        self._space_bindings[space_binding.name] = space_binding

    def remove(self, name: str):
        self._space_bindings.pop(name, None)

    def binding(self, name: str) -> Optional[SpaceBinding]:
        """Get an arrangement by name."""
        return self._space_bindings.get(name)

    def match(self, screen_spaces: Sequence[int]) -> str:
        """Get the name of the first arrangement matching a topology.

        Overlapping signatures resolve to the arrangement added first.
        """
        for name, space_binding in self._space_bindings.items():
            if space_binding.match(screen_spaces):
                return name
        return DEFAULT_ARRANGEMENT

    def describe(self) -> str:
        """One line per arrangement: its name and topology signature."""
        return "\n".join(
            f"{name}: [{', '.join(str(n) for n in binding.screen_spaces)}]"
            for name, binding in self._space_bindings.items()
        )

    @property
    def count(self) -> int:
        return len(self._space_bindings)

    def __iter__(self) -> Iterator[SpaceBinding]:
        return iter(list(self._space_bindings.values()))
