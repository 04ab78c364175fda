"""
Unit tests for the binding model.
"""

import dataclasses

import pytest
from spacebind.bindings import (
    CATCH_ALL,
    DEFAULT_ARRANGEMENT,
    BindingSet,
    SpaceBinding,
    WindowBinding,
)
from spacebind.geometry import Area


@pytest.mark.unit
class TestWindowBinding:
    """Test WindowBinding construction and validation."""

    def test_defaults(self):
        binding = WindowBinding("org.mozilla.firefox")

        assert binding.app_id == "org.mozilla.firefox"
        assert binding.screen == 0
        assert binding.space == 0
        assert binding.frame is None

    @pytest.mark.parametrize("app_id", ["", None, 42])
    def test_rejects_invalid_app_id(self, app_id):
        with pytest.raises(ValueError, match="non-empty string"):
            WindowBinding(app_id)

    def test_rejects_negative_indexes(self):
        with pytest.raises(ValueError):
            WindowBinding("app", screen=-1)
        with pytest.raises(ValueError):
            WindowBinding("app", space=-1)

    def test_is_immutable(self):
        binding = WindowBinding("app", 1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            binding.screen = 0

    def test_catch_all(self):
        binding = WindowBinding(CATCH_ALL, 0, 0)
        assert binding.app_id == "*"

    def test_maximize_frame(self):
        assert WindowBinding.maximize() == Area(0, 0, 100, 100)

    def test_maximize_returns_fresh_frame(self):
        frame = WindowBinding.maximize()
        frame.width = 50
        assert WindowBinding.maximize().width == 100


@pytest.mark.unit
class TestSpaceBinding:
    """Test SpaceBinding arrangement management."""

    def test_create(self):
        space_binding = SpaceBinding("Laptop only", [1])

        assert space_binding.name == "Laptop only"
        assert space_binding.screen_spaces == [1]
        assert space_binding.default_binding is None
        assert len(space_binding) == 0

    def test_create_without_topology(self):
        space_binding = SpaceBinding("empty")
        assert space_binding.screen_spaces == []

    def test_add_and_lookup(self):
        space_binding = SpaceBinding("test", [1])
        binding = WindowBinding("com.apple.Safari", 0, 0)

        space_binding.add(binding)

        assert space_binding.window_binding("com.apple.Safari") is binding
        assert "com.apple.Safari" in space_binding

    def test_add_replaces_by_app_id(self):
        space_binding = SpaceBinding("test", [1])
        space_binding.add(WindowBinding("app", 0, 0))
        space_binding.add(WindowBinding("app", 1, 0))

        assert len(space_binding) == 1
        assert space_binding.window_binding("app").screen == 1

    def test_add_new(self):
        space_binding = SpaceBinding("test", [2])
        frame = Area(0, 0, 50, 100)

        binding = space_binding.add_new("app", 0, 1, frame)

        assert space_binding.window_binding("app") == WindowBinding("app", 0, 1, frame)
        assert binding.space == 1

    def test_add_new_validates(self):
        space_binding = SpaceBinding("test", [1])
        with pytest.raises(ValueError):
            space_binding.add_new("")

    def test_remove(self):
        space_binding = SpaceBinding("test", [1])
        space_binding.add_new("app")

        space_binding.remove("app")
        space_binding.remove("unknown")

        assert space_binding.window_binding("app") is None
        assert space_binding.app_ids == []

    def test_unknown_app(self):
        assert SpaceBinding("test", [1]).window_binding("nope") is None

    def test_match_exact(self):
        space_binding = SpaceBinding("dual", [2, 1])

        assert space_binding.match([2, 1])
        assert space_binding.match((2, 1))

    def test_match_requires_same_order_and_length(self):
        space_binding = SpaceBinding("dual", [2, 1])

        assert not space_binding.match([1, 2])
        assert not space_binding.match([2])
        assert not space_binding.match([2, 1, 1])
        assert not space_binding.match([])

    def test_screen_spaces_are_copied(self):
        topology = [1, 1]
        space_binding = SpaceBinding("dual", topology)
        topology.append(3)
        space_binding.screen_spaces.append(4)

        assert space_binding.screen_spaces == [1, 1]

    def test_set_screen_spaces(self):
        space_binding = SpaceBinding("test", [1])
        space_binding.screen_spaces = [3, 2]

        assert space_binding.match([3, 2])
        assert not space_binding.match([1])

    def test_default_binding(self):
        space_binding = SpaceBinding("test", [1])
        space_binding.default_binding = WindowBinding(CATCH_ALL, 0, 0)

        assert space_binding.default_binding.app_id == "*"
        # The default binding is not an explicit binding
        assert space_binding.window_binding(CATCH_ALL) is None


@pytest.mark.unit
class TestBindingSet:
    """Test BindingSet matching and lookup."""

    def test_starts_with_default(self):
        binding_set = BindingSet()

        assert binding_set.count == 1
        default = binding_set.binding(DEFAULT_ARRANGEMENT)
        assert default is not None
        assert len(default) == 0

    def test_add_and_lookup(self):
        binding_set = BindingSet()
        laptop = SpaceBinding("Laptop only", [1])
        binding_set.add(laptop)

        assert binding_set.binding("Laptop only") is laptop
        assert binding_set.count == 2

    def test_unknown_name(self):
        assert BindingSet().binding("missing") is None

    def test_match(self):
        binding_set = BindingSet()
        binding_set.add(SpaceBinding("Laptop only", [1]))
        binding_set.add(SpaceBinding("Docked", [1, 1]))

        assert binding_set.match([1]) == "Laptop only"
        assert binding_set.match([1, 1]) == "Docked"

    def test_no_match_returns_default(self):
        binding_set = BindingSet()
        binding_set.add(SpaceBinding("Laptop only", [1]))
        binding_set.add(SpaceBinding("Docked", [1, 1]))

        assert binding_set.match([2, 1]) == DEFAULT_ARRANGEMENT
        assert binding_set.match([]) == DEFAULT_ARRANGEMENT

    def test_first_inserted_wins(self):
        binding_set = BindingSet()
        binding_set.add(SpaceBinding("first", [2]))
        binding_set.add(SpaceBinding("second", [2]))

        assert binding_set.match([2]) == "first"

    def test_match_falls_back_to_default_after_removal(self):
        binding_set = BindingSet()
        binding_set.add(SpaceBinding("Laptop only", [1]))
        binding_set.remove(DEFAULT_ARRANGEMENT)

        assert binding_set.binding(DEFAULT_ARRANGEMENT) is None
        assert binding_set.match([3]) == DEFAULT_ARRANGEMENT
        assert binding_set.count == 1

    def test_remove(self):
        binding_set = BindingSet()
        binding_set.add(SpaceBinding("Laptop only", [1]))
        binding_set.remove("Laptop only")
        binding_set.remove("never added")

        assert binding_set.binding("Laptop only") is None
        assert binding_set.match([1]) == DEFAULT_ARRANGEMENT

    def test_describe(self):
        binding_set = BindingSet()
        binding_set.add(SpaceBinding("Laptop only", [1]))
        binding_set.add(SpaceBinding("Docked", [2, 1]))

        assert binding_set.describe() == "default: []\nLaptop only: [1]\nDocked: [2, 1]"

    def test_iterates_in_insertion_order(self):
        binding_set = BindingSet()
        binding_set.add(SpaceBinding("b", [1]))
        binding_set.add(SpaceBinding("a", [2]))

        assert [sb.name for sb in binding_set] == ["default", "b", "a"]
