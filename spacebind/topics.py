"""
Event Topics for spacebind

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Notification events from the platform backend
TOPOLOGY_CHANGED = "screens.changed"
"""Published when screens are connected, disconnected or rearranged."""

# Command events (imperative - tell components to do something)
# These are triggered by user input (hotkeys) or the platform backend

CMD_MOVE_BOUND_WINDOWS = "cmd.move_bound_windows"
"""Command: Run one pass moving every bound window to its target."""

CMD_ENUMERATE_WINDOWS = "cmd.enumerate_windows"
"""Command: Log every window with its frame as screen percentages."""

# Pass notifications
PASS_STARTED = "pass.started"
"""Published when a pass has resolved its arrangement. Params: arrangement, topology"""

PASS_FINISHED = "pass.finished"
"""Published when a pass completes. Params: result (PassResult)"""

PASS_ABORTED = "pass.aborted"
"""Published when no arrangement matches the topology. Params: topology, message"""

# Per-window notifications
WINDOW_MOVED = "placement.window_moved"
"""Published when a window is moved or resized. Params: app_id, screen, space"""

WINDOW_SKIPPED = "placement.window_skipped"
"""Published when a bound window's target does not exist. Params: app_id, reason"""
