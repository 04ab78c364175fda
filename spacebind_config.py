"""
spacebind configuration file.

Customize your arrangements here, then run:

    python -m spacebind move spacebind_config.py
    python -m spacebind list spacebind_config.py

This example uses the in-memory display so it can be run anywhere.
Replace `display` (and `status`) with your platform backend.
"""

from spacebind import (
    AppSettings,
    Area,
    Monitor,
    MoverConfig,
    RecordingStatusSurface,
    VirtualDisplay,
    VirtualScreen,
    VirtualWindow,
    WindowBinding,
    bind_apps,
    resolve_monitor_indexes,
)

# Screens
monitors = [
    Monitor("screenExtMain", "6A5F1E1C-C366-140A-0D3C-EF79946BBA2F", Area(0, 0, 3008, 1692)),
    Monitor("screenBuiltIn", "6CE794D8-FAF3-2AF6-D16A-477FDADB46D6", Area(3008, 471, 1536, 960)),
]

# Apps' settings: percentage frames per monitor
apps = [
    AppSettings(
        "TextMate",
        "com.macromates.TextMate",
        {
            "screenBuiltIn": Area(0, 0, 100 / 2, 100),
            "screenExtMain": Area(200 / 3, 0, 100 / 3, 100),
        },
    ),
    AppSettings(
        "iTerm2",
        "com.googlecode.iterm2",
        {
            "screenBuiltIn": Area(100 / 2, 0, 100 / 2, 100),
            "screenExtMain": Area(100 / 3, 0, 100 / 3, 100),
        },
    ),
    AppSettings(
        "Firefox",
        "org.mozilla.firefox",
        {
            "screenBuiltIn": Area(0, 0, 200 / 3, 100),
            "screenExtMain": Area(0, 0, 50, 100),
        },
    ),
    AppSettings(
        "Calendar",
        "com.apple.iCal",
        {
            "screenBuiltIn": WindowBinding.maximize(),
            "screenExtMain": Area(200 / 3, 0, 100 / 3, 100),
        },
        preferred="screenBuiltIn",
    ),
]

# Display: two screens with one space each, and a few windows
display = VirtualDisplay(
    [
        VirtualScreen(m.screen_id, m.frame, spaces=1, display_height=1692)
        for m in monitors
    ]
)
display.screen(1).add_window(
    VirtualWindow("com.macromates.TextMate", Area(3008, 471, 768, 960), "notes.md")
)
display.screen(1).add_window(
    VirtualWindow("com.apple.iCal", Area(3100, 500, 900, 700), "Calendar")
)
display.screen(0).add_window(
    VirtualWindow("org.mozilla.firefox", Area(200, 100, 1400, 1200), "Mozilla Firefox")
)

status = RecordingStatusSurface()

# Create configuration
config = MoverConfig(
    snap_to_edge_threshold=5,
    # Excluded apps
    excluded_apps=[
        "com.apple.finder",
        "com.surteesstudios.Bartender",
    ],
    logging_indent=2,
)

# Window bindings
#
# A binding to a screen or space that does not exist leaves the window alone.
# The "default" arrangement always exists and is used if nothing else
# matches, in which case no windows are moved.
# config.arrangement(name, [spaces_on_screen_0, spaces_on_screen_1, ...])
# WindowBinding(app_id, screen, space, frame) with frame in percentages.
laptop = config.arrangement("Laptop only", [1], WindowBinding("*", 0, 0))
bind_apps(laptop, apps, "screenBuiltIn")

docked = config.arrangement(
    "Laptop with external main display", [1, 1], WindowBinding("*", 0, 0)
)
bind_apps(
    docked,
    apps,
    "screenExtMain",
    monitor_indexes=resolve_monitor_indexes(monitors, display.screens()),
)
