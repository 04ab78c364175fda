"""
Command Line Entry Point

Loads a configuration file and runs one pass, or lists every window.

A configuration file is a Python file defining:

- config: a MoverConfig
- display: a DisplayProvider
- status: a StatusSurface (optional)
"""

from __future__ import annotations
import argparse
import logging
import os
import runpy
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from pubsub import pub

from .config import MoverConfig
from .logger import configure_logging
from .objects import DisplayProvider, StatusSurface
from .window_manager import WindowManager

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "spacebind" / "config.py"


class ConfigError(Exception):
    """A configuration file is missing required definitions."""


def load_config_file(path: Path) -> Dict[str, Any]:
    """Run a configuration file and check its definitions.

    Returns:
        Dictionary with "config", "display" and "status" entries

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If a required definition is missing or has the wrong type
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    namespace = runpy.run_path(str(path))
    config = namespace.get("config")
    display = namespace.get("display")
    status = namespace.get("status")

    if not isinstance(config, MoverConfig):
        raise ConfigError(f"{path}: 'config' must be a MoverConfig")
    if not isinstance(display, DisplayProvider):
        raise ConfigError(f"{path}: 'display' must be a DisplayProvider")
    if status is not None and not isinstance(status, StatusSurface):
        raise ConfigError(f"{path}: 'status' must be a StatusSurface")
    return {"config": config, "display": display, "status": status}


def debug_event_logger(topic=pub.AUTO_TOPIC, **kwargs):
    """Log all events published on the event bus."""
    timestamp = time.strftime("%H:%M:%S")
    topic_name = topic.getName()
    data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
    print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="spacebind",
        description="Move windows to the screens and spaces bound to them.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=("move", "list"),
        default="move",
        help="move bound windows (default) or list windows with percentage frames",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=os.getenv("SPACEBIND_CONFIG", str(DEFAULT_CONFIG_PATH)),
        help="configuration file (default: $SPACEBIND_CONFIG or %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    if os.getenv("SPACEBIND_DEBUG"):
        pub.subscribe(debug_event_logger, pub.ALL_TOPICS)

    try:
        loaded = load_config_file(Path(args.config))
    except (FileNotFoundError, ConfigError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    wm = WindowManager(
        loaded["display"], loaded["config"], status=loaded["status"], subscribe=False
    )

    if args.command == "list":
        wm.enumerate_app_windows()
        return 0

    result = wm.move_bound_windows()
    return 1 if result.aborted else 0
