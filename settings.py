"""JSON-based settings persistence for the daily tracker.

Only window/display preferences live here; tracked days are never saved.
"""

import json
import logging
import os

LOGGER = logging.getLogger("daily_tracker.settings")

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".daily-tracker-settings.json")

_DEFAULTS = {
    "dark_mode": True,
    "window_width": None,
    "window_height": None,
    "dot_radius": 20.0,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        LOGGER.warning("ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings
    if not isinstance(stored, dict):
        LOGGER.warning("ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings

    if "dark_mode" in stored and isinstance(stored["dark_mode"], bool):
        settings["dark_mode"] = stored["dark_mode"]
    for key in ("window_width", "window_height"):
        value = stored.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            settings[key] = value
    radius = stored.get("dot_radius")
    if isinstance(radius, (int, float)) and not isinstance(radius, bool) and radius > 0:
        settings["dot_radius"] = float(radius)
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
