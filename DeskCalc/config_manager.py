# config_manager.py
"""""
Persisted user preferences (JSON file in the home directory).

All values are plain integers / booleans handed to the UI at startup and
written back when they change. Missing or unreadable files give the defaults.
"""""

import json
from pathlib import Path

from . import error as E

config_json = Path.home() / ".calculator_config.json"

# Debug toggle for optional prints in this module
debug = False

PRECISION_CHOICES = (0, 1, 2, 3, 4, 6, 8, 10)
DISPLAY_HEIGHT_CHOICES = (0, 80, 120, 160)  # 0 = auto-scale

DEFAULT_SETTINGS = {
    "result_precision": 6,
    "display_height": 0,
    "window_width": 200,
    "window_height": 300,
    "darkmode": False,
}

SETTING_DESCRIPTIONS = {
    "result_precision": "Result Precision",
    "display_height": "Display Height",
    "window_width": "Window width",
    "window_height": "Window height",
    "darkmode": "Dark Mode",
}


def _resolve(path):
    return Path(path) if path is not None else config_json


def is_integer_setting(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_precision(precision):
    """Return `precision` if it is one of PRECISION_CHOICES, else raise ConfigurationError."""
    if not is_integer_setting(precision) or precision not in PRECISION_CHOICES:
        raise E.ConfigurationError(f"Invalid result precision: {precision!r}", code="5001")
    return precision


def sanitize(settings_dict):
    """Replace values of the wrong type (or an unsupported precision) by the defaults."""
    for key_value, default in DEFAULT_SETTINGS.items():
        value = settings_dict.get(key_value, default)
        if isinstance(default, bool):
            if not isinstance(value, bool):
                value = default
        elif not is_integer_setting(value):
            value = default
        settings_dict[key_value] = value

    if settings_dict["result_precision"] not in PRECISION_CHOICES:
        settings_dict["result_precision"] = DEFAULT_SETTINGS["result_precision"]

    return settings_dict


def load_setting_value(key_value, path=None):
    settings_dict = dict(DEFAULT_SETTINGS)
    try:
        with open(_resolve(path), 'r', encoding='utf-8') as f:
            stored = json.load(f)

    except (OSError, json.JSONDecodeError):
        stored = {}

    if isinstance(stored, dict):
        settings_dict.update(stored)
    settings_dict = sanitize(settings_dict)

    if debug == True:
        print("Config loaded:", settings_dict)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    if key_value == "all":
        return dict(SETTING_DESCRIPTIONS)

    else:
        return SETTING_DESCRIPTIONS.get(key_value, "")


def save_setting(settings_dict, path=None):
    try:
        with open(_resolve(path), 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError:
        return {}
