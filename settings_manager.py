import json
import logging
import os

import config
from error_messages import ErrorMessages, SettingsError

logger = logging.getLogger(__name__)

def load_settings():
    """Read settings.json and return it as a dict."""
    if os.path.exists(config.SETTINGS_FILE):
        with open(config.SETTINGS_FILE, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError:
                logger.warning("Settings file is corrupted, using defaults: %s", config.SETTINGS_FILE)
                return {}
        if not isinstance(data, dict):
            logger.warning("Settings file does not hold an object, using defaults")
            return {}
        return data
    return {}

def save_settings(data):
    """Write the settings dict to settings.json."""
    try:
        with open(config.SETTINGS_FILE, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)
    except OSError as e:
        info = ErrorMessages.SETTINGS_ERROR
        raise SettingsError(f"Could not write {config.SETTINGS_FILE}: {e}",
                            error_code=info['code'], suggestions=info['suggestions']) from e

def save_settings_safe(data, preserve_keys=None):
    """
    Save settings while keeping the stored values of selected keys.

    Args:
        data: settings to write
        preserve_keys: keys whose existing value wins (e.g. ['window_geometry'])
    """
    if preserve_keys is None:
        preserve_keys = ['window_geometry']

    original_settings = load_settings()
    merged = dict(original_settings)
    merged.update(data)

    for key in preserve_keys:
        if key in original_settings:
            merged[key] = original_settings[key]
            logger.debug("settings_manager: preserved key '%s'", key)

    save_settings(merged)
    return merged

def get_int_setting(settings, key, default, minimum=None, maximum=None):
    """Integer setting with fallback to the default on a bad value."""
    value = settings.get(key, default)
    try:
        value = int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid value for setting '%s': %r, using %r", key, value, default)
        return default
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        logger.warning("Setting '%s' out of range: %r, using %r", key, value, default)
        return default
    return value
