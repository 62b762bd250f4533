# timezone_helper.py
import json
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import requests

from config import DEFAULT_TIMEZONE, DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

def get_timezone_from_ip():
    """
    Fetches the timezone based on the user's public IP address using ipinfo.io.
    Returns the default timezone if the request fails.
    """
    try:
        response = requests.get("https://ipinfo.io/json", timeout=DEFAULT_REQUEST_TIMEOUT)
        response.raise_for_status()
        data = response.json()
        timezone = data.get("timezone")

        if timezone and isinstance(timezone, str):
            logger.info("Detected timezone: %s", timezone)
            return timezone
        logger.info("No timezone in IP info, using default (%s)", DEFAULT_TIMEZONE)
        return DEFAULT_TIMEZONE

    except (requests.exceptions.RequestException, json.JSONDecodeError, KeyError) as e:
        logger.warning("Timezone lookup failed: %s. Using default (%s)", e, DEFAULT_TIMEZONE)
        return DEFAULT_TIMEZONE

def resolve_timezone(name):
    """ZoneInfo for a setting value, UTC when the name is unknown."""
    if isinstance(name, ZoneInfo):
        return name
    try:
        return ZoneInfo(name or DEFAULT_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to %s", name, DEFAULT_TIMEZONE)
        return ZoneInfo(DEFAULT_TIMEZONE)

def get_user_timezone(settings):
    return resolve_timezone(settings.get("user_timezone", DEFAULT_TIMEZONE))
