# api/config.py
"""Configuration management for the segmentation service."""
import logging
import os
from dotenv import load_dotenv

load_dotenv()


def get_port():
    """Get port configuration."""
    return int(os.getenv("PORT", 3000))


def get_log_level():
    """Get the root log level name (DEBUG shows per-day classification)."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_secret_key():
    """Get the Flask session secret, or None when it must be generated."""
    return os.getenv("FLASK_SECRET_KEY") or None


def get_cors_origins():
    """Get allowed CORS origins for the rendering front-end."""
    return os.getenv("CORS_ORIGINS", "*").split(",")


def get_segmenter_config():
    """Get segmenter configuration."""
    return {
        # Longest itinerary the HTTP layer will accept
        "max_days": int(os.getenv("SEGMENTER_MAX_DAYS", "90")),
        # Substring marking a transition day in the _destination hint
        "travel_sentinel": os.getenv("SEGMENTER_TRAVEL_SENTINEL", "travel day").lower(),
    }


def validate_segmenter_config():
    """Validate segmenter configuration is usable."""
    config = get_segmenter_config()

    if config["max_days"] < 1:
        raise ValueError("SEGMENTER_MAX_DAYS must be at least 1")

    if not config["travel_sentinel"].strip():
        raise ValueError("SEGMENTER_TRAVEL_SENTINEL must not be empty")

    if not isinstance(logging.getLevelName(get_log_level()), int):
        raise ValueError(f"Invalid LOG_LEVEL: {get_log_level()}")

    return True
