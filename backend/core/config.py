"""Backend settings read from the environment (and ``env/.env``).

Palette policy defaults come from ``src.theming``; each can be
overridden with an environment variable of the same name.
"""

import os

from dotenv import load_dotenv

from src.theming import (
    FETCH_TIMEOUT as _FETCH_TIMEOUT,
    IMAGE_SIZE as _IMAGE_SIZE,
    MAX_COLOR_COUNT as _MAX_COLOR_COUNT,
    MIN_CONTRAST_RATIO as _MIN_CONTRAST_RATIO,
    parse_hex,
)

load_dotenv("env/.env")

ENV = os.getenv("ENV", "local")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")

# Palette policy
IMAGE_SIZE = int(os.getenv("IMAGE_SIZE", str(_IMAGE_SIZE)))
MAX_COLOR_COUNT = int(os.getenv("MAX_COLOR_COUNT", str(_MAX_COLOR_COUNT)))
MIN_CONTRAST_RATIO = float(os.getenv("MIN_CONTRAST_RATIO", str(_MIN_CONTRAST_RATIO)))
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", str(_FETCH_TIMEOUT)))

# Fallback theme when no artwork color qualifies
DEFAULT_COLOR = parse_hex(os.getenv("DEFAULT_COLOR", "#1DB954"))
DEFAULT_ON_COLOR = parse_hex(os.getenv("DEFAULT_ON_COLOR", "#000000"))
