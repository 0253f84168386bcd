"""Configuration management - loads environment variables."""

import os
from dotenv import load_dotenv

from .constants import URL_BASE, DEFAULT_REQUEST_TIMEOUT, DEFAULT_MAX_RATE_LIMIT_RETRIES

load_dotenv()

# WaniKani API Configuration
WANIKANI_API_KEY = os.getenv("WANIKANI_API_KEY") or os.getenv("API_KEY")
WANIKANI_BASE_URL = os.getenv("WANIKANI_BASE_URL", URL_BASE)

# Request behaviour
REQUEST_TIMEOUT = float(os.getenv("WANIKANI_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT)))
MAX_RATE_LIMIT_RETRIES = int(
    os.getenv("WANIKANI_MAX_RATE_LIMIT_RETRIES", str(DEFAULT_MAX_RATE_LIMIT_RETRIES))
)

# Logging (used by the scripts; the library never configures handlers)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
