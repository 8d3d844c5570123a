"""
Configuration - Game constants and environment settings.

Game rules are fixed constants. Deployment settings (catalog URL,
request timeout, CORS origins, log level, session idle timeout) come from the environment.
"""

import os

# Game rules
MAX_ATTEMPTS = 5
HINT_COUNT = 5

# Limits which creatures appear (e.g. 1-151 for only Gen 1)
MIN_SUBJECT_ID = 1
MAX_SUBJECT_ID = 898

# Environment configuration
POKEGUESS_ENV = os.getenv("POKEGUESS_ENV", "development")
API_BASE_URL = os.getenv("POKEGUESS_API_BASE", "https://pokeapi.co/api/v2").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("POKEGUESS_TIMEOUT", "10"))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
LOG_LEVEL = os.getenv("POKEGUESS_LOG_LEVEL", "INFO").upper()
SESSION_IDLE_TIMEOUT = float(os.getenv("POKEGUESS_SESSION_IDLE_TIMEOUT", "3600"))
