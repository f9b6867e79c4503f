"""
Environment-driven configuration for the simulator service.

Values are read once at import time; a .env file next to the process is
honored via python-dotenv.
"""

import os

from dotenv import load_dotenv

load_dotenv()

SIMULATOR_HOST = os.getenv("SIMULATOR_HOST", "0.0.0.0")
SIMULATOR_PORT = int(os.getenv("SIMULATOR_PORT", "8090"))

DEFAULT_RULESET = os.getenv("DEFAULT_RULESET", "standard")
DEFAULT_MAP = os.getenv("DEFAULT_MAP", "standard")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
FLASK_DEBUG = os.getenv("FLASK_DEBUG", "").lower() in ("1", "true", "yes")

# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    CORS_ALLOWED_ORIGINS = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    # sensible defaults for local dev
    CORS_ALLOWED_ORIGINS = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
