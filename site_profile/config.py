"""
Configuration settings for the site_profile package.

Settings only tune diagnostics (log level, import-time content check).
They never change the profile data itself.

Values come from the process environment, falling back to a `.env` file
found from the current working directory. The `.env` file is read, not
loaded: nothing is written into os.environ.
"""

import logging
import os

from dotenv import dotenv_values, find_dotenv

_FALSY = {"0", "false", "no", "off"}

_ENV = {**dotenv_values(find_dotenv(usecwd=True)), **os.environ}

# Log level for the "site_profile" logger
LOG_LEVEL = (_ENV.get("SITE_PROFILE_LOG_LEVEL") or "WARNING").upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise ValueError(f"Unknown log level in SITE_PROFILE_LOG_LEVEL: {LOG_LEVEL!r}")

# Run check_profile() once when site_profile.consts is imported
VERIFY_ON_IMPORT = (_ENV.get("SITE_PROFILE_VERIFY") or "1").strip().lower() not in _FALSY


def get_log_level() -> int:
    """Numeric level for LOG_LEVEL."""
    return logging.getLevelName(LOG_LEVEL)
