"""Configuration loading from environment variables and defaults.

Values are kept as raw strings; the CLI validates them and reports bad
settings the same way as bad arguments.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Worker processes used when --workers is not given
WORKERS = os.getenv("PREFLOP_ODDS_WORKERS", "1")

# Log level used when --verbose is not given
LOG_LEVEL = os.getenv("PREFLOP_ODDS_LOG_LEVEL", "WARNING").upper()
