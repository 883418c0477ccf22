"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Monte Carlo rounds per query
DEFAULT_ITERATIONS = int(os.getenv("CASINO_ODDS_ITERATIONS", "2200"))

# Worker threads sharing one query's rounds
DEFAULT_WORKERS = int(os.getenv("CASINO_ODDS_WORKERS", "1"))

LOG_LEVEL = os.getenv("CASINO_ODDS_LOG_LEVEL", "WARNING").upper()

# Fixed seed for reproducible CLI runs; unset means ambient randomness
_seed = os.getenv("CASINO_ODDS_SEED", "")
SEED = int(_seed) if _seed else None
