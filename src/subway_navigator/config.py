"""Configuration settings for the subway navigator."""

import os
from dotenv import load_dotenv

load_dotenv()

# Routing
TRANSFER_COST = int(os.getenv("SUBWAY_TRANSFER_COST", "2"))

# Logging
LOG_LEVEL = os.getenv("SUBWAY_LOG_LEVEL", "WARNING").upper()

# Terminal colours (NO_COLOR is honoured as well)
USE_COLOR = (
    os.getenv("SUBWAY_COLOR", "1").lower() not in ("0", "false", "no")
    and "NO_COLOR" not in os.environ
)

# HTTP API
API_HOST = os.getenv("SUBWAY_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SUBWAY_API_PORT", "8000"))
