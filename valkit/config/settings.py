"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Metrics ---
METRICS_ENABLED: bool = os.getenv("VALKIT_METRICS_ENABLED", "true").lower() == "true"

# --- Logging ---
MAX_VALUE_LOG_CHARS: int = int(os.getenv("VALKIT_MAX_VALUE_LOG_CHARS", "80"))
