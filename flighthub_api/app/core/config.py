"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration at all; in a deployment you
override them via environment variables (for example in a ``.env``
file loaded by your process manager).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Seed file shipped with the package.  ``SEED_CSV_PATH`` may point
# elsewhere; relative paths are resolved from the working directory.
DEFAULT_SEED_CSV_PATH = str(Path(__file__).resolve().parent.parent / "data" / "FlightInformation.csv")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "FlightHub API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    description: str = os.getenv("API_DESCRIPTION", "Flight Information API")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # CSV file used to populate the in-memory store on startup.  Seeding
    # is skipped when the file does not exist.
    seed_csv_path: str = os.getenv("SEED_CSV_PATH", DEFAULT_SEED_CSV_PATH)

    # Fixed-window rate limit applied to every request, keyed by the
    # client address.  Set RATE_LIMIT_REQUESTS=0 to disable.
    rate_limit_requests: int = int(os.getenv("RATE_LIMIT_REQUESTS", "100"))
    rate_limit_window_seconds: float = float(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
