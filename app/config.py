"""
Centralized configuration for the Cellar Drinking Window service.

All constants are defined here to avoid scattered magic numbers
and enable easy configuration management.
"""

import logging
import os
from datetime import date

logger = logging.getLogger(__name__)


class Config:
    """Application configuration constants."""

    # === Vintage Plausibility (API edge only, the engine never validates) ===
    MIN_VINTAGE = 1500
    MAX_VINTAGE_LEAD_YEARS = 1  # Allow next year's vintage (southern hemisphere harvests)

    # === Evaluation Year ===
    MIN_EVALUATION_YEAR = 1500
    MAX_EVALUATION_YEAR = 3000

    # === Request Limits ===
    MAX_BUCKET_WINES = 5000
    MAX_TEXT_LENGTH = 100  # Grape variety / region length, matches cellar form limits
    MAX_ID_LENGTH = 128

    # === Environment ===
    @staticmethod
    def log_level() -> str:
        """Log level (DEBUG, INFO, WARNING, ERROR)."""
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def is_dev() -> bool:
        """Check if running in development mode."""
        return os.getenv("DEV_MODE", "false").lower() == "true"

    @staticmethod
    def evaluation_year() -> int:
        """Year used as "now" when a caller does not supply one.

        Reads EVALUATION_YEAR so deployments and demos can pin the year;
        falls back to the current calendar year.
        """
        raw = os.getenv("EVALUATION_YEAR")
        if raw:
            try:
                return int(raw)
            except ValueError:
                logger.warning(f"Ignoring invalid EVALUATION_YEAR={raw!r}")
        return date.today().year

    @staticmethod
    def max_vintage(evaluation_year: int) -> int:
        """Latest vintage accepted for a given evaluation year."""
        return evaluation_year + Config.MAX_VINTAGE_LEAD_YEARS
