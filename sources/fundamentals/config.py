"""
Configuration for the Alpha Vantage fundamentals client.

Values come from the environment; the CLI loads a project-level .env first.
"""

import os
from pathlib import Path


class Settings:
    """Fundamentals client configuration."""

    # Paths
    BASE_DIR: Path = Path(__file__).parent.parent.parent
    OUTPUT_DIR: str = os.getenv("FUNDAMENTALS_OUTPUT_DIR", str(BASE_DIR / "data" / "fundamentals"))

    # Alpha Vantage
    API_KEY: str = os.getenv("ALPHA_VANTAGE_API_KEY", "")
    BASE_URL: str = os.getenv("ALPHA_VANTAGE_BASE_URL", "https://www.alphavantage.co")
    REQUEST_TIMEOUT: int = int(os.getenv("ALPHA_VANTAGE_TIMEOUT", "30"))  # seconds

    # Free tier: 5 calls/minute. 0 disables client-side pacing.
    CALLS_PER_MINUTE: int = int(os.getenv("ALPHA_VANTAGE_CALLS_PER_MINUTE", "5"))


settings = Settings()
