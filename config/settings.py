"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., LOG_LEVEL env var → Settings.LOG_LEVEL)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_STRATEGY: str = "uniform"   # weights the API scheduler starts with

    # ── Workloads ───────────────────────────────────────────────
    WORKLOAD_PATH: str = "workloads/data/workload_01.txt"
    WORKLOAD_STRATEGY: str = "balanced"
    PROCESSING_DELAY_MS: float = 10.0   # simulated work per complexity point

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this everywhere
settings = Settings()
