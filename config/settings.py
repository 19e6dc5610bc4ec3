"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., TIME_SLICE env var → Settings.TIME_SLICE)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
The scheduler itself only reads these as constructor defaults, so tests can
build schedulers with any time slice or policy without touching the environment.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_SCHEDULING_POLICY: str = "round_robin"
    TIME_SLICE: int = 2                # ticks per quantum in Round Robin
    MIN_PRIORITY: int = 1
    MAX_PRIORITY: int = 10             # higher number = more urgent

    # ── Driver ──────────────────────────────────────────────────
    TICK_INTERVAL: float = 1.0         # seconds between automatic ticks
    AUTO_ADVANCE: bool = False         # start the periodic clock with the API
    MAX_TICKS: int = 0                 # headless driver stops here (0 = run until idle)
    SAMPLE_DATA_PATH: str = "data/sample_processes.txt"
    LOAD_SAMPLE_DATA: bool = False     # load SAMPLE_DATA_PATH when the API starts

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton, import this everywhere
settings = Settings()
