"""Quiz-session constants shared across UI and core layers."""

MAX_SECONDS: int = 30
NO_ANSWER: int = -1
TICK_INTERVAL_MS: int = 1000
