"""Network configuration constants for the quiz player."""

DEFAULT_API_URL: str = "http://localhost:8020/api"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float | None = None

API_URL_ENV_VAR: str = "QUIZ_PLAYER_API_URL"
REQUEST_TIMEOUT_ENV_VAR: str = "QUIZ_PLAYER_TIMEOUT"
PARTICIPANT_ENV_VAR: str = "QUIZ_PLAYER_USER"

NO_ACTIVE_ATTEMPT_CODE: str = "NO_ACTIVE_ATTEMPT"
# Older backends only report the condition through this message.
LEGACY_NO_ACTIVE_ATTEMPT_MESSAGE: str = "No hay un quiz activo"
