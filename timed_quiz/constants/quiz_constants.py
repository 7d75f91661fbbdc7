"""Quiz-related constants shared across UI and core layers."""

DEFAULT_TOTAL_DURATION_SECONDS: int = 60
TICK_INTERVAL_MS: int = 1000
TIME_WARNING_WINDOW_SECONDS: int = 10

# Persistence keys for the progress snapshot.
RESPONSES_KEY: str = "responses"
ACTIVE_QUESTION_INDEX_KEY: str = "activeQuestionIndex"
TOTAL_TIME_LEFT_KEY: str = "totalTimeLeft"
SNAPSHOT_KEYS: tuple[str, ...] = (
    RESPONSES_KEY,
    ACTIVE_QUESTION_INDEX_KEY,
    TOTAL_TIME_LEFT_KEY,
)

DEFAULT_QUESTION_BANK_FILE: str = "data/questions.json"
