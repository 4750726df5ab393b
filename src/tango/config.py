import os

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class Settings:
    PROJECT_NAME: str = "tango"
    DEBUG: bool = False
    LOG_DIR: str = "log"
    LOG_FILE: str = "tango.log"
    LOG_TO_DB: bool = os.environ.get("TANGO_LOG_TO_DB", "0") == "1"
    DB_DIR: str = "db"
    DB_FILE: str = "tango.db"
    VOCAB_DIR: str = os.environ.get(
        "TANGO_VOCAB_DIR", os.path.join(PACKAGE_DIR, "data")
    )
    TOTAL_QUESTIONS: int = 10
    CHOICE_COUNT: int = 4
    ADVANCE_DELAY_SECONDS: float = 1.0
    SESSION_COOKIE_NAME: str = "quiz_session_id"
    SESSION_TIMEOUT_MINUTES: int = 120
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")


settings = Settings()
