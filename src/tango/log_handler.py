import logging
from contextlib import closing

from . import database


class QuizEventHandler(logging.Handler):
    """
    Stores quiz log records in the ``quiz_events`` table.

    Records logged with ``extra={"session_id": ..., "tier": ...}`` keep that
    context in their own columns so a learner's run can be read back with
    ``database.fetch_quiz_events(session_id)``.
    """

    def emit(self, record):
        try:
            with closing(database.get_db_connection()) as conn:
                with conn:
                    conn.execute(
                        "INSERT INTO quiz_events (level, source, session_id, tier, message) "
                        "VALUES (?, ?, ?, ?, ?)",
                        (
                            record.levelname,
                            record.name,
                            getattr(record, "session_id", None),
                            getattr(record, "tier", None),
                            self.format(record),
                        ),
                    )
        except Exception:
            self.handleError(record)
