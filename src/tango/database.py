import os
import sqlite3
from contextlib import closing
from typing import List, Optional

from .config import settings


def get_db_connection():
    """Establishes a connection to the SQLite quiz event log."""
    db_path = os.path.join(settings.DB_DIR, settings.DB_FILE)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def create_quiz_event_table():
    """Creates the quiz event table and its session index if missing."""
    with closing(get_db_connection()) as conn:
        with conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS quiz_events (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    timestamp DATETIME DEFAULT CURRENT_TIMESTAMP,
                    level TEXT NOT NULL,
                    source TEXT NOT NULL,
                    session_id TEXT,
                    tier TEXT,
                    message TEXT NOT NULL
                );
                """
            )
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_quiz_events_session "
                "ON quiz_events (session_id)"
            )


def fetch_quiz_events(
    session_id: Optional[str] = None, limit: int = 100
) -> List[sqlite3.Row]:
    """Most recent events first, optionally for a single session."""
    query = "SELECT * FROM quiz_events"
    params: tuple = ()
    if session_id is not None:
        query += " WHERE session_id = ?"
        params = (session_id,)
    query += " ORDER BY id DESC LIMIT ?"
    with closing(get_db_connection()) as conn:
        return conn.execute(query, params + (limit,)).fetchall()


def init_db():
    os.makedirs(settings.DB_DIR, exist_ok=True)
    create_quiz_event_table()
