import logging
import uuid
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from .config import settings
from .quiz import QuizSession
from .vocabulary import WordCatalog

logger = logging.getLogger(__name__)


class SessionStore:
    """In-memory quiz sessions keyed by the session cookie."""

    def __init__(self, catalog: WordCatalog, timeout_minutes: Optional[int] = None):
        self.catalog = catalog
        self.timeout = timedelta(
            minutes=timeout_minutes or settings.SESSION_TIMEOUT_MINUTES
        )
        self.sessions: Dict[str, QuizSession] = {}
        self.last_seen: Dict[str, datetime] = {}

    def create(self) -> Tuple[str, QuizSession]:
        self.purge_expired()
        session_id = str(uuid.uuid4())
        session = QuizSession(self.catalog)
        self.sessions[session_id] = session
        self.last_seen[session_id] = datetime.now()
        logger.info(f"New session: {session_id}", extra={"session_id": session_id})
        return session_id, session

    def get(self, session_id: Optional[str]) -> Optional[QuizSession]:
        if not session_id or session_id not in self.sessions:
            return None
        if self._is_expired(session_id, datetime.now()):
            logger.info(f"Session expired: {session_id}", extra={"session_id": session_id})
            self.discard(session_id)
            return None
        self.last_seen[session_id] = datetime.now()
        return self.sessions[session_id]

    def purge_expired(self) -> int:
        """Drop every idle session; returns how many were removed."""
        now = datetime.now()
        expired = [sid for sid in self.last_seen if self._is_expired(sid, now)]
        for session_id in expired:
            self.discard(session_id)
        if expired:
            logger.info(f"Purged {len(expired)} expired sessions")
        return len(expired)

    def _is_expired(self, session_id: str, now: datetime) -> bool:
        return now - self.last_seen[session_id] > self.timeout

    def discard(self, session_id: Optional[str]):
        self.sessions.pop(session_id, None)
        self.last_seen.pop(session_id, None)

    def clear(self):
        self.sessions.clear()
        self.last_seen.clear()
