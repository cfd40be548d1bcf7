"""In-memory registry of chat sessions."""

from __future__ import annotations

import itertools
import logging

from app.models.state import SessionState

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """No session is registered under the requested id."""


class SessionStore:
    """Keeps one SessionState per session id for the life of the process."""

    def __init__(self) -> None:
        self._sessions: dict[int, SessionState] = {}
        self._counter = itertools.count(1)

    def create_session(self) -> int:
        session_id = next(self._counter)
        self._sessions[session_id] = SessionState()
        logger.info("Session %s created", session_id)
        return session_id

    def get_session(self, session_id: int) -> SessionState:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def drop_session(self, session_id: int) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info("Session %s ended", session_id)

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore()
