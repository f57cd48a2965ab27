import threading
import uuid
from dataclasses import dataclass
from typing import Dict, Optional

from core.game_session import GameConfig, GameSession


@dataclass(frozen=True)
class SessionHandle:
    """A server-owned game.

    The client holds only the `session_id`; the maze and ball position live on
    the backend.
    """

    session_id: str
    session: GameSession


class SessionStore:
    """In-memory storage for game sessions.

    Sessions end when the client deletes them or the process stops; nothing is
    persisted. This store is process-local.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._sessions: Dict[str, GameSession] = {}

    def create(self, config: GameConfig) -> SessionHandle:
        # Generation happens outside the store lock
        session = GameSession(config)
        session_id = str(uuid.uuid4())
        with self._lock:
            self._sessions[session_id] = session
        return SessionHandle(session_id=session_id, session=session)

    def get(self, session_id: str) -> Optional[GameSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
