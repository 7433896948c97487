from typing import Optional

from ...domain.entity.session_entity import SessionEntity
from .entity_store import EntityStore


class InMemorySessionRepository:
    def __init__(self, store: EntityStore):
        self._sessions = store.sessions

    def save(self, session: SessionEntity) -> SessionEntity:
        self._sessions.insert(session.session_id, session)
        return session

    def get_by_id(self, session_id: str) -> Optional[SessionEntity]:
        return self._sessions.get(session_id)

    def count(self) -> int:
        return len(self._sessions)
