from typing import Protocol, Optional
from ..domain.entity.session_entity import SessionEntity


class SessionRepository(Protocol):
    """
    セッションの保存インターフェース（現状どのユースケースからも使われていない）
    """

    def save(self, session: SessionEntity) -> SessionEntity:
        ...

    def get_by_id(self, session_id: str) -> Optional[SessionEntity]:
        ...

    def count(self) -> int:
        ...
