from typing import Optional

from ...domain.entity.user_entity import UserEntity
from .entity_store import EntityStore


class InMemoryUserRepository:
    """
    EntityStoreのusersマップを使ったUserRepository実装
    """

    def __init__(self, store: EntityStore):
        self._users = store.users

    def save(self, user: UserEntity) -> UserEntity:
        self._users.insert(user.id, user)
        return user

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        return self._users.get(user_id)

    def exists(self, user_id: str) -> bool:
        return self._users.contains(user_id)

    def count(self) -> int:
        return len(self._users)
