from typing import Protocol, Optional
from ..domain.entity.user_entity import UserEntity


class UserRepository(Protocol):
    """
    ユーザーデータの保存インターフェース。
    """

    def save(self, user: UserEntity) -> UserEntity:
        ...

    def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        ...

    def exists(self, user_id: str) -> bool:
        ...

    def count(self) -> int:
        ...
