from ...domain.entity.user_entity import UserEntity
from ...domain.entity.biography_entity import BiographyEntity
from ...domain.entity.session_entity import SessionEntity
from .concurrent_map import ConcurrentMap


class EntityStore:
    """
    プロセス内の全エンティティを保持するインメモリストア

    3つのマップは互いに独立しており、マップをまたぐトランザクションは存在しない。
    再起動すると内容は失われる。
    """

    def __init__(self, shard_count: int = 16) -> None:
        self.users: ConcurrentMap[UserEntity] = ConcurrentMap(shard_count)
        self.biographies: ConcurrentMap[BiographyEntity] = ConcurrentMap(shard_count)
        self.sessions: ConcurrentMap[SessionEntity] = ConcurrentMap(shard_count, timestamp_field=None)

    def stats(self) -> dict:
        return {
            "users": len(self.users),
            "biographies": len(self.biographies),
            "sessions": len(self.sessions),
        }
