import copy
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from ...domain.exception.store_exceptions import EntityNotFoundError

V = TypeVar("V")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class _Shard(Generic[V]):
    __slots__ = ("lock", "entries")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.entries: Dict[str, V] = {}


class ConcurrentMap(Generic[V]):
    def __init__(
        self,
        shard_count: int = 16,
        timestamp_field: Optional[str] = "updated_at",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        ロックストライピングによるスレッドセーフなキー・バリューマップ

        Args:
            shard_count: シャード数（キーのハッシュで振り分け、シャードごとに1つのロック）
            timestamp_field: mutate時に更新する更新日時フィールド名（Noneなら更新しない）
            clock: 現在時刻の取得関数
        """
        if shard_count < 1:
            raise ValueError("shard_count must be at least 1")
        self.shard_count = shard_count
        self.timestamp_field = timestamp_field
        self._clock = clock
        self._shards: List[_Shard[V]] = [_Shard() for _ in range(shard_count)]

    def _shard_for(self, key: str) -> _Shard[V]:
        return self._shards[hash(key) % self.shard_count]

    def insert(self, key: str, value: V) -> None:
        """値を挿入（既存キーは上書き）"""
        shard = self._shard_for(key)
        stored = copy.copy(value)
        with shard.lock:
            shard.entries[key] = stored

    def get(self, key: str) -> Optional[V]:
        """値のコピーを取得（存在しなければNone）"""
        shard = self._shard_for(key)
        with shard.lock:
            value = shard.entries.get(key)
        if value is None:
            return None
        return copy.copy(value)

    def contains(self, key: str) -> bool:
        shard = self._shard_for(key)
        with shard.lock:
            return key in shard.entries

    def mutate(self, key: str, patch: Callable[[V], None]) -> V:
        """
        エントリにパッチを適用し、更新日時を進めた結果のコピーを返す

        パッチはコピーに対して適用され、例外が発生した場合は元のエントリは変更されない。

        Raises:
            EntityNotFoundError: キーが存在しない場合
        """
        shard = self._shard_for(key)
        with shard.lock:
            current = shard.entries.get(key)
            if current is None:
                raise EntityNotFoundError(key)

            updated = copy.copy(current)
            patch(updated)
            if self.timestamp_field is not None:
                previous = getattr(current, self.timestamp_field)
                now = self._clock()
                # 時計が巻き戻っても更新日時は後退させない
                setattr(updated, self.timestamp_field, now if now >= previous else previous)
            shard.entries[key] = updated
        return copy.copy(updated)

    def scan_filter(self, predicate: Callable[[V], bool]) -> List[V]:
        """条件に一致する全エントリのスナップショットを返す（順序は不定）"""
        matched: List[V] = []
        for shard in self._shards:
            with shard.lock:
                matched.extend(v for v in shard.entries.values() if predicate(v))
        return [copy.copy(v) for v in matched]

    def __len__(self) -> int:
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += len(shard.entries)
        return total
