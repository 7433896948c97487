"""
In-memory biography repository backed by the entity store
"""
from typing import Callable, List, Optional

from ...domain.entity.biography_entity import BiographyEntity
from .entity_store import EntityStore


class InMemoryBiographyRepository:
    """BiographyRepository implementation over ``EntityStore.biographies``"""

    def __init__(self, store: EntityStore):
        self._biographies = store.biographies

    def save(self, biography: BiographyEntity) -> BiographyEntity:
        self._biographies.insert(biography.id, biography)
        return biography

    def get_by_id(self, biography_id: str) -> Optional[BiographyEntity]:
        return self._biographies.get(biography_id)

    def update(self, biography_id: str, patch: Callable[[BiographyEntity], None]) -> BiographyEntity:
        return self._biographies.mutate(biography_id, patch)

    def list_by_user(self, user_id: str) -> List[BiographyEntity]:
        return self._biographies.scan_filter(lambda b: b.user_id == user_id)

    def count(self) -> int:
        return len(self._biographies)
