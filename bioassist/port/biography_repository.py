"""
Port interface for biography storage
"""
from typing import Callable, List, Optional, Protocol

from ..domain.entity.biography_entity import BiographyEntity


class BiographyRepository(Protocol):
    """Biography storage interface"""

    def save(self, biography: BiographyEntity) -> BiographyEntity:
        """Insert or overwrite a biography"""
        ...

    def get_by_id(self, biography_id: str) -> Optional[BiographyEntity]:
        """Return a copy of the biography, or None"""
        ...

    def update(self, biography_id: str, patch: Callable[[BiographyEntity], None]) -> BiographyEntity:
        """
        Apply ``patch`` to the stored biography and refresh ``updated_at``.

        Raises:
            EntityNotFoundError: no biography with this id
        """
        ...

    def list_by_user(self, user_id: str) -> List[BiographyEntity]:
        """All biographies owned by ``user_id`` in no particular order"""
        ...

    def count(self) -> int:
        ...
