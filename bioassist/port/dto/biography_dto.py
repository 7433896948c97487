"""
DTOs for biography use cases
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Optional


@dataclass
class CreateBiographyDTO:
    """Biography creation request"""
    user_id: str
    title: str
    description: Optional[str] = None


@dataclass
class UpdateBiographyDTO:
    """
    Partial update request

    Only names listed in ``fields_set`` with a non-None value are applied.
    An empty string is an explicit overwrite.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    fields_set: FrozenSet[str] = field(default_factory=frozenset)

    def is_set(self, name: str) -> bool:
        return name in self.fields_set and getattr(self, name) is not None
