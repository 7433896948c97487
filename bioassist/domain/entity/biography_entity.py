"""
Domain entities for biography projects
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class BiographyStatus(str, Enum):
    DRAFT = "Draft"
    PUBLISHED = "Published"
    ARCHIVED = "Archived"


@dataclass
class BiographyEntity:
    """
    Biography project owned by a user
    """
    id: str
    user_id: str
    title: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    content: str = ""
    status: BiographyStatus = BiographyStatus.DRAFT

    def update_metadata(self, title: Optional[str] = None, description: Optional[str] = None) -> None:
        """Update title and/or description"""
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description

    def update_content(self, content: str) -> None:
        """Replace the whole content text"""
        self.content = content
