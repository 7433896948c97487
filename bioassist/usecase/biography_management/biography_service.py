"""
Biography management service - use case layer
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from ...domain.entity.biography_entity import BiographyEntity, BiographyStatus
from ...domain.exception.biography_exceptions import (
    BiographyNotFoundError, InvalidUserReferenceError, MissingParameterError
)
from ...domain.exception.store_exceptions import EntityNotFoundError
from ...port.biography_repository import BiographyRepository
from ...port.user_repository import UserRepository
from ...port.dto.biography_dto import CreateBiographyDTO, UpdateBiographyDTO

logger = logging.getLogger(__name__)


class BiographyService:
    """Service for biography project operations"""

    def __init__(self, biography_repository: BiographyRepository, user_repository: UserRepository):
        self._biography_repository = biography_repository
        self._user_repository = user_repository

    def create_biography(self, dto: CreateBiographyDTO) -> BiographyEntity:
        """Create a new draft biography for an existing user"""
        # The user check and the insert are separate steps; users are never
        # deleted so the reference cannot go stale in between.
        if not self._user_repository.exists(dto.user_id):
            logger.error("Biography creation failed: unknown user", extra={"user_id": dto.user_id})
            raise InvalidUserReferenceError(dto.user_id)

        now = datetime.now(timezone.utc)
        biography = BiographyEntity(
            id=str(uuid4()),
            user_id=dto.user_id,
            title=dto.title,
            description=dto.description,
            content="",
            status=BiographyStatus.DRAFT,
            created_at=now,
            updated_at=now,
        )
        saved = self._biography_repository.save(biography)
        logger.info("Biography created", extra={"biography_id": saved.id, "user_id": saved.user_id})
        return saved

    def list_biographies(self, user_id: Optional[str]) -> List[BiographyEntity]:
        """List all biographies of a user (empty list if the user has none)"""
        if user_id is None:
            logger.error("Missing required parameter: user_id")
            raise MissingParameterError("user_id")

        biographies = self._biography_repository.list_by_user(user_id)
        logger.info(
            "Biographies listed",
            extra={"user_id": user_id, "count": len(biographies)}
        )
        return biographies

    def get_biography(self, biography_id: str) -> BiographyEntity:
        """Get biography by ID"""
        biography = self._biography_repository.get_by_id(biography_id)
        if biography is None:
            logger.warning("Biography not found", extra={"biography_id": biography_id})
            raise BiographyNotFoundError(biography_id)
        return biography

    def update_biography(self, biography_id: str, dto: UpdateBiographyDTO) -> BiographyEntity:
        """Overwrite the fields present in ``dto`` and refresh the update timestamp"""

        def patch(biography: BiographyEntity) -> None:
            if dto.is_set("title"):
                biography.update_metadata(title=dto.title)
            if dto.is_set("description"):
                biography.update_metadata(description=dto.description)
            if dto.is_set("content"):
                biography.update_content(dto.content)

        try:
            updated = self._biography_repository.update(biography_id, patch)
        except EntityNotFoundError as e:
            logger.error("Biography update failed: not found", extra={"biography_id": biography_id})
            raise BiographyNotFoundError(biography_id) from e

        logger.info(
            "Biography updated",
            extra={"biography_id": biography_id, "fields": sorted(dto.fields_set)}
        )
        return updated
