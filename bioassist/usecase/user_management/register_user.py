import logging
from uuid import uuid4
from datetime import datetime, timezone

from ...port.user_repository import UserRepository
from ...port.dto.user_dto import CreateUserDTO
from ...domain.entity.user_entity import UserEntity

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    ユーザー登録のユースケース実装

    IDはサーバー側で生成する。openidの重複チェックは行わない。
    """
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def execute(self, user_dto: CreateUserDTO) -> UserEntity:
        now = datetime.now(timezone.utc)
        new_user = UserEntity(
            id=str(uuid4()),
            openid=user_dto.openid,
            nickname=user_dto.nickname,
            avatar=user_dto.avatar,
            created_at=now,
            updated_at=now,
        )

        saved = self.user_repository.save(new_user)
        logger.info("User created", extra={"user_id": saved.id})
        return saved
