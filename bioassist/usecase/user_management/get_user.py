import logging

from ...port.user_repository import UserRepository
from ...domain.entity.user_entity import UserEntity
from ...domain.exception.user_exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """
    ユーザー取得のユースケース実装
    """
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def execute(self, user_id: str) -> UserEntity:
        user = self.user_repository.get_by_id(user_id)
        if user is None:
            logger.warning("User not found", extra={"user_id": user_id})
            raise UserNotFoundError(user_id)
        return user
