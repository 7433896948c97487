from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from ...domain.entity.biography_entity import BiographyEntity, BiographyStatus
from ...domain.entity.user_entity import UserEntity

T = TypeVar("T")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ApiResponse(BaseModel, Generic[T]):
    """全エンドポイント共通のレスポンスエンベロープ"""
    success: bool
    data: Optional[T] = None
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)

    @classmethod
    def ok(cls, data: T, message: str) -> "ApiResponse[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def error(cls, message: str) -> "ApiResponse[T]":
        return cls(success=False, data=None, message=message)


# --- users ---

class CreateUserRequest(BaseModel):
    openid: str
    nickname: str
    avatar: Optional[str] = None


class UserResponse(BaseModel):
    id: str
    openid: str
    nickname: str
    avatar: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: UserEntity) -> "UserResponse":
        return cls(
            id=user.id,
            openid=user.openid,
            nickname=user.nickname,
            avatar=user.avatar,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


# --- biographies ---

class CreateBiographyRequest(BaseModel):
    user_id: str
    title: str
    description: Optional[str] = None


class UpdateBiographyRequest(BaseModel):
    """
    部分更新リクエスト

    送られてこなかったフィールド、およびnullのフィールドは変更しない。
    空文字は「空で上書き」として扱う。
    """
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None

    def provided_fields(self) -> frozenset:
        """値付きで送られてきたフィールド名"""
        return frozenset(
            name for name in self.model_fields_set if getattr(self, name) is not None
        )


class BiographyResponse(BaseModel):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    content: str
    status: BiographyStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, biography: BiographyEntity) -> "BiographyResponse":
        return cls(
            id=biography.id,
            user_id=biography.user_id,
            title=biography.title,
            description=biography.description,
            content=biography.content,
            status=biography.status,
            created_at=biography.created_at,
            updated_at=biography.updated_at,
        )


# --- misc ---

class HealthResponse(BaseModel):
    status: str
    version: str
    entities: dict
