from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class UserEntity:
    """
    ユーザーのビジネスドメインモデル

    openid は外部アカウント（WeChat）の識別子。
    """
    id: str
    openid: str
    nickname: str
    avatar: Optional[str]
    created_at: datetime
    updated_at: datetime
