from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateUserDTO:
    """
    ユーザー登録用DTO
    """
    openid: str
    nickname: str
    avatar: Optional[str] = None
