from dataclasses import dataclass
from datetime import datetime


@dataclass
class SessionEntity:
    """
    ログインセッション

    ストアは確保されているが、現状これを発行・検証するエンドポイントは存在しない。
    """
    session_id: str
    user_id: str
    expires_at: datetime
