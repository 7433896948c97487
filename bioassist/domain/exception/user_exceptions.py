"""
ユーザー関連の例外クラス

ユーザーの取得や、他エンティティからのユーザー参照で発生する例外を定義します。
"""

from typing import Optional


class UserException(Exception):
    """ユーザー関連の基底例外クラス"""
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class UserNotFoundError(UserException):
    """指定されたユーザーが見つからない場合の例外"""
    def __init__(self, user_id: str):
        super().__init__(f"User not found: {user_id}", "USER_NOT_FOUND")
        self.user_id = user_id
