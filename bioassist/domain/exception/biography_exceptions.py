"""
Domain exceptions for biography operations
"""

from typing import Optional


class BiographyException(Exception):
    """Base exception for biography operations"""
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code


class BiographyNotFoundError(BiographyException):
    """Raised when a biography is not found"""
    def __init__(self, biography_id: str):
        super().__init__(f"Biography not found: {biography_id}", "BIOGRAPHY_NOT_FOUND")
        self.biography_id = biography_id


class InvalidUserReferenceError(BiographyException):
    """Raised when a biography is created for a user that does not exist"""
    def __init__(self, user_id: str):
        super().__init__(f"Referenced user does not exist: {user_id}", "INVALID_USER_REFERENCE")
        self.user_id = user_id


class MissingParameterError(BiographyException):
    """Raised when a required query parameter is absent"""
    def __init__(self, name: str):
        super().__init__(f"Missing required parameter: {name}", "MISSING_PARAMETER")
        self.name = name
