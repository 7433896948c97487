from typing import Any

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from ..config import Settings
from .schemas import ApiResponse

DEFAULT_RETRY_AFTER = 60


def create_limiter(settings: Settings) -> Limiter:
    """アプリごとのリミッター（カウンタはインスタンスごとのメモリストレージ）"""
    return Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def retry_after_seconds(exc: Any) -> int:
    """例外が持つ待機秒数、なければ超過した制限のウィンドウ長"""
    retry_after = getattr(exc, "retry_after", None)
    if retry_after is not None:
        return int(retry_after)

    item = getattr(getattr(exc, "limit", None), "limit", None)
    if item is not None:
        return int(item.get_expiry())
    return DEFAULT_RETRY_AFTER


def rate_limit_error_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    body = ApiResponse.error("请求过于频繁，请稍后再试")
    return JSONResponse(
        status_code=429,
        content=body.model_dump(mode="json"),
        headers={"Retry-After": str(retry_after_seconds(exc))},
    )
