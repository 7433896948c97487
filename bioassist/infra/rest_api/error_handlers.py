import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .schemas import ApiResponse
from ...domain.exception.biography_exceptions import (
    BiographyException,
    BiographyNotFoundError,
    InvalidUserReferenceError,
    MissingParameterError,
)
from ...domain.exception.user_exceptions import UserException, UserNotFoundError

logger = logging.getLogger("bioassist.api.errors")


def create_error_response(message: str, status_code: int) -> JSONResponse:
    """エラー時もエンベロープ形式で返す"""
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.error(message).model_dump(mode="json"),
    )


async def handle_user_exception(request: Request, exc: UserException):
    """ユーザー例外のハンドリング"""
    status_code_map = {
        UserNotFoundError: status.HTTP_404_NOT_FOUND,
    }
    status_code = status_code_map.get(type(exc), status.HTTP_400_BAD_REQUEST)

    logger.warning(
        f"User exception: {exc.__class__.__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_code": exc.error_code,
            "error": str(exc)
        }
    )

    return create_error_response("未找到用户", status_code)


async def handle_biography_exception(request: Request, exc: BiographyException):
    """伝記例外のハンドリング"""
    status_code_map = {
        BiographyNotFoundError: status.HTTP_404_NOT_FOUND,
        InvalidUserReferenceError: status.HTTP_400_BAD_REQUEST,
        MissingParameterError: status.HTTP_400_BAD_REQUEST,
    }
    message_map = {
        BiographyNotFoundError: "未找到传记项目",
        InvalidUserReferenceError: "用户不存在",
        MissingParameterError: "缺少必需参数",
    }
    status_code = status_code_map.get(type(exc), status.HTTP_400_BAD_REQUEST)

    logger.warning(
        f"Biography exception: {exc.__class__.__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_code": exc.error_code,
            "error": str(exc)
        }
    )

    return create_error_response(message_map.get(type(exc), str(exc)), status_code)


async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """リクエストのバリデーションエラーは400として扱う"""
    logger.warning(
        "Request validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "errors": exc.errors()
        }
    )

    return create_error_response("请求参数无效", status.HTTP_400_BAD_REQUEST)


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """ルーティング由来のHTTPエラー（404/405等）"""
    logger.info(
        "HTTP error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.status_code,
        }
    )
    return create_error_response(str(exc.detail), exc.status_code)


async def handle_generic_error(request: Request, exc: Exception):
    """その他のエラーのハンドリング"""
    logger.error(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error": str(exc),
            "error_type": type(exc).__name__
        },
        exc_info=True
    )

    return create_error_response("服务器内部错误", status.HTTP_500_INTERNAL_SERVER_ERROR)
