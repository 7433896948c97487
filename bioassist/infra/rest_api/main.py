from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import Settings
from ..di import AppContainer
from ..logging_config import LoggingMiddleware, configure_app_logging

from .routers.users import router as users_router
from .routers.biographies import router as biographies_router
from .routers.ai import create_ai_router
from .schemas import HealthResponse
from .error_handlers import (
    handle_user_exception,
    handle_biography_exception,
    handle_validation_exception,
    handle_http_exception,
    handle_generic_error,
)
from .rate_limiter import create_limiter, rate_limit_error_handler
from ...domain.exception.user_exceptions import UserException
from ...domain.exception.biography_exceptions import BiographyException

APP_VERSION = "0.1.0"
ROOT_BANNER = "传记写作助手后端服务 - API文档请参考相关接口"


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[AppContainer] = None,
) -> FastAPI:
    """
    FastAPIアプリケーションを組み立てる

    Args:
        settings: アプリケーション設定（省略時は環境変数から読み込み）
        container: DIコンテナ（省略時は新しいEntityStoreを持つコンテナを生成）
    """
    settings = settings or (container.settings if container else Settings())
    container = container or AppContainer(settings)

    logger = configure_app_logging(settings.effective_log_level, settings.log_file)

    app = FastAPI(
        title="Biography Assistant API",
        version=APP_VERSION
    )
    app.state.container = container

    # レート制限の設定
    limiter = create_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_error_handler)

    app.add_middleware(LoggingMiddleware)

    # CORS 設定（環境設定に基づく）
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router)
    app.include_router(biographies_router)
    app.include_router(create_ai_router(limiter, settings))

    @app.get("/", response_class=PlainTextResponse)
    def root_handler():
        return ROOT_BANNER

    @app.get("/api/health", response_model=HealthResponse)
    def health_check():
        """ヘルスチェックエンドポイント"""
        return HealthResponse(
            status="healthy",
            version=APP_VERSION,
            entities=container.store.stats(),
        )

    # エラーハンドラーの登録
    app.add_exception_handler(UserException, handle_user_exception)
    app.add_exception_handler(BiographyException, handle_biography_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_generic_error)

    logger.info(
        "Application configured",
        extra={"environment": settings.environment, "store_shards": container.store.users.shard_count}
    )
    return app


app = create_app()

#uvicorn bioassist.infra.rest_api.main:app --reload
