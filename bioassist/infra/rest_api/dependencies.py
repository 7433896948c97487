"""
FastAPI依存性注入の定義

リクエストが属するアプリケーションのAppContainer（app.state.container）から
ユースケースを組み立てて各エンドポイントに渡します。
ストアはアプリケーション単位で保持され、モジュールグローバルには置きません。
"""

from typing import Annotated

from fastapi import Depends, Request

from ..di import AppContainer
from ...usecase.user_management.register_user import RegisterUserUseCase
from ...usecase.user_management.get_user import GetUserUseCase
from ...usecase.biography_management.biography_service import BiographyService
from ...usecase.ai_assistant.ai_assistant_service import AIAssistantService


def get_container(request: Request) -> AppContainer:
    """
    リクエスト元アプリのDIコンテナを取得

    Returns:
        AppContainer: create_appで生成されたコンテナ
    """
    return request.app.state.container


def get_register_user_usecase(
    container: Annotated[AppContainer, Depends(get_container)]
) -> RegisterUserUseCase:
    return container.register_user_usecase()


def get_get_user_usecase(
    container: Annotated[AppContainer, Depends(get_container)]
) -> GetUserUseCase:
    return container.get_user_usecase()


def get_biography_service(
    container: Annotated[AppContainer, Depends(get_container)]
) -> BiographyService:
    return container.biography_service()


def get_ai_assistant_service(
    container: Annotated[AppContainer, Depends(get_container)]
) -> AIAssistantService:
    return container.ai_assistant_service()
