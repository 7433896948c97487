from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter

from ..dependencies import get_ai_assistant_service
from ..schemas import ApiResponse
from ...config import Settings
from ....usecase.ai_assistant.ai_assistant_service import AIAssistantService


def create_ai_router(limiter: Limiter, settings: Settings) -> APIRouter:
    """アプリのリミッターと制限値を適用したAIルーターを作る"""
    router = APIRouter(prefix="/api/ai", tags=["ai"])
    limit = limiter.limit(settings.ai_rate_limit)

    @router.post("/generate-outline", response_model=ApiResponse[str])
    @limit
    async def generate_outline(
        request: Request,
        payload: Dict[str, Any],
        service: AIAssistantService = Depends(get_ai_assistant_service)
    ):
        """伝記の大纲を生成"""
        outline = await service.generate_outline(payload)
        return ApiResponse[str].ok(outline, "大纲生成成功")

    @router.post("/generate-content", response_model=ApiResponse[str])
    @limit
    async def generate_content(
        request: Request,
        payload: Dict[str, Any],
        service: AIAssistantService = Depends(get_ai_assistant_service)
    ):
        """伝記本文を生成"""
        content = await service.generate_content(payload)
        return ApiResponse[str].ok(content, "内容生成成功")

    @router.post("/interview-questions", response_model=ApiResponse[str])
    @limit
    async def interview_questions(
        request: Request,
        payload: Dict[str, Any],
        service: AIAssistantService = Depends(get_ai_assistant_service)
    ):
        """インタビュー質問を生成"""
        questions = await service.generate_interview_questions(payload)
        return ApiResponse[str].ok(questions, "采访问题生成成功")

    return router
