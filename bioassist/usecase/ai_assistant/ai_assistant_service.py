import logging
from typing import Any, Dict

from ...port.content_generator import ContentGenerator

logger = logging.getLogger(__name__)


class AIAssistantService:
    """
    AI執筆支援のユースケース

    生成処理はContentGeneratorに委譲する。実装を差し替えてもこのクラスは変更不要。
    """

    def __init__(self, generator: ContentGenerator):
        self.generator = generator

    async def generate_outline(self, payload: Dict[str, Any]) -> str:
        logger.debug("Outline requested", extra={"payload_keys": sorted(payload)})
        outline = await self.generator.outline(payload)
        logger.info("Outline generated")
        return outline

    async def generate_content(self, payload: Dict[str, Any]) -> str:
        logger.debug("Content requested", extra={"payload_keys": sorted(payload)})
        content = await self.generator.content(payload)
        logger.info("Content generated")
        return content

    async def generate_interview_questions(self, payload: Dict[str, Any]) -> str:
        logger.debug("Interview questions requested", extra={"payload_keys": sorted(payload)})
        questions = await self.generator.interview_questions(payload)
        logger.info("Interview questions generated")
        return questions
