from typing import Any, Dict

# QWen API連携までの固定レスポンス
CANNED_OUTLINE = """{
    "title": "传记大纲",
    "chapters": [
        {"chapter_number": 1, "title": "早年生活", "summary": "描述主人公的出生背景和童年经历"},
        {"chapter_number": 2, "title": "求学之路", "summary": "讲述教育经历和成长过程"},
        {"chapter_number": 3, "title": "职业生涯", "summary": "记录工作经历和职业发展"},
        {"chapter_number": 4, "title": "重要事件", "summary": "回顾人生中的重大转折点"},
        {"chapter_number": 5, "title": "成就与影响", "summary": "总结取得的成就和社会影响"},
        {"chapter_number": 6, "title": "晚年生活", "summary": "描述晚年时光和人生感悟"}
    ]
}"""

CANNED_CONTENT = "这是由AI生成的传记内容示例。在实际实现中，这里会调用QWen API来生成高质量的传记内容。"

CANNED_INTERVIEW_QUESTIONS = """[
    "您能介绍一下自己的童年和家庭背景吗？",
    "在您的成长过程中，哪些人对您产生了深远的影响？",
    "您人生中最重要的转折点是什么时候？",
    "面对困难时，您是如何坚持下来的？",
    "您认为自己最大的成就是什么？",
    "对于年轻一代，您有什么建议或寄语？"
]"""


class StubContentGenerator:
    """入力を無視して固定テキストを返すContentGenerator実装"""

    async def outline(self, payload: Dict[str, Any]) -> str:
        return CANNED_OUTLINE

    async def content(self, payload: Dict[str, Any]) -> str:
        return CANNED_CONTENT

    async def interview_questions(self, payload: Dict[str, Any]) -> str:
        return CANNED_INTERVIEW_QUESTIONS
