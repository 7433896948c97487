from typing import Any, Dict, Protocol


class ContentGenerator(Protocol):
    """伝記執筆支援のテキスト生成を抽象化するインターフェース"""

    async def outline(self, payload: Dict[str, Any]) -> str:
        """
        伝記の章立て（大纲）を生成する

        Args:
            payload: クライアントから渡された任意のパラメータ

        Returns:
            JSON文字列形式の大纲
        """

    async def content(self, payload: Dict[str, Any]) -> str:
        """
        伝記本文を生成する

        Args:
            payload: クライアントから渡された任意のパラメータ

        Returns:
            生成された本文
        """

    async def interview_questions(self, payload: Dict[str, Any]) -> str:
        """
        インタビュー質問リストを生成する

        Args:
            payload: クライアントから渡された任意のパラメータ

        Returns:
            JSON配列文字列形式の質問リスト
        """
