"""インメモリストアの例外クラス"""


class EntityNotFoundError(KeyError):
    """キーに対応するエントリが存在しない場合の例外"""
    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Entity not found: {self.key}"
