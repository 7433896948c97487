from typing import Optional

from .config import Settings
from .memory_store.entity_store import EntityStore
from .memory_store.user_repository import InMemoryUserRepository
from .memory_store.biography_repository import InMemoryBiographyRepository
from .memory_store.session_repository import InMemorySessionRepository
from .stub_content_generator import StubContentGenerator
from ..port.content_generator import ContentGenerator
from ..port.user_repository import UserRepository
from ..port.biography_repository import BiographyRepository
from ..port.session_repository import SessionRepository
from ..usecase.user_management.register_user import RegisterUserUseCase
from ..usecase.user_management.get_user import GetUserUseCase
from ..usecase.biography_management.biography_service import BiographyService
from ..usecase.ai_assistant.ai_assistant_service import AIAssistantService


class AppContainer:
    """
    依存性注入コンテナ

    アプリケーションごとに1つ生成され、app.state.container に保持される。
    EntityStoreはこのコンテナが所有し、モジュールグローバルには置かない。
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[EntityStore] = None,
        content_generator: Optional[ContentGenerator] = None,
    ):
        self.settings = settings or Settings()
        self.store = store or EntityStore(shard_count=self.settings.store_shards)
        self._content_generator = content_generator
        self._user_repository: Optional[UserRepository] = None
        self._biography_repository: Optional[BiographyRepository] = None
        self._session_repository: Optional[SessionRepository] = None

    @property
    def user_repository(self) -> UserRepository:
        """ユーザーリポジトリのシングルトンインスタンスを取得"""
        if self._user_repository is None:
            self._user_repository = InMemoryUserRepository(self.store)
        return self._user_repository

    @property
    def biography_repository(self) -> BiographyRepository:
        """伝記リポジトリのシングルトンインスタンスを取得"""
        if self._biography_repository is None:
            self._biography_repository = InMemoryBiographyRepository(self.store)
        return self._biography_repository

    @property
    def session_repository(self) -> SessionRepository:
        """セッションリポジトリのシングルトンインスタンスを取得"""
        if self._session_repository is None:
            self._session_repository = InMemorySessionRepository(self.store)
        return self._session_repository

    @property
    def content_generator(self) -> ContentGenerator:
        """テキスト生成器を取得（未指定ならスタブ）"""
        if self._content_generator is None:
            self._content_generator = StubContentGenerator()
        return self._content_generator

    def register_user_usecase(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(self.user_repository)

    def get_user_usecase(self) -> GetUserUseCase:
        return GetUserUseCase(self.user_repository)

    def biography_service(self) -> BiographyService:
        return BiographyService(self.biography_repository, self.user_repository)

    def ai_assistant_service(self) -> AIAssistantService:
        return AIAssistantService(self.content_generator)
