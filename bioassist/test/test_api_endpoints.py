"""
API Endpoints Tests

FastAPI TestClientを使用したエンドポイント動作検証
"""

import pytest
import sys
import os
import re
import uuid
from datetime import datetime
from concurrent.futures import ThreadPoolExecutor
from fastapi.testclient import TestClient

# Add path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from bioassist.infra.config import Settings
from bioassist.infra.di import AppContainer
from bioassist.infra.rest_api.main import create_app, ROOT_BANNER


def parse_ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def assert_utc_iso8601(value: str) -> None:
    """タイムゾーン付きISO-8601（Zまたはオフセット）であること"""
    assert re.search(r"(Z|[+-]\d{2}:\d{2})$", value), value
    parsed = parse_ts(value)
    assert parsed.tzinfo is not None
    assert parsed.utcoffset().total_seconds() == 0


@pytest.fixture
def container():
    return AppContainer(Settings(rate_limit_enabled=False, store_shards=4))


@pytest.fixture
def client(container):
    """アプリごとに新しいストアを持つTestClient"""
    return TestClient(create_app(container=container))


@pytest.fixture
def user(client):
    response = client.post("/api/users", json={"openid": "wx-openid", "nickname": "Alice"})
    assert response.status_code == 200
    return response.json()["data"]


class TestEnvelope:
    """レスポンスエンベロープ形式のテスト"""

    def test_success_envelope_shape(self, client):
        response = client.post("/api/users", json={"openid": "o", "nickname": "n"})
        body = response.json()

        assert set(body) == {"success", "data", "message", "timestamp"}
        assert body["success"] is True
        assert body["message"] == "用户创建成功"
        assert_utc_iso8601(body["timestamp"])

    def test_error_envelope_shape(self, client):
        response = client.get(f"/api/users/{uuid.uuid4()}")
        body = response.json()

        assert response.status_code == 404
        assert body["success"] is False
        assert body["data"] is None
        assert body["message"]
        assert_utc_iso8601(body["timestamp"])

    def test_repeated_get_is_identical_except_timestamp(self, client, user):
        first = client.get(f"/api/users/{user['id']}").json()
        second = client.get(f"/api/users/{user['id']}").json()
        first.pop("timestamp")
        second.pop("timestamp")
        assert first == second


class TestUserEndpoints:
    """ユーザーAPIのテスト"""

    def test_create_user(self, client):
        response = client.post(
            "/api/users",
            json={"openid": "wx-1", "nickname": "Alice", "avatar": "https://example.com/a.png"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["openid"] == "wx-1"
        assert data["nickname"] == "Alice"
        assert data["avatar"] == "https://example.com/a.png"
        assert data["created_at"] == data["updated_at"]

    def test_create_user_ids_are_unique(self, client):
        ids = {
            client.post("/api/users", json={"openid": "same", "nickname": "n"}).json()["data"]["id"]
            for _ in range(10)
        }
        assert len(ids) == 10

    def test_client_supplied_id_is_ignored(self, client):
        response = client.post("/api/users", json={"id": "mine", "openid": "o", "nickname": "n"})
        assert response.status_code == 200
        assert response.json()["data"]["id"] != "mine"

    def test_get_user_returns_created_user(self, client, user):
        response = client.get(f"/api/users/{user['id']}")
        assert response.status_code == 200
        assert response.json()["data"] == user
        assert response.json()["message"] == "获取用户信息成功"

    def test_create_user_missing_nickname_is_bad_request(self, client):
        response = client.post("/api/users", json={"openid": "o"})
        assert response.status_code == 400
        assert response.json()["success"] is False


class TestBiographyEndpoints:
    """伝記APIのテスト"""

    def test_create_biography_defaults(self, client, user):
        response = client.post("/api/biographies", json={"user_id": user["id"], "title": "Life"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "Draft"
        assert data["content"] == ""
        assert data["description"] is None
        assert data["user_id"] == user["id"]

    def test_create_biography_unknown_user(self, client, container):
        response = client.post("/api/biographies", json={"user_id": "ghost", "title": "Life"})
        assert response.status_code == 400
        assert response.json()["success"] is False
        assert container.store.stats()["biographies"] == 0

    def test_create_biography_missing_title(self, client, user):
        response = client.post("/api/biographies", json={"user_id": user["id"]})
        assert response.status_code == 400

    def test_list_requires_user_id(self, client):
        response = client.get("/api/biographies")
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_list_for_user_without_biographies(self, client, user):
        response = client.get("/api/biographies", params={"user_id": user["id"]})
        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_list_for_unknown_user_is_empty_not_error(self, client):
        response = client.get("/api/biographies", params={"user_id": "nobody"})
        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_list_only_returns_own_biographies(self, client, user):
        other = client.post("/api/users", json={"openid": "o2", "nickname": "Bob"}).json()["data"]
        mine = client.post("/api/biographies", json={"user_id": user["id"], "title": "Mine"}).json()["data"]
        client.post("/api/biographies", json={"user_id": other["id"], "title": "Theirs"})

        data = client.get("/api/biographies", params={"user_id": user["id"]}).json()["data"]
        assert [b["id"] for b in data] == [mine["id"]]

    def test_get_unknown_biography_is_not_found(self, client):
        response = client.get(f"/api/biographies/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_update_unknown_biography_is_not_found(self, client):
        response = client.post(f"/api/biographies/{uuid.uuid4()}", json={"title": "x"})
        assert response.status_code == 404

    def test_update_only_title(self, client, user):
        created = client.post(
            "/api/biographies",
            json={"user_id": user["id"], "title": "Life", "description": "desc"}
        ).json()["data"]

        response = client.post(f"/api/biographies/{created['id']}", json={"title": "New Life"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "New Life"
        assert data["description"] == "desc"
        assert data["content"] == ""
        assert parse_ts(data["updated_at"]) >= parse_ts(created["updated_at"])
        assert data["created_at"] == created["created_at"]

    def test_update_with_empty_string_clears_content(self, client, user):
        created = client.post("/api/biographies", json={"user_id": user["id"], "title": "Life"}).json()["data"]
        client.post(f"/api/biographies/{created['id']}", json={"content": "text"})

        data = client.post(f"/api/biographies/{created['id']}", json={"content": ""}).json()["data"]
        assert data["content"] == ""
        assert data["title"] == "Life"

    def test_update_null_title_leaves_title_and_applies_content(self, client, user):
        """nullは未指定と同じ扱いで、他のフィールドの更新は反映されるべき"""
        created = client.post("/api/biographies", json={"user_id": user["id"], "title": "Life"}).json()["data"]
        response = client.post(
            f"/api/biographies/{created['id']}", json={"title": None, "content": "chapter one"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "Life"
        assert data["content"] == "chapter one"

    def test_update_null_description_leaves_it_unchanged(self, client, user):
        created = client.post(
            "/api/biographies",
            json={"user_id": user["id"], "title": "Life", "description": "desc"}
        ).json()["data"]
        response = client.post(f"/api/biographies/{created['id']}", json={"description": None})
        assert response.status_code == 200
        assert response.json()["data"]["description"] == "desc"
        assert client.get(f"/api/biographies/{created['id']}").json()["data"]["description"] == "desc"

    def test_concurrent_updates_through_api_keep_one_complete_write(self, client, user):
        """同時更新の最終状態はいずれかのリクエスト内容と完全に一致するべき"""
        created = client.post("/api/biographies", json={"user_id": user["id"], "title": "Life"}).json()["data"]
        writes = [{"title": f"title-{i}", "content": f"content-{i}"} for i in range(24)]

        def write(body):
            return client.post(f"/api/biographies/{created['id']}", json=body).status_code

        with ThreadPoolExecutor(max_workers=6) as pool:
            statuses = list(pool.map(write, writes))

        assert statuses == [200] * len(writes)
        final = client.get(f"/api/biographies/{created['id']}").json()["data"]
        assert {"title": final["title"], "content": final["content"]} in writes


class TestBiographyScenario:
    """ユーザー作成から更新・一覧までの一連の流れ"""

    def test_full_flow(self, client):
        u1 = client.post("/api/users", json={"openid": "wx-u1", "nickname": "U1"}).json()["data"]

        created = client.post("/api/biographies", json={"user_id": u1["id"], "title": "Life"})
        assert created.status_code == 200
        biography = created.json()["data"]
        assert biography["status"] == "Draft"
        assert biography["content"] == ""

        updated = client.post(f"/api/biographies/{biography['id']}", json={"content": "chapter one"})
        assert updated.status_code == 200
        assert updated.json()["message"] == "传记项目更新成功"

        fetched = client.get(f"/api/biographies/{biography['id']}").json()["data"]
        assert fetched["content"] == "chapter one"
        assert fetched["title"] == "Life"

        listed = client.get("/api/biographies", params={"user_id": u1["id"]}).json()["data"]
        assert len(listed) == 1
        assert listed[0] == fetched

        assert client.get(f"/api/biographies/{uuid.uuid4()}").status_code == 404


class TestAIEndpoints:
    """AI（スタブ）APIのテスト"""

    @pytest.mark.parametrize("path,message", [
        ("/api/ai/generate-outline", "大纲生成成功"),
        ("/api/ai/generate-content", "内容生成成功"),
        ("/api/ai/interview-questions", "采访问题生成成功"),
    ])
    def test_ai_endpoint_returns_canned_text(self, client, path, message):
        response = client.post(path, json={"name": "张三"})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == message
        assert isinstance(body["data"], str) and body["data"]

    def test_ai_endpoint_ignores_payload(self, client):
        a = client.post("/api/ai/generate-content", json={}).json()["data"]
        b = client.post("/api/ai/generate-content", json={"topic": "war years"}).json()["data"]
        assert a == b

    def test_custom_generator_is_used(self):
        class EchoGenerator:
            async def outline(self, payload):
                return "outline:" + payload.get("name", "")

            async def content(self, payload):
                return "content"

            async def interview_questions(self, payload):
                return "[]"

        container = AppContainer(Settings(rate_limit_enabled=False), content_generator=EchoGenerator())
        client = TestClient(create_app(container=container))

        response = client.post("/api/ai/generate-outline", json={"name": "Li"})
        assert response.json()["data"] == "outline:Li"


class TestMiscEndpoints:
    def test_root_returns_plain_text(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == ROOT_BANNER

    def test_health_reports_entity_counts(self, client, user):
        response = client.get("/api/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["entities"] == {"users": 1, "biographies": 0, "sessions": 0}

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_separate_apps_do_not_share_state(self, user):
        other = TestClient(create_app(Settings(rate_limit_enabled=False)))
        assert other.get(f"/api/users/{user['id']}").status_code == 404
