import os
import tempfile

#   src import 전에 환경 변수 고정 (path_dic / 로거가 import 시점에 경로를 잡음)
_TMP_ROOT = tempfile.mkdtemp(prefix="fraud-report-test-")
os.environ["LOG_DIR"] = os.path.join(_TMP_ROOT, "logs")
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_ROOT, "uploads")
os.environ["JWT_ACCESS_SECRET"] = "test-access-secret-0123456789-abcdefghij"
os.environ["JWT_REFRESH_SECRET"] = "test-refresh-secret-0123456789-abcdefghij"
os.environ["JWT_ACCESS_TTL"] = "10m"
os.environ["JWT_REFRESH_TTL"] = "1d"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient

from src.utils.env_config import get_config

PASSWORD = "password1234"


@pytest.fixture
def client(tmp_path, monkeypatch):
    """
        테스트마다 새 SQLite 파일 + 스키마
    """
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    get_config.cache_clear()

    from src.main import app

    with TestClient(app) as test_client:
        yield test_client

    get_config.cache_clear()


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(client, email: str, name: str = "tester", password: str = PASSWORD) -> dict:
    response = client.post("/users", json={"email": email, "name": name, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


def login(client, email: str, password: str = PASSWORD) -> dict:
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def user(client):
    created = register(client, "user@example.com", "user")
    tokens = login(client, "user@example.com")
    return {**created, "token": tokens["accessToken"], "refresh": tokens["refreshToken"]}


@pytest.fixture
def other_user(client):
    created = register(client, "other@example.com", "other")
    tokens = login(client, "other@example.com")
    return {**created, "token": tokens["accessToken"]}


@pytest.fixture
def admin(client):
    response = client.post(
        "/admin/init-super",
        json={"email": "admin@example.com", "name": "admin", "password": PASSWORD}
    )
    assert response.status_code == 201, response.text
    tokens = login(client, "admin@example.com")
    return {**response.json(), "token": tokens["accessToken"]}


@pytest.fixture
def category(client, admin):
    response = client.post(
        "/categories",
        json={"name": "phishing", "description": "피싱 사이트"},
        headers=auth_header(admin["token"])
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_report(client, token: str, category_id: int, title: str = "fake bank", url: str = "https://fake.example.com",
                  tag_names=None) -> dict:
    body = {
        "categoryId": category_id,
        "title": title,
        "description": "login page clone",
        "url": url,
    }
    if tag_names is not None:
        body["tagNames"] = tag_names

    response = client.post("/reports", json=body, headers=auth_header(token))
    assert response.status_code == 201, response.text
    return response.json()


def change_status(client, admin_token: str, report_id: int, status_id: int, note: str = None):
    body = {"statusId": status_id}
    if note is not None:
        body["moderationNote"] = note
    return client.put(f"/reports/{report_id}/status", json=body, headers=auth_header(admin_token))
