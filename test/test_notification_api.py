import asyncio

import pytest

from conftest import auth_header, create_report, change_status
from src.service.notification.notification_service import NotificationService
from src.utils.exception_handler.service_error_class import BadRequestException


@pytest.fixture
def notified(client, user, admin, category):
    report = create_report(client, user["token"], category["id"])
    change_status(client, admin["token"], report["id"], 2)
    change_status(client, admin["token"], report["id"], 3)
    return report


def test_list_newest_first(client, user, notified):
    notifications = client.get(f"/notifications/user/{user['id']}", headers=auth_header(user["token"])).json()

    assert len(notifications) == 2
    assert "approved" in notifications[0]["message"]
    assert all(not n["isRead"] for n in notifications)


def test_limit_offset(client, user, notified):
    url = f"/notifications/user/{user['id']}"
    headers = auth_header(user["token"])

    assert len(client.get(url, params={"limit": 1}, headers=headers).json()) == 1
    assert len(client.get(url, params={"limit": 1, "offset": 1}, headers=headers).json()) == 1
    assert client.get(url, params={"offset": 5}, headers=headers).json() == []


def test_mark_as_read(client, user, notified):
    headers = auth_header(user["token"])
    unread = client.get(f"/notifications/user/{user['id']}/unread", headers=headers).json()
    assert len(unread) == 2

    response = client.put(f"/notifications/{unread[0]['id']}/read", headers=headers)
    assert response.status_code == 200
    assert response.json()["isRead"] is True

    assert client.get(f"/notifications/user/{user['id']}/unread-count", headers=headers).json() == {"count": 1}


def test_other_users_notifications_forbidden(client, user, other_user, admin, notified):
    other_headers = auth_header(other_user["token"])

    assert client.get(f"/notifications/user/{user['id']}", headers=other_headers).status_code == 403
    assert client.get(f"/notifications/user/{user['id']}/unread-count", headers=other_headers).status_code == 403

    notification = client.get(f"/notifications/user/{user['id']}", headers=auth_header(user["token"])).json()[0]
    assert client.get(f"/notifications/{notification['id']}", headers=other_headers).status_code == 403
    assert client.put(f"/notifications/{notification['id']}/read", headers=other_headers).status_code == 403

    #   관리자는 조회 가능
    assert client.get(f"/notifications/user/{user['id']}", headers=auth_header(admin["token"])).status_code == 200


def test_missing_notification(client, user):
    assert client.get("/notifications/999", headers=auth_header(user["token"])).status_code == 404


@pytest.mark.parametrize("user_id, title, message", [
    (0, "title", "message"),
    (1, "   ", "message"),
    (1, "title", ""),
])
def test_create_notification_validation(user_id, title, message):
    #   DB 접근 전에 검증에서 실패
    with pytest.raises(BadRequestException):
        asyncio.run(NotificationService().create_notification(user_id, title, message))
