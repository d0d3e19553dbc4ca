from conftest import auth_header, create_report, change_status


def _comment(client, token, report_id, title="same here", content="got the same sms"):
    return client.post(
        "/comments",
        json={"reportId": report_id, "title": title, "content": content},
        headers=auth_header(token)
    )


def test_comment_rejected_unless_approved_and_nothing_written(client, user, other_user, admin, category):
    report = create_report(client, user["token"], category["id"])

    response = _comment(client, other_user["token"], report["id"])
    assert response.status_code == 400

    assert client.get(f"/comments/report/{report['id']}").json() == []
    assert client.get("/reports", params={"id": report["id"]}).json()["commentCount"] == 0

    change_status(client, admin["token"], report["id"], 4)
    assert _comment(client, other_user["token"], report["id"]).status_code == 400


def test_comment_on_missing_report(client, user):
    assert _comment(client, user["token"], 999).status_code == 404


def test_comment_on_approved_report(client, user, other_user, admin, category):
    report = create_report(client, user["token"], category["id"])
    change_status(client, admin["token"], report["id"], 3)

    response = _comment(client, other_user["token"], report["id"])
    assert response.status_code == 201
    comment = response.json()
    assert comment["userId"] == other_user["id"]
    assert comment["reportId"] == report["id"]

    assert client.get("/reports", params={"id": report["id"]}).json()["commentCount"] == 1
    assert client.get(f"/comments/{comment['id']}").json()["content"] == "got the same sms"

    #   상태 변경 알림 1 + 댓글 알림 1
    count = client.get(f"/notifications/user/{user['id']}/unread-count", headers=auth_header(user["token"]))
    assert count.json() == {"count": 2}


def test_own_comment_does_not_notify(client, user, admin, category):
    report = create_report(client, user["token"], category["id"])
    change_status(client, admin["token"], report["id"], 3)

    assert _comment(client, user["token"], report["id"]).status_code == 201

    count = client.get(f"/notifications/user/{user['id']}/unread-count", headers=auth_header(user["token"]))
    assert count.json() == {"count": 1}


def test_comments_listed_oldest_first(client, user, other_user, admin, category):
    report = create_report(client, user["token"], category["id"])
    change_status(client, admin["token"], report["id"], 3)

    _comment(client, other_user["token"], report["id"], title="first")
    _comment(client, user["token"], report["id"], title="second")

    titles = [comment["title"] for comment in client.get(f"/comments/report/{report['id']}").json()]
    assert titles == ["first", "second"]


def test_delete_comment(client, user, other_user, admin, category):
    report = create_report(client, user["token"], category["id"])
    change_status(client, admin["token"], report["id"], 3)
    comment = _comment(client, other_user["token"], report["id"]).json()

    assert client.delete(f"/comments/{comment['id']}", headers=auth_header(user["token"])).status_code == 403
    assert client.delete(f"/comments/{comment['id']}", headers=auth_header(other_user["token"])).status_code == 200

    assert client.get(f"/comments/{comment['id']}").status_code == 404
    assert client.get("/reports", params={"id": report["id"]}).json()["commentCount"] == 0


def test_blank_comment_is_400(client, user, admin, category):
    report = create_report(client, user["token"], category["id"])
    change_status(client, admin["token"], report["id"], 3)

    assert _comment(client, user["token"], report["id"], title="   ").status_code == 400
