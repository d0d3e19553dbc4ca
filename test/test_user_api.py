from conftest import auth_header, create_report, login, PASSWORD


def test_get_me(client, user):
    body = client.get("/users/me", headers=auth_header(user["token"])).json()

    assert body["email"] == "user@example.com"
    assert body["isAdmin"] is False
    assert "password_hash" not in body and "passwordHash" not in body


def test_my_stats(client, user, other_user, category):
    report = create_report(client, user["token"], category["id"])
    client.put(f"/reports/{report['id']}/vote", headers=auth_header(user["token"]))

    stats = client.get("/users/me/stats", headers=auth_header(user["token"])).json()
    assert stats["reportCount"] == 1
    assert stats["likeCount"] == 1
    assert stats["commentCount"] == 0


def test_update_me(client, user):
    response = client.put(
        "/users/me",
        json={"name": "renamed", "password": "new-password"},
        headers=auth_header(user["token"])
    )
    assert response.status_code == 200
    assert response.json()["name"] == "renamed"

    assert client.post("/auth/login", json={"email": "user@example.com", "password": PASSWORD}).status_code == 401
    login(client, "user@example.com", "new-password")


def test_update_me_email_taken(client, user, other_user):
    response = client.put("/users/me", json={"email": "other@example.com"}, headers=auth_header(user["token"]))
    assert response.status_code == 400


def test_me_requires_token(client):
    assert client.get("/users/me").status_code == 401
