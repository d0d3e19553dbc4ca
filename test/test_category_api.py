from conftest import auth_header, create_report


def test_list_and_get(client, category):
    assert [c["name"] for c in client.get("/categories").json()] == ["phishing"]
    assert client.get(f"/categories/{category['id']}").json()["description"] == "피싱 사이트"


def test_invalid_and_missing_ids(client):
    assert client.get("/categories/0").status_code == 400
    assert client.get("/categories/999").status_code == 404
    assert client.get("/categories/top/0").status_code == 400


def test_duplicate_name(client, admin, category):
    response = client.post("/categories", json={"name": " phishing "}, headers=auth_header(admin["token"]))
    assert response.status_code == 400


def test_write_requires_admin(client, user, category):
    headers = auth_header(user["token"])

    assert client.post("/categories", json={"name": "scam"}, headers=headers).status_code == 403
    assert client.put(f"/categories/{category['id']}", json={"name": "x"}, headers=headers).status_code == 403
    assert client.delete(f"/categories/{category['id']}", headers=headers).status_code == 403


def test_update_and_delete(client, admin, category):
    headers = auth_header(admin["token"])

    other = client.post("/categories", json={"name": "smishing"}, headers=headers).json()

    clash = client.put(f"/categories/{other['id']}", json={"name": "phishing"}, headers=headers)
    assert clash.status_code == 400

    renamed = client.put(f"/categories/{other['id']}", json={"name": "sms scam"}, headers=headers)
    assert renamed.json()["name"] == "sms scam"

    assert client.delete(f"/categories/{other['id']}", headers=headers).status_code == 200
    assert client.get(f"/categories/{other['id']}").status_code == 404


def test_delete_category_in_use(client, admin, user, category):
    create_report(client, user["token"], category["id"])

    response = client.delete(f"/categories/{category['id']}", headers=auth_header(admin["token"]))
    assert response.status_code == 400


def test_top_categories(client, admin, user, category):
    headers = auth_header(admin["token"])
    unused = client.post("/categories", json={"name": "unused"}, headers=headers).json()

    create_report(client, user["token"], category["id"])
    create_report(client, user["token"], category["id"])

    top = client.get("/categories/top/5").json()
    assert top[0] == {"name": "phishing", "usageCount": 2}
    assert top[1] == {"name": unused["name"], "usageCount": 0}

    assert len(client.get("/categories/top/1").json()) == 1
