from conftest import auth_header, create_report, change_status


def test_create_report_starts_pending_with_normalized_tags(client, user, category):
    report = create_report(client, user["token"], category["id"], tag_names=[" Bank ", "bank", "", "SMS"])

    assert report["statusId"] == 1
    assert report["userId"] == user["id"]
    assert report["voteCount"] == 0

    tags = client.get(f"/reports/{report['id']}/tags").json()
    assert [tag["name"] for tag in tags] == ["bank", "sms"]


def test_create_report_unknown_category(client, user):
    response = client.post(
        "/reports",
        json={"categoryId": 999, "title": "t", "description": "d", "url": "https://x.example.com"},
        headers=auth_header(user["token"])
    )
    assert response.status_code == 404


def test_create_report_requires_token(client, category):
    response = client.post(
        "/reports",
        json={"categoryId": category["id"], "title": "t", "description": "d", "url": "https://x.example.com"}
    )
    assert response.status_code == 401


def test_get_single_report(client, user, category):
    report = create_report(client, user["token"], category["id"])

    response = client.get("/reports", params={"id": report["id"]})
    assert response.status_code == 200
    assert response.json()["title"] == "fake bank"

    assert client.get("/reports", params={"id": 12345}).status_code == 404


def test_search_without_tags_include_omits_tags(client, user, category):
    create_report(client, user["token"], category["id"])

    body = client.get("/reports").json()
    assert len(body) == 1
    assert "tags" not in body[0]
    assert "statusName" not in body[0]


def test_search_with_tags_include_returns_empty_list(client, user, category):
    create_report(client, user["token"], category["id"])
    create_report(client, user["token"], category["id"], title="tagged", tag_names=["bank"])

    body = client.get("/reports", params={"include": "tags,status,category,user"}).json()

    by_title = {report["title"]: report for report in body}
    assert by_title["fake bank"]["tags"] == []
    assert [tag["name"] for tag in by_title["tagged"]["tags"]] == ["bank"]
    assert by_title["tagged"]["statusName"] == "pending"
    assert by_title["tagged"]["categoryName"] == "phishing"
    assert by_title["tagged"]["userName"] == "user"


def test_search_repeated_include_params(client, user, category):
    create_report(client, user["token"], category["id"], tag_names=["sms"])

    body = client.get("/reports?include=tags&include=status").json()
    assert body[0]["tags"][0]["name"] == "sms"
    assert body[0]["statusName"] == "pending"


def test_search_status_filter(client, user, admin, category):
    pending = create_report(client, user["token"], category["id"], title="pending one")
    approved = create_report(client, user["token"], category["id"], title="approved one")
    assert change_status(client, admin["token"], approved["id"], 3).status_code == 200

    def titles(status):
        return {report["title"] for report in client.get("/reports", params={"status": status}).json()}

    assert titles("active") == {"pending one"}
    assert titles("completed") == {"approved one"}
    assert titles("3") == {"approved one"}
    assert titles("approved") == {"approved one"}
    assert titles("nonsense") == {"pending one", "approved one"}
    assert pending["id"] != approved["id"]


def test_search_filters_and_pagination(client, user, other_user, category):
    for i in range(3):
        create_report(client, user["token"], category["id"], title=f"mine {i}")
    create_report(client, other_user["token"], category["id"], title="theirs", url="https://other.example.com")

    mine = client.get("/reports", params={"userId": user["id"]}).json()
    assert len(mine) == 3

    by_url = client.get("/reports", params={"url": "https://other.example.com"}).json()
    assert [report["title"] for report in by_url] == ["theirs"]

    first_page = client.get("/reports", params={"limit": 2, "page": 1}).json()
    second_page = client.get("/reports", params={"limit": 2, "page": 2}).json()
    assert len(first_page) == 2
    assert len(second_page) == 2
    assert {r["id"] for r in first_page}.isdisjoint({r["id"] for r in second_page})

    #   page <= 0 -> 1 페이지
    assert client.get("/reports", params={"limit": 2, "page": 0}).json() == first_page


def test_search_recent_then_popular(client, user, other_user, category):
    older = create_report(client, user["token"], category["id"], title="older")
    newer = create_report(client, user["token"], category["id"], title="newer")

    assert [r["id"] for r in client.get("/reports").json()] == [newer["id"], older["id"]]

    client.put(f"/reports/{older['id']}/vote", headers=auth_header(other_user["token"]))

    popular = client.get("/reports", params={"sort": "popular"}).json()
    assert [r["id"] for r in popular] == [older["id"], newer["id"]]


def test_vote_toggle_twice_returns_to_zero(client, user, other_user, category):
    report = create_report(client, user["token"], category["id"])
    url = f"/reports/{report['id']}/vote"

    first = client.put(url, headers=auth_header(other_user["token"])).json()
    assert first == {"voteCount": 1, "hasVoted": True}

    second = client.put(url, headers=auth_header(other_user["token"])).json()
    assert second == {"voteCount": 0, "hasVoted": False}

    assert client.get("/reports", params={"id": report["id"]}).json()["voteCount"] == 0


def test_vote_counts_distinct_users(client, user, other_user, category):
    report = create_report(client, user["token"], category["id"])
    url = f"/reports/{report['id']}/vote"

    client.put(url, headers=auth_header(user["token"]))
    body = client.put(url, headers=auth_header(other_user["token"])).json()

    assert body == {"voteCount": 2, "hasVoted": True}


def test_vote_unknown_report(client, user):
    assert client.put("/reports/999/vote", headers=auth_header(user["token"])).status_code == 404


def test_report_category(client, user, category):
    report = create_report(client, user["token"], category["id"])

    assert client.get(f"/reports/{report['id']}/category").json() == {"categoryName": "phishing"}
    assert client.get("/reports/999/category").status_code == 404


def test_statuses(client):
    statuses = client.get("/reports/statuses").json()
    assert [status["name"] for status in statuses] == ["pending", "in_review", "approved", "rejected"]


def test_update_report_by_owner_replaces_tags(client, user, category):
    report = create_report(client, user["token"], category["id"], tag_names=["old"])

    response = client.put(
        f"/reports/{report['id']}",
        json={"title": "renamed", "tagNames": ["New", "other"]},
        headers=auth_header(user["token"])
    )
    assert response.status_code == 200
    assert response.json()["title"] == "renamed"

    tags = client.get(f"/reports/{report['id']}/tags").json()
    assert sorted(tag["name"] for tag in tags) == ["new", "other"]


def test_update_report_by_stranger_forbidden(client, user, other_user, category):
    report = create_report(client, user["token"], category["id"])

    response = client.put(
        f"/reports/{report['id']}",
        json={"title": "hijack"},
        headers=auth_header(other_user["token"])
    )
    assert response.status_code == 403


def test_add_tags_from_text(client, user, category):
    report = create_report(client, user["token"], category["id"], tag_names=["bank"])

    response = client.put(
        f"/reports/{report['id']}/tags/from-text",
        json={"tagNames": ["BANK", "crypto"]},
        headers=auth_header(user["token"])
    )
    assert response.status_code == 200
    assert sorted(tag["name"] for tag in response.json()) == ["bank", "crypto"]


def test_delete_report(client, user, other_user, admin, category):
    report = create_report(client, user["token"], category["id"])
    url = f"/reports/{report['id']}"

    assert client.delete(url, headers=auth_header(other_user["token"])).status_code == 403
    assert client.delete(url, headers=auth_header(user["token"])).status_code == 200
    assert client.get("/reports", params={"id": report["id"]}).status_code == 404

    second = create_report(client, user["token"], category["id"])
    assert client.delete(f"/reports/{second['id']}", headers=auth_header(admin["token"])).status_code == 200


def test_search_huge_page_is_empty_not_error(client, user, category):
    create_report(client, user["token"], category["id"])

    response = client.get("/reports", params={"page": 10 ** 19, "limit": 5})
    assert response.status_code == 200
    assert response.json() == []
