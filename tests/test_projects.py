from tests.conftest import auth, ALICE, BUCKET_URL


def ids(response):
    return [p["id"] for p in response.json()["items"]]


def test_feed_defaults_newest_first(client):
    response = client.get("/api/v1/projects")
    assert response.status_code == 200
    body = response.json()
    assert ids(response) == ["p-reel", "p-brand", "p-logo", "p-street"]
    assert body["total"] == 4
    assert body["query_params"] == {}
    assert body["items"][0]["profiles"]["username"] == "bob"
    assert body["items"][0]["categories"]["name"] == "Edited Video"


def test_feed_search_reranks_by_relevance(client):
    response = client.get("/api/v1/projects", params={"search": "logo"})
    assert ids(response) == ["p-logo", "p-brand", "p-street"]
    assert response.json()["query_params"] == {"search": "logo"}


def test_feed_search_with_explicit_sort_keeps_query_order(client):
    response = client.get("/api/v1/projects", params={"search": "logo", "sort": "most_liked"})
    assert ids(response) == ["p-street", "p-logo", "p-brand"]
    assert response.json()["active_filter_count"] == 1


def test_feed_category_and_media_filters(client):
    assert ids(client.get("/api/v1/projects", params={"category": "cat-design"})) == ["p-brand", "p-logo"]
    assert ids(client.get("/api/v1/projects", params={"media": "videos"})) == ["p-reel"]
    assert len(ids(client.get("/api/v1/projects", params={"media": "images"}))) == 3


def test_feed_best_of(client):
    response = client.get("/api/v1/projects", params={"best_of": "true"})
    items = response.json()["items"]
    assert [p["id"] for p in items] == ["p-street", "p-reel", "p-logo", "p-brand"]
    assert [p["rank"] for p in items] == [1, 2, 3, 4]


def test_feed_pagination(client):
    response = client.get("/api/v1/projects", params={"limit": 2, "offset": 1})
    assert ids(response) == ["p-brand", "p-logo"]
    assert response.json()["total"] == 4


def test_feed_rejects_unknown_sort(client):
    assert client.get("/api/v1/projects", params={"sort": "random"}).status_code == 422


def test_feed_viewer_flags(client):
    items = {p["id"]: p for p in client.get("/api/v1/projects", headers=auth()).json()["items"]}
    assert items["p-street"]["is_liked"] is True
    assert items["p-reel"]["is_saved"] is True
    assert items["p-logo"]["is_liked"] is False


def test_feed_anonymous_flags_false(client):
    items = client.get("/api/v1/projects").json()["items"]
    assert not any(p["is_liked"] or p["is_saved"] for p in items)


def test_get_project_and_missing(client):
    assert client.get("/api/v1/projects/p-logo").json()["title"] == "Logo"
    assert client.get("/api/v1/projects/nope").status_code == 404


def test_create_project(client, fake_db):
    response = client.post("/api/v1/projects", headers=auth(), json={
        "title": "  Poster  ", "category_id": "cat-design", "media_url": f"{BUCKET_URL}/alice/poster.png",
    })
    assert response.status_code == 201
    assert response.json()["title"] == "Poster"
    assert response.json()["user_id"] == ALICE


def test_create_project_requires_login(client):
    response = client.post("/api/v1/projects", json={"title": "x", "media_url": "a.png"})
    assert response.status_code == 401


def test_create_project_blank_title(client):
    response = client.post("/api/v1/projects", headers=auth(), json={"title": "  ", "media_url": "a.png"})
    assert response.status_code == 422


def test_video_only_in_video_categories(client):
    bad = client.post("/api/v1/projects", headers=auth(), json={
        "title": "Clip", "category_id": "cat-design", "media_url": f"{BUCKET_URL}/alice/clip.mp4",
    })
    assert bad.status_code == 400
    good = client.post("/api/v1/projects", headers=auth(), json={
        "title": "Clip", "category_id": "cat-motion", "media_url": f"{BUCKET_URL}/alice/clip.mp4",
    })
    assert good.status_code == 201


def test_update_project_owner_only(client):
    assert client.patch("/api/v1/projects/p-street", headers=auth(), json={"title": "Mine"}).status_code == 403
    response = client.patch("/api/v1/projects/p-logo", headers=auth(), json={"title": "New logo"})
    assert response.status_code == 200
    assert response.json()["title"] == "New logo"


def test_replace_image_must_be_image(client):
    bad = client.put("/api/v1/projects/p-logo/image", headers=auth(), json={"media_url": f"{BUCKET_URL}/a.mp4"})
    assert bad.status_code == 400
    good = client.put("/api/v1/projects/p-logo/image", headers=auth(), json={"media_url": f"{BUCKET_URL}/a.jpg"})
    assert good.json()["image_url"].endswith("/a.jpg")


def test_delete_image_removes_object_and_sets_placeholder(client, fake_db):
    response = client.delete("/api/v1/projects/p-logo/image", headers=auth())
    assert response.status_code == 200
    assert response.json()["image_url"] == "/placeholder.svg"
    assert ("projects", "alice/logo.png") in fake_db.storage.removed


def test_delete_project(client, fake_db):
    assert client.delete("/api/v1/projects/p-street", headers=auth()).status_code == 403
    assert client.delete("/api/v1/projects/p-logo", headers=auth()).status_code == 204
    assert all(p["id"] != "p-logo" for p in fake_db.rows("projects"))


def test_list_user_projects(client):
    response = client.get(f"/api/v1/projects/user/{ALICE}")
    assert [p["id"] for p in response.json()] == ["p-brand", "p-logo"]


def test_create_project_size_limits(client):
    mb = 1024 * 1024
    image = {"title": "Big", "category_id": "cat-design", "media_url": f"{BUCKET_URL}/alice/big.png"}
    video = {"title": "Cut", "category_id": "cat-video", "media_url": f"{BUCKET_URL}/alice/cut.mp4"}
    too_big = client.post("/api/v1/projects", headers=auth(), json={**image, "file_size": 11 * mb})
    assert too_big.status_code == 400
    assert too_big.json()["detail"].startswith("File too large")
    assert client.post("/api/v1/projects", headers=auth(), json={**video, "file_size": 150 * mb}).status_code == 201
    assert client.post("/api/v1/projects", headers=auth(), json={**video, "file_size": 201 * mb}).status_code == 400


def test_replace_image_size_limit(client):
    response = client.put("/api/v1/projects/p-logo/image", headers=auth(),
                          json={"media_url": f"{BUCKET_URL}/alice/new.png", "file_size": 20 * 1024 * 1024})
    assert response.status_code == 400


def test_feed_search_with_punctuation_still_reranks(client):
    response = client.get("/api/v1/projects", params={"search": "Logo,"})
    assert ids(response) == ["p-logo", "p-brand", "p-street"]
