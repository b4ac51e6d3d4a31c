from tests.conftest import auth, ALICE, BOB


def test_like_is_idempotent(client, fake_db):
    first = client.post("/api/v1/projects/p-logo/like", headers=auth("token-bob"))
    second = client.post("/api/v1/projects/p-logo/like", headers=auth("token-bob"))
    assert first.json() == {"project_id": "p-logo", "liked": True, "likes_count": 1}
    assert second.json()["likes_count"] == 1
    assert len([l for l in fake_db.rows("likes") if l["project_id"] == "p-logo"]) == 1


def test_unlike_is_idempotent(client):
    client.delete("/api/v1/projects/p-street/like", headers=auth())
    response = client.delete("/api/v1/projects/p-street/like", headers=auth())
    assert response.json() == {"project_id": "p-street", "liked": False, "likes_count": 0}


def test_like_requires_login(client):
    response = client.post("/api/v1/projects/p-logo/like")
    assert response.status_code == 401
    assert response.json()["detail"] == "Please log in to like projects"


def test_like_invalid_token(client):
    response = client.post("/api/v1/projects/p-logo/like", headers=auth("garbage"))
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"


def test_like_missing_project(client):
    assert client.post("/api/v1/projects/nope/like", headers=auth()).status_code == 404


def test_save_and_list_saved(client):
    response = client.post("/api/v1/projects/p-street/save", headers=auth())
    assert response.json() == {"project_id": "p-street", "saved": True, "saves_count": 1}
    saved = client.get("/api/v1/users/me/saved", headers=auth()).json()
    # seeded save on p-reel is older than the one just made
    assert [p["id"] for p in saved] == ["p-street", "p-reel"]
    assert all(p["is_saved"] for p in saved)
    assert saved[0]["is_liked"] is True


def test_comments_flow(client, fake_db):
    created = client.post("/api/v1/projects/p-logo/comments", headers=auth("token-bob"), json={"content": " Nice! "})
    assert created.status_code == 201
    assert created.json()["content"] == "Nice!"

    listed = client.get("/api/v1/projects/p-logo/comments").json()
    assert [c["content"] for c in listed] == ["Nice!"]
    assert listed[0]["profiles"]["username"] == "bob"

    comment_id = created.json()["id"]
    # carol is neither the author nor the project owner
    assert client.delete(f"/api/v1/projects/p-logo/comments/{comment_id}", headers=auth("token-carol")).status_code == 403
    # alice owns the project
    assert client.delete(f"/api/v1/projects/p-logo/comments/{comment_id}", headers=auth()).status_code == 204
    assert fake_db.rows("comments") == []


def test_comment_validation(client):
    assert client.post("/api/v1/projects/p-logo/comments", headers=auth(), json={"content": "   "}).status_code == 422
    too_long = "x" * 2001
    assert client.post("/api/v1/projects/p-logo/comments", headers=auth(), json={"content": too_long}).status_code == 422
    assert client.post("/api/v1/projects/p-logo/comments", headers=auth(), json={"content": "x" * 2000}).status_code == 201


def test_comment_requires_login(client):
    assert client.post("/api/v1/projects/p-logo/comments", json={"content": "hi"}).status_code == 401
