from app.modules.categories.service import is_video_category, category_kind


def test_is_video_category():
    assert is_video_category("Edited Video")
    assert is_video_category(" motion ")
    assert not is_video_category("Video Games")
    assert not is_video_category(None)


def test_category_kind():
    assert category_kind("Graphic Design") == "design"
    assert category_kind("Photography") == "photo"
    assert category_kind("Short Film") == "video"
    assert category_kind("Sound & Audio") == "music"
    assert category_kind("Web Development") == "code"
    assert category_kind("Illustration") == "other"
    assert category_kind(None) == "other"


def test_list_categories(client):
    by_date = [c["name"] for c in client.get("/api/v1/categories").json()]
    assert by_date == ["Graphic Design", "Photography", "Edited Video", "Motion"]
    by_name = [c["name"] for c in client.get("/api/v1/categories", params={"order_by": "name"}).json()]
    assert by_name == ["Edited Video", "Graphic Design", "Motion", "Photography"]


def test_list_categories_bad_order(client):
    assert client.get("/api/v1/categories", params={"order_by": "id"}).status_code == 422


def test_get_category(client):
    assert client.get("/api/v1/categories/cat-photo").json()["name"] == "Photography"
    assert client.get("/api/v1/categories/nope").status_code == 404
