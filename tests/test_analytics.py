from postgrest.exceptions import APIError

from app.modules.analytics.service import engagement_rate, monthly_series, category_stats, top_projects
from tests.conftest import auth


def test_engagement_rate():
    assert engagement_rate(5, 0) == 0.0
    assert engagement_rate(1, 3) == 33.3


def test_monthly_series_sorted_by_month():
    points = monthly_series([
        {"created_at": "2026-03-10T00:00:00", "views_count": 10, "likes_count": 1},
        {"created_at": "2026-01-02T00:00:00", "views_count": 5, "likes_count": 0},
        {"created_at": "2026-03-01T00:00:00", "views_count": 2, "likes_count": 2},
        {"created_at": None},
    ])
    assert [(p.month, p.views, p.likes, p.projects) for p in points] == [
        ("2026-01", 5, 0, 1),
        ("2026-03", 12, 3, 2),
    ]


def test_category_stats_uncategorized():
    stats = category_stats([
        {"categories": {"name": "Photography"}},
        {"categories": None},
        {"categories": {"name": "Photography"}},
        {},
    ])
    assert [(s.name, s.count, s.value) for s in stats] == [("Photography", 2, 50.0), ("Uncategorized", 2, 50.0)]


def test_top_projects_limit():
    rows = [{"id": str(i), "title": f"P{i}", "views_count": 100, "likes_count": i} for i in range(6)]
    top = top_projects(rows)
    assert [t.id for t in top] == ["5", "4", "3", "2"]


def test_dashboard(client):
    body = client.get("/api/v1/analytics/me", headers=auth()).json()
    assert body["total_views"] == 150
    assert body["total_likes"] == 7
    assert body["total_projects"] == 2
    assert body["followers"] == 12
    assert body["engagement_rate"] == 4.7
    assert body["monthly"] == [{"month": "2026-09", "views": 150, "likes": 7, "projects": 2}]
    assert body["categories"] == [{"name": "Graphic Design", "count": 2, "value": 100.0}]
    assert [t["id"] for t in body["top_projects"]] == ["p-logo", "p-brand"]


def test_dashboard_for_user_without_projects(client):
    body = client.get("/api/v1/analytics/me", headers=auth("token-carol")).json()
    assert body["total_projects"] == 0
    assert body["engagement_rate"] == 0.0
    assert body["categories"] == []


def test_dashboard_requires_login(client):
    assert client.get("/api/v1/analytics/me").status_code == 401


def test_dashboard_without_followers_column(client, fake_db):
    fake_db.fail("profiles", "select", APIError({
        "message": 'column profiles.followers_count does not exist', "code": "42703", "details": None, "hint": None,
    }))
    response = client.get("/api/v1/analytics/me", headers=auth())
    assert response.status_code == 200
    body = response.json()
    assert body["followers"] == 0
    assert body["total_projects"] == 2


def test_dashboard_other_profile_errors_propagate(client, fake_db):
    fake_db.fail("profiles", "select", APIError({
        "message": "permission denied for table profiles", "code": "42501", "details": None, "hint": None,
    }))
    assert client.get("/api/v1/analytics/me", headers=auth()).status_code == 403
