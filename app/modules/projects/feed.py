"""
Feed pipeline: query-builder steps applied to the projects select, followed by the
in-memory steps (media filter, relevance re-rank, best-of ranking, pagination).
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from app.modules.projects.media import media_type_of
from app.modules.projects.schemas import FeedFilters

FEED_SELECT = "*, profiles(*), categories(*)"

DEFAULT_SORT = "relevance"
DEFAULT_DATE_RANGE = "all"
DEFAULT_MEDIA_TYPE = "all"

_SORT_COLUMNS = {
    "oldest": ("created_at", False),
    "most_liked": ("likes_count", True),
    "most_saved": ("saves_count", True),
    "most_commented": ("comments_count", True),
    "newest": ("created_at", True),
    "relevance": ("created_at", True),
}

_RANGE_DAYS = {"week": 7, "month": 30, "year": 365}


def date_cutoff(date_range: str, now: Optional[datetime] = None) -> Optional[datetime]:
    """Lower bound on created_at for a date range, or None for 'all'."""
    now = now or datetime.now(timezone.utc)
    if date_range == "today":
        return now.astimezone(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
    days = _RANGE_DAYS.get(date_range)
    if days is None:
        return None
    return now - timedelta(days=days)


def sort_column(sort: str):
    """(column, descending) for a sort key."""
    return _SORT_COLUMNS.get(sort, _SORT_COLUMNS[DEFAULT_SORT])


def escape_like(term: str) -> str:
    # or_() filters are comma separated; commas and parentheses would split the expression
    return term.replace(",", " ").replace("(", " ").replace(")", " ").strip()


def apply_filters(query, filters: FeedFilters, now: Optional[datetime] = None):
    """Add the conditional query-builder steps (category, search, date range, order)."""
    if filters.category_id:
        query = query.eq("category_id", filters.category_id)

    term = escape_like(filters.search or "")
    if term:
        query = query.or_(f"title.ilike.%{term}%,description.ilike.%{term}%")

    cutoff = date_cutoff(filters.date_range, now)
    if cutoff is not None:
        query = query.gte("created_at", cutoff.isoformat())

    column, descending = sort_column(filters.sort)
    return query.order(column, desc=descending)


def filter_by_media(rows: List[Dict[str, Any]], media_type: str) -> List[Dict[str, Any]]:
    if media_type == DEFAULT_MEDIA_TYPE:
        return rows
    return [r for r in rows if media_type_of(r.get("image_url")) == media_type]


def relevance_score(row: Dict[str, Any], term: str) -> int:
    term = term.lower()
    title = (row.get("title") or "").lower()
    description = (row.get("description") or "").lower()
    if title == term:
        return 4
    if title.startswith(term):
        return 3
    if term in title:
        return 2
    if term in description:
        return 1
    return 0


def rerank_by_relevance(rows: List[Dict[str, Any]], term: str) -> List[Dict[str, Any]]:
    """Stable sort by descending relevance score; ties keep the query order."""
    term = (term or "").strip()
    if not term:
        return rows
    return sorted(rows, key=lambda r: -relevance_score(r, term))


def engagement(row: Dict[str, Any]) -> int:
    return (row.get("likes_count") or 0) + (row.get("saves_count") or 0) + (row.get("comments_count") or 0)


def rank_best_of(rows: List[Dict[str, Any]], limit: int) -> List[Dict[str, Any]]:
    """Top `limit` rows by engagement (ties: more views, then newer), each with a 1-based rank."""
    ordered = sorted(rows, key=lambda r: r.get("created_at") or "", reverse=True)
    ordered = sorted(
        ordered,
        key=lambda r: (engagement(r), r.get("views_count") or 0),
        reverse=True,
    )
    ranked = []
    for position, row in enumerate(ordered[:limit], start=1):
        ranked.append({**row, "rank": position})
    return ranked


def paginate(rows: List[Any], offset: int, limit: int) -> List[Any]:
    return rows[offset:offset + limit]


def run_in_memory_steps(rows: List[Dict[str, Any]], filters: FeedFilters, best_of_limit: int) -> List[Dict[str, Any]]:
    rows = filter_by_media(rows, filters.media_type)
    # Rank on the same cleaned term the database matched on
    term = escape_like(filters.search or "")
    if filters.sort == "relevance" and term:
        rows = rerank_by_relevance(rows, term)
    if filters.best_of:
        rows = rank_best_of(rows, best_of_limit)
    return rows


def to_query_params(filters: FeedFilters) -> Dict[str, str]:
    """URL search params for the feed: search first, then only non-default filters."""
    params: Dict[str, str] = {}
    if filters.search:
        params["search"] = filters.search
    if filters.category_id:
        params["category"] = filters.category_id
    if filters.sort != DEFAULT_SORT:
        params["sort"] = filters.sort
    if filters.date_range != DEFAULT_DATE_RANGE:
        params["date"] = filters.date_range
    if filters.media_type != DEFAULT_MEDIA_TYPE:
        params["media"] = filters.media_type
    return params


def from_query_params(params: Dict[str, str]) -> FeedFilters:
    return FeedFilters(
        search=params.get("search") or None,
        category_id=params.get("category") or None,
        sort=params.get("sort") or DEFAULT_SORT,
        date_range=params.get("date") or DEFAULT_DATE_RANGE,
        media_type=params.get("media") or DEFAULT_MEDIA_TYPE,
    )


def active_filter_count(filters: FeedFilters) -> int:
    return sum((
        filters.category_id is not None,
        filters.sort != DEFAULT_SORT,
        filters.date_range != DEFAULT_DATE_RANGE,
        filters.media_type != DEFAULT_MEDIA_TYPE,
    ))
